"""Logic for rendering namespace pages and the wiki's Home, sidebar and footer."""

import datetime
from typing import Any

from mdwikigen.doc_resolver import DocResolver
from mdwikigen.format_type_name import format_type_name
from mdwikigen.markdown import code_quote, md_header, md_link
from mdwikigen.render_type_section import render_type_section
from mdwikigen.type_descriptor import TypeDescriptor

GLOBAL_NAMESPACE_PAGE = "Global"


def type_anchor(display_name: str) -> str:
    """Anchor of a type header on its namespace page: List<T, U> -> listt-u."""
    return (
        display_name.replace("<", "")
        .replace(">", "")
        .replace(",", "")
        .replace(" ", "-")
        .lower()
    )


def namespace_page_name(namespace: str) -> str:
    """Wiki page name of a namespace; types without one go to the Global page."""
    return namespace or GLOBAL_NAMESPACE_PAGE


def group_by_namespace(types: list[TypeDescriptor]) -> dict[str, list[TypeDescriptor]]:
    """Group types by namespace; namespaces and their types sorted by name."""
    groups: dict[str, list[TypeDescriptor]] = {}
    for t in types:
        groups.setdefault(t.namespace, []).append(t)
    return {ns: sorted(groups[ns], key=lambda t: t.name) for ns in sorted(groups)}


def render_namespace_page(
    types_in_ns: list[TypeDescriptor],
    resolver: DocResolver,
    render_config: dict[str, Any],
) -> str:
    """Concatenate the sections of every type in a namespace."""
    return "".join(render_type_section(t, resolver, render_config) for t in types_in_ns)


def _type_links(
    by_namespace: dict[str, list[TypeDescriptor]], header_level: int
) -> list[str]:
    parts: list[str] = []
    for ns, types in by_namespace.items():
        page = namespace_page_name(ns)
        parts += [md_header(header_level, md_link(page, page)), ""]
        for t in types:
            name = format_type_name(t)
            url = f"{page}#{type_anchor(name)}"
            parts.append(f"- {md_link(code_quote(name), url)}")
        parts.append("")
    return parts


def render_home_page(by_namespace: dict[str, list[TypeDescriptor]]) -> str:
    """Render Home.md listing every namespace and its types."""
    parts = [md_header(1, "References"), ""]
    parts.extend(_type_links(by_namespace, 2))
    return "\n".join(parts).rstrip() + "\n"


def render_sidebar(by_namespace: dict[str, list[TypeDescriptor]]) -> str:
    """Render _Sidebar.md with the same links as the Home page."""
    return "\n".join(_type_links(by_namespace, 5)).rstrip() + "\n"


def render_footer(footer_config: dict[str, Any], year: int | None = None) -> str:
    """Render _Footer.md with the generation note and copyright line."""
    year = year or datetime.date.today().year
    holder = footer_config.get("copyright_holder") or ""
    lines = ["***", f"#### {footer_config.get('note', '')}"]
    copyright_line = f"Copyright (c) {year}"
    if holder:
        copyright_line += f" {holder}"
    lines.append(f"_{copyright_line}_")
    return "\n".join(lines) + "\n"
