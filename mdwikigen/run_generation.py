"""Orchestration logic for generating wiki pages from a type surface and XML docs."""

import argparse
import re
from pathlib import Path
from typing import Any

import yaml

from mdwikigen.comment_index import CommentIndex
from mdwikigen.doc_comment import DocComment
from mdwikigen.doc_resolver import DocResolver
from mdwikigen.load_config import load_config
from mdwikigen.load_doc_comments import companion_xml_path, load_doc_comments
from mdwikigen.render_index_pages import (
    group_by_namespace,
    namespace_page_name,
    render_footer,
    render_home_page,
    render_namespace_page,
    render_sidebar,
)
from mdwikigen.type_descriptor import TypeDescriptor
from mdwikigen.type_surface import TypeSurfaceError, load_type_surface


def filter_types(
    types: list[TypeDescriptor], namespace_match: str | None
) -> list[TypeDescriptor]:
    """Keep the types whose namespace matches the filter pattern (if any)."""
    if not namespace_match:
        return list(types)
    pattern = re.compile(namespace_match)
    return [t for t in types if pattern.search(t.namespace)]


def generate_pages(
    types: list[TypeDescriptor],
    comments: list[DocComment],
    config: dict[str, Any],
) -> dict[str, str]:
    """Render every page of the wiki, keyed by file name."""
    resolver = DocResolver(CommentIndex(comments))
    by_namespace = group_by_namespace(filter_types(types, config.get("namespace_match")))
    render_config = config["render"]

    pages: dict[str, str] = {}
    for ns, types_in_ns in by_namespace.items():
        pages[f"{namespace_page_name(ns)}.md"] = render_namespace_page(
            types_in_ns, resolver, render_config
        )

    page_flags = config["pages"]
    if page_flags.get("home"):
        pages["Home.md"] = render_home_page(by_namespace)
    if page_flags.get("sidebar"):
        pages["_Sidebar.md"] = render_sidebar(by_namespace)
    if page_flags.get("footer"):
        pages["_Footer.md"] = render_footer(config["footer"])
    return pages


def write_pages(pages: dict[str, str], out_root: Path) -> int:
    """Write rendered pages under ``out_root``; returns the number written."""
    out_root.mkdir(parents=True, exist_ok=True)
    written = 0
    for name, content in pages.items():
        (out_root / name).write_text(content, encoding="utf-8")
        written += 1
    return written


def _effective_config(args: argparse.Namespace) -> dict[str, Any]:
    """Load the configuration and apply command-line overrides."""
    config = load_config(args.config)
    if args.namespace_match is not None:
        config["namespace_match"] = args.namespace_match
    if args.style:
        config["render"]["style"] = args.style
    return config


def run_generation(args: argparse.Namespace) -> int:
    """Execute the full generation pipeline."""
    if not args.types.exists():
        msg = f"Type surface manifest not found: {args.types}"
        raise SystemExit(msg)

    config = _effective_config(args)
    namespace_match = config.get("namespace_match") or None
    if namespace_match:
        try:
            re.compile(namespace_match)
        except re.error as exc:
            msg = f"Invalid namespace pattern {namespace_match!r}: {exc}"
            raise SystemExit(msg) from exc

    try:
        surface = load_type_surface(args.types)
    except (yaml.YAMLError, TypeSurfaceError) as exc:
        msg = f"Could not load type surface manifest {args.types}: {exc}"
        raise SystemExit(msg) from exc
    if surface.is_partial:
        print(f"Loaded {len(surface.types)} types ({surface.skipped} entries skipped)")
    else:
        print(f"Loaded {len(surface.types)} types")

    xml_path = args.doc_xml or companion_xml_path(args.types)
    comments = load_doc_comments(xml_path, namespace_match)
    print(f"Parsed {len(comments)} doc comments from {xml_path}")

    pages = generate_pages(surface.types, comments, config)

    if args.dry_run:
        for name in sorted(pages):
            print(f"  would write {name}")
        return 0

    out_root = args.out_dir.resolve()
    written = write_pages(pages, out_root)
    print(f"Generated {written} Markdown pages into: {out_root}")
    return 0
