"""Logic for rendering the Markdown section of a single type."""

from dataclasses import dataclass
from typing import Any

from mdwikigen.comment_text import NBSP_TAB
from mdwikigen.cross_reference import replace_see_links
from mdwikigen.doc_comment import ResolvedDoc
from mdwikigen.doc_resolver import DocResolver
from mdwikigen.format_member_signature import format_member_signature
from mdwikigen.format_type_name import format_type_name
from mdwikigen.load_config import RENDER_STYLES
from mdwikigen.markdown import code_quote, md_codeblock, md_header, md_table, single_line
from mdwikigen.type_descriptor import MemberDescriptor, TypeDescriptor

# (label, member kind, static)
MEMBER_GROUPS = [
    ("Constructors", "constructor", False),
    ("Fields", "field", False),
    ("Properties", "property", False),
    ("Events", "event", False),
    ("Methods", "method", False),
    ("Static Fields", "field", True),
    ("Static Properties", "property", True),
    ("Static Methods", "method", True),
    ("Static Events", "event", True),
]


@dataclass
class MemberRow:
    """One rendered line of a member group."""

    type_label: str
    name: str
    doc: ResolvedDoc


def render_declaration(t: TypeDescriptor, hidden_base_types: list[str]) -> str:
    """Render the C#-like declaration of a type with its base list."""
    modifiers = ""
    if t.is_static:
        modifiers = "static "
    elif t.is_abstract and t.kind != "interface":
        modifiers = "abstract "
    lines = [f"public {modifiers}{t.kind} {format_type_name(t, full=True)}"]

    bases = [t.base_type, *t.interfaces]
    impl = ", ".join(
        format_type_name(b)
        for b in bases
        if b is not None and b.full_name not in hidden_base_types
    )
    if impl:
        lines.append(f"    : {impl}")
    return "\n".join(lines)


def render_details_item(row: MemberRow) -> str:
    """Render a member as a collapsible block, or a plain line when undocumented."""
    doc = row.doc
    if not doc.summary.strip():
        return f"{NBSP_TAB}{code_quote(row.type_label)} {row.name}<br />"

    parts = [
        f"<details><summary>{code_quote(row.type_label)} {single_line(row.name)}</summary>",
        f"<h3>Summary:</h3><p>{replace_see_links(doc.summary)}</p>",
    ]
    if doc.parameters:
        items = "".join(
            f"<li>{code_quote(k.strip())} - {single_line(v.strip())}</li>"
            for k, v in doc.parameters.items()
        )
        parts.append(f"<h3>Parameter:</h3><p><ul>{items}</ul></p>")
    if doc.returns.strip():
        parts.append(f"<h3>Returns:</h3><p>{single_line(doc.returns.strip())}</p>")
    if doc.remarks.strip():
        parts.append(f"<h3>Remarks:</h3><p>{replace_see_links(doc.remarks)}</p>")
    parts.append("<hr /></details>")
    return "".join(parts)


def render_table(rows: list[MemberRow]) -> str:
    """Render a member group as a flat Markdown table."""
    return md_table(
        ["Type", "Name", "Summary"],
        [
            [
                code_quote(r.type_label),
                single_line(r.name),
                single_line(replace_see_links(r.doc.summary)),
            ]
            for r in rows
        ],
    )


def _render_group(label: str, rows: list[MemberRow], style: str) -> list[str]:
    if not rows:
        return []
    parts = [md_header(2, label), ""]
    if style == "table":
        parts.append(render_table(rows))
    else:
        parts.extend(render_details_item(r) for r in rows)
    parts += ["", "___", ""]
    return parts


def _member_row(t: TypeDescriptor, m: MemberDescriptor, resolver: DocResolver) -> MemberRow:
    if m.kind == "constructor":
        type_label = format_type_name(t)
    else:
        type_label = format_type_name(m.value_type)
    return MemberRow(
        type_label=type_label,
        name=format_member_signature(m, t.name),
        doc=resolver.resolve(t, m),
    )


def enum_sort_key(value: Any) -> tuple[int, float, str]:
    """Order enum values numerically, then non-numeric values as text, then missing ones.

    Numeric strings such as ``"0x10"`` or ``"-3"`` sort by their integer value.
    """
    if value is None:
        return (2, 0, "")
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return (0, value, "")
    try:
        return (0, int(str(value).strip(), 0), "")
    except ValueError:
        return (1, 0, str(value))


def _enum_rows(t: TypeDescriptor, resolver: DocResolver) -> list[MemberRow]:
    values = [m for m in t.members if m.kind == "field"]
    values.sort(key=lambda m: enum_sort_key(m.constant_value))
    return [
        MemberRow(
            type_label="" if m.constant_value is None else str(m.constant_value),
            name=m.name,
            doc=resolver.resolve(t, m),
        )
        for m in values
    ]


def render_type_section(
    t: TypeDescriptor,
    resolver: DocResolver,
    render_config: dict[str, Any],
) -> str:
    """Render a type (header, summary, declaration, members) in Markdown."""
    style = render_config.get("style", "details")
    if style not in RENDER_STYLES:
        msg = f"Unknown render style {style!r}; expected one of {RENDER_STYLES}"
        raise ValueError(msg)

    parts = [md_header(1, code_quote(format_type_name(t))), ""]

    summary = resolver.type_summary(t)
    if summary:
        parts += [replace_see_links(summary), ""]

    declaration = render_declaration(t, render_config.get("hidden_base_types") or [])
    parts += [md_codeblock(render_config.get("code_language", "csharp"), declaration), ""]

    if t.kind == "enum":
        parts.extend(_render_group("Enum", _enum_rows(t, resolver), style))
    else:
        for label, kind, static in MEMBER_GROUPS:
            members = sorted(
                (m for m in t.members if m.kind == kind and m.is_static == static),
                key=lambda m: m.name,
            )
            rows = [_member_row(t, m, resolver) for m in members]
            parts.extend(_render_group(label, rows, style))

    return "\n".join(parts).rstrip() + "\n"
