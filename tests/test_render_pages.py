"""Tests for type sections, namespace pages and the wiki index pages."""

import pytest

from mdwikigen.comment_index import CommentIndex
from mdwikigen.comment_text import NBSP_TAB
from mdwikigen.doc_comment import DocComment, MemberType, ResolvedDoc
from mdwikigen.doc_resolver import DocResolver
from mdwikigen.load_config import DEFAULT_CONFIG
from mdwikigen.markdown import md_table, single_line
from mdwikigen.render_index_pages import (
    group_by_namespace,
    render_footer,
    render_home_page,
    render_namespace_page,
    render_sidebar,
    type_anchor,
)
from mdwikigen.render_type_section import (
    MemberRow,
    render_declaration,
    enum_sort_key,
    render_details_item,
    render_table,
    render_type_section,
)
from mdwikigen.type_descriptor import MemberDescriptor, ParameterDescriptor, TypeDescriptor

INT32 = TypeDescriptor("System", "Int32", kind="struct")
VOID = TypeDescriptor("System", "Void", kind="struct")
OBJECT = TypeDescriptor("System", "Object")
HIDDEN = ["System.Object", "System.ValueType"]

SIZE = MemberDescriptor(kind="property", name="Size", value_type=INT32)
FILL = MemberDescriptor(
    kind="method",
    name="Fill",
    parameters=(ParameterDescriptor("value", INT32),),
    value_type=VOID,
)
BOX = TypeDescriptor("Lib", "Box", members=(FILL, SIZE))


def doc(owner: str, member: str, summary: str, member_type: MemberType) -> DocComment:
    return DocComment(
        member_type=member_type,
        class_name=owner,
        member_name=member,
        summary=summary,
    )


def box_resolver() -> DocResolver:
    return DocResolver(
        CommentIndex(
            [
                doc("Lib.Box", "Box", "A box.", MemberType.TYPE),
                doc("Lib.Box", "Size", "The size.", MemberType.PROPERTY),
            ]
        )
    )


def render_config(**overrides: object) -> dict:
    return {**DEFAULT_CONFIG["render"], **overrides}


def test_declaration_hides_root_types() -> None:
    """Verify that System.Object is omitted from the base list."""
    iface = TypeDescriptor("Lib", "IBox", kind="interface")
    t = TypeDescriptor("Lib", "Box", base_type=OBJECT, interfaces=(iface,))
    assert render_declaration(t, HIDDEN) == "public class Lib.Box\n    : IBox"
    assert render_declaration(TypeDescriptor("Lib", "Box", base_type=OBJECT), HIDDEN) == (
        "public class Lib.Box"
    )


def test_declaration_modifiers() -> None:
    """Verify static and abstract modifiers."""
    util = TypeDescriptor("Lib", "Util", is_abstract=True, is_sealed=True)
    shape = TypeDescriptor("Lib", "Shape", is_abstract=True)
    iface = TypeDescriptor("Lib", "IShape", kind="interface", is_abstract=True)
    assert render_declaration(util, HIDDEN) == "public static class Lib.Util"
    assert render_declaration(shape, HIDDEN) == "public abstract class Lib.Shape"
    assert render_declaration(iface, HIDDEN) == "public interface Lib.IShape"


def test_declaration_generic_base() -> None:
    """Verify generic names in the declaration."""
    base = TypeDescriptor("Lib", "Base`1", generic_arguments=(INT32,))
    t = TypeDescriptor(
        "Lib", "Bag`1", generic_arguments=(TypeDescriptor("", "T"),), base_type=base
    )
    assert render_declaration(t, HIDDEN) == "public class Lib.Bag<T>\n    : Base<Int32>"


def test_undocumented_member_is_plain_line() -> None:
    """Verify the single-line rendering of members without a summary."""
    row = MemberRow("Int32", "Count", ResolvedDoc())
    assert render_details_item(row) == f"{NBSP_TAB}<code>Int32</code> Count<br />"


def test_documented_member_is_details_block() -> None:
    """Verify every section of a collapsible member block."""
    row = MemberRow(
        "void",
        "Fill(<code>Int32</code> value)",
        ResolvedDoc(
            summary="Fills it.",
            remarks='See <see href="http://x" />',
            parameters={"value": "Fill value."},
            returns="Nothing.",
        ),
    )
    assert render_details_item(row) == (
        "<details><summary><code>void</code> Fill(<code>Int32</code> value)</summary>"
        "<h3>Summary:</h3><p>Fills it.</p>"
        "<h3>Parameter:</h3><p><ul><li><code>value</code> - Fill value.</li></ul></p>"
        "<h3>Returns:</h3><p>Nothing.</p>"
        '<h3>Remarks:</h3><p>See see <a href="http://x">http://x</a></p>'
        "<hr /></details>"
    )


def test_table_rendering() -> None:
    """Verify the flat table variant."""
    rows = [MemberRow("Int32", "Size", ResolvedDoc(summary="The size."))]
    assert render_table(rows) == (
        "| Type | Name | Summary |\n"
        "| --- | --- | --- |\n"
        "| <code>Int32</code> | Size | The size. |"
    )


def test_md_table_escapes_pipes() -> None:
    """Verify table cells cannot break the row."""
    assert md_table(["A"], [["x|y"]]) == "| A |\n| --- |\n| x\\|y |"
    assert md_table(["A"], []) == ""


def test_single_line() -> None:
    """Verify that line breaks collapse to spaces."""
    assert single_line("a\r\nb\nc") == "a b c"


def test_type_section_details_style() -> None:
    """Verify the full section of a small class."""
    section = render_type_section(BOX, box_resolver(), render_config())
    assert section == (
        "# <code>Box</code>\n"
        "\n"
        "A box.\n"
        "\n"
        "```csharp\n"
        "public class Lib.Box\n"
        "```\n"
        "\n"
        "## Properties\n"
        "\n"
        "<details><summary><code>Int32</code> Size</summary>"
        "<h3>Summary:</h3><p>The size.</p><hr /></details>\n"
        "\n"
        "___\n"
        "\n"
        "## Methods\n"
        "\n"
        f"{NBSP_TAB}<code>void</code> Fill(<code>Int32</code> value)<br />\n"
        "\n"
        "___\n"
    )


def test_type_section_table_style() -> None:
    """Verify the table style renders the same members."""
    section = render_type_section(BOX, box_resolver(), render_config(style="table"))
    assert "| <code>Int32</code> | Size | The size. |" in section
    assert "| <code>void</code> | Fill(<code>Int32</code> value) |  |" in section
    assert "<details>" not in section


def test_type_section_groups_in_order() -> None:
    """Verify constructors first and static members after instance members."""
    ctor = MemberDescriptor(kind="constructor", name="#ctor", declaring_type="Lib.Box")
    create = MemberDescriptor(kind="method", name="Create", value_type=BOX, is_static=True)
    field = MemberDescriptor(kind="field", name="Max", value_type=INT32, is_static=True)
    t = TypeDescriptor("Lib", "Box", members=(create, field, SIZE, ctor, FILL))
    section = render_type_section(t, DocResolver(CommentIndex()), render_config())
    headers = [line for line in section.splitlines() if line.startswith("## ")]
    assert headers == [
        "## Constructors",
        "## Properties",
        "## Methods",
        "## Static Fields",
        "## Static Methods",
    ]
    assert f"{NBSP_TAB}<code>Box</code> Box()<br />" in section


def test_members_sorted_by_name() -> None:
    """Verify alphabetical order within a group."""
    b = MemberDescriptor(kind="property", name="Beta", value_type=INT32)
    a = MemberDescriptor(kind="property", name="Alpha", value_type=INT32)
    t = TypeDescriptor("Lib", "Box", members=(b, a))
    section = render_type_section(t, DocResolver(CommentIndex()), render_config())
    assert section.index("Alpha") < section.index("Beta")


def test_enum_section_sorted_by_value() -> None:
    """Verify enum values render in numeric order with their value as label."""
    green = MemberDescriptor(kind="field", name="Green", is_static=True, constant_value=2)
    red = MemberDescriptor(kind="field", name="Red", is_static=True, constant_value=1)
    color = TypeDescriptor("Lib", "Color", kind="enum", members=(green, red))
    resolver = DocResolver(CommentIndex([doc("Lib.Color", "Red", "Warm.", MemberType.FIELD)]))
    section = render_type_section(color, resolver, render_config())
    assert "public enum Lib.Color" in section
    assert "## Enum" in section
    assert "<summary><code>1</code> Red</summary>" in section
    assert f"{NBSP_TAB}<code>2</code> Green<br />" in section
    assert section.index("Red") < section.index("Green")


def test_enum_mixed_and_missing_values() -> None:
    """Verify ordering of string, numeric and missing enum values."""
    members = (
        MemberDescriptor(kind="field", name="Unset", is_static=True),
        MemberDescriptor(kind="field", name="Flag", is_static=True, constant_value="0x10"),
        MemberDescriptor(kind="field", name="Other", is_static=True, constant_value="Mixed"),
        MemberDescriptor(kind="field", name="One", is_static=True, constant_value=1),
    )
    t = TypeDescriptor("Lib", "Mode", kind="enum", members=members)
    section = render_type_section(t, DocResolver(CommentIndex()), render_config())
    order = [section.index(name) for name in ("One", "Flag", "Other", "Unset")]
    assert order == sorted(order)
    assert f"{NBSP_TAB}<code>0x10</code> Flag<br />" in section
    assert f"{NBSP_TAB}<code></code> Unset<br />" in section
    assert "None" not in section


def test_enum_sort_key() -> None:
    """Verify numeric coercion of enum values."""
    assert enum_sort_key("0x10") == enum_sort_key(16)
    assert enum_sort_key(" -3 ") < enum_sort_key(0)
    assert enum_sort_key(5) < enum_sort_key("Mixed") < enum_sort_key(None)


def test_type_summary_see_href() -> None:
    """Verify that href links in the type summary are rewritten."""
    t = TypeDescriptor("Lib", "Box")
    resolver = DocResolver(
        CommentIndex([doc("Lib.Box", "Box", 'Docs: <see href="http://d" />', MemberType.TYPE)])
    )
    section = render_type_section(t, resolver, render_config())
    assert 'Docs: see <a href="http://d">http://d</a>' in section


def test_unknown_style_raises() -> None:
    """Verify that an unsupported render style is rejected."""
    with pytest.raises(ValueError, match="Unknown render style"):
        render_type_section(BOX, box_resolver(), render_config(style="fancy"))


def test_type_anchor() -> None:
    """Verify anchors for generic display names."""
    assert type_anchor("List<T, U>") == "listt-u"
    assert type_anchor("Box") == "box"


def test_group_by_namespace_sorted() -> None:
    """Verify namespace and type ordering."""
    loose = TypeDescriptor("", "Loose")
    zed = TypeDescriptor("Lib", "Zed")
    grouped = group_by_namespace([zed, BOX, loose])
    assert list(grouped) == ["", "Lib"]
    assert [t.name for t in grouped["Lib"]] == ["Box", "Zed"]


def test_home_page_links() -> None:
    """Verify the Home page lists namespaces and type anchors."""
    bag = TypeDescriptor("Lib", "Bag`1", generic_arguments=(TypeDescriptor("", "T"),))
    grouped = group_by_namespace([BOX, bag, TypeDescriptor("", "Loose")])
    assert render_home_page(grouped) == (
        "# References\n"
        "\n"
        "## [Global](Global)\n"
        "\n"
        "- [<code>Loose</code>](Global#loose)\n"
        "\n"
        "## [Lib](Lib)\n"
        "\n"
        "- [<code>Bag<T></code>](Lib#bagt)\n"
        "- [<code>Box</code>](Lib#box)\n"
    )


def test_sidebar_uses_small_headers() -> None:
    """Verify the sidebar shares the Home links with level-5 headers."""
    sidebar = render_sidebar(group_by_namespace([BOX]))
    assert sidebar == "##### [Lib](Lib)\n\n- [<code>Box</code>](Lib#box)\n"


def test_footer() -> None:
    """Verify the footer note and copyright line."""
    footer = {"note": "generated", "copyright_holder": "ACME"}
    assert render_footer(footer, year=2024) == (
        "***\n#### generated\n_Copyright (c) 2024 ACME_\n"
    )
    assert render_footer({"note": "generated"}, year=2024).endswith(
        "_Copyright (c) 2024_\n"
    )


def test_namespace_page_concatenates_sections() -> None:
    """Verify that every type of a namespace appears on its page."""
    zed = TypeDescriptor("Lib", "Zed")
    page = render_namespace_page([BOX, zed], box_resolver(), render_config())
    assert page.index("# <code>Box</code>") < page.index("# <code>Zed</code>")
