"""Logic for rewriting <see> references inside doc comments."""

import re

# Last ".Segment" of a dotted name: Foo.Bar.Baz -> ".Baz"
LAST_SEGMENT_RE = re.compile(r"\.[^.]+$")
SEE_HREF_RE = re.compile(r'<see href="(.+?)"\s*/>')


def cref_fragment(type_name: str) -> str:
    """Turn a full type name into a page#anchor address: Foo.Bar.Baz -> foo.bar#baz."""
    return LAST_SEGMENT_RE.sub(lambda m: "#" + m.group(0)[1:], type_name).lower()


def resolve_cref(type_name: str, namespace_match: str | None) -> str:
    """Render a referenced type as an internal link or an inline code span.

    Types inside the documented namespace (``namespace_match`` anchored at the
    start of the name) link to their page; everything else stays plain code.
    """
    if namespace_match and re.match(namespace_match, type_name):
        return f'<a href="{cref_fragment(type_name)}">{type_name}</a>'
    return f"`{type_name}`"


def replace_see_links(text: str) -> str:
    """Rewrite ``<see href="url" />`` into an HTML link."""
    return SEE_HREF_RE.sub(r'see <a href="\1">\1</a>', text)
