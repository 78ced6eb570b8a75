"""Parser for compiler-generated XML documentation files."""

import html
import logging
import re
from xml.etree.ElementTree import Element, tostring

from defusedxml import ElementTree

from mdwikigen.comment_text import comment_text_rules, normalize_comment_text
from mdwikigen.doc_comment import INHERIT_MARKER, DocComment, MemberType
from mdwikigen.format_type_name import strip_arity

logger = logging.getLogger(__name__)

# M:Foo.Bar.Baz(System.Int32) -> kind, path, member, signature
# Conversion operators append the return type: op_Implicit(Foo.Bar)~System.Int32
MEMBER_ID_RE = re.compile(
    r"^(?P<kind>.):(?P<path>[^(]+)\.(?P<member>[^.()]+)(?P<signature>\(.*\))?(?:~.+)?$"
)


def inner_markup(el: Element | None) -> str:
    """Return the element's content with child tags serialized back to markup."""
    if el is None:
        return ""
    parts = [html.escape(el.text or "", quote=False)]
    parts.extend(tostring(child, encoding="unicode") for child in el)
    return "".join(parts)


def inner_text(el: Element | None) -> str:
    """Return the concatenated text content of an element, trimmed."""
    if el is None:
        return ""
    return "".join(el.itertext()).strip()


def assembly_name(root: Element) -> str:
    """Read <assembly><name> from the document, if any."""
    return inner_text(root.find("assembly/name"))


def parse_member(el: Element, namespace_match: str | None) -> DocComment | None:
    """Parse a single <member> element, or return None if it is not usable."""
    member_id = el.get("name") or ""
    match = MEMBER_ID_RE.match(member_id)
    if not match:
        logger.debug("Skipping malformed member id: %r", member_id)
        return None
    try:
        member_type = MemberType(match.group("kind"))
    except ValueError:
        logger.debug("Skipping unsupported member kind: %r", member_id)
        return None

    path = match.group("path")
    member = match.group("member")
    if member_type is MemberType.TYPE:
        class_name = f"{path}.{member}"
    else:
        class_name = path

    summary_el = el.find("summary")
    if summary_el is not None:
        summary = inner_markup(summary_el)
    elif el.find(INHERIT_MARKER) is not None:
        summary = INHERIT_MARKER
    else:
        summary = ""

    rules = comment_text_rules(namespace_match)
    parameters: dict[str, str] = {}
    for p in el.findall("param"):
        pname = p.get("name")
        if pname and pname not in parameters:
            parameters[pname] = inner_text(p)

    return DocComment(
        member_type=member_type,
        class_name=class_name,
        member_name=strip_arity(member),
        summary=normalize_comment_text(summary, rules),
        remarks=normalize_comment_text(inner_markup(el.find("remarks")), rules),
        parameters=parameters,
        returns=inner_text(el.find("returns")),
        signature=match.group("signature") or "",
    )


def parse_doc_comments(
    xml_text: str | bytes, namespace_match: str | None = None
) -> list[DocComment]:
    """Parse an XML documentation file into DocComment records in document order.

    When no namespace filter is given, the documented assembly's name decides
    which ``<see cref>`` targets become internal links.
    """
    root = ElementTree.fromstring(xml_text)
    ns = namespace_match or assembly_name(root)

    comments: list[DocComment] = []
    for el in root.iter("member"):
        comment = parse_member(el, ns)
        if comment is not None:
            comments.append(comment)
    return comments
