"""Resolution of a member's effective documentation across its type hierarchy.

A member's own comment wins unless it is missing or only says
``<inheritdoc/>``. Then the implemented interfaces are searched depth-first in
declared order (each interface, then the interfaces it extends), and only
after that the base type, where the whole search repeats.
"""

import logging

from mdwikigen.comment_index import CommentIndex
from mdwikigen.doc_comment import DocComment, ResolvedDoc, is_inherit_marker
from mdwikigen.member_matchers import MatchPredicate, matcher_for
from mdwikigen.type_descriptor import MemberDescriptor, TypeDescriptor

logger = logging.getLogger(__name__)


def find_own_comment(
    t: TypeDescriptor,
    member_name: str,
    matches: MatchPredicate,
    index: CommentIndex,
) -> DocComment | None:
    """Return the first comment on ``t`` for the member that satisfies ``matches``."""
    for c in index[t.class_key]:
        if (
            c.member_name == member_name or c.member_name.startswith(member_name + "`")
        ) and matches(c):
            return c
    return None


def _lookup_interfaces(
    t: TypeDescriptor,
    member_name: str,
    matches: MatchPredicate,
    index: CommentIndex,
    seen: set[str],
) -> DocComment | None:
    for iface in t.interfaces:
        # Already searched for this member without a result.
        if iface.class_key in seen:
            continue
        seen.add(iface.class_key)

        found = find_own_comment(iface, member_name, matches, index)
        if found is not None and not found.inherits:
            return found
        found = _lookup_interfaces(iface, member_name, matches, index, seen)
        if found is not None:
            return found
    return None


def lookup_comment(
    root: TypeDescriptor,
    member_name: str,
    matches: MatchPredicate,
    index: CommentIndex,
) -> DocComment | None:
    """Walk ``root``, its interfaces, then its base types for a usable comment."""
    seen_interfaces: set[str] = set()
    seen_types: set[str] = set()
    current: TypeDescriptor | None = root
    while current is not None:
        if current.class_key in seen_types:
            logger.warning("Inheritance cycle at %s; stopping lookup", current.class_key)
            return None
        seen_types.add(current.class_key)

        found = find_own_comment(current, member_name, matches, index)
        if found is not None and not found.inherits:
            return found
        found = _lookup_interfaces(current, member_name, matches, index, seen_interfaces)
        if found is not None:
            return found
        current = current.base_type
    return None


def resolve_member_doc(
    root: TypeDescriptor,
    member_name: str,
    matches: MatchPredicate,
    index: CommentIndex,
) -> ResolvedDoc:
    """Resolve the documentation of ``member_name`` as seen from ``root``."""
    return ResolvedDoc.from_comment(lookup_comment(root, member_name, matches, index))


class DocResolver:
    """Resolves documentation for the members of many types against one index."""

    def __init__(self, index: CommentIndex) -> None:
        """Initialize the resolver with a read-only comment index."""
        self.index = index
        self._cache: dict[tuple[str, str, str, tuple[str, ...]], ResolvedDoc] = {}

    def resolve(self, t: TypeDescriptor, member: MemberDescriptor) -> ResolvedDoc:
        """Return the effective documentation of ``member`` declared on ``t``."""
        key = (t.class_key, member.kind, member.doc_name, member.parameter_names)
        doc = self._cache.get(key)
        if doc is None:
            doc = resolve_member_doc(t, member.doc_name, matcher_for(member), self.index)
            self._cache[key] = doc
        return doc

    def type_summary(self, t: TypeDescriptor) -> str:
        """Return the summary written on the type itself."""
        comment = self.index.type_comment(t.class_key)
        if comment is None or is_inherit_marker(comment.summary):
            return ""
        return comment.summary
