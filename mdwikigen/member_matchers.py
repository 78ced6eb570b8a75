"""Predicates that pick the doc comment matching a member overload."""

from collections.abc import Callable

from mdwikigen.doc_comment import DocComment
from mdwikigen.type_descriptor import MemberDescriptor

MatchPredicate = Callable[[DocComment], bool]


def match_any(comment: DocComment) -> bool:
    """Accept any comment carrying the member's name."""
    return True


def match_parameter_names(member: MemberDescriptor) -> MatchPredicate:
    """Accept comments documenting exactly the member's parameter names."""
    names = member.parameter_names

    def matches(comment: DocComment) -> bool:
        return len(names) == len(comment.parameters) and all(
            n in comment.parameters for n in names
        )

    return matches


def matcher_for(member: MemberDescriptor) -> MatchPredicate:
    """Return the overload predicate suited to the member kind."""
    if member.kind in ("method", "constructor"):
        return match_parameter_names(member)
    return match_any
