"""Utility for rendering type descriptors as display names."""

import re

from mdwikigen.type_descriptor import TypeDescriptor

# Generic arity marker: List`1 -> List
ARITY_SUFFIX_RE = re.compile(r"`.+$")


def strip_arity(name: str) -> str:
    """Remove a trailing generic arity suffix from a type or member name."""
    return ARITY_SUFFIX_RE.sub("", name)


def format_type_name(t: TypeDescriptor | None, *, full: bool = False) -> str:
    """Render a type as a C#-like display name, e.g. Dictionary<String, Int32>.

    Generic arguments are always rendered in short form. A wrapper whose
    element is a nullable value type renders as ``Int32?&``.
    """
    if t is None:
        return ""
    if t.is_void:
        return "void"
    if not t.is_generic:
        if t.element_type is not None:
            underlying = t.element_type.nullable_underlying()
            if underlying is not None:
                name = underlying.full_name if full else underlying.name
                return strip_arity(name) + "?&"
        return t.full_name if full else t.name

    inner = ", ".join(format_type_name(a) for a in t.generic_arguments)
    name = t.full_name if full else t.name
    return f"{strip_arity(name)}<{inner}>"
