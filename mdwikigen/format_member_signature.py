"""Utility for rendering method and constructor signatures for member tables."""

from mdwikigen.format_type_name import format_type_name, strip_arity
from mdwikigen.type_descriptor import MemberDescriptor, ParameterDescriptor


def _format_parameter(p: ParameterDescriptor) -> str:
    suffix = ""
    if p.has_default:
        default = "null" if p.default_value is None else str(p.default_value)
        suffix = f" = {default}"
    return f"<code>{format_type_name(p.type)}</code> {p.name}{suffix}"


def format_member_signature(member: MemberDescriptor, declaring_name: str = "") -> str:
    """Render ``Name(<code>Type</code> arg = default, ...)`` for a method or constructor.

    Constructors are rendered with the declaring type's short name. Fields,
    properties and events render as their bare name.
    """
    if member.kind not in ("method", "constructor"):
        return member.name

    name = member.name
    if member.kind == "constructor":
        name = strip_arity(declaring_name or member.declaring_type.rsplit(".", 1)[-1])

    params = ", ".join(_format_parameter(p) for p in member.parameters)
    this = "this " if member.is_extension else ""
    return f"{name}({this}{params})"
