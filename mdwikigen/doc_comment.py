"""Data models for parsed XML documentation comments."""

from dataclasses import dataclass, field
from enum import Enum

INHERIT_MARKER = "inheritdoc"


class MemberType(str, Enum):
    """Kind letter prefixing an XML doc member id (``M:Foo.Bar.Baz``)."""

    FIELD = "F"
    PROPERTY = "P"
    TYPE = "T"
    EVENT = "E"
    METHOD = "M"


def is_inherit_marker(text: str | None) -> bool:
    """Check if a summary is the inheritdoc directive rather than content."""
    return (text or "").strip().lower() == INHERIT_MARKER


@dataclass(frozen=True)
class DocComment:
    """Represents one <member> entry of an XML documentation file."""

    member_type: MemberType
    class_name: str  # class key, e.g. Foo.Bar`1
    member_name: str  # arity suffix stripped
    summary: str = ""
    remarks: str = ""
    parameters: dict[str, str] = field(default_factory=dict)
    returns: str = ""
    signature: str = ""  # raw parameter list, e.g. (System.Int32)

    @property
    def inherits(self) -> bool:
        return is_inherit_marker(self.summary)

    def __str__(self) -> str:
        return f"{self.member_type.value}:{self.class_name}.{self.member_name}"


@dataclass(frozen=True)
class ResolvedDoc:
    """The effective documentation of a member after the ancestor walk."""

    summary: str = ""
    remarks: str = ""
    parameters: dict[str, str] = field(default_factory=dict)
    returns: str = ""

    @classmethod
    def from_comment(cls, comment: DocComment | None) -> "ResolvedDoc":
        if comment is None or comment.inherits:
            return cls()
        return cls(
            summary=comment.summary,
            remarks=comment.remarks,
            parameters=dict(comment.parameters),
            returns=comment.returns,
        )

    @property
    def is_empty(self) -> bool:
        return not (self.summary or self.remarks or self.parameters or self.returns)
