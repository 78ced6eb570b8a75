"""Data models for the public type surface of a documented library."""

from dataclasses import dataclass
from typing import Any

TYPE_KINDS = ("class", "struct", "interface", "enum")
MEMBER_KINDS = ("field", "property", "method", "event", "constructor")

CONSTRUCTOR_DOC_NAME = "#ctor"


@dataclass(frozen=True)
class TypeDescriptor:
    """Represents a type (class, struct, interface, enum) or a type reference."""

    namespace: str
    name: str  # may carry a generic arity suffix, e.g. List`1
    kind: str = "class"
    generic_arguments: tuple["TypeDescriptor", ...] = ()
    base_type: "TypeDescriptor | None" = None
    interfaces: tuple["TypeDescriptor", ...] = ()
    members: tuple["MemberDescriptor", ...] = ()
    element_type: "TypeDescriptor | None" = None  # arrays, by-ref, pointers
    is_abstract: bool = False
    is_sealed: bool = False

    @property
    def full_name(self) -> str:
        """Namespace-qualified name, e.g. Foo.Bar`1."""
        if self.namespace:
            return f"{self.namespace}.{self.name}"
        return self.name

    @property
    def class_key(self) -> str:
        """Key used by XML doc comments for this type (nested types use dots)."""
        return self.full_name.replace("+", ".")

    @property
    def is_generic(self) -> bool:
        return bool(self.generic_arguments)

    @property
    def is_void(self) -> bool:
        return self.full_name in ("System.Void", "void")

    @property
    def is_static(self) -> bool:
        return self.is_abstract and self.is_sealed

    def nullable_underlying(self) -> "TypeDescriptor | None":
        """Return T when this is System.Nullable<T>, otherwise None."""
        if (
            self.namespace == "System"
            and self.name == "Nullable`1"
            and len(self.generic_arguments) == 1
        ):
            return self.generic_arguments[0]
        return None


@dataclass(frozen=True)
class ParameterDescriptor:
    """Represents a method or constructor parameter."""

    name: str
    type: TypeDescriptor
    has_default: bool = False
    default_value: Any = None


@dataclass(frozen=True)
class MemberDescriptor:
    """Represents a member (field, property, method, event, constructor)."""

    kind: str
    name: str
    parameters: tuple[ParameterDescriptor, ...] = ()
    value_type: TypeDescriptor | None = None  # field/property/event type or return type
    declaring_type: str = ""  # full name of the declaring type
    is_static: bool = False
    is_extension: bool = False
    constant_value: Any = None  # enum values

    @property
    def doc_name(self) -> str:
        """Member key used by XML doc comments."""
        if self.kind == "constructor":
            return CONSTRUCTOR_DOC_NAME
        return self.name

    @property
    def parameter_names(self) -> tuple[str, ...]:
        return tuple(p.name for p in self.parameters)
