"""Logic for loading a library's public type surface from a YAML manifest."""

import dataclasses
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from mdwikigen.type_descriptor import (
    MEMBER_KINDS,
    TYPE_KINDS,
    MemberDescriptor,
    ParameterDescriptor,
    TypeDescriptor,
)

logger = logging.getLogger(__name__)


class TypeSurfaceError(ValueError):
    """Raised when a single type entry of the manifest cannot be used."""


@dataclass
class TypeSurface:
    """The types loaded from a manifest, with the number of entries skipped."""

    assembly: str
    types: list[TypeDescriptor] = field(default_factory=list)
    skipped: int = 0

    @property
    def is_partial(self) -> bool:
        return self.skipped > 0


def split_full_name(full_name: str) -> tuple[str, str]:
    """Split Foo.Bar.Baz into ("Foo.Bar", "Baz")."""
    if "." not in full_name:
        return "", full_name
    ns, name = full_name.rsplit(".", 1)
    return ns, name


def _full_name(namespace: object, name: object) -> str:
    return f"{namespace}.{name}" if namespace else str(name)


def _is_hidden(raw: dict[str, Any]) -> bool:
    return bool(raw.get("obsolete")) or str(raw.get("visibility", "public")) == "private"


class _SurfaceBuilder:
    """Turns raw manifest entries into linked TypeDescriptors."""

    def __init__(self, entries: dict[str, dict[str, Any]]) -> None:
        self.entries = entries
        self.built: dict[str, TypeDescriptor] = {}
        self.in_progress: set[str] = set()

    def build(self, full_name: str) -> TypeDescriptor:
        if full_name in self.built:
            return self.built[full_name]
        if full_name in self.in_progress:
            msg = f"inheritance cycle through {full_name}"
            raise TypeSurfaceError(msg)

        raw = self.entries[full_name]
        kind = str(raw.get("kind") or "class").lower()
        if kind not in TYPE_KINDS:
            msg = f"unsupported kind {kind!r}"
            raise TypeSurfaceError(msg)

        self.in_progress.add(full_name)
        try:
            base = raw.get("base_type")
            t = TypeDescriptor(
                namespace=str(raw.get("namespace") or ""),
                name=str(raw["name"]),
                kind=kind,
                generic_arguments=tuple(
                    self.ref(a) for a in raw.get("generic_arguments") or []
                ),
                base_type=self.ref(base, deep=True) if base else None,
                interfaces=tuple(
                    self.ref(i, deep=True) for i in raw.get("interfaces") or []
                ),
                members=tuple(self._members(full_name, raw.get("members") or [])),
                is_abstract=bool(raw.get("abstract")),
                is_sealed=bool(raw.get("sealed")),
            )
        finally:
            self.in_progress.discard(full_name)

        self.built[full_name] = t
        return t

    def ref(self, value: object, *, deep: bool = False) -> TypeDescriptor:
        """Resolve a type reference; ``deep`` links manifest types with their hierarchy."""
        if isinstance(value, str):
            if deep and value in self.entries:
                return self.build(value)
            ns, name = split_full_name(value)
            kind = "class"
            if value in self.entries:
                kind = str(self.entries[value].get("kind") or "class").lower()
            return TypeDescriptor(namespace=ns, name=name, kind=kind)

        if isinstance(value, dict) and "element_type" in value:
            element = self.ref(value["element_type"])
            suffix = str(value.get("suffix") or "[]")
            return TypeDescriptor(
                namespace=element.namespace,
                name=element.name + suffix,
                element_type=element,
            )

        if isinstance(value, dict) and "type" in value:
            definition = self.ref(value["type"], deep=deep)
            args = tuple(self.ref(a) for a in value.get("arguments") or [])
            return dataclasses.replace(definition, generic_arguments=args)

        msg = f"invalid type reference {value!r}"
        raise TypeSurfaceError(msg)

    def _members(
        self, declaring: str, raw_members: list[Any]
    ) -> list[MemberDescriptor]:
        members = []
        for m in raw_members:
            if not isinstance(m, dict) or not m.get("name"):
                logger.warning("Skipping malformed member on %s: %r", declaring, m)
                continue
            kind = str(m.get("kind") or "").lower()
            if kind not in MEMBER_KINDS:
                logger.warning(
                    "Skipping member %s.%s with kind %r", declaring, m["name"], kind
                )
                continue
            if _is_hidden(m) or (kind == "method" and str(m["name"]).lower() == "finalize"):
                continue
            value_type = m.get("returns") if kind == "method" else m.get("type")
            members.append(
                MemberDescriptor(
                    kind=kind,
                    name=str(m["name"]),
                    parameters=tuple(self._parameter(p) for p in m.get("parameters") or []),
                    value_type=self.ref(value_type) if value_type else None,
                    declaring_type=declaring,
                    is_static=bool(m.get("static")),
                    is_extension=bool(m.get("extension")),
                    constant_value=m.get("value"),
                )
            )
        return members

    def _parameter(self, raw: object) -> ParameterDescriptor:
        if not isinstance(raw, dict) or not raw.get("name"):
            msg = f"invalid parameter {raw!r}"
            raise TypeSurfaceError(msg)
        return ParameterDescriptor(
            name=str(raw["name"]),
            type=self.ref(raw.get("type") or "System.Object"),
            has_default="default" in raw,
            default_value=raw.get("default"),
        )


def build_type_surface(doc: dict[str, Any]) -> TypeSurface:
    """Build descriptors for every usable entry of a parsed manifest.

    Bad entries are skipped and counted; the rest of the surface still loads.
    """
    entries: dict[str, dict[str, Any]] = {}
    skipped = 0
    for raw in doc.get("types") or []:
        if not isinstance(raw, dict) or not raw.get("name"):
            logger.warning("Skipping malformed type entry: %r", raw)
            skipped += 1
            continue
        if _is_hidden(raw) or str(raw.get("kind") or "").lower() == "delegate":
            continue
        entries[_full_name(raw.get("namespace"), raw["name"])] = raw

    builder = _SurfaceBuilder(entries)
    types: list[TypeDescriptor] = []
    for full_name in entries:
        try:
            types.append(builder.build(full_name))
        except TypeSurfaceError as exc:
            logger.warning("Skipping type %s: %s", full_name, exc)
            skipped += 1

    return TypeSurface(
        assembly=str(doc.get("assembly") or ""), types=types, skipped=skipped
    )


def load_type_surface(path: Path) -> TypeSurface:
    """Load and parse a YAML type surface manifest."""
    doc = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    if not isinstance(doc, dict):
        msg = f"{path}: expected a mapping with a 'types' list"
        raise TypeSurfaceError(msg)
    return build_type_surface(doc)
