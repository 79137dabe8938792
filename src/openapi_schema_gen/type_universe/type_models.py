"""Type universe entities."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import TypeAlias


@dataclass(frozen=True, order=True)
class TypeRef:
    """Qualified identity of a declared type."""

    namespace: str
    name: str

    @property
    def qualified_name(self) -> str:
        """Return the `namespace.Name` form used as schema key."""
        return f"{self.namespace}.{self.name}"

    def __str__(self) -> str:
        return self.qualified_name


class PrimitiveFamily(str, Enum):
    """Primitive value families understood by the kind classifier."""

    BOOLEAN = "boolean"
    STRING = "string"
    INTEGER = "integer"
    FLOAT = "float"
    BYTE = "byte"


@dataclass(frozen=True)
class PrimitiveDescriptor:
    """Primitive kind with its bit width and signedness.

    `bits` is None for platform-width integers.
    """

    family: PrimitiveFamily
    bits: int | None = None
    signed: bool = False


class SerializationDirective(str, Enum):
    """Per-field wire encoding directives."""

    OMIT_EMPTY = "omitempty"
    STRING = "string"


@dataclass(frozen=True)
class PrimitiveType:
    """Declaration of a primitive value."""

    descriptor: PrimitiveDescriptor


@dataclass(frozen=True)
class PointerType:
    """Declaration of a pointer to another declaration."""

    element: TypeDecl


@dataclass(frozen=True)
class ArrayType:
    """Declaration of an ordered sequence of elements."""

    element: TypeDecl


@dataclass(frozen=True)
class MapType:
    """Declaration of a string-keyed mapping to elements."""

    element: TypeDecl


@dataclass(frozen=True)
class Field:
    """One declared record field."""

    name: str
    type: TypeDecl
    documentation: str = ""
    directives: frozenset[SerializationDirective] = frozenset()


@dataclass(frozen=True)
class RecordType:
    """Declaration of a named record.

    A record reached through a field only needs its `ref`; its `fields` are
    read when the record itself is the generation entry point.
    """

    ref: TypeRef
    fields: tuple[Field, ...] = ()
    documentation: str = ""
    markers: tuple[str, ...] = ()


TypeDecl: TypeAlias = PrimitiveType | PointerType | ArrayType | MapType | RecordType


@dataclass(frozen=True)
class Universe(Mapping[TypeRef, RecordType]):
    """Resolved record declarations available to one generation run."""

    records: Mapping[TypeRef, RecordType] = field(default_factory=dict)

    def __getitem__(self, key: TypeRef) -> RecordType:
        return self.records[key]

    def __iter__(self) -> Iterator[TypeRef]:
        return iter(self.records)

    def __len__(self) -> int:
        return len(self.records)
