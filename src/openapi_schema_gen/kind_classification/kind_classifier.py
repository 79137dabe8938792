"""Primitive kind to OpenAPI type/format classification."""

from __future__ import annotations

from collections.abc import Mapping
from typing import NamedTuple

from openapi_schema_gen.type_universe.type_models import PrimitiveDescriptor, PrimitiveFamily


class SchemaType(NamedTuple):
    """OpenAPI `type` and `format` pair."""

    type: str
    format: str


BYTE_SEQUENCE = SchemaType("string", "byte")

# 8-bit signed integers keep the legacy "uint8" format.
_CLASSIFICATION_TABLE: Mapping[tuple[PrimitiveFamily, int | None, bool], SchemaType] = {
    (PrimitiveFamily.BOOLEAN, None, False): SchemaType("boolean", ""),
    (PrimitiveFamily.STRING, None, False): SchemaType("string", ""),
    (PrimitiveFamily.INTEGER, 64, True): SchemaType("integer", "int64"),
    (PrimitiveFamily.INTEGER, 64, False): SchemaType("integer", "uint64"),
    (PrimitiveFamily.INTEGER, 32, True): SchemaType("integer", "int32"),
    (PrimitiveFamily.INTEGER, 32, False): SchemaType("integer", "uint32"),
    (PrimitiveFamily.INTEGER, 16, True): SchemaType("integer", "int16"),
    (PrimitiveFamily.INTEGER, 16, False): SchemaType("integer", "uint16"),
    (PrimitiveFamily.INTEGER, 8, True): SchemaType("integer", "uint8"),
    (PrimitiveFamily.INTEGER, 8, False): SchemaType("integer", "uint8"),
    (PrimitiveFamily.BYTE, 8, False): SchemaType("integer", "uint8"),
    (PrimitiveFamily.INTEGER, None, False): SchemaType("integer", "uint"),
    (PrimitiveFamily.FLOAT, 64, True): SchemaType("number", "double"),
    (PrimitiveFamily.FLOAT, 32, True): SchemaType("number", "float"),
}

# Families whose width and signedness do not change the mapping.
_WIDTH_AGNOSTIC = frozenset({PrimitiveFamily.BOOLEAN, PrimitiveFamily.STRING})


class UnsupportedKindError(Exception):
    """Raised when a primitive descriptor has no OpenAPI mapping."""


def classify(descriptor: PrimitiveDescriptor) -> SchemaType:
    """Return the OpenAPI type/format pair for a primitive descriptor."""
    key = _table_key(descriptor)
    try:
        return _CLASSIFICATION_TABLE[key]
    except KeyError as exc:
        raise UnsupportedKindError(f"Unsupported primitive kind: {describe(descriptor)}") from exc


def is_byte(descriptor: PrimitiveDescriptor) -> bool:
    """Return True for descriptors whose sequences encode as base64 strings."""
    if descriptor.family is PrimitiveFamily.BYTE:
        return True
    return (
        descriptor.family is PrimitiveFamily.INTEGER
        and descriptor.bits == 8
        and not descriptor.signed
    )


def describe(descriptor: PrimitiveDescriptor) -> str:
    """Render a descriptor for error messages."""
    width = "platform-width" if descriptor.bits is None else f"{descriptor.bits}-bit"
    if descriptor.family in _WIDTH_AGNOSTIC:
        return descriptor.family.value
    sign = "signed" if descriptor.signed else "unsigned"
    return f"{width} {sign} {descriptor.family.value}"


def _table_key(descriptor: PrimitiveDescriptor) -> tuple[PrimitiveFamily, int | None, bool]:
    if descriptor.family in _WIDTH_AGNOSTIC:
        return (descriptor.family, None, False)
    if descriptor.family is PrimitiveFamily.BYTE:
        return (descriptor.family, 8, False)
    if descriptor.family is PrimitiveFamily.FLOAT:
        return (descriptor.family, descriptor.bits, True)
    return (descriptor.family, descriptor.bits, descriptor.signed)
