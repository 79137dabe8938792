"""Universe declaration file loader."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any

import yaml

from .type_models import (
    ArrayType,
    Field,
    MapType,
    PointerType,
    PrimitiveDescriptor,
    PrimitiveFamily,
    PrimitiveType,
    RecordType,
    SerializationDirective,
    TypeDecl,
    TypeRef,
    Universe,
)

MARKER_PREFIX = "+"

PRIMITIVE_TYPES: Mapping[str, PrimitiveDescriptor] = {
    "bool": PrimitiveDescriptor(PrimitiveFamily.BOOLEAN),
    "string": PrimitiveDescriptor(PrimitiveFamily.STRING),
    "byte": PrimitiveDescriptor(PrimitiveFamily.BYTE, bits=8),
    "int": PrimitiveDescriptor(PrimitiveFamily.INTEGER, signed=True),
    "int8": PrimitiveDescriptor(PrimitiveFamily.INTEGER, bits=8, signed=True),
    "int16": PrimitiveDescriptor(PrimitiveFamily.INTEGER, bits=16, signed=True),
    "int32": PrimitiveDescriptor(PrimitiveFamily.INTEGER, bits=32, signed=True),
    "int64": PrimitiveDescriptor(PrimitiveFamily.INTEGER, bits=64, signed=True),
    "uint": PrimitiveDescriptor(PrimitiveFamily.INTEGER),
    "uint8": PrimitiveDescriptor(PrimitiveFamily.INTEGER, bits=8),
    "uint16": PrimitiveDescriptor(PrimitiveFamily.INTEGER, bits=16),
    "uint32": PrimitiveDescriptor(PrimitiveFamily.INTEGER, bits=32),
    "uint64": PrimitiveDescriptor(PrimitiveFamily.INTEGER, bits=64),
    "float32": PrimitiveDescriptor(PrimitiveFamily.FLOAT, bits=32, signed=True),
    "float64": PrimitiveDescriptor(PrimitiveFamily.FLOAT, bits=64, signed=True),
}

_WRAPPER_KEYS = ("pointer", "array", "map")
_DIRECTIVE_NAMES = frozenset(directive.value for directive in SerializationDirective)


class UniverseError(Exception):
    """Raised when a type declaration file is invalid."""


def load_universe(universe_path: Path | str) -> Universe:
    """Load and validate a type declaration file."""
    path = Path(universe_path)
    if not path.exists():
        raise UniverseError(f"Type declaration file not found: {path}")

    try:
        parsed = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise UniverseError(f"Failed to parse type declaration file: {exc}") from exc

    return build_universe(parsed if parsed is not None else {})


def build_universe(document: Any) -> Universe:
    """Build a universe from an already parsed declaration document."""
    if not isinstance(document, Mapping):
        raise UniverseError("Type declaration root must be a mapping.")
    declarations = document.get("types", [])
    if not isinstance(declarations, Sequence) or isinstance(declarations, str):
        raise UniverseError("'types' must be a list of type declarations.")

    records: dict[TypeRef, RecordType] = {}
    for index, declaration in enumerate(declarations):
        record = _parse_record(declaration, f"types[{index}]")
        if record.ref in records:
            raise UniverseError(f"Duplicate type declaration: {record.ref}")
        records[record.ref] = record
    return Universe(records=records)


def split_documentation(text: str) -> tuple[str, tuple[str, ...]]:
    """Separate free-text documentation from `+marker` lines."""
    prose: list[str] = []
    markers: list[str] = []
    for line in text.splitlines():
        stripped = line.strip()
        if stripped.startswith(MARKER_PREFIX):
            markers.append(stripped)
        else:
            prose.append(line)
    return "\n".join(prose).strip(), tuple(markers)


def parse_type_expression(expression: Any, namespace: str) -> TypeDecl:
    """Parse one type expression relative to the declaring namespace."""
    if isinstance(expression, str):
        name = expression.strip()
        if not name:
            raise UniverseError("Type expression must not be empty.")
        descriptor = PRIMITIVE_TYPES.get(name)
        if descriptor is not None:
            return PrimitiveType(descriptor)
        return RecordType(ref=_parse_type_ref(name, namespace))

    if isinstance(expression, Mapping):
        if len(expression) != 1:
            raise UniverseError(
                f"Wrapped type expression must have exactly one of {', '.join(_WRAPPER_KEYS)}."
            )
        wrapper, inner = next(iter(expression.items()))
        element = parse_type_expression(inner, namespace)
        if wrapper == "pointer":
            return PointerType(element)
        if wrapper == "array":
            return ArrayType(element)
        if wrapper == "map":
            return MapType(element)
        raise UniverseError(f"Unknown type wrapper: {wrapper}")

    raise UniverseError(f"Unsupported type expression: {expression!r}")


def parse_directives(value: Any) -> frozenset[SerializationDirective]:
    """Parse a directive list, a single directive, or a `name,omitempty,string` tag string."""
    if value is None:
        return frozenset()
    if isinstance(value, str):
        tokens = _directive_tokens(value)
    elif isinstance(value, Sequence):
        tokens = []
        for item in value:
            if not isinstance(item, str):
                raise UniverseError("Field directives must be strings.")
            tokens.append(item.strip())
    else:
        raise UniverseError("Field directives must be a string or list of strings.")

    directives: set[SerializationDirective] = set()
    for token in tokens:
        if not token:
            continue
        try:
            directives.add(SerializationDirective(token))
        except ValueError as exc:
            raise UniverseError(f"Unknown serialization directive: {token}") from exc
    return frozenset(directives)


def _directive_tokens(value: str) -> list[str]:
    if "," not in value:
        return [value.strip()]
    # The leading segment of a tag string is the wire name, not a directive.
    wire_name, *tokens = (token.strip() for token in value.split(","))
    if wire_name in _DIRECTIVE_NAMES:
        raise UniverseError(
            f"Tag string {value!r} starts with directive {wire_name}; "
            f"write ',{value.strip()}' or use a list."
        )
    return tokens


def _parse_record(value: Any, label: str) -> RecordType:
    declaration = _require_mapping(value, label)
    namespace = _require_non_empty_string(declaration.get("namespace"), f"{label}.namespace")
    name = _require_non_empty_string(declaration.get("name"), f"{label}.name")
    documentation, markers = split_documentation(
        _optional_string(declaration.get("doc"), f"{label}.doc")
    )

    raw_fields = declaration.get("fields") or []
    if not isinstance(raw_fields, Sequence) or isinstance(raw_fields, str):
        raise UniverseError(f"{label}.fields must be a list.")

    fields: list[Field] = []
    seen_names: set[str] = set()
    for index, raw_field in enumerate(raw_fields):
        parsed_field = _parse_field(raw_field, namespace, f"{label}.fields[{index}]")
        if parsed_field.name in seen_names:
            raise UniverseError(f"Duplicate field {parsed_field.name} in {namespace}.{name}")
        seen_names.add(parsed_field.name)
        fields.append(parsed_field)

    return RecordType(
        ref=TypeRef(namespace=namespace, name=name),
        fields=tuple(fields),
        documentation=documentation,
        markers=markers,
    )


def _parse_field(value: Any, namespace: str, label: str) -> Field:
    declaration = _require_mapping(value, label)
    name = _require_non_empty_string(declaration.get("name"), f"{label}.name")
    if "type" not in declaration:
        raise UniverseError(f"{label}.type is required.")
    try:
        field_type = parse_type_expression(declaration["type"], namespace)
    except UniverseError as exc:
        raise UniverseError(f"{label}.type: {exc}") from exc
    documentation, _ = split_documentation(
        _optional_string(declaration.get("doc"), f"{label}.doc")
    )
    return Field(
        name=name,
        type=field_type,
        documentation=documentation,
        directives=parse_directives(declaration.get("directives")),
    )


def _parse_type_ref(name: str, namespace: str) -> TypeRef:
    if "." not in name.rsplit("/", 1)[-1]:
        return TypeRef(namespace=namespace, name=name)
    type_namespace, type_name = name.rsplit(".", 1)
    if not type_namespace or not type_name:
        raise UniverseError(f"Invalid qualified type name: {name}")
    return TypeRef(namespace=type_namespace, name=type_name)


def _require_mapping(value: Any, label: str) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        raise UniverseError(f"{label} must be a mapping.")
    return value


def _require_non_empty_string(value: Any, label: str) -> str:
    if not isinstance(value, str):
        raise UniverseError(f"{label} must be a string.")
    stripped = value.strip()
    if not stripped:
        raise UniverseError(f"{label} must not be empty.")
    return stripped


def _optional_string(value: Any, label: str) -> str:
    if value is None:
        return ""
    if not isinstance(value, str):
        raise UniverseError(f"{label} must be a string.")
    return value
