"""Type universe domain exports."""

from .entry_selection import DEFAULT_ENTRY_MARKER, is_entry_point, select_entry_points
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
from .universe_loader import UniverseError, build_universe, load_universe

__all__ = [
    "ArrayType",
    "Field",
    "MapType",
    "PointerType",
    "PrimitiveDescriptor",
    "PrimitiveFamily",
    "PrimitiveType",
    "RecordType",
    "SerializationDirective",
    "TypeDecl",
    "TypeRef",
    "Universe",
    "UniverseError",
    "build_universe",
    "load_universe",
    "DEFAULT_ENTRY_MARKER",
    "is_entry_point",
    "select_entry_points",
]
