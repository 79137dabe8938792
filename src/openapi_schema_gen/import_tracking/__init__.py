"""Import tracking exports."""

from .import_records import (
    DEFAULT_SCHEMA_LIBRARY_ALIAS,
    DEFAULT_SCHEMA_LIBRARY_NAMESPACE,
    ImportRecord,
    SchemaLibrary,
)
from .import_tracker import AliasCollisionError, ImportTracker

__all__ = [
    "DEFAULT_SCHEMA_LIBRARY_ALIAS",
    "DEFAULT_SCHEMA_LIBRARY_NAMESPACE",
    "AliasCollisionError",
    "ImportRecord",
    "ImportTracker",
    "SchemaLibrary",
]
