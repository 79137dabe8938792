"""Schema generation exports."""

from .schema_models import SchemaDefinition, SchemaNode
from .schema_writer import SchemaWriter, UnresolvedReferenceError

__all__ = [
    "SchemaDefinition",
    "SchemaNode",
    "SchemaWriter",
    "UnresolvedReferenceError",
]
