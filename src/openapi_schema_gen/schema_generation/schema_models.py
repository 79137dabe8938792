"""Schema generation entities."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field

from openapi_schema_gen.type_universe.type_models import TypeRef


@dataclass(frozen=True)
class SchemaNode:  # pylint: disable=too-many-instance-attributes
    """OpenAPI Schema Object produced for one declaration.

    `ref` holds the qualified name of another schema and excludes `type` and
    `properties`. `properties` keeps field declaration order.
    """

    description: str = ""
    type: str | None = None
    format: str | None = None
    properties: Mapping[str, SchemaNode] = field(default_factory=dict)
    required: tuple[str, ...] = ()
    ref: str | None = None
    items: SchemaNode | None = None
    additional_properties: SchemaNode | None = None


@dataclass(frozen=True)
class SchemaDefinition:
    """Schema for one entry declaration and the records it references."""

    schema: SchemaNode
    dependencies: tuple[TypeRef, ...] = ()
