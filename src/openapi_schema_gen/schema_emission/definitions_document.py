"""OpenAPI definitions document assembly."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

from openapi_schema_gen.schema_generation import SchemaDefinition, SchemaNode
from openapi_schema_gen.type_universe import TypeRef

DEFAULT_REF_PREFIX = "#/definitions/"


@dataclass(frozen=True)
class GeneratedDefinition:
    """Schema definition keyed by the entry type it was generated for."""

    ref: TypeRef
    definition: SchemaDefinition


def schema_to_dict(node: SchemaNode, ref_prefix: str = DEFAULT_REF_PREFIX) -> dict[str, Any]:
    """Convert a schema node into an OpenAPI Schema Object mapping.

    Record schemas always carry `properties` and `required`, even when empty.
    Primitive schemas always carry `format`, even when empty.
    """
    rendered: dict[str, Any] = {}
    if node.description:
        rendered["description"] = node.description
    if node.ref is not None:
        rendered["$ref"] = f"{ref_prefix}{node.ref}"
        return rendered

    if node.type is not None:
        rendered["type"] = node.type
    if node.format is not None:
        rendered["format"] = node.format
    if node.items is not None:
        rendered["items"] = schema_to_dict(node.items, ref_prefix)
    if node.additional_properties is not None:
        rendered["additionalProperties"] = schema_to_dict(node.additional_properties, ref_prefix)
    if node.type is None:
        rendered["properties"] = {
            name: schema_to_dict(child, ref_prefix) for name, child in node.properties.items()
        }
        rendered["required"] = list(node.required)
    return rendered


def build_definitions_document(
    definitions: Sequence[GeneratedDefinition],
    import_lines: Sequence[str],
    ref_prefix: str = DEFAULT_REF_PREFIX,
) -> dict[str, Any]:
    """Assemble the run output: import lines plus one entry per generated type."""
    rendered_definitions: dict[str, Any] = {}
    for generated in definitions:
        entry: dict[str, Any] = {
            "schema": schema_to_dict(generated.definition.schema, ref_prefix)
        }
        if generated.definition.dependencies:
            entry["dependencies"] = [
                dependency.qualified_name for dependency in generated.definition.dependencies
            ]
        rendered_definitions[generated.ref.qualified_name] = entry
    return {"imports": list(import_lines), "definitions": rendered_definitions}
