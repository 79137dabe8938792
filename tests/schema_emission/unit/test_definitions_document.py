"""Definitions document assembly tests."""

from __future__ import annotations

from openapi_schema_gen.schema_emission import (
    GeneratedDefinition,
    build_definitions_document,
    schema_to_dict,
)
from openapi_schema_gen.schema_generation import SchemaDefinition, SchemaNode
from openapi_schema_gen.type_universe import TypeRef

BLAH = TypeRef("base/foo", "Blah")


def test_primitive_schema_keeps_empty_format() -> None:
    node = SchemaNode(description="A simple string", type="string", format="")

    assert schema_to_dict(node) == {
        "description": "A simple string",
        "type": "string",
        "format": "",
    }


def test_reference_schema_uses_ref_prefix_only() -> None:
    node = SchemaNode(description="A struct pointer", ref="base/foo.Blah")

    assert schema_to_dict(node) == {
        "description": "A struct pointer",
        "$ref": "#/definitions/base/foo.Blah",
    }
    assert schema_to_dict(node, "#/components/schemas/")["$ref"] == (
        "#/components/schemas/base/foo.Blah"
    )


def test_array_and_map_schemas_nest_items_and_additional_properties() -> None:
    string_node = SchemaNode(type="string", format="")
    array_node = SchemaNode(type="array", items=string_node)
    map_node = SchemaNode(type="object", additional_properties=array_node)

    assert schema_to_dict(map_node) == {
        "type": "object",
        "additionalProperties": {
            "type": "array",
            "items": {"type": "string", "format": ""},
        },
    }


def test_record_schema_always_has_properties_and_required() -> None:
    assert schema_to_dict(SchemaNode()) == {"properties": {}, "required": []}


def test_record_properties_keep_declaration_order() -> None:
    node = SchemaNode(
        description="Blah is a test.",
        properties={
            "Zeta": SchemaNode(type="boolean", format=""),
            "Alpha": SchemaNode(type="boolean", format=""),
        },
        required=("Zeta", "Alpha"),
    )

    rendered = schema_to_dict(node)

    assert list(rendered) == ["description", "properties", "required"]
    assert list(rendered["properties"]) == ["Zeta", "Alpha"]
    assert rendered["required"] == ["Zeta", "Alpha"]


def test_build_definitions_document_includes_dependencies_only_when_present() -> None:
    other = TypeRef("base/foo", "Other")
    document = build_definitions_document(
        [
            GeneratedDefinition(
                ref=BLAH,
                definition=SchemaDefinition(
                    schema=SchemaNode(
                        properties={"Parent": SchemaNode(ref="base/foo.Blah")},
                        required=("Parent",),
                    ),
                    dependencies=(BLAH,),
                ),
            ),
            GeneratedDefinition(ref=other, definition=SchemaDefinition(schema=SchemaNode())),
        ],
        ['spec "github.com/go-openapi/spec"'],
    )

    assert document == {
        "imports": ['spec "github.com/go-openapi/spec"'],
        "definitions": {
            "base/foo.Blah": {
                "schema": {
                    "properties": {"Parent": {"$ref": "#/definitions/base/foo.Blah"}},
                    "required": ["Parent"],
                },
                "dependencies": ["base/foo.Blah"],
            },
            "base/foo.Other": {"schema": {"properties": {}, "required": []}},
        },
    }
