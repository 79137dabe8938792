"""Type declaration to OpenAPI schema writer."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from typing import assert_never

from openapi_schema_gen.import_tracking import ImportTracker, SchemaLibrary
from openapi_schema_gen.kind_classification import (
    BYTE_SEQUENCE,
    UnsupportedKindError,
    classify,
    is_byte,
)
from openapi_schema_gen.type_universe.type_models import (
    ArrayType,
    MapType,
    PointerType,
    PrimitiveType,
    RecordType,
    TypeDecl,
    TypeRef,
)

from .schema_models import SchemaDefinition, SchemaNode

_LOGGER = logging.getLogger("openapi_schema_gen.schema_generation")
_LOGGER.addHandler(logging.NullHandler())


class UnresolvedReferenceError(Exception):
    """Raised when a field references a record missing from the universe."""


@dataclass
class _WalkState:
    """Mutable collector for one `generate` call."""

    entry_namespace: str | None
    dependencies: list[TypeRef] = field(default_factory=list)
    namespaces: list[str] = field(default_factory=list)

    def reference(self, ref: TypeRef) -> None:
        if ref not in self.dependencies:
            self.dependencies.append(ref)
        if ref.namespace != self.entry_namespace and ref.namespace not in self.namespaces:
            self.namespaces.append(ref.namespace)


class SchemaWriter:
    """Produces schema trees for type declarations of one generation run.

    Every writer of a run shares the run's `ImportTracker`. Namespaces a
    declaration references are committed to the tracker only once its schema
    has been produced, so a failing declaration leaves the tracker untouched.
    Entry records are looked up in the universe by ref, which expands bare
    references such as the ones the loader builds for field types.
    """

    def __init__(
        self,
        universe: Mapping[TypeRef, RecordType],
        import_tracker: ImportTracker,
        schema_library: SchemaLibrary | None = None,
    ) -> None:
        self._universe = universe
        self._import_tracker = import_tracker
        self._schema_library = schema_library or SchemaLibrary()

    def generate(self, declaration: TypeDecl) -> SchemaDefinition:
        """Return the schema and dependency list of one entry declaration.

        Raises:
          UnsupportedKindError: A primitive has no OpenAPI mapping.
          UnresolvedReferenceError: A referenced record is not in the universe.
          AliasCollisionError: A referenced namespace cannot be aliased.
        """
        state = _WalkState(entry_namespace=_entry_namespace(declaration))
        schema = self._schema_for(declaration, state, is_entry=True)

        self._import_tracker.add_all(
            [(self._schema_library.namespace, self._schema_library.alias)]
            + [(namespace, None) for namespace in state.namespaces]
        )
        return SchemaDefinition(schema=schema, dependencies=tuple(state.dependencies))

    def _schema_for(
        self, declaration: TypeDecl, state: _WalkState, *, is_entry: bool
    ) -> SchemaNode:
        if isinstance(declaration, PrimitiveType):
            schema_type = classify(declaration.descriptor)
            return SchemaNode(type=schema_type.type, format=schema_type.format)
        if isinstance(declaration, PointerType):
            return self._schema_for(declaration.element, state, is_entry=is_entry)
        if isinstance(declaration, ArrayType):
            element = declaration.element
            if isinstance(element, PrimitiveType) and is_byte(element.descriptor):
                return SchemaNode(type=BYTE_SEQUENCE.type, format=BYTE_SEQUENCE.format)
            return SchemaNode(type="array", items=self._schema_for(element, state, is_entry=False))
        if isinstance(declaration, MapType):
            return SchemaNode(
                type="object",
                additional_properties=self._schema_for(declaration.element, state, is_entry=False),
            )
        if isinstance(declaration, RecordType):
            if is_entry:
                return self._record_schema(self._universe.get(declaration.ref, declaration), state)
            return self._reference_schema(declaration, state)
        assert_never(declaration)

    def _record_schema(self, record: RecordType, state: _WalkState) -> SchemaNode:
        properties: dict[str, SchemaNode] = {}
        required: list[str] = []
        for record_field in record.fields:
            if record_field.directives:
                _LOGGER.debug(
                    "Skipping %s.%s with directives %s",
                    record.ref,
                    record_field.name,
                    sorted(directive.value for directive in record_field.directives),
                )
                continue
            try:
                node = self._schema_for(record_field.type, state, is_entry=False)
            except (UnsupportedKindError, UnresolvedReferenceError) as exc:
                raise type(exc)(f"{record.ref}.{record_field.name}: {exc}") from exc
            properties[record_field.name] = replace(
                node, description=record_field.documentation.strip()
            )
            required.append(record_field.name)

        return SchemaNode(
            description=record.documentation.strip(),
            properties=properties,
            required=tuple(required),
        )

    def _reference_schema(self, record: RecordType, state: _WalkState) -> SchemaNode:
        if record.ref not in self._universe:
            raise UnresolvedReferenceError(f"Referenced type {record.ref} is not declared.")
        state.reference(record.ref)
        return SchemaNode(ref=record.ref.qualified_name)


def _entry_namespace(declaration: TypeDecl) -> str | None:
    while isinstance(declaration, PointerType):
        declaration = declaration.element
    if isinstance(declaration, RecordType):
        return declaration.ref.namespace
    return None
