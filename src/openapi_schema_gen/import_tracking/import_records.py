"""Import tracking entities."""

from __future__ import annotations

from dataclasses import dataclass

DEFAULT_SCHEMA_LIBRARY_NAMESPACE = "github.com/go-openapi/spec"
DEFAULT_SCHEMA_LIBRARY_ALIAS = "spec"


@dataclass(frozen=True, order=True)
class ImportRecord:
    """One aliased namespace referenced by the generated artifact."""

    alias: str
    namespace: str

    def render(self) -> str:
        """Render as an `alias "namespace"` import line."""
        return f'{self.alias} "{self.namespace}"'


@dataclass(frozen=True)
class SchemaLibrary:
    """Namespace that provides the schema object types themselves."""

    namespace: str = DEFAULT_SCHEMA_LIBRARY_NAMESPACE
    alias: str = DEFAULT_SCHEMA_LIBRARY_ALIAS
