"""Schema emission exports."""

from .definitions_document import GeneratedDefinition, build_definitions_document, schema_to_dict
from .document_writer import EmissionError, render_document, write_document

__all__ = [
    "GeneratedDefinition",
    "build_definitions_document",
    "schema_to_dict",
    "EmissionError",
    "render_document",
    "write_document",
]
