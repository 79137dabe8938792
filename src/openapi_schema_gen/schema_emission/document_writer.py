"""Definitions document serialization."""

from __future__ import annotations

import json
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

GENERATED_HEADER = "Code generated by openapi-schema-gen. DO NOT EDIT."


class EmissionError(Exception):
    """Raised when the definitions document cannot be rendered or written."""


def render_document(document: Mapping[str, Any], output_format: str = "yaml") -> str:
    """Render the document as YAML or JSON text, keeping key order."""
    if output_format == "yaml":
        body = yaml.safe_dump(
            dict(document), sort_keys=False, default_flow_style=False, allow_unicode=True
        )
        return f"# {GENERATED_HEADER}\n{body}"
    if output_format == "json":
        return json.dumps(document, indent=2, ensure_ascii=False) + "\n"
    raise EmissionError(f"Unsupported output format: {output_format}")


def write_document(
    document: Mapping[str, Any], output_path: Path | str, output_format: str = "yaml"
) -> Path:
    """Write the rendered document and return its resolved path."""
    destination = Path(output_path)
    text = render_document(document, output_format)
    try:
        destination.parent.mkdir(parents=True, exist_ok=True)
        destination.write_text(text, encoding="utf-8")
    except OSError as exc:
        raise EmissionError(f"Failed to write {destination}: {exc}") from exc
    return destination.resolve()
