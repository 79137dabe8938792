"""Configuration domain entities."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from openapi_schema_gen.import_tracking import SchemaLibrary

OUTPUT_FORMATS: tuple[str, ...] = ("yaml", "json")


@dataclass(frozen=True)
class OutputSettings:
    """Generated document destination."""

    path: Path
    format: str


@dataclass(frozen=True)
class GenerationSettings:
    """Schema generation behaviour."""

    local_namespace: str | None
    entry_marker: str
    ref_prefix: str
    fail_fast: bool


@dataclass(frozen=True)
class Configuration:
    """Top-level configuration aggregate."""

    path: Path
    universe_path: Path
    output: OutputSettings
    generation: GenerationSettings
    schema_library: SchemaLibrary
