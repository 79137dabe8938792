"""Configuration loader service."""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

from openapi_schema_gen.import_tracking import (
    DEFAULT_SCHEMA_LIBRARY_ALIAS,
    DEFAULT_SCHEMA_LIBRARY_NAMESPACE,
    SchemaLibrary,
)
from openapi_schema_gen.schema_emission.definitions_document import DEFAULT_REF_PREFIX
from openapi_schema_gen.type_universe import DEFAULT_ENTRY_MARKER

from .runtime_settings import OUTPUT_FORMATS, Configuration, GenerationSettings, OutputSettings


class ConfigurationError(Exception):
    """Raised when the configuration file is invalid."""


def load_configuration(config_path: Path | str) -> Configuration:
    """Load and validate the configuration file."""
    path = Path(config_path)
    if not path.exists():
        raise ConfigurationError(f"Configuration file not found: {path}")

    text = path.read_text(encoding="utf-8")
    try:
        parsed = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Failed to parse configuration file: {exc}") from exc

    if parsed is None:
        parsed = {}

    if not isinstance(parsed, Mapping):
        raise ConfigurationError("Configuration root must be a mapping.")

    universe_path = _parse_universe_section(parsed.get("universe"), path.parent)
    output = _parse_output_section(parsed.get("output"), path.parent)
    generation = _parse_generation_section(parsed.get("generation"))
    schema_library = _parse_schema_library_section(parsed.get("schema_library"))

    return Configuration(
        path=path,
        universe_path=universe_path,
        output=output,
        generation=generation,
        schema_library=schema_library,
    )


def _parse_universe_section(value: Any, base_path: Path) -> Path:
    section = _require_mapping(value, "universe")
    raw_path = _require_non_empty_string(section.get("path"), "universe.path")
    universe_path = _resolve_path(base_path, raw_path)
    if not universe_path.exists():
        raise ConfigurationError(f"Type declaration file not found: {universe_path}")
    return universe_path


def _parse_output_section(value: Any, base_path: Path) -> OutputSettings:
    section = _require_mapping(value, "output")
    raw_path = _require_non_empty_string(section.get("path"), "output.path")
    output_format = _require_non_empty_string(
        section.get("format", "yaml"), "output.format"
    ).lower()
    if output_format not in OUTPUT_FORMATS:
        raise ConfigurationError(
            f"output.format must be one of {', '.join(OUTPUT_FORMATS)}, not {output_format}."
        )
    return OutputSettings(path=_resolve_path(base_path, raw_path), format=output_format)


def _parse_generation_section(value: Any) -> GenerationSettings:
    section = _optional_mapping(value, "generation")
    local_namespace = _optional_string(
        section.get("local_namespace"), "generation.local_namespace"
    )
    entry_marker = _require_non_empty_string(
        section.get("entry_marker", DEFAULT_ENTRY_MARKER), "generation.entry_marker"
    )
    ref_prefix = section.get("ref_prefix", DEFAULT_REF_PREFIX)
    if not isinstance(ref_prefix, str):
        raise ConfigurationError("generation.ref_prefix must be a string.")
    fail_fast = section.get("fail_fast", False)
    if not isinstance(fail_fast, bool):
        raise ConfigurationError("generation.fail_fast must be a boolean.")
    return GenerationSettings(
        local_namespace=local_namespace,
        entry_marker=entry_marker,
        ref_prefix=ref_prefix,
        fail_fast=fail_fast,
    )


def _parse_schema_library_section(value: Any) -> SchemaLibrary:
    section = _optional_mapping(value, "schema_library")
    namespace = _require_non_empty_string(
        section.get("namespace", DEFAULT_SCHEMA_LIBRARY_NAMESPACE), "schema_library.namespace"
    )
    alias = _require_non_empty_string(
        section.get("alias", DEFAULT_SCHEMA_LIBRARY_ALIAS), "schema_library.alias"
    )
    if not alias.isidentifier():
        raise ConfigurationError(f"schema_library.alias '{alias}' must be an identifier.")
    return SchemaLibrary(namespace=namespace, alias=alias)


def _resolve_path(base_path: Path, raw_path: str) -> Path:
    candidate = Path(raw_path)
    if not candidate.is_absolute():
        return (base_path / candidate).resolve()
    return candidate


def _require_mapping(value: Any, section_name: str) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        raise ConfigurationError(f"Configuration section '{section_name}' is required.")
    return value


def _optional_mapping(value: Any, section_name: str) -> Mapping[str, Any]:
    if value is None:
        return {}
    if not isinstance(value, Mapping):
        raise ConfigurationError(f"Configuration section '{section_name}' must be a mapping.")
    return value


def _require_non_empty_string(value: Any, field_name: str) -> str:
    if not isinstance(value, str):
        raise ConfigurationError(f"{field_name} must be a string.")
    stripped = value.strip()
    if not stripped:
        raise ConfigurationError(f"{field_name} must not be empty.")
    return stripped


def _optional_string(value: Any, field_name: str) -> str | None:
    if value is None:
        return None
    if not isinstance(value, str):
        raise ConfigurationError(f"{field_name} must be a string.")
    stripped = value.strip()
    return stripped or None
