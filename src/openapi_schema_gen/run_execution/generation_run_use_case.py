"""Generation run use-case service."""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from pathlib import Path

from openapi_schema_gen.configuration import Configuration, ConfigurationError, load_configuration
from openapi_schema_gen.import_tracking import AliasCollisionError, ImportTracker, SchemaLibrary
from openapi_schema_gen.kind_classification import UnsupportedKindError
from openapi_schema_gen.schema_emission import (
    EmissionError,
    GeneratedDefinition,
    build_definitions_document,
    write_document,
)
from openapi_schema_gen.schema_generation import SchemaWriter, UnresolvedReferenceError
from openapi_schema_gen.type_universe import (
    RecordType,
    TypeRef,
    Universe,
    UniverseError,
    load_universe,
    select_entry_points,
)

from .run_contracts import GenerationFailure, RunOutcome, RunRequest

_LOGGER = logging.getLogger("openapi_schema_gen.run_execution")
_LOGGER.addHandler(logging.NullHandler())

GENERATION_ERRORS = (UnsupportedKindError, UnresolvedReferenceError, AliasCollisionError)


class RunExecutionError(Exception):
    """Raised when a generation run cannot be completed."""


@dataclass(frozen=True)
class GenerationBatch:
    """Definitions and failures collected over the entry types of one run."""

    definitions: tuple[GeneratedDefinition, ...]
    failures: tuple[GenerationFailure, ...]


def execute_generation_run(request: RunRequest) -> RunOutcome:
    """Execute one full generation run and return the run outcome."""
    configuration, universe = _load_run_inputs(request.config_path)
    fail_fast = (
        configuration.generation.fail_fast if request.fail_fast is None else request.fail_fast
    )
    output_path = Path(request.output_path) if request.output_path else configuration.output.path

    entries = select_entry_points(universe, configuration.generation.entry_marker)
    _LOGGER.info("Generating %d entry types from %s", len(entries), configuration.universe_path)
    import_tracker = ImportTracker(local_namespace=configuration.generation.local_namespace)
    batch = generate_definitions(
        entries,
        universe,
        import_tracker,
        schema_library=configuration.schema_library,
        fail_fast=fail_fast,
    )

    import_lines = tuple(import_tracker.import_lines())
    document = build_definitions_document(
        batch.definitions, import_lines, ref_prefix=configuration.generation.ref_prefix
    )
    try:
        written_path = write_document(document, output_path, configuration.output.format)
    except EmissionError as exc:
        raise RunExecutionError(str(exc)) from exc

    return RunOutcome(
        output_path=written_path,
        generated=tuple(generated.ref for generated in batch.definitions),
        failures=batch.failures,
        import_lines=import_lines,
    )


def generate_definitions(
    entries: Sequence[RecordType],
    universe: Mapping[TypeRef, RecordType],
    import_tracker: ImportTracker,
    *,
    schema_library: SchemaLibrary | None = None,
    fail_fast: bool = False,
) -> GenerationBatch:
    """Generate every entry with one shared import tracker.

    A failing entry is recorded and skipped, unless `fail_fast` is set, in
    which case the run stops with `RunExecutionError`.
    """
    writer = SchemaWriter(universe, import_tracker, schema_library)
    definitions: list[GeneratedDefinition] = []
    failures: list[GenerationFailure] = []
    for entry in entries:
        _LOGGER.debug("Generating schema for %s", entry.ref)
        try:
            definition = writer.generate(entry)
        except GENERATION_ERRORS as exc:
            if fail_fast:
                raise RunExecutionError(f"Failed to generate {entry.ref}: {exc}") from exc
            _LOGGER.warning("Skipping %s: %s", entry.ref, exc)
            failures.append(
                GenerationFailure(ref=entry.ref, error_kind=type(exc).__name__, message=str(exc))
            )
            continue
        definitions.append(GeneratedDefinition(ref=entry.ref, definition=definition))
    return GenerationBatch(definitions=tuple(definitions), failures=tuple(failures))


def list_entry_points(config_path: str) -> tuple[TypeRef, ...]:
    """Return the entry types a run with this configuration would generate."""
    configuration, universe = _load_run_inputs(config_path)
    entries = select_entry_points(universe, configuration.generation.entry_marker)
    return tuple(entry.ref for entry in entries)


def _load_run_inputs(config_path: str) -> tuple[Configuration, Universe]:
    try:
        configuration = load_configuration(config_path)
        universe = load_universe(configuration.universe_path)
    except (ConfigurationError, UniverseError, OSError) as exc:
        raise RunExecutionError(str(exc)) from exc
    return configuration, universe
