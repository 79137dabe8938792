"""Run execution entities."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from openapi_schema_gen.type_universe import TypeRef


@dataclass(frozen=True)
class RunRequest:
    """Input contract for executing one generation run."""

    config_path: str
    output_path: str | None = None
    fail_fast: bool | None = None


@dataclass(frozen=True)
class GenerationFailure:
    """One entry type whose schema could not be generated."""

    ref: TypeRef
    error_kind: str
    message: str


@dataclass(frozen=True)
class RunOutcome:
    """Output contract for one completed generation run."""

    output_path: Path
    generated: tuple[TypeRef, ...]
    failures: tuple[GenerationFailure, ...]
    import_lines: tuple[str, ...]

    @property
    def is_ok(self) -> bool:
        """Return True when every entry type was generated."""
        return not self.failures
