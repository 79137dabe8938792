"""Run execution domain exports."""

from .generation_run_use_case import (
    GenerationBatch,
    RunExecutionError,
    execute_generation_run,
    generate_definitions,
    list_entry_points,
)
from .run_contracts import GenerationFailure, RunOutcome, RunRequest

__all__ = [
    "RunRequest",
    "RunOutcome",
    "GenerationFailure",
    "GenerationBatch",
    "RunExecutionError",
    "execute_generation_run",
    "generate_definitions",
    "list_entry_points",
]
