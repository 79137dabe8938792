"""Generation entry point selection."""

from __future__ import annotations

from .type_models import RecordType, Universe

DEFAULT_ENTRY_MARKER = "+openapi-gen=true"


def is_entry_point(record: RecordType, marker: str = DEFAULT_ENTRY_MARKER) -> bool:
    """Return True when the record documentation carries the entry marker."""
    return marker in record.markers


def select_entry_points(
    universe: Universe, marker: str = DEFAULT_ENTRY_MARKER
) -> tuple[RecordType, ...]:
    """Return marked records in qualified-name order."""
    selected = [record for record in universe.values() if is_entry_point(record, marker)]
    return tuple(sorted(selected, key=lambda record: record.ref.qualified_name))
