"""Run-scoped namespace import tracker."""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable

from .import_records import ImportRecord

_LOGGER = logging.getLogger("openapi_schema_gen.import_tracking")
_LOGGER.addHandler(logging.NullHandler())

_NON_IDENTIFIER_PATTERN = re.compile(r"\W")


class AliasCollisionError(Exception):
    """Raised when an alias cannot be assigned to a namespace uniquely."""


class ImportTracker:
    """Accumulates aliased namespaces for one generation run.

    Aliases derive from the last path segment of the namespace. When two
    distinct namespaces share that segment, the later one is widened with
    preceding segments (`bar/foo` becomes `bar_foo`) and, once every segment
    is used, suffixed with a counter. Assignment depends only on the order of
    `add` calls, so identical runs produce identical aliases.
    """

    def __init__(self, local_namespace: str | None = None) -> None:
        self._local_namespace = local_namespace
        self._alias_by_namespace: dict[str, str] = {}
        self._namespace_by_alias: dict[str, str] = {}

    @property
    def local_namespace(self) -> str | None:
        return self._local_namespace

    def add(self, namespace: str, alias: str | None = None) -> str:
        """Register a namespace and return its alias."""
        normalized = namespace.strip()
        if not normalized:
            raise AliasCollisionError("Cannot assign an alias to an empty namespace.")

        existing = self._alias_by_namespace.get(normalized)
        if existing is not None:
            if alias is not None and alias != existing:
                raise AliasCollisionError(
                    f"Namespace {normalized} is already imported as {existing}, not {alias}."
                )
            return existing

        if alias is None:
            chosen = self._derive_alias(normalized)
        else:
            chosen = _require_identifier(alias)
            owner = self._namespace_by_alias.get(chosen)
            if owner is not None:
                raise AliasCollisionError(
                    f"Alias {chosen} for {normalized} is already used by {owner}."
                )

        self._alias_by_namespace[normalized] = chosen
        self._namespace_by_alias[chosen] = normalized
        _LOGGER.debug("Imported %s as %s", normalized, chosen)
        return chosen

    def add_all(self, requests: Iterable[tuple[str, str | None]]) -> list[str]:
        """Register several `(namespace, alias)` pairs as one step.

        Either every pair is registered or, when one fails, none is.
        """
        alias_by_namespace = dict(self._alias_by_namespace)
        namespace_by_alias = dict(self._namespace_by_alias)
        try:
            return [self.add(namespace, alias) for namespace, alias in requests]
        except AliasCollisionError:
            self._alias_by_namespace = alias_by_namespace
            self._namespace_by_alias = namespace_by_alias
            raise

    def alias_for(self, namespace: str) -> str | None:
        """Return the alias of a registered namespace."""
        return self._alias_by_namespace.get(namespace.strip())

    def imports(self) -> tuple[ImportRecord, ...]:
        """Return alias-sorted import records without the local namespace."""
        records = [
            ImportRecord(alias=alias, namespace=namespace)
            for namespace, alias in self._alias_by_namespace.items()
            if namespace != self._local_namespace
        ]
        return tuple(sorted(records))

    def import_lines(self) -> list[str]:
        """Return rendered import lines sorted by alias."""
        return [record.render() for record in self.imports()]

    def _derive_alias(self, namespace: str) -> str:
        segments = [_sanitize_segment(segment) for segment in namespace.split("/") if segment]
        if not segments:
            raise AliasCollisionError(f"Cannot derive an alias from namespace {namespace!r}.")
        for width in range(1, len(segments) + 1):
            candidate = "_".join(segments[-width:])
            if candidate not in self._namespace_by_alias:
                return candidate

        base = "_".join(segments)
        counter = 2
        while f"{base}{counter}" in self._namespace_by_alias:
            counter += 1
        return f"{base}{counter}"


def _sanitize_segment(segment: str) -> str:
    sanitized = _NON_IDENTIFIER_PATTERN.sub("_", segment)
    if sanitized[0].isdigit():
        return f"_{sanitized}"
    return sanitized


def _require_identifier(alias: str) -> str:
    stripped = alias.strip()
    if not stripped.isidentifier():
        raise AliasCollisionError(f"Alias {alias!r} is not a valid identifier.")
    return stripped
