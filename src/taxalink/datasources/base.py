"""Helpers shared by every datasource package."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from taxalink.exceptions import SourceMismatchError
from taxalink.schemas import Source, TaxonId


def require_source(identifier: TaxonId, source: Source) -> None:
    """Refuse identifiers minted by another source."""
    if identifier.source is not source:
        raise SourceMismatchError(expected=source, got=identifier.source)


def non_null(rows: Iterable[Any] | None) -> list[Any]:
    """Drop the ``null`` placeholders some services put in empty lists."""
    return [r for r in rows or [] if r is not None]


def best_match(
    hits: list[dict[str, Any]],
    name: str,
    name_field: str,
    *,
    prefer: tuple[str, Any] | None = None,
) -> dict[str, Any] | None:
    """
    Pick one search hit for ``name``.

    Exact (case-insensitive) name matches win over the rest; among those,
    hits where ``hit[prefer[0]] == prefer[1]`` win. Falls back to the first hit.
    """
    if not hits:
        return None
    wanted = name.strip().lower()
    exact = [h for h in hits if str(h.get(name_field) or "").strip().lower() == wanted]
    if prefer is not None:
        key, value = prefer
        preferred = [h for h in exact if h.get(key) == value]
        if preferred:
            return preferred[0]
    if exact:
        return exact[0]
    return hits[0]
