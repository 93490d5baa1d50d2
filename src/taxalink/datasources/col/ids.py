"""Catalogue of Life name -> name usage id resolution."""

from __future__ import annotations

from typing import Any

from taxalink.config import Settings
from taxalink.datasources.base import best_match
from taxalink.datasources.col import client
from taxalink.schemas import Source, TaxonId


def lookup(
    name: str, *, settings: Settings, request_options: dict[str, Any] | None = None
) -> dict[str, Any] | None:
    """Best search hit for ``name`` (exact accepted > exact > first), or ``None``."""
    if not name or not name.strip():
        return None
    hits = client.search(name, settings=settings, request_options=request_options)
    return best_match(hits, name, "scientificName", prefer=("status", "accepted"))


def resolve(
    name: str,
    *,
    settings: Settings,
    key: str | None = None,
    request_options: dict[str, Any] | None = None,
) -> TaxonId | None:
    hit = lookup(name, settings=settings, request_options=request_options)
    if hit is None:
        return None
    return TaxonId(source=Source.COL, value=hit["id"], name=name)
