"""WoRMS name -> AphiaID resolution."""

from __future__ import annotations

from typing import Any

from taxalink.config import Settings
from taxalink.datasources.base import best_match
from taxalink.datasources.worms import client
from taxalink.schemas import Source, TaxonId


def resolve(
    name: str,
    *,
    settings: Settings,
    key: str | None = None,
    request_options: dict[str, Any] | None = None,
) -> TaxonId | None:
    """
    Resolve a scientific name to an AphiaID.

    Prefers an exact, accepted record; then any exact match; then the first hit.
    """
    if not name or not name.strip():
        return None
    hits = client.records_by_name(name, settings=settings, request_options=request_options)
    hit = best_match(hits, name, "scientificname", prefer=("status", "accepted"))
    if hit is None or hit.get("AphiaID") is None:
        return None
    return TaxonId(source=Source.WORMS, value=hit["AphiaID"], name=name)
