"""ITIS name -> TSN resolution."""

from __future__ import annotations

from typing import Any

from taxalink.config import Settings
from taxalink.datasources.base import best_match, non_null
from taxalink.datasources.itis import client
from taxalink.schemas import Source, TaxonId


def resolve(
    name: str,
    *,
    settings: Settings,
    key: str | None = None,
    request_options: dict[str, Any] | None = None,
) -> TaxonId | None:
    """
    Resolve a scientific name to a TSN.

    An exact ``combinedName`` match is preferred, else the first search hit.
    Returns ``None`` when ITIS knows nothing by that name.
    """
    if not name or not name.strip():
        return None
    data = client.search_by_scientific_name(name, settings=settings, request_options=request_options)
    hits = non_null(data.get("scientificNames"))
    hit = best_match(hits, name, "combinedName")
    if hit is None or not hit.get("tsn"):
        return None
    return TaxonId(source=Source.ITIS, value=hit["tsn"], name=name)
