"""BOLD name -> taxid resolution."""

from __future__ import annotations

from typing import Any

from taxalink.config import Settings
from taxalink.datasources.base import best_match
from taxalink.datasources.bold import client
from taxalink.schemas import Source, TaxonId


def resolve(
    name: str,
    *,
    settings: Settings,
    key: str | None = None,
    request_options: dict[str, Any] | None = None,
    fuzzy: bool = False,
) -> TaxonId | None:
    """BOLD taxid for ``name``: exact ``taxon`` match, else first hit."""
    if not name or not name.strip():
        return None
    hits = client.taxon_search(name, fuzzy=fuzzy, settings=settings, request_options=request_options)
    hit = best_match(hits, name, "taxon")
    if hit is None or hit.get("taxid") is None:
        return None
    return TaxonId(source=Source.BOLD, value=hit["taxid"], name=name)
