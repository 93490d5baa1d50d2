"""WoRMS vernacular names and classification for an AphiaID."""

from __future__ import annotations

from typing import Any

import pandas as pd

from taxalink.config import Settings
from taxalink.datasources.base import require_source
from taxalink.datasources.worms import client
from taxalink.normalize import normalize, parse_records
from taxalink.schemas import ClassificationRank, Source, TaxonId, WormsVernacular


def common_names(
    identifier: TaxonId | None,
    simplify: bool = True,
    *,
    settings: Settings,
    key: str | None = None,
    request_options: dict[str, Any] | None = None,
) -> list[str] | pd.DataFrame | None:
    """
    Vernacular names for one AphiaID.

    Returns:
        ``vernacular`` strings when ``simplify``, else a frame with columns
        ``vernacular, language_code, language``.
    """
    if identifier is None:
        return None
    require_source(identifier, Source.WORMS)
    rows = client.vernaculars_by_id(identifier.value, settings=settings, request_options=request_options)
    return normalize(parse_records(Source.WORMS, WormsVernacular, rows), WormsVernacular, simplify)


def _flatten(node: dict[str, Any] | None) -> list[ClassificationRank]:
    # The classification is a chain of nested ``child`` objects, root first.
    ranks = []
    while isinstance(node, dict) and node:
        name = node.get("scientificname")
        if name:
            ranks.append(
                ClassificationRank(
                    name=name,
                    rank=(node.get("rank") or "").lower() or None,
                    id=node.get("AphiaID"),
                )
            )
        node = node.get("child")
    return ranks


def classification(
    identifier: TaxonId | None,
    simplify: bool = False,
    *,
    settings: Settings,
    key: str | None = None,
    request_options: dict[str, Any] | None = None,
) -> list[str] | pd.DataFrame | None:
    """Lineage of one AphiaID, root first."""
    if identifier is None:
        return None
    require_source(identifier, Source.WORMS)
    tree = client.classification_by_id(identifier.value, settings=settings, request_options=request_options)
    return normalize(_flatten(tree), ClassificationRank, simplify)
