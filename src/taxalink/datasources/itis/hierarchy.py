"""ITIS classification (ancestors of a TSN, root first)."""

from __future__ import annotations

from typing import Any

import pandas as pd

from taxalink.config import Settings
from taxalink.datasources.base import non_null, require_source
from taxalink.datasources.itis import client
from taxalink.normalize import normalize
from taxalink.schemas import ClassificationRank, Source, TaxonId


def _lineage(rows: list[dict[str, Any]], tsn: str) -> list[ClassificationRank]:
    # getFullHierarchyFromTSN lists ancestors, the taxon itself, then its
    # direct children. Stop at the taxon.
    lineage = []
    for row in rows:
        lineage.append(
            ClassificationRank(
                name=row.get("taxonName") or "",
                rank=(row.get("rankName") or "").strip().lower() or None,
                id=row.get("tsn"),
            )
        )
        if str(row.get("tsn")) == tsn:
            break
    return [r for r in lineage if r.name]


def classification(
    identifier: TaxonId | None,
    simplify: bool = False,
    *,
    settings: Settings,
    key: str | None = None,
    request_options: dict[str, Any] | None = None,
) -> list[str] | pd.DataFrame | None:
    """Lineage of one TSN as ``name, rank, id`` rows."""
    if identifier is None:
        return None
    require_source(identifier, Source.ITIS)
    data = client.full_hierarchy_from_tsn(
        identifier.value, settings=settings, request_options=request_options
    )
    return normalize(
        _lineage(non_null(data.get("hierarchyList")), identifier.value),
        ClassificationRank,
        simplify,
    )
