"""Catalogue of Life tree walks: downstream taxa and classification."""

from __future__ import annotations

import logging
from collections import deque
from typing import Any

import pandas as pd

from taxalink.config import Settings
from taxalink.datasources.base import require_source
from taxalink.datasources.col import client
from taxalink.datasources.col.ids import lookup
from taxalink.exceptions import InvalidInputError, ResponseShapeError
from taxalink.normalize import normalize
from taxalink.schemas import RANKS, ClassificationRank, ColChild, Source, TaxonId, rank_index

logger = logging.getLogger(__name__)


def _child(row: dict[str, Any]) -> ColChild:
    name = row.get("name")
    if isinstance(name, dict):
        name = name.get("scientificName")
    if not row.get("id") or not name:
        raise ResponseShapeError(Source.COL, f"tree child without id or name: {row!r}")
    return ColChild(
        childtaxa_id=str(row["id"]),
        childtaxa_name=name,
        childtaxa_rank=(row.get("rank") or "").lower(),
    )


def check_rank(downto: str) -> int:
    """Position of ``downto`` in the rank table; unknown ranks are rejected."""
    index = rank_index(downto)
    if index is None:
        raise InvalidInputError(f"unknown rank {downto!r}; expected one of: {', '.join(RANKS)}")
    return index


def downstream(
    name: str,
    downto: str,
    *,
    settings: Settings,
    verbose: bool = False,
    request_options: dict[str, Any] | None = None,
) -> pd.DataFrame | None:
    """
    All taxa at rank ``downto`` below ``name``.

    Resolves ``name`` in CoL, then walks the tree breadth-first, only
    descending into children ranked above ``downto`` and into
    unranked ones (``clade``, ``unranked``, ...), whose descendants may
    still reach that rank.

    Returns:
        Frame with columns ``childtaxa_id, childtaxa_name, childtaxa_rank``,
        or ``None`` when the name is unknown, ``downto`` is not below the
        name's own rank, or nothing sits at that rank.
    """
    target_index = check_rank(downto)
    target = RANKS[target_index]

    hit = lookup(name, settings=settings, request_options=request_options)
    if hit is None:
        logger.log(logging.INFO if verbose else logging.DEBUG, "col: no match for %r", name)
        return None

    own_index = rank_index(hit.get("rank"))
    if own_index is not None and own_index >= target_index:
        logger.warning(
            "No deeper taxa found: %r is a %s, which is not above %s. Try adjusting `downto`.",
            name,
            hit.get("rank"),
            target,
        )
        return None

    found: list[ColChild] = []
    queue: deque[str] = deque([hit["id"]])
    while queue:
        parent = queue.popleft()
        for row in client.children(parent, settings=settings, request_options=request_options):
            child = _child(row)
            child_index = rank_index(child.childtaxa_rank)
            if child.childtaxa_rank == target:
                found.append(child)
            elif child_index is None or child_index < target_index:
                queue.append(child.childtaxa_id)
        if verbose:
            logger.info("col: %s -> %d %s so far", parent, len(found), target)

    if not found:
        logger.warning("No taxa at rank %s below %r. Try adjusting `downto`.", target, name)
    return normalize(found, ColChild, simplify=False)


def classification(
    identifier: TaxonId | None,
    simplify: bool = False,
    *,
    settings: Settings,
    key: str | None = None,
    request_options: dict[str, Any] | None = None,
) -> list[str] | pd.DataFrame | None:
    """Lineage of one CoL usage id, root first, ending with the taxon itself."""
    if identifier is None:
        return None
    require_source(identifier, Source.COL)
    parents = client.classification(identifier.value, settings=settings, request_options=request_options)
    own = client.taxon(identifier.value, settings=settings, request_options=request_options)
    own_name = own.get("name") or {}
    ranks = [
        ClassificationRank(
            name=p.get("name") or "",
            rank=(p.get("rank") or "").lower() or None,
            id=p.get("id"),
        )
        for p in reversed(parents)
    ]
    ranks.append(
        ClassificationRank(
            name=own_name.get("scientificName") or "",
            rank=(own_name.get("rank") or "").lower() or None,
            id=identifier.value,
        )
    )
    return normalize([r for r in ranks if r.name], ClassificationRank, simplify)
