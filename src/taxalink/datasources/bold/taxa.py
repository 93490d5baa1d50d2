"""BOLD taxon search by name or by taxid."""

from __future__ import annotations

from typing import Any

import pandas as pd

from taxalink.config import Settings
from taxalink.datasources.base import require_source
from taxalink.datasources.bold import client
from taxalink.normalize import parse_records, to_frame
from taxalink.schemas import BoldTaxon, Source, TaxonId

#: Column holding the caller's query in name searches.
INPUT_COLUMN = "input"


def search_name(
    name: str,
    *,
    fuzzy: bool = False,
    settings: Settings,
    request_options: dict[str, Any] | None = None,
) -> list[BoldTaxon]:
    """Matching taxa for one name. Blank names match nothing without a request."""
    if not name or not name.strip():
        return []
    hits = client.taxon_search(name, fuzzy=fuzzy, settings=settings, request_options=request_options)
    return parse_records(Source.BOLD, BoldTaxon, hits)


def search_id(
    identifier: TaxonId,
    *,
    settings: Settings,
    request_options: dict[str, Any] | None = None,
) -> BoldTaxon | None:
    """One taxon by taxid, ``None`` when BOLD does not know the id."""
    require_source(identifier, Source.BOLD)
    data = client.taxon_data(identifier.value, settings=settings, request_options=request_options)
    if data is None:
        return None
    return parse_records(Source.BOLD, BoldTaxon, [data])[0]


def name_frame(rows: list[tuple[str, BoldTaxon | None]]) -> pd.DataFrame:
    """
    ``input`` + the seven BoldTaxon columns, one row per hit.

    A ``None`` taxon becomes an all-missing row that still carries its input.
    """
    frame = to_frame([t or BoldTaxon() for _, t in rows], BoldTaxon)
    frame.insert(0, INPUT_COLUMN, [name for name, _ in rows])
    return frame


def id_frame(taxa: list[BoldTaxon | None]) -> pd.DataFrame:
    """The seven BoldTaxon columns, one row per requested id."""
    return to_frame([t or BoldTaxon() for t in taxa], BoldTaxon)
