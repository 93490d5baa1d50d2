"""EOL pages: vernacular names, synonyms, and the name -> pages fan-out."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

import pandas as pd

from taxalink.config import Settings
from taxalink.datasources.base import require_source
from taxalink.datasources.eol import client
from taxalink.datasources.eol.ids import matching_pageids
from taxalink.normalize import normalize, parse_records
from taxalink.schemas import EolVernacular, Source, TaxonId

# =============================================================================
# Data Model
# =============================================================================


@dataclass
class EolPage:
    """One EOL page, as far as name lookups care."""

    pageid: str
    scientific_name: str | None
    vernaculars: list[EolVernacular] = field(default_factory=list)
    synonyms: list[str] = field(default_factory=list)

    @property
    def vernacular_frame(self) -> pd.DataFrame | None:
        return normalize(self.vernaculars, EolVernacular, simplify=False)


# =============================================================================
# Parsing
# =============================================================================


def _parse_page(pageid: str, concept: dict[str, Any]) -> EolPage:
    rows = [
        {**row, "pageid": pageid}
        for row in concept.get("vernacularNames") or []
        if isinstance(row, dict)
    ]
    synonyms = [
        s.get("synonym") or s.get("scientificName")
        for s in concept.get("synonyms") or []
        if isinstance(s, dict)
    ]
    return EolPage(
        pageid=pageid,
        scientific_name=concept.get("scientificName"),
        vernaculars=parse_records(Source.EOL, EolVernacular, rows),
        synonyms=[s for s in synonyms if s],
    )


# =============================================================================
# API Fetching
# =============================================================================


def eol_pages(
    pageid: str,
    *,
    settings: Settings,
    key: str | None = None,
    request_options: dict[str, Any] | None = None,
) -> EolPage:
    """Fetch and parse one EOL page."""
    concept = client.page(pageid, settings=settings, key=key, request_options=request_options)
    return _parse_page(pageid, concept)


def common_names(
    identifier: TaxonId | None,
    simplify: bool = True,
    *,
    settings: Settings,
    key: str | None = None,
    request_options: dict[str, Any] | None = None,
) -> list[str] | pd.DataFrame | None:
    """Vernacular names on one EOL page."""
    if identifier is None:
        return None
    require_source(identifier, Source.EOL)
    page = eol_pages(identifier.value, settings=settings, key=key, request_options=request_options)
    return normalize(page.vernaculars, EolVernacular, simplify)


def common_names_by_name(
    name: str,
    simplify: bool = True,
    *,
    settings: Settings,
    key: str | None = None,
    request_options: dict[str, Any] | None = None,
) -> list[str] | pd.DataFrame | None:
    """
    Vernacular names for every EOL page matching ``name``.

    Searches EOL, keeps hits whose title contains ``name``, fetches each
    matching page and concatenates their vernacular tables.

    Returns:
        ``vernacularname`` strings when ``simplify``, else a frame with columns
        ``vernacularname, language, eol_preferred, pageid``. ``None`` when no
        page matches or no matching page has vernacular names.
    """
    if not name or not name.strip():
        return None
    hits = client.search(name, settings=settings, key=key, request_options=request_options)
    records: list[EolVernacular] = []
    for pageid in matching_pageids(hits, name):
        page = eol_pages(pageid, settings=settings, key=key, request_options=request_options)
        records.extend(page.vernaculars)
    return normalize(records, EolVernacular, simplify)
