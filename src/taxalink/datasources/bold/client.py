"""
BOLD Systems taxonomy API client.

API docs: https://v4.boldsystems.org/index.php/resources/api
The taxonomy API answers junk queries with an empty body or a bare ``[]``
instead of an error status; those are treated as "no data".
"""

from __future__ import annotations

from typing import Any

from taxalink.config import Settings
from taxalink.schemas import Source
from taxalink.services import http


def get_json(
    operation: str,
    params: dict[str, Any],
    *,
    settings: Settings,
    request_options: dict[str, Any] | None = None,
) -> dict[str, Any] | None:
    """GET one API_Tax operation. ``None`` when BOLD has nothing to say."""
    url = f"{settings.bold_base}/{operation}"
    resp = http.get(Source.BOLD, url, params=params, settings=settings, request_options=request_options)
    if not resp.content or not resp.content.strip():
        return None
    try:
        data = resp.json()
    except ValueError:
        return None
    return data if isinstance(data, dict) and data else None


def taxon_search(
    name: str,
    *,
    fuzzy: bool = False,
    settings: Settings,
    request_options: dict[str, Any] | None = None,
) -> list[dict[str, Any]]:
    """GET TaxonSearch — taxa whose name matches ``name``."""
    data = get_json(
        "TaxonSearch",
        {"taxName": name, "fuzzy": str(fuzzy).lower()},
        settings=settings,
        request_options=request_options,
    )
    if data is None:
        return []
    hits = data.get("top_matched_names") or []
    return [h for h in hits if isinstance(h, dict)]


def taxon_data(
    taxid: str,
    *,
    data_types: str = "basic",
    settings: Settings,
    request_options: dict[str, Any] | None = None,
) -> dict[str, Any] | None:
    """GET TaxonData — one taxon by BOLD taxid."""
    data = get_json(
        "TaxonData",
        {"taxId": taxid, "dataTypes": data_types},
        settings=settings,
        request_options=request_options,
    )
    if data is None or "taxid" not in data:
        return None
    return data
