"""
Catalogue of Life client (ChecklistBank API).

API docs: https://api.checklistbank.org/
All calls are scoped to one dataset; ``Settings.col_dataset_key`` defaults
to ``3LR``, the latest monthly Catalogue of Life release.
"""

from __future__ import annotations

from typing import Any
from urllib.parse import quote

from taxalink.config import Settings
from taxalink.exceptions import ResponseShapeError
from taxalink.schemas import Source
from taxalink.services import http

PAGE_LIMIT = 1000
SEARCH_LIMIT = 50


def get_json(
    path: str,
    params: dict[str, Any] | None = None,
    *,
    settings: Settings,
    request_options: dict[str, Any] | None = None,
) -> Any:
    url = f"{settings.col_base}/dataset/{quote(settings.col_dataset_key, safe='')}/{path}"
    resp = http.get(Source.COL, url, params=params, settings=settings, request_options=request_options)
    try:
        return resp.json()
    except ValueError as exc:
        raise ResponseShapeError(Source.COL, f"{path} did not return JSON") from exc


def search(
    name: str, *, settings: Settings, request_options: dict[str, Any] | None = None
) -> list[dict[str, Any]]:
    """
    Name usage search, flattened to ``id, scientificName, rank, status`` dicts.
    """
    data = get_json(
        "nameusage/search",
        {"q": name, "content": "SCIENTIFIC_NAME", "limit": SEARCH_LIMIT},
        settings=settings,
        request_options=request_options,
    )
    if not isinstance(data, dict):
        raise ResponseShapeError(Source.COL, "nameusage/search: expected an object")
    hits = []
    for item in data.get("result") or []:
        usage = item.get("usage") or {}
        usage_name = usage.get("name") or {}
        usage_id = usage.get("id") or item.get("id")
        if not usage_id:
            continue
        hits.append(
            {
                "id": str(usage_id),
                "scientificName": usage_name.get("scientificName"),
                "rank": (usage_name.get("rank") or "").lower() or None,
                "status": usage.get("status"),
            }
        )
    return hits


def children(
    taxon_id: str, *, settings: Settings, request_options: dict[str, Any] | None = None
) -> list[dict[str, Any]]:
    """Direct children of a taxon in the tree, all pages."""
    results: list[dict[str, Any]] = []
    offset = 0
    while True:
        data = get_json(
            f"tree/{quote(taxon_id, safe='')}/children",
            {"limit": PAGE_LIMIT, "offset": offset},
            settings=settings,
            request_options=request_options,
        )
        if not isinstance(data, dict):
            raise ResponseShapeError(Source.COL, "tree children: expected an object")
        page = [r for r in data.get("result") or [] if isinstance(r, dict)]
        results.extend(page)
        if data.get("last", True) or not page:
            break
        offset += len(page)
    return results


def taxon(
    taxon_id: str, *, settings: Settings, request_options: dict[str, Any] | None = None
) -> dict[str, Any]:
    data = get_json(
        f"taxon/{quote(taxon_id, safe='')}", settings=settings, request_options=request_options
    )
    if not isinstance(data, dict):
        raise ResponseShapeError(Source.COL, "taxon: expected an object")
    return data


def classification(
    taxon_id: str, *, settings: Settings, request_options: dict[str, Any] | None = None
) -> list[dict[str, Any]]:
    """Ancestors of a taxon, direct parent first."""
    data = get_json(
        f"taxon/{quote(taxon_id, safe='')}/classification",
        settings=settings,
        request_options=request_options,
    )
    if not isinstance(data, list):
        raise ResponseShapeError(Source.COL, "classification: expected a list")
    return [d for d in data if isinstance(d, dict)]
