"""
Encyclopedia of Life (EOL) classic API client.

API docs: https://eol.org/docs/what-is-eol/classic-apis
EOL pages are the unit of identity: names are searched, then pages fetched.
An API key is optional for most calls; it is sent when configured.
"""

from __future__ import annotations

from typing import Any

from taxalink.config import Settings
from taxalink.exceptions import ResponseShapeError
from taxalink.schemas import Source
from taxalink.services import http

API_VERSION = "1.0"


def get_json(
    path: str,
    params: dict[str, Any],
    *,
    settings: Settings,
    key: str | None = None,
    request_options: dict[str, Any] | None = None,
) -> dict[str, Any]:
    url = f"{settings.eol_base}/{path}"
    query = dict(params)
    api_key = settings.api_key(Source.EOL, key)
    if api_key:
        query["key"] = api_key
    resp = http.get(Source.EOL, url, params=query, settings=settings, request_options=request_options)
    try:
        data = resp.json()
    except ValueError as exc:
        raise ResponseShapeError(Source.EOL, f"{path} did not return JSON") from exc
    if not isinstance(data, dict):
        raise ResponseShapeError(Source.EOL, f"{path} returned {type(data).__name__}")
    return data


def search(
    terms: str,
    *,
    exact: bool = False,
    page: int = 1,
    settings: Settings,
    key: str | None = None,
    request_options: dict[str, Any] | None = None,
) -> list[dict[str, Any]]:
    """GET /search — one page of hits (``id``, ``title``, ``link``, ``content``)."""
    data = get_json(
        f"search/{API_VERSION}.json",
        {"q": terms, "page": page, "exact": str(exact).lower()},
        settings=settings,
        key=key,
        request_options=request_options,
    )
    results = data.get("results") or []
    if not isinstance(results, list):
        raise ResponseShapeError(Source.EOL, "search: 'results' is not a list")
    return [r for r in results if isinstance(r, dict)]


def page(
    pageid: str,
    *,
    settings: Settings,
    key: str | None = None,
    request_options: dict[str, Any] | None = None,
) -> dict[str, Any]:
    """GET /pages/{id} with vernaculars and synonyms, no media."""
    data = get_json(
        f"pages/{API_VERSION}/{pageid}.json",
        {
            "vernaculars": "true",
            "synonyms": "true",
            "details": "false",
            "images_per_page": 0,
            "videos_per_page": 0,
            "texts_per_page": 0,
        },
        settings=settings,
        key=key,
        request_options=request_options,
    )
    return _taxon_concept(data, "pages")


def data_object(
    object_id: str,
    *,
    settings: Settings,
    key: str | None = None,
    request_options: dict[str, Any] | None = None,
) -> dict[str, Any]:
    """GET /data_objects/{id} — metadata of one text/image/video object."""
    data = get_json(
        f"data_objects/{API_VERSION}/{object_id}.json",
        {"taxonomy": "false"},
        settings=settings,
        key=key,
        request_options=request_options,
    )
    return _taxon_concept(data, "data_objects")


def _taxon_concept(data: dict[str, Any], operation: str) -> dict[str, Any]:
    concept = data.get("taxonConcept", data)
    if not isinstance(concept, dict):
        raise ResponseShapeError(Source.EOL, f"{operation}: 'taxonConcept' is not an object")
    return concept
