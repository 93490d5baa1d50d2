"""
ITIS JSON web service client.

API docs: https://www.itis.gov/ws_description.html
Endpoints live under ``{itis_base}/{operation}`` and take plain query params.
"""

from __future__ import annotations

from typing import Any

from taxalink.config import Settings
from taxalink.exceptions import ResponseShapeError
from taxalink.schemas import Source
from taxalink.services import http

SEARCH_BY_SCIENTIFIC_NAME = "searchByScientificName"
COMMON_NAMES_FROM_TSN = "getCommonNamesFromTSN"
FULL_HIERARCHY_FROM_TSN = "getFullHierarchyFromTSN"


def get_json(
    operation: str,
    params: dict[str, Any],
    *,
    settings: Settings,
    request_options: dict[str, Any] | None = None,
) -> dict[str, Any]:
    """GET one ITIS operation and return its JSON object."""
    url = f"{settings.itis_base}/{operation}"
    resp = http.get(
        Source.ITIS, url, params=params, settings=settings, request_options=request_options
    )
    try:
        data = resp.json()
    except ValueError as exc:
        raise ResponseShapeError(Source.ITIS, f"{operation} did not return JSON") from exc
    if not isinstance(data, dict):
        raise ResponseShapeError(Source.ITIS, f"{operation} returned {type(data).__name__}")
    return data


def search_by_scientific_name(
    name: str, *, settings: Settings, request_options: dict[str, Any] | None = None
) -> dict[str, Any]:
    return get_json(
        SEARCH_BY_SCIENTIFIC_NAME, {"srchKey": name}, settings=settings, request_options=request_options
    )


def common_names_from_tsn(
    tsn: str, *, settings: Settings, request_options: dict[str, Any] | None = None
) -> dict[str, Any]:
    return get_json(
        COMMON_NAMES_FROM_TSN, {"tsn": tsn}, settings=settings, request_options=request_options
    )


def full_hierarchy_from_tsn(
    tsn: str, *, settings: Settings, request_options: dict[str, Any] | None = None
) -> dict[str, Any]:
    return get_json(
        FULL_HIERARCHY_FROM_TSN, {"tsn": tsn}, settings=settings, request_options=request_options
    )
