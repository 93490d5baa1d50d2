"""
WoRMS (World Register of Marine Species) REST client.

API docs: https://www.marinespecies.org/rest/
Empty results come back as ``204 No Content`` rather than an empty list.
"""

from __future__ import annotations

from typing import Any
from urllib.parse import quote

from taxalink.config import Settings
from taxalink.exceptions import ResponseShapeError
from taxalink.schemas import Source
from taxalink.services import http

NO_CONTENT = 204


def get_json(
    path: str,
    params: dict[str, Any] | None = None,
    *,
    settings: Settings,
    request_options: dict[str, Any] | None = None,
) -> Any:
    """GET a WoRMS resource. Returns ``None`` for 204 No Content."""
    url = f"{settings.worms_base}/{path}"
    resp = http.get(
        Source.WORMS,
        url,
        params=params,
        settings=settings,
        request_options=request_options,
        allow_statuses=(NO_CONTENT,),
    )
    if resp.status_code == NO_CONTENT or not resp.content:
        return None
    try:
        return resp.json()
    except ValueError as exc:
        raise ResponseShapeError(Source.WORMS, f"{path} did not return JSON") from exc


def records_by_name(
    name: str, *, settings: Settings, request_options: dict[str, Any] | None = None
) -> list[dict[str, Any]]:
    data = get_json(
        f"AphiaRecordsByName/{quote(name, safe='')}",
        {"like": "false", "marine_only": "false"},
        settings=settings,
        request_options=request_options,
    )
    return _as_list(data, "AphiaRecordsByName")


def vernaculars_by_id(
    aphia_id: str, *, settings: Settings, request_options: dict[str, Any] | None = None
) -> list[dict[str, Any]]:
    data = get_json(
        f"AphiaVernacularsByAphiaID/{quote(aphia_id, safe='')}",
        settings=settings,
        request_options=request_options,
    )
    return _as_list(data, "AphiaVernacularsByAphiaID")


def classification_by_id(
    aphia_id: str, *, settings: Settings, request_options: dict[str, Any] | None = None
) -> dict[str, Any] | None:
    data = get_json(
        f"AphiaClassificationByAphiaID/{quote(aphia_id, safe='')}",
        settings=settings,
        request_options=request_options,
    )
    if data is not None and not isinstance(data, dict):
        raise ResponseShapeError(Source.WORMS, "AphiaClassificationByAphiaID: expected an object")
    return data


def _as_list(data: Any, operation: str) -> list[dict[str, Any]]:
    if data is None:
        return []
    if not isinstance(data, list):
        raise ResponseShapeError(Source.WORMS, f"{operation}: expected a list")
    return [d for d in data if d is not None]
