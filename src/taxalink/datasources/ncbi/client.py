"""
NCBI Entrez E-utilities client (taxonomy database).

API docs: https://www.ncbi.nlm.nih.gov/books/NBK25501/
Rate limits: 3 req/s without an API key, 10 req/s with one. The limiter in
``services/ratelimit.py`` enforces the gap; see ``Settings.min_interval``.
"""

from __future__ import annotations

import xml.etree.ElementTree as ET
from typing import Any

from taxalink.config import Settings
from taxalink.exceptions import ResponseShapeError
from taxalink.schemas import Source
from taxalink.services import http

DB = "taxonomy"


def get_xml(
    utility: str,
    params: dict[str, Any],
    *,
    settings: Settings,
    key: str | None = None,
    request_options: dict[str, Any] | None = None,
) -> ET.Element:
    """GET one E-utility (``esearch``, ``efetch``) and return the parsed XML root."""
    url = f"{settings.ncbi_base}/{utility}.fcgi"
    query = {"db": DB, **params}
    api_key = settings.api_key(Source.NCBI, key)
    if api_key:
        query["api_key"] = api_key
    resp = http.get(
        Source.NCBI, url, params=query, settings=settings, request_options=request_options
    )
    try:
        return ET.fromstring(resp.content)
    except ET.ParseError as exc:
        raise ResponseShapeError(Source.NCBI, f"{utility} returned malformed XML: {exc}") from exc


def esearch(
    term: str,
    *,
    settings: Settings,
    key: str | None = None,
    request_options: dict[str, Any] | None = None,
) -> ET.Element:
    return get_xml(
        "esearch", {"term": term}, settings=settings, key=key, request_options=request_options
    )


def efetch(
    taxid: str,
    *,
    settings: Settings,
    key: str | None = None,
    request_options: dict[str, Any] | None = None,
) -> ET.Element:
    return get_xml(
        "efetch", {"id": taxid}, settings=settings, key=key, request_options=request_options
    )
