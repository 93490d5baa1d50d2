"""EOL name -> page id resolution."""

from __future__ import annotations

from typing import Any

from taxalink.config import Settings
from taxalink.datasources.eol import client
from taxalink.schemas import Source, TaxonId


def matching_pageids(hits: list[dict[str, Any]], name: str) -> list[str]:
    """Page ids of search hits whose title contains ``name``, in search order."""
    return [str(h["id"]) for h in hits if h.get("id") is not None and name in (h.get("title") or "")]


def resolve(
    name: str,
    *,
    settings: Settings,
    key: str | None = None,
    request_options: dict[str, Any] | None = None,
) -> TaxonId | None:
    """First EOL page whose title contains ``name``, or ``None``."""
    if not name or not name.strip():
        return None
    hits = client.search(name, settings=settings, key=key, request_options=request_options)
    pageids = matching_pageids(hits, name)
    if not pageids:
        return None
    return TaxonId(source=Source.EOL, value=pageids[0], name=name)
