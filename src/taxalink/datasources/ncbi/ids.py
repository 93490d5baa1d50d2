"""NCBI name -> taxonomy UID resolution."""

from __future__ import annotations

import logging
from typing import Any

from taxalink.config import Settings
from taxalink.datasources.ncbi import client
from taxalink.exceptions import ResponseShapeError
from taxalink.schemas import Source, TaxonId

logger = logging.getLogger(__name__)


def resolve(
    name: str,
    *,
    settings: Settings,
    key: str | None = None,
    request_options: dict[str, Any] | None = None,
) -> TaxonId | None:
    """
    Resolve a scientific name to an NCBI taxonomy UID.

    Takes the first id esearch returns. ``None`` when the term matches nothing.
    """
    if not name or not name.strip():
        return None
    root = client.esearch(name, settings=settings, key=key, request_options=request_options)
    if root.tag != "eSearchResult":
        raise ResponseShapeError(Source.NCBI, f"esearch root is <{root.tag}>")
    ids = [el.text.strip() for el in root.findall("./IdList/Id") if el.text and el.text.strip()]
    if not ids:
        return None
    if len(ids) > 1:
        logger.debug("ncbi: %d uids for %r, taking %s", len(ids), name, ids[0])
    return TaxonId(source=Source.NCBI, value=ids[0], name=name)
