"""ITIS vernacular names for a TSN."""

from __future__ import annotations

from typing import Any

import pandas as pd

from taxalink.config import Settings
from taxalink.datasources.base import non_null, require_source
from taxalink.datasources.itis import client
from taxalink.normalize import normalize, parse_records
from taxalink.schemas import ItisCommonName, Source, TaxonId


def common_names(
    identifier: TaxonId | None,
    simplify: bool = True,
    *,
    settings: Settings,
    key: str | None = None,
    request_options: dict[str, Any] | None = None,
) -> list[str] | pd.DataFrame | None:
    """
    Common names for one TSN.

    Returns:
        ``commonName`` strings when ``simplify``, else a frame with columns
        ``commonName, language, tsn``. ``None`` if the TSN is missing or has
        no common names.
    """
    if identifier is None:
        return None
    require_source(identifier, Source.ITIS)
    data = client.common_names_from_tsn(
        identifier.value, settings=settings, request_options=request_options
    )
    records = parse_records(Source.ITIS, ItisCommonName, non_null(data.get("commonNames")))
    return normalize(records, ItisCommonName, simplify)
