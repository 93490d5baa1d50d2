"""EOL data object metadata."""

from __future__ import annotations

from typing import Any

import pandas as pd

from taxalink.config import Settings
from taxalink.datasources.base import require_source
from taxalink.datasources.eol import client
from taxalink.normalize import normalize, parse_records
from taxalink.schemas import EolDataObject, Source, TaxonId


def data_objects(
    identifier: TaxonId | None,
    simplify: bool = False,
    *,
    settings: Settings,
    key: str | None = None,
    request_options: dict[str, Any] | None = None,
) -> list[str] | pd.DataFrame | None:
    """
    Metadata of one EOL data object.

    ``identifier`` carries the data object id under the EOL tag. The response
    nests objects under ``taxonConcept.dataObjects``.
    """
    if identifier is None:
        return None
    require_source(identifier, Source.EOL)
    concept = client.data_object(
        identifier.value, settings=settings, key=key, request_options=request_options
    )
    rows = concept.get("dataObjects")
    if rows is None and "identifier" in concept and "dataType" in concept:
        # Bare data object without the taxonConcept wrapper
        rows = [concept]
    return normalize(parse_records(Source.EOL, EolDataObject, rows or []), EolDataObject, simplify)
