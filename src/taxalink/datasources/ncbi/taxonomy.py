"""Parsing of efetch TaxaSet documents: other names and lineage."""

from __future__ import annotations

import xml.etree.ElementTree as ET
from typing import Any

import pandas as pd

from taxalink.config import Settings
from taxalink.datasources.base import require_source
from taxalink.datasources.ncbi import client
from taxalink.exceptions import ResponseShapeError
from taxalink.normalize import normalize
from taxalink.schemas import ClassificationRank, NcbiOtherName, Source, TaxonId

GENBANK_COMMON_NAME = "GenbankCommonName"
COMMON_NAME = "CommonName"


def _taxa_set(root: ET.Element) -> ET.Element:
    if root.tag != "TaxaSet":
        raise ResponseShapeError(Source.NCBI, f"efetch root is <{root.tag}>, expected <TaxaSet>")
    return root


def _other_names(root: ET.Element) -> list[NcbiOtherName]:
    names = []
    for other in _taxa_set(root).findall("./Taxon/OtherNames"):
        for el in other:
            if el.tag in (GENBANK_COMMON_NAME, COMMON_NAME) and el.text and el.text.strip():
                names.append(NcbiOtherName(name=el.text.strip(), name_type=el.tag))
    return names


def _lineage(root: ET.Element) -> list[ClassificationRank]:
    taxon = _taxa_set(root).find("./Taxon")
    if taxon is None:
        return []
    ranks = [
        ClassificationRank(
            name=(el.findtext("ScientificName") or "").strip(),
            rank=(el.findtext("Rank") or "").strip() or None,
            id=(el.findtext("TaxId") or "").strip() or None,
        )
        for el in taxon.findall("./LineageEx/Taxon")
    ]
    ranks.append(
        ClassificationRank(
            name=(taxon.findtext("ScientificName") or "").strip(),
            rank=(taxon.findtext("Rank") or "").strip() or None,
            id=(taxon.findtext("TaxId") or "").strip() or None,
        )
    )
    return [r for r in ranks if r.name]


def common_names(
    identifier: TaxonId | None,
    simplify: bool = True,
    *,
    settings: Settings,
    key: str | None = None,
    request_options: dict[str, Any] | None = None,
) -> list[str] | pd.DataFrame | None:
    """
    Common names for one NCBI UID.

    Simplified output is the GenBank common name(s) only. The full frame has
    ``name, name_type`` rows for both ``GenbankCommonName`` and ``CommonName``.
    """
    if identifier is None:
        return None
    require_source(identifier, Source.NCBI)
    root = client.efetch(identifier.value, settings=settings, key=key, request_options=request_options)
    records = _other_names(root)
    if simplify:
        records = [r for r in records if r.name_type == GENBANK_COMMON_NAME]
    return normalize(records, NcbiOtherName, simplify)


def classification(
    identifier: TaxonId | None,
    simplify: bool = False,
    *,
    settings: Settings,
    key: str | None = None,
    request_options: dict[str, Any] | None = None,
) -> list[str] | pd.DataFrame | None:
    """Lineage of one NCBI UID, root first, ending with the taxon itself."""
    if identifier is None:
        return None
    require_source(identifier, Source.NCBI)
    root = client.efetch(identifier.value, settings=settings, key=key, request_options=request_options)
    return normalize(_lineage(root), ClassificationRank, simplify)
