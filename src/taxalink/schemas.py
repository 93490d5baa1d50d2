"""
Domain models for taxalink.

Pydantic models for identifiers and for the records each source returns.
These define the canonical schema - adapters validate raw API payloads
against them, so an unexpected response shape fails loudly instead of being
coerced into something plausible.
"""

from __future__ import annotations

from enum import StrEnum
from typing import ClassVar

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

# =============================================================================
# Core
# =============================================================================


class Source(StrEnum):
    """Taxonomic data providers."""

    EOL = "eol"
    ITIS = "itis"
    NCBI = "ncbi"
    WORMS = "worms"
    BOLD = "bold"
    COL = "col"


class ErrorPolicy(StrEnum):
    """What a batch does when one element hits a transport failure."""

    RAISE = "raise"
    CONTINUE = "continue"


class TaxonId(BaseModel):
    """
    An identifier that only means something inside one source.

    ``value`` is opaque (TSN, NCBI UID, AphiaID, ...). ``name`` keeps the query
    that produced it, when it came from a resolver.
    """

    model_config = ConfigDict(frozen=True, coerce_numbers_to_str=True)

    source: Source
    value: str = Field(..., min_length=1)
    name: str | None = None

    def __str__(self) -> str:
        return self.value


def tsn(value: str | int) -> TaxonId:
    """ITIS taxonomic serial number."""
    return TaxonId(source=Source.ITIS, value=value)


def uid(value: str | int) -> TaxonId:
    """NCBI taxonomy UID."""
    return TaxonId(source=Source.NCBI, value=value)


def wormsid(value: str | int) -> TaxonId:
    """WoRMS AphiaID."""
    return TaxonId(source=Source.WORMS, value=value)


def boldid(value: str | int) -> TaxonId:
    """BOLD taxid."""
    return TaxonId(source=Source.BOLD, value=value)


def colid(value: str) -> TaxonId:
    """Catalogue of Life (ChecklistBank) name usage id."""
    return TaxonId(source=Source.COL, value=value)


def eolid(value: str | int) -> TaxonId:
    """EOL page id."""
    return TaxonId(source=Source.EOL, value=value)


# =============================================================================
# Records
# =============================================================================


class Record(BaseModel):
    """Base for one normalized row. Unknown upstream fields are dropped."""

    model_config = ConfigDict(
        extra="ignore",
        frozen=True,
        populate_by_name=True,
        coerce_numbers_to_str=True,
    )

    #: Column used when output is simplified to a flat list.
    simple_field: ClassVar[str] = ""

    @classmethod
    def columns(cls) -> list[str]:
        return list(cls.model_fields)


class ItisCommonName(Record):
    simple_field = "commonName"

    commonName: str | None = None
    language: str | None = None
    tsn: str | None = None


class WormsVernacular(Record):
    simple_field = "vernacular"

    vernacular: str | None = None
    language_code: str | None = None
    language: str | None = None


class EolVernacular(Record):
    simple_field = "vernacularname"

    vernacularname: str | None = Field(
        default=None, validation_alias=AliasChoices("vernacularName", "vernacularname")
    )
    language: str | None = None
    eol_preferred: bool | None = None
    pageid: str | None = None


class NcbiOtherName(Record):
    simple_field = "name"

    name: str
    name_type: str


class ClassificationRank(Record):
    """One level of a lineage, root first."""

    simple_field = "name"

    name: str
    rank: str | None = None
    id: str | None = None


class BoldTaxon(Record):
    simple_field = "taxon"

    taxid: int | None = None
    taxon: str | None = None
    tax_rank: str | None = None
    tax_division: str | None = None
    parentid: int | None = None
    parentname: str | None = None
    taxonrep: str | None = None


class ColChild(Record):
    simple_field = "childtaxa_name"

    childtaxa_id: str
    childtaxa_name: str
    childtaxa_rank: str


class EolDataObject(Record):
    simple_field = "identifier"

    identifier: str | None = None
    dataType: str | None = None
    mimeType: str | None = None
    title: str | None = None
    language: str | None = None
    license: str | None = None
    rightsHolder: str | None = None
    source: str | None = None
    mediaURL: str | None = None
    description: str | None = None


# =============================================================================
# Ranks
# =============================================================================

#: Linnaean ranks from most to least inclusive, lower-case.
RANKS: tuple[str, ...] = (
    "domain",
    "superkingdom",
    "kingdom",
    "subkingdom",
    "infrakingdom",
    "superphylum",
    "phylum",
    "subphylum",
    "infraphylum",
    "superclass",
    "class",
    "subclass",
    "infraclass",
    "superorder",
    "order",
    "suborder",
    "infraorder",
    "parvorder",
    "superfamily",
    "family",
    "subfamily",
    "tribe",
    "subtribe",
    "genus",
    "subgenus",
    "section",
    "subsection",
    "series",
    "species",
    "subspecies",
    "variety",
    "subvariety",
    "form",
    "subform",
)


def rank_index(rank: str | None) -> int | None:
    """Position of ``rank`` in :data:`RANKS` (case-insensitive), ``None`` if unranked."""
    if not rank:
        return None
    try:
        return RANKS.index(rank.strip().lower())
    except ValueError:
        return None
