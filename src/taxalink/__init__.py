"""taxalink - one client for several taxonomic web services.

Architecture::

    datasources/   One package per source (EOL, ITIS, NCBI, WoRMS, BOLD, CoL):
                   client (HTTP + payload checks), ids (name -> TaxonId), adapters
    normalize.py   Raw rows -> records -> flat list | DataFrame | None
    dispatch.py    Public operations and the source -> (resolver, adapter) tables
    services/      Shared HTTP session and per-source rate limiter
    config.py      Settings (environment / .env), passed into every call

Data flow: caller -> dispatch -> resolver (names only) -> adapter -> normalize -> ResultMap

Extension points - see each package's docstring for step-by-step guides:
  - New data source:   datasources/__init__.py
"""

__version__ = "0.1.0"

from taxalink.config import Settings, get_settings
from taxalink.datasources.eol import eol_pages
from taxalink.dispatch import (
    bold_search,
    classification,
    col_downstream,
    eol_dataobjects,
    get_boldid,
    get_colid,
    get_eolid,
    get_ids,
    get_tsn,
    get_uid,
    get_wormsid,
    sci2comm,
)
from taxalink.exceptions import (
    InvalidInputError,
    ResponseShapeError,
    SourceMismatchError,
    SourceRequestError,
    TaxalinkError,
)
from taxalink.results import ResultMap
from taxalink.schemas import ErrorPolicy, Source, TaxonId, boldid, colid, eolid, tsn, uid, wormsid

__all__ = [
    "ErrorPolicy",
    "InvalidInputError",
    "ResponseShapeError",
    "ResultMap",
    "Settings",
    "Source",
    "SourceMismatchError",
    "SourceRequestError",
    "TaxalinkError",
    "TaxonId",
    "__version__",
    "bold_search",
    "boldid",
    "classification",
    "col_downstream",
    "colid",
    "eol_dataobjects",
    "eol_pages",
    "eolid",
    "get_boldid",
    "get_colid",
    "get_eolid",
    "get_ids",
    "get_settings",
    "get_tsn",
    "get_uid",
    "get_wormsid",
    "sci2comm",
    "tsn",
    "uid",
    "wormsid",
]
