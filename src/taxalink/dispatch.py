"""
Public operations.

Each operation takes names (routed by ``db``) and/or typed identifiers (routed
by their own source tag), looks the right resolver/adapter pair up in a
dispatch table, and returns one result per input in input order.

Example::

    from taxalink import sci2comm, tsn

    sci2comm("Helianthus annuus", db="itis")
    sci2comm(ids=[tsn(36616)], simplify=False)
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Any

import pandas as pd

from taxalink.config import Settings, get_settings
from taxalink.datasources import bold, col, eol, itis, ncbi, worms
from taxalink.exceptions import InvalidInputError, ResponseShapeError, SourceRequestError
from taxalink.results import ResultMap
from taxalink.schemas import BoldTaxon, ErrorPolicy, Source, TaxonId, boldid, eolid

logger = logging.getLogger(__name__)

Resolver = Callable[..., TaxonId | None]
Adapter = Callable[..., Any]

#: Key used for inputs that were already missing (e.g. a failed ``get_tsn``).
MISSING_KEY = "NA"

# =============================================================================
# Dispatch tables
# =============================================================================


@dataclass(frozen=True)
class Route:
    """How one source answers one operation."""

    resolve: Resolver
    fetch: Adapter
    #: Used instead of resolve + fetch when a source works name-first.
    fetch_by_name: Adapter | None = None


RESOLVERS: dict[Source, Resolver] = {
    Source.EOL: eol.resolve,
    Source.ITIS: itis.resolve,
    Source.NCBI: ncbi.resolve,
    Source.WORMS: worms.resolve,
    Source.BOLD: bold.resolve,
    Source.COL: col.resolve,
}

COMMON_NAMES: dict[Source, Route] = {
    Source.EOL: Route(eol.resolve, eol.common_names, eol.common_names_by_name),
    Source.ITIS: Route(itis.resolve, itis.common_names),
    Source.NCBI: Route(ncbi.resolve, ncbi.common_names),
    Source.WORMS: Route(worms.resolve, worms.common_names),
}

CLASSIFICATION: dict[Source, Route] = {
    Source.ITIS: Route(itis.resolve, itis.classification),
    Source.NCBI: Route(ncbi.resolve, ncbi.classification),
    Source.WORMS: Route(worms.resolve, worms.classification),
    Source.COL: Route(col.resolve, col.classification),
}

DATA_OBJECTS: dict[Source, Route] = {
    Source.EOL: Route(eol.resolve, eol.data_objects),
}

# =============================================================================
# Input handling
# =============================================================================

Inputs = str | TaxonId | None | Iterable[str | TaxonId | None]


def _as_list(value: Inputs) -> list[str | TaxonId | None]:
    if value is None:
        return []
    if isinstance(value, (str, TaxonId)):
        return [value]
    return list(value)


def _source(db: str | Source, routes: dict[Source, Any], operation: str) -> Source:
    try:
        source = Source(str(db).lower())
    except ValueError:
        raise InvalidInputError(f"{operation}: unknown data source {db!r}") from None
    if source not in routes:
        supported = ", ".join(s.value for s in routes)
        raise InvalidInputError(
            f"{operation}: {source.value} is not supported (use one of {supported})"
        )
    return source


def _key(item: str | TaxonId | None) -> str:
    if isinstance(item, TaxonId):
        return item.value
    if item is None:
        return MISSING_KEY
    return item


def _resolve_settings(
    settings: Settings | None, on_error: ErrorPolicy | str | None, verbose: bool | None
) -> tuple[Settings, ErrorPolicy, bool]:
    settings = settings or get_settings()
    policy = ErrorPolicy(on_error) if on_error is not None else settings.on_error
    return settings, policy, settings.verbose if verbose is None else verbose


def _soft(verbose: bool) -> int:
    """Log level for per-element diagnostics."""
    return logging.INFO if verbose else logging.DEBUG


# =============================================================================
# Generic runner
# =============================================================================


def _run(
    operation: str,
    routes: dict[Source, Route],
    names: Inputs,
    db: str | Source,
    ids: Inputs,
    simplify: bool,
    *,
    key: str | None,
    settings: Settings | None,
    on_error: ErrorPolicy | str | None,
    verbose: bool | None,
    request_options: dict[str, Any] | None,
) -> ResultMap:
    settings, policy, verbose = _resolve_settings(settings, on_error, verbose)
    items = _as_list(names) + _as_list(ids)
    if not items:
        raise InvalidInputError(f"{operation}: supply at least one name or identifier")

    # Validate routing for every element before any network activity
    name_source = None
    if any(isinstance(i, str) for i in items):
        name_source = _source(db, routes, operation)
    for item in items:
        if isinstance(item, TaxonId) and item.source not in routes:
            _source(item.source, routes, operation)
        elif item is not None and not isinstance(item, (str, TaxonId)):
            raise InvalidInputError(f"{operation}: cannot look up {item!r}")

    common = {"settings": settings, "key": key, "request_options": request_options}
    out = ResultMap()
    for item in items:
        try:
            if isinstance(item, TaxonId):
                value = routes[item.source].fetch(item, simplify, **common)
            elif isinstance(item, str) and name_source is not None:
                route = routes[name_source]
                if route.fetch_by_name is not None:
                    value = route.fetch_by_name(item, simplify, **common)
                else:
                    identifier = route.resolve(item, **common)
                    if identifier is None:
                        logger.log(
                            _soft(verbose), "%s: %r not found in %s", operation, item, name_source.value
                        )
                    value = route.fetch(identifier, simplify, **common)
            else:
                value = None
        except (SourceRequestError, ResponseShapeError) as exc:
            if policy is ErrorPolicy.RAISE:
                raise
            logger.warning("%s: skipping %r: %s", operation, _key(item), exc)
            value = None
        if value is None:
            logger.log(_soft(verbose), "%s: no result for %r", operation, _key(item))
        out.append(_key(item), value)
    return out


# =============================================================================
# Public operations
# =============================================================================


def sci2comm(
    names: Inputs = None,
    db: str | Source = "eol",
    *,
    ids: Inputs = None,
    simplify: bool = True,
    key: str | None = None,
    settings: Settings | None = None,
    on_error: ErrorPolicy | str | None = None,
    verbose: bool | None = None,
    request_options: dict[str, Any] | None = None,
) -> ResultMap:
    """
    Common names from scientific names or identifiers.

    Args:
        names: One or more scientific (or partial) names. TaxonId elements are
            also accepted and routed by their own source.
        db: Source for names: ``eol`` (default), ``itis``, ``ncbi``, ``worms``.
        ids: TaxonIds as returned by ``get_tsn``, ``get_uid``, ``get_wormsid``
            or ``get_eolid``. ``db`` is ignored for these.
        simplify: Flat list of names if True, else a DataFrame per input.
        key: API key for this call (EOL, NCBI), overriding settings.
        settings: Configuration; defaults to :func:`get_settings`.
        on_error: ``raise`` (default) aborts the batch on a transport failure;
            ``continue`` records ``None`` for that input and goes on.
        verbose: Log per-input diagnostics at INFO instead of DEBUG.
        request_options: Forwarded to ``requests`` (headers, timeout, ...).

    Returns:
        ResultMap keyed by input name (or identifier value), in input order.
        Inputs with no common names map to ``None``.
    """
    return _run(
        "sci2comm",
        COMMON_NAMES,
        names,
        db,
        ids,
        simplify,
        key=key,
        settings=settings,
        on_error=on_error,
        verbose=verbose,
        request_options=request_options,
    )


def classification(
    names: Inputs = None,
    db: str | Source = "itis",
    *,
    ids: Inputs = None,
    simplify: bool = False,
    key: str | None = None,
    settings: Settings | None = None,
    on_error: ErrorPolicy | str | None = None,
    verbose: bool | None = None,
    request_options: dict[str, Any] | None = None,
) -> ResultMap:
    """
    Lineage (root first) for names or identifiers.

    Sources: ``itis`` (default), ``ncbi``, ``worms``, ``col``. Each value is a
    DataFrame with columns ``name, rank, id``, or a list of names when
    ``simplify`` is True.
    """
    return _run(
        "classification",
        CLASSIFICATION,
        names,
        db,
        ids,
        simplify,
        key=key,
        settings=settings,
        on_error=on_error,
        verbose=verbose,
        request_options=request_options,
    )


def eol_dataobjects(
    ids: str | int | TaxonId | Iterable[str | int | TaxonId],
    *,
    simplify: bool = False,
    key: str | None = None,
    settings: Settings | None = None,
    on_error: ErrorPolicy | str | None = None,
    verbose: bool | None = None,
    request_options: dict[str, Any] | None = None,
) -> ResultMap:
    """Metadata for EOL data objects, keyed by data object id."""
    raw = [ids] if isinstance(ids, (str, int, TaxonId)) else list(ids or [])
    typed = [i if isinstance(i, TaxonId) else eolid(i) for i in raw]
    return _run(
        "eol_dataobjects",
        DATA_OBJECTS,
        None,
        Source.EOL,
        typed,
        simplify,
        key=key,
        settings=settings,
        on_error=on_error,
        verbose=verbose,
        request_options=request_options,
    )


def bold_search(
    name: str | Iterable[str] | None = None,
    *,
    id: str | int | TaxonId | Iterable[str | int | TaxonId] | None = None,  # noqa: A002
    fuzzy: bool = False,
    settings: Settings | None = None,
    on_error: ErrorPolicy | str | None = None,
    verbose: bool | None = None,
    request_options: dict[str, Any] | None = None,
) -> pd.DataFrame:
    """
    Search BOLD taxonomy by name or by taxid.

    Name searches return ``input, taxid, taxon, tax_rank, tax_division,
    parentid, parentname, taxonrep``, one row per hit. Id searches return the
    same columns without ``input``, one row per id. A name or id BOLD does not
    know still gets a row, with missing values.

    Raises:
        InvalidInputError: neither (or both) of ``name`` and ``id`` given.
    """
    settings, policy, verbose = _resolve_settings(settings, on_error, verbose)
    names = [name] if isinstance(name, str) else list(name or [])
    raw_ids = [id] if isinstance(id, (str, int, TaxonId)) else list(id or [])
    if not names and not raw_ids:
        raise InvalidInputError("bold_search: supply name or id")
    if names and raw_ids:
        raise InvalidInputError("bold_search: supply name or id, not both")

    if names:
        rows: list[tuple[str, BoldTaxon | None]] = []
        for n in names:
            try:
                hits = bold.search_name(
                    n, fuzzy=fuzzy, settings=settings, request_options=request_options
                )
            except (SourceRequestError, ResponseShapeError) as exc:
                if policy is ErrorPolicy.RAISE:
                    raise
                logger.warning("bold_search: skipping %r: %s", n, exc)
                hits = []
            if not hits:
                logger.log(_soft(verbose), "bold_search: no taxa match %r", n)
                rows.append((n, None))
            else:
                rows.extend((n, h) for h in hits)
        return bold.name_frame(rows)

    taxa: list[BoldTaxon | None] = []
    for raw in raw_ids:
        if raw is None or (isinstance(raw, str) and not raw.strip()):
            logger.log(_soft(verbose), "bold_search: blank id %r", raw)
            taxa.append(None)
            continue
        identifier = raw if isinstance(raw, TaxonId) else boldid(str(raw).strip())
        try:
            taxon = bold.search_id(identifier, settings=settings, request_options=request_options)
        except (SourceRequestError, ResponseShapeError) as exc:
            if policy is ErrorPolicy.RAISE:
                raise
            logger.warning("bold_search: skipping id %s: %s", identifier.value, exc)
            taxon = None
        if taxon is None:
            logger.log(_soft(verbose), "bold_search: no taxon with id %s", identifier.value)
        taxa.append(taxon)
    return bold.id_frame(taxa)


def col_downstream(
    name: str | Iterable[str],
    downto: str,
    *,
    settings: Settings | None = None,
    on_error: ErrorPolicy | str | None = None,
    verbose: bool | None = None,
    request_options: dict[str, Any] | None = None,
) -> ResultMap:
    """
    Taxa at rank ``downto`` below each name, from the Catalogue of Life.

    Each value is a DataFrame with columns ``childtaxa_id, childtaxa_name,
    childtaxa_rank``, or ``None`` when the name is unknown or has nothing
    at that rank (a warning suggests adjusting ``downto``).

    Raises:
        InvalidInputError: no names, or ``downto`` is not a known rank.
    """
    settings, policy, verbose = _resolve_settings(settings, on_error, verbose)
    names = [name] if isinstance(name, str) else list(name or [])
    if not names:
        raise InvalidInputError("col_downstream: supply at least one name")
    col.check_rank(downto)

    out = ResultMap()
    for n in names:
        try:
            value = col.downstream(
                n, downto, settings=settings, verbose=verbose, request_options=request_options
            )
        except (SourceRequestError, ResponseShapeError) as exc:
            if policy is ErrorPolicy.RAISE:
                raise
            logger.warning("col_downstream: skipping %r: %s", n, exc)
            value = None
        out.append(n, value)
    return out


# =============================================================================
# Identifier resolution
# =============================================================================


def get_ids(
    names: str | Iterable[str],
    db: str | Source,
    *,
    key: str | None = None,
    settings: Settings | None = None,
    verbose: bool | None = None,
    request_options: dict[str, Any] | None = None,
) -> list[TaxonId | None]:
    """Resolve names to identifiers of one source, ``None`` where unresolved."""
    settings, _, verbose = _resolve_settings(settings, None, verbose)
    items = [names] if isinstance(names, str) else list(names or [])
    if not items:
        raise InvalidInputError("get_ids: supply at least one name")
    source = _source(db, RESOLVERS, "get_ids")
    resolve = RESOLVERS[source]
    out: list[TaxonId | None] = []
    for name in items:
        identifier = resolve(name, settings=settings, key=key, request_options=request_options)
        if identifier is None:
            logger.log(_soft(verbose), "get_ids: %r not found in %s", name, source.value)
        out.append(identifier)
    return out


def get_tsn(names: str | Iterable[str], **kwargs: Any) -> list[TaxonId | None]:
    """ITIS TSNs for names."""
    return get_ids(names, Source.ITIS, **kwargs)


def get_uid(names: str | Iterable[str], **kwargs: Any) -> list[TaxonId | None]:
    """NCBI taxonomy UIDs for names."""
    return get_ids(names, Source.NCBI, **kwargs)


def get_wormsid(names: str | Iterable[str], **kwargs: Any) -> list[TaxonId | None]:
    """WoRMS AphiaIDs for names."""
    return get_ids(names, Source.WORMS, **kwargs)


def get_boldid(names: str | Iterable[str], **kwargs: Any) -> list[TaxonId | None]:
    """BOLD taxids for names."""
    return get_ids(names, Source.BOLD, **kwargs)


def get_colid(names: str | Iterable[str], **kwargs: Any) -> list[TaxonId | None]:
    """Catalogue of Life usage ids for names."""
    return get_ids(names, Source.COL, **kwargs)


def get_eolid(names: str | Iterable[str], **kwargs: Any) -> list[TaxonId | None]:
    """EOL page ids for names."""
    return get_ids(names, Source.EOL, **kwargs)
