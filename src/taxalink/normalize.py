"""
Turn raw payloads into records, and records into the caller's output shape.

Every adapter produces a list of :class:`~taxalink.schemas.Record` rows. The
simplify flag picks the output shape:

- ``simplify=True``: a flat list of the record type's ``simple_field``,
  with missing/empty values dropped.
- ``simplify=False``: a ``pandas.DataFrame`` with one column per record field.

Zero rows always become ``None``, the missing-value marker.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Any, TypeVar

import pandas as pd
from pydantic import ValidationError

from taxalink.exceptions import ResponseShapeError
from taxalink.schemas import Record, Source

R = TypeVar("R", bound=Record)


def parse_records(source: Source, record_type: type[R], rows: Iterable[Any]) -> list[R]:
    """
    Validate raw rows against ``record_type``.

    Raises:
        ResponseShapeError: a row is not a mapping or fails validation.
    """
    records: list[R] = []
    for row in rows:
        if not isinstance(row, dict):
            raise ResponseShapeError(
                source, f"expected an object for {record_type.__name__}, got {type(row).__name__}"
            )
        try:
            records.append(record_type.model_validate(row))
        except ValidationError as exc:
            raise ResponseShapeError(source, f"{record_type.__name__}: {exc}") from exc
    return records


def to_frame(records: Sequence[Record], record_type: type[Record]) -> pd.DataFrame:
    """Records as a DataFrame, columns in model field order (even when empty)."""
    return pd.DataFrame(
        [r.model_dump() for r in records],
        columns=record_type.columns(),
    )


def simplify_records(records: Sequence[Record], record_type: type[Record]) -> list[Any]:
    field = record_type.simple_field
    values = [getattr(r, field) for r in records]
    return [v for v in values if v is not None and v != ""]


def normalize(
    records: Sequence[Record] | None,
    record_type: type[Record],
    simplify: bool,
) -> list[Any] | pd.DataFrame | None:
    """Apply the simplify flag. No rows (or nothing left after filtering) gives ``None``."""
    if not records:
        return None
    if simplify:
        return simplify_records(records, record_type) or None
    return to_frame(records, record_type)
