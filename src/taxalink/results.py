"""Ordered, duplicate-preserving result mapping."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any


class ResultMap:
    """
    Results keyed by the caller's original inputs.

    Behaves like a read-only mapping, except that entries keep input order and
    repeated inputs each keep their own entry. Key lookup returns the first
    entry for that key; use :meth:`at` or :meth:`items` to reach the others.
    """

    def __init__(self, entries: list[tuple[str, Any]] | None = None):
        self._entries: list[tuple[str, Any]] = list(entries or [])

    def append(self, key: str, value: Any) -> None:
        self._entries.append((key, value))

    def keys(self) -> list[str]:
        return [k for k, _ in self._entries]

    def values(self) -> list[Any]:
        return [v for _, v in self._entries]

    def items(self) -> list[tuple[str, Any]]:
        return list(self._entries)

    def at(self, index: int) -> Any:
        """Value of the entry at ``index`` (input position)."""
        return self._entries[index][1]

    def get(self, key: str, default: Any = None) -> Any:
        for k, v in self._entries:
            if k == key:
                return v
        return default

    def get_all(self, key: str) -> list[Any]:
        """Every value recorded for ``key``, in input order."""
        return [v for k, v in self._entries if k == key]

    def to_dict(self) -> dict[str, Any]:
        """Plain dict. Later duplicates overwrite earlier ones."""
        return dict(self._entries)

    def __getitem__(self, key: str) -> Any:
        for k, v in self._entries:
            if k == key:
                return v
        raise KeyError(key)

    def __contains__(self, key: object) -> bool:
        return any(k == key for k, _ in self._entries)

    def __iter__(self) -> Iterator[str]:
        return iter(self.keys())

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        inner = ", ".join(f"{k!r}: {v!r}" for k, v in self._entries)
        return f"ResultMap({{{inner}}})"
