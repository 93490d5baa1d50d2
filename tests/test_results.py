"""Tests for ResultMap."""

from __future__ import annotations

import pytest

from taxalink.results import ResultMap


class TestResultMap:
    """Ordered, duplicate-preserving mapping."""

    def test_keeps_order_and_duplicates(self) -> None:
        rm = ResultMap([("b", 1), ("a", 2), ("b", 3)])
        assert rm.keys() == ["b", "a", "b"]
        assert rm.values() == [1, 2, 3]
        assert len(rm) == 3
        assert list(rm) == ["b", "a", "b"]

    def test_lookup_returns_first(self) -> None:
        rm = ResultMap([("b", 1), ("b", 3)])
        assert rm["b"] == 1
        assert rm.get_all("b") == [1, 3]
        assert rm.at(1) == 3

    def test_missing_key(self) -> None:
        rm = ResultMap()
        with pytest.raises(KeyError):
            rm["x"]
        assert rm.get("x") is None
        assert "x" not in rm

    def test_none_values_are_kept(self) -> None:
        rm = ResultMap()
        rm.append("asdfsdf", None)
        assert "asdfsdf" in rm
        assert rm["asdfsdf"] is None

    def test_to_dict_last_wins(self) -> None:
        rm = ResultMap([("b", 1), ("b", 3)])
        assert rm.to_dict() == {"b": 3}

    def test_repr(self) -> None:
        assert repr(ResultMap([("a", None)])) == "ResultMap({'a': None})"
