"""
Tests for the BOLD datasource and bold_search.
"""

from __future__ import annotations

from collections.abc import Callable
from unittest.mock import Mock, patch

import pandas as pd
import pytest

from taxalink import bold_search
from taxalink.config import Settings
from taxalink.datasources import bold
from taxalink.exceptions import InvalidInputError, SourceRequestError
from taxalink.schemas import boldid

# =============================================================================
# Sample API Responses
# =============================================================================

APIS_SEARCH: dict = {
    "top_matched_names": [
        {
            "taxid": 125295,
            "taxon": "Apis",
            "tax_rank": "genus",
            "tax_division": "Animalia",
            "parentid": 125294,
            "parentname": "Apini",
            "taxonrep": "Apis mellifera",
            "representitive_image": {"image": "x.jpg"},
        }
    ],
    "total_matched_names": 1,
}

PUMA_SEARCH: dict = {
    "top_matched_names": [
        {
            "taxid": 88899,
            "taxon": "Puma concolor",
            "tax_rank": "species",
            "tax_division": "Animalia",
            "parentid": 27802,
            "parentname": "Puma",
        }
    ],
    "total_matched_names": 1,
}

FUZZY_SEARCH: dict = {
    "top_matched_names": [
        {"taxid": 1, "taxon": "Agabus", "tax_rank": "genus", "parentid": 10, "parentname": "Dytiscidae"},
        {"taxid": 2, "taxon": "Agama", "tax_rank": "genus", "parentid": 20, "parentname": "Agamidae"},
        {"taxid": 3, "taxon": "Agaricus", "tax_rank": "genus", "parentid": 30, "parentname": "Agaricaceae"},
    ],
    "total_matched_names": 3,
}

TAXON_DATA: dict = {
    "taxid": 88899,
    "taxon": "Puma concolor",
    "tax_rank": "species",
    "tax_division": "Animalia",
    "parentid": 27802,
    "parentname": "Puma",
    "taxonrep": "Puma concolor",
}

BOLD_COLUMNS = ["taxid", "taxon", "tax_rank", "tax_division", "parentid", "parentname", "taxonrep"]


def _by_name(make_response: Callable[..., Mock]) -> Callable[..., Mock]:
    answers = {"Apis": APIS_SEARCH, "Puma concolor": PUMA_SEARCH, "Aga": FUZZY_SEARCH}

    def fake_get(url: str, *, params: dict, **kwargs: object) -> Mock:
        payload = answers.get(params.get("taxName"))
        if payload is None:
            return make_response(content=b"")
        return make_response(payload)

    return fake_get


class TestBoldSearchByName:
    """Name searches: ``input`` + seven taxon columns."""

    @patch("taxalink.services.http.session.get")
    def test_single_name(
        self, mock_get: Mock, settings: Settings, make_response: Callable[..., Mock]
    ) -> None:
        mock_get.side_effect = _by_name(make_response)
        a = bold_search("Apis", settings=settings)
        assert isinstance(a, pd.DataFrame)
        assert a.shape == (1, 8)
        assert list(a.columns) == ["input", *BOLD_COLUMNS]
        assert a.loc[0, "taxon"] == "Apis"
        assert isinstance(a.loc[0, "tax_rank"], str)
        params = mock_get.call_args.kwargs["params"]
        assert params == {"taxName": "Apis", "fuzzy": "false"}

    @patch("taxalink.services.http.session.get")
    def test_fuzzy(
        self, mock_get: Mock, settings: Settings, make_response: Callable[..., Mock]
    ) -> None:
        mock_get.side_effect = _by_name(make_response)
        b = bold_search("Aga", fuzzy=True, settings=settings)
        assert b.shape[1] == 8
        assert len(b) == 3
        assert set(b["input"]) == {"Aga"}
        assert mock_get.call_args.kwargs["params"]["fuzzy"] == "true"

    @patch("taxalink.services.http.session.get")
    def test_several_names(
        self, mock_get: Mock, settings: Settings, make_response: Callable[..., Mock]
    ) -> None:
        mock_get.side_effect = _by_name(make_response)
        c = bold_search(["Apis", "Puma concolor"], settings=settings)
        assert c.shape == (2, 8)
        assert c["input"].tolist() == ["Apis", "Puma concolor"]

    @patch("taxalink.services.http.session.get")
    def test_unknown_name_gives_missing_row(
        self, mock_get: Mock, settings: Settings, make_response: Callable[..., Mock]
    ) -> None:
        mock_get.side_effect = _by_name(make_response)
        frame = bold_search("asdfsdf", settings=settings)
        assert frame.shape == (1, 8)
        assert frame.loc[0, "input"] == "asdfsdf"
        assert frame[BOLD_COLUMNS].isna().all(axis=None)

    @patch("taxalink.services.http.session.get")
    def test_empty_name_gives_missing_row(self, mock_get: Mock, settings: Settings) -> None:
        frame = bold_search("", settings=settings)
        assert isinstance(frame, pd.DataFrame)
        assert frame.shape == (1, 8)
        mock_get.assert_not_called()

    @patch("taxalink.services.http.session.get")
    def test_bare_list_answer_is_no_data(
        self, mock_get: Mock, settings: Settings, make_response: Callable[..., Mock]
    ) -> None:
        mock_get.return_value = make_response([])
        frame = bold_search("Apis", settings=settings)
        assert frame.shape == (1, 8)
        assert pd.isna(frame.loc[0, "taxon"])


class TestBoldSearchById:
    """Id searches: seven taxon columns, no ``input``."""

    @patch("taxalink.services.http.session.get")
    def test_by_id(
        self, mock_get: Mock, settings: Settings, make_response: Callable[..., Mock]
    ) -> None:
        mock_get.return_value = make_response(TAXON_DATA)
        d = bold_search(id=88899, settings=settings)
        assert d.shape == (1, 7)
        assert list(d.columns) == BOLD_COLUMNS
        assert d.loc[0, "parentname"] == "Puma"
        assert mock_get.call_args.kwargs["params"] == {"taxId": "88899", "dataTypes": "basic"}

    @patch("taxalink.services.http.session.get")
    def test_junk_id_gives_missing_row(
        self, mock_get: Mock, settings: Settings, make_response: Callable[..., Mock]
    ) -> None:
        mock_get.return_value = make_response(content=b"")
        d = bold_search(id="asdfsdf", settings=settings)
        assert isinstance(d, pd.DataFrame)
        assert d.shape == (1, 7)
        assert d.isna().all(axis=None)


class TestBoldSearchErrors:
    """Top-level misuse and transport failures."""

    def test_no_arguments(self, settings: Settings) -> None:
        with pytest.raises(InvalidInputError):
            bold_search(settings=settings)

    def test_name_and_id(self, settings: Settings) -> None:
        with pytest.raises(InvalidInputError):
            bold_search("Apis", id=1, settings=settings)

    @patch("taxalink.services.http.session.get")
    def test_http_failure_raises_by_default(
        self, mock_get: Mock, settings: Settings, make_response: Callable[..., Mock]
    ) -> None:
        mock_get.return_value = make_response({}, status=503)
        with pytest.raises(SourceRequestError):
            bold_search("Apis", settings=settings)

    @patch("taxalink.services.http.session.get")
    def test_http_failure_continue(
        self, mock_get: Mock, settings: Settings, make_response: Callable[..., Mock]
    ) -> None:
        mock_get.return_value = make_response({}, status=503)
        frame = bold_search(["Apis", "Puma concolor"], settings=settings, on_error="continue")
        assert frame.shape == (2, 8)


class TestResolve:
    """Name -> BOLD taxid."""

    @patch("taxalink.services.http.session.get")
    def test_resolve(
        self, mock_get: Mock, settings: Settings, make_response: Callable[..., Mock]
    ) -> None:
        mock_get.return_value = make_response(PUMA_SEARCH)
        assert bold.resolve("Puma concolor", settings=settings) == boldid(88899).model_copy(
            update={"name": "Puma concolor"}
        )
