"""Tests for the shared HTTP client."""

from __future__ import annotations

from collections.abc import Callable
from unittest.mock import Mock, patch

import pytest
import requests
from urllib3.util.retry import Retry

from taxalink.config import Settings
from taxalink.exceptions import SourceRequestError
from taxalink.schemas import Source
from taxalink.services import http
from taxalink.services.http import DEFAULT_RETRY, DEFAULT_TIMEOUT, create_session, session


class TestDefaultRetry:
    """The default strategy fails fast."""

    def test_no_retries(self) -> None:
        assert DEFAULT_RETRY.total == 0

    def test_only_safe_methods(self) -> None:
        allowed = DEFAULT_RETRY.allowed_methods
        assert "GET" in allowed
        assert "POST" not in allowed


class TestCreateSession:
    """Verify session factory."""

    def test_returns_session(self) -> None:
        s = create_session()
        assert isinstance(s, requests.Session)

    def test_mounts_adapters(self) -> None:
        s = create_session()
        assert isinstance(s.get_adapter("https://example.com"), requests.adapters.HTTPAdapter)
        assert isinstance(s.get_adapter("http://example.com"), requests.adapters.HTTPAdapter)

    def test_custom_retry(self) -> None:
        custom = Retry(total=3, backoff_factor=1)
        s = create_session(retry=custom)
        adapter = s.get_adapter("https://example.com")
        assert adapter.max_retries.total == 3

    def test_user_agent_header(self) -> None:
        s = create_session()
        assert s.headers["User-Agent"].startswith("taxalink/")

    def test_default_timeout_injected(self) -> None:
        s = create_session(timeout=42)
        prep = requests.Request("GET", "https://example.com").prepare()
        with patch.object(
            requests.adapters.HTTPAdapter, "send", return_value=requests.Response()
        ) as mock_send:
            s.send(prep)
            _, kwargs = mock_send.call_args
            assert kwargs.get("timeout") == 42

    def test_explicit_timeout_not_overridden(self) -> None:
        s = create_session(timeout=42)
        prep = requests.Request("GET", "https://example.com").prepare()
        with patch.object(
            requests.adapters.HTTPAdapter, "send", return_value=requests.Response()
        ) as mock_send:
            s.send(prep, timeout=99)
            _, kwargs = mock_send.call_args
            assert kwargs.get("timeout") == 99

    def test_default_timeout(self) -> None:
        assert DEFAULT_TIMEOUT == 30


class TestSessionFor:
    """Retry opt-in through settings."""

    def test_zero_retries_uses_module_session(self, settings: Settings) -> None:
        assert http.session_for(settings) is session

    def test_retries_build_a_retrying_session(self) -> None:
        s = http.session_for(Settings(_env_file=None, http_retries=2))
        assert s is not session
        assert s.get_adapter("https://example.com").max_retries.total == 2

    def test_rate_limited_source_never_retries(self) -> None:
        retrying = Settings(_env_file=None, http_retries=2)
        assert http.session_for(retrying, Source.NCBI) is session
        assert http.session_for(retrying, Source.ITIS) is not session

    @patch("taxalink.services.http._retrying_session")
    @patch("taxalink.services.http.session.get")
    def test_ncbi_get_uses_plain_session(
        self,
        mock_get: Mock,
        mock_retrying: Mock,
        make_response: Callable[..., Mock],
    ) -> None:
        mock_get.return_value = make_response({})
        settings = Settings(_env_file=None, http_retries=3, ncbi_min_interval=0.01)
        http.get(Source.NCBI, "https://example.com/x", settings=settings)
        mock_get.assert_called_once()
        mock_retrying.assert_not_called()


class TestGet:
    """Rate-limited GET with error wrapping."""

    @patch("taxalink.services.http.session.get")
    def test_returns_response(
        self, mock_get: Mock, settings: Settings, make_response: Callable[..., Mock]
    ) -> None:
        mock_get.return_value = make_response({"ok": True})
        resp = http.get(Source.ITIS, "https://example.com/x", params={"a": 1}, settings=settings)
        assert resp.json() == {"ok": True}
        assert mock_get.call_args.kwargs["params"] == {"a": 1}
        assert mock_get.call_args.kwargs["timeout"] == settings.http_timeout

    @patch("taxalink.services.http.session.get")
    def test_request_options_forwarded(
        self, mock_get: Mock, settings: Settings, make_response: Callable[..., Mock]
    ) -> None:
        mock_get.return_value = make_response({})
        http.get(
            Source.ITIS,
            "https://example.com/x",
            settings=settings,
            request_options={"headers": {"X-Test": "1"}, "timeout": 5},
        )
        kwargs = mock_get.call_args.kwargs
        assert kwargs["headers"] == {"X-Test": "1"}
        assert kwargs["timeout"] == 5

    @patch("taxalink.services.http.session.get")
    def test_params_in_request_options_merged(
        self, mock_get: Mock, settings: Settings, make_response: Callable[..., Mock]
    ) -> None:
        mock_get.return_value = make_response({})
        http.get(
            Source.ITIS,
            "https://example.com/x",
            params={"srchKey": "Poa annua"},
            settings=settings,
            request_options={"params": {"extra": "1", "srchKey": "ignored"}},
        )
        assert mock_get.call_args.kwargs["params"] == {"extra": "1", "srchKey": "Poa annua"}

    @patch("taxalink.services.http.session.get")
    def test_http_error_wrapped(
        self, mock_get: Mock, settings: Settings, make_response: Callable[..., Mock]
    ) -> None:
        mock_get.return_value = make_response({}, status=500)
        with pytest.raises(SourceRequestError) as excinfo:
            http.get(Source.WORMS, "https://example.com/x", settings=settings)
        assert excinfo.value.status_code == 500
        assert excinfo.value.source is Source.WORMS
        assert "worms" in str(excinfo.value)

    @patch("taxalink.services.http.session.get")
    def test_network_error_wrapped(
        self, mock_get: Mock, settings: Settings, make_response: Callable[..., Mock]
    ) -> None:
        mock_get.side_effect = requests.ConnectionError("connection refused")
        with pytest.raises(SourceRequestError) as excinfo:
            http.get(Source.NCBI, "https://example.com/x", settings=settings)
        assert excinfo.value.status_code is None
        assert "connection refused" in str(excinfo.value)

    @patch("taxalink.services.http.session.get")
    def test_allowed_status_returned(
        self, mock_get: Mock, settings: Settings, make_response: Callable[..., Mock]
    ) -> None:
        mock_get.return_value = make_response(None, status=204)
        resp = http.get(Source.WORMS, "https://example.com/x", settings=settings, allow_statuses=(204,))
        assert resp.status_code == 204
