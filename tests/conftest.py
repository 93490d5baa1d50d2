"""Shared fixtures: offline settings and fake HTTP responses."""

from __future__ import annotations

import json
from collections.abc import Callable, Iterator
from typing import Any
from unittest.mock import Mock

import pytest
import requests

from taxalink.config import Settings
from taxalink.services.ratelimit import limiter


def _fake_response(
    payload: Any = None,
    *,
    status: int = 200,
    content: bytes | None = None,
) -> Mock:
    """A stand-in for ``requests.Response``."""
    resp = Mock()
    resp.status_code = status
    resp.json.return_value = payload
    if content is None:
        content = json.dumps(payload).encode() if payload is not None else b""
    resp.content = content
    if status >= 400:
        resp.raise_for_status.side_effect = requests.HTTPError(f"{status} Error")
    else:
        resp.raise_for_status = Mock()
    return resp


@pytest.fixture
def make_response() -> Callable[..., Mock]:
    """Factory for fake ``requests.Response`` objects."""
    return _fake_response


@pytest.fixture
def settings() -> Settings:
    """Defaults, no .env, no NCBI pause."""
    return Settings(_env_file=None, ncbi_min_interval=0.0, ncbi_min_interval_with_key=0.0)


@pytest.fixture(autouse=True)
def _reset_limiter() -> Iterator[None]:
    limiter.reset()
    yield
    limiter.reset()
