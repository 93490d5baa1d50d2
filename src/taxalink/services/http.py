"""
Shared HTTP client.

Provides a pre-configured ``requests.Session`` with a default timeout and a
``urllib3`` retry adapter. The default strategy performs no retries: a failed
request surfaces immediately as :class:`~taxalink.exceptions.SourceRequestError`.
Set ``TAXALINK_HTTP_RETRIES`` to opt into retrying transient errors.

Usage::

    from taxalink.services.http import get

    resp = get(Source.ITIS, url, params={"tsn": "36616"}, settings=settings)
"""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Any

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from taxalink import __version__
from taxalink.config import Settings
from taxalink.exceptions import SourceRequestError
from taxalink.schemas import Source
from taxalink.services.ratelimit import limiter

logger = logging.getLogger(__name__)

#: Default retry strategy: fail fast.
DEFAULT_RETRY = Retry(
    total=0,
    status_forcelist=[429, 502, 503, 504],
    allowed_methods=["GET", "HEAD", "OPTIONS"],
    raise_on_status=False,  # let resp.raise_for_status() handle it
)

DEFAULT_TIMEOUT = 30  # seconds


def create_session(
    retry: Retry | None = None,
    timeout: float = DEFAULT_TIMEOUT,
) -> requests.Session:
    """
    Build a ``requests.Session`` with retry adapter mounted.

    Args:
        retry: Custom retry strategy (defaults to ``DEFAULT_RETRY``).
        timeout: Default timeout applied to every request.
    """
    s = requests.Session()
    adapter = HTTPAdapter(max_retries=retry or DEFAULT_RETRY)
    s.mount("https://", adapter)
    s.mount("http://", adapter)
    s.headers["User-Agent"] = f"taxalink/{__version__} (python-requests)"

    # Inject a default timeout so callers don't need to pass ``timeout=``.
    _original_send = s.send

    def _send_with_timeout(
        prepared: requests.PreparedRequest, **kwargs: object
    ) -> requests.Response:
        kwargs.setdefault("timeout", timeout)
        return _original_send(prepared, **kwargs)  # type: ignore[arg-type]

    s.send = _send_with_timeout  # type: ignore[method-assign]
    return s


#: Module-level session - import and use directly.
session: requests.Session = create_session()


@lru_cache(maxsize=8)
def _retrying_session(retries: int) -> requests.Session:
    retry = Retry(
        total=retries,
        backoff_factor=2,
        status_forcelist=[429, 502, 503, 504],
        allowed_methods=["GET", "HEAD", "OPTIONS"],
        raise_on_status=False,
    )
    return create_session(retry=retry)


def session_for(settings: Settings, source: Source | None = None) -> requests.Session:
    """
    The module session, or a retrying one when settings ask for retries.

    urllib3 retries happen inside the adapter, out of reach of the rate
    limiter, so sources with a minimum interval (NCBI) never retry.
    """
    if settings.http_retries > 0 and not (source is not None and settings.min_interval(source) > 0):
        return _retrying_session(settings.http_retries)
    return session


def get(
    source: Source,
    url: str,
    *,
    settings: Settings,
    params: dict[str, Any] | None = None,
    request_options: dict[str, Any] | None = None,
    allow_statuses: tuple[int, ...] = (),
) -> requests.Response:
    """
    Rate-limited GET against one data source.

    ``request_options`` (headers, timeout, proxies, ...) are forwarded
    unmodified to ``session.get``, except ``params``, which is merged under
    the query this call builds. Statuses listed in ``allow_statuses`` are
    returned instead of raised; everything else outside 2xx raises.

    Raises:
        SourceRequestError: network error or non-2xx status.
    """
    options = dict(request_options or {})
    query = {**(options.pop("params", None) or {}), **(params or {})}
    options.setdefault("timeout", settings.http_timeout)

    limiter.wait(source, settings.min_interval(source))
    logger.debug("GET %s params=%s", url, query)
    try:
        resp = session_for(settings, source).get(url, params=query, **options)
    except requests.RequestException as exc:
        raise SourceRequestError(source, url, str(exc)) from exc

    if resp.status_code in allow_statuses:
        return resp
    try:
        resp.raise_for_status()
    except requests.HTTPError as exc:
        raise SourceRequestError(source, url, str(exc), status_code=resp.status_code) from exc
    return resp
