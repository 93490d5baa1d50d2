"""
Per-source minimum-interval rate limiting.

A blocking pause before each request so consecutive requests to the same
source start at least ``interval`` seconds apart. No token bucket, no
backoff: upstream limits are simple requests-per-second ceilings.
"""

from __future__ import annotations

import time

from taxalink.schemas import Source


class MinIntervalLimiter:
    """Remembers when each source was last called and sleeps to keep the gap."""

    def __init__(self) -> None:
        self._last_request: dict[Source, float] = {}

    def wait(self, source: Source, interval: float) -> float:
        """
        Block until ``interval`` seconds have passed since the last request to
        ``source``, then record this request. Returns the time slept.
        """
        slept = 0.0
        if interval > 0 and source in self._last_request:
            elapsed = time.monotonic() - self._last_request[source]
            if elapsed < interval:
                slept = interval - elapsed
                time.sleep(slept)
        self._last_request[source] = time.monotonic()
        return slept

    def reset(self) -> None:
        self._last_request.clear()


#: Module-level limiter shared by every datasource client.
limiter = MinIntervalLimiter()
