"""Tests for the per-source minimum-interval limiter."""

from __future__ import annotations

from unittest.mock import Mock, patch

from taxalink.schemas import Source
from taxalink.services.ratelimit import MinIntervalLimiter


class TestMinIntervalLimiter:
    """Sleeps only when consecutive requests to one source come too fast."""

    @patch("taxalink.services.ratelimit.time.sleep")
    @patch("taxalink.services.ratelimit.time.monotonic")
    def test_first_request_never_sleeps(self, mock_clock: Mock, mock_sleep: Mock) -> None:
        mock_clock.return_value = 100.0
        limiter = MinIntervalLimiter()
        assert limiter.wait(Source.NCBI, 0.34) == 0.0
        mock_sleep.assert_not_called()

    @patch("taxalink.services.ratelimit.time.sleep")
    @patch("taxalink.services.ratelimit.time.monotonic")
    def test_sleeps_for_remaining_interval(self, mock_clock: Mock, mock_sleep: Mock) -> None:
        mock_clock.side_effect = [100.0, 100.1, 100.34]
        limiter = MinIntervalLimiter()
        limiter.wait(Source.NCBI, 0.34)
        slept = limiter.wait(Source.NCBI, 0.34)
        assert abs(slept - 0.24) < 1e-9
        mock_sleep.assert_called_once()
        assert abs(mock_sleep.call_args.args[0] - 0.24) < 1e-9

    @patch("taxalink.services.ratelimit.time.sleep")
    @patch("taxalink.services.ratelimit.time.monotonic")
    def test_no_sleep_after_interval_passed(self, mock_clock: Mock, mock_sleep: Mock) -> None:
        mock_clock.side_effect = [100.0, 101.0, 101.0]
        limiter = MinIntervalLimiter()
        limiter.wait(Source.NCBI, 0.34)
        limiter.wait(Source.NCBI, 0.34)
        mock_sleep.assert_not_called()

    @patch("taxalink.services.ratelimit.time.sleep")
    @patch("taxalink.services.ratelimit.time.monotonic")
    def test_sources_are_independent(self, mock_clock: Mock, mock_sleep: Mock) -> None:
        mock_clock.return_value = 100.0
        limiter = MinIntervalLimiter()
        limiter.wait(Source.NCBI, 0.34)
        limiter.wait(Source.ITIS, 0.34)
        mock_sleep.assert_not_called()

    @patch("taxalink.services.ratelimit.time.sleep")
    def test_zero_interval_never_sleeps(self, mock_sleep: Mock) -> None:
        limiter = MinIntervalLimiter()
        for _ in range(3):
            limiter.wait(Source.WORMS, 0.0)
        mock_sleep.assert_not_called()

    def test_real_spacing(self) -> None:
        import time

        limiter = MinIntervalLimiter()
        limiter.wait(Source.NCBI, 0.05)
        start = time.monotonic()
        limiter.wait(Source.NCBI, 0.05)
        assert time.monotonic() - start >= 0.04
