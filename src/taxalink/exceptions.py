"""Error taxonomy.

Hard failures (bad top-level input, transport errors, unexpected payloads)
are raised. Per-element soft failures (unresolvable names, empty results)
never raise; they show up as ``None`` in the output.
"""

from __future__ import annotations

from taxalink.schemas import Source


class TaxalinkError(Exception):
    """Base class for every error raised by taxalink."""


class InvalidInputError(TaxalinkError, ValueError):
    """The call itself is malformed (nothing to look up, unknown source, ...)."""


class SourceRequestError(TaxalinkError):
    """An HTTP request to a data source failed."""

    def __init__(self, source: Source, url: str, message: str, status_code: int | None = None):
        self.source = source
        self.url = url
        self.status_code = status_code
        status = f" (HTTP {status_code})" if status_code is not None else ""
        super().__init__(f"{source.value}: request to {url} failed{status}: {message}")


class ResponseShapeError(TaxalinkError):
    """A source answered with a payload that does not match its expected schema."""

    def __init__(self, source: Source, message: str):
        self.source = source
        super().__init__(f"{source.value}: unexpected response shape: {message}")


class SourceMismatchError(TaxalinkError, ValueError):
    """An identifier from one source was handed to another source's adapter."""

    def __init__(self, expected: Source, got: Source):
        self.expected = expected
        self.got = got
        super().__init__(f"expected a {expected.value} identifier, got a {got.value} one")
