"""
Process-wide configuration.

Settings are read once from the environment (``TAXALINK_*`` variables) or a
local ``.env`` file and passed explicitly into every public call. Nothing in
the package mutates them.

Example::

    export TAXALINK_EOL_API_KEY=...
    export TAXALINK_NCBI_API_KEY=...
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from taxalink.schemas import ErrorPolicy, Source


class Settings(BaseSettings):
    """Configuration shared by every data source."""

    model_config = SettingsConfigDict(
        env_prefix="TAXALINK_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )

    # API keys
    eol_api_key: str | None = None
    ncbi_api_key: str | None = None

    # Base URLs
    eol_base: str = "https://eol.org/api"
    itis_base: str = "https://www.itis.gov/ITISWebService/jsonservice"
    ncbi_base: str = "https://eutils.ncbi.nlm.nih.gov/entrez/eutils"
    worms_base: str = "https://www.marinespecies.org/rest"
    bold_base: str = "https://v4.boldsystems.org/index.php/API_Tax"
    col_base: str = "https://api.checklistbank.org"
    col_dataset_key: str = "3LR"

    # Transport
    http_timeout: float = Field(default=30.0, gt=0)
    http_retries: int = Field(default=0, ge=0)

    # NCBI allows 3 requests/second without a key. A key permits up to 10, but
    # the faster gap only applies when ncbi_min_interval_with_key is set.
    ncbi_min_interval: float = Field(default=0.34, ge=0)
    ncbi_min_interval_with_key: float | None = Field(default=None, ge=0)

    verbose: bool = False
    on_error: ErrorPolicy = ErrorPolicy.RAISE

    @model_validator(mode="after")
    def _check_urls(self) -> Settings:
        for field in ("eol_base", "itis_base", "ncbi_base", "worms_base", "bold_base", "col_base"):
            value = getattr(self, field)
            if not value.startswith(("http://", "https://")):
                raise ValueError(f"{field} must be an http(s) URL, got {value!r}")
        return self

    def api_key(self, source: Source, override: str | None = None) -> str | None:
        """Explicit per-call key wins over the configured one."""
        if override:
            return override
        if source is Source.EOL:
            return self.eol_api_key
        if source is Source.NCBI:
            return self.ncbi_api_key
        return None

    def min_interval(self, source: Source) -> float:
        """Minimum seconds between consecutive requests to ``source``."""
        if source is Source.NCBI:
            if self.ncbi_api_key and self.ncbi_min_interval_with_key is not None:
                return self.ncbi_min_interval_with_key
            return self.ncbi_min_interval
        return 0.0


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Settings built from the environment, constructed once per process."""
    return Settings()
