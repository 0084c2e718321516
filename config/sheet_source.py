"""
Spreadsheet source configuration.

The catalog is built from a Google Sheet published to the web.  The published
URL is the only required setting; everything else has a sensible default.

Usage:
    from config.sheet_source import SheetSourceConfig

    config = SheetSourceConfig.from_env()
    config.validate()   # raises SheetConfigurationError if the URL is missing
"""

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass

from processing.errors import SheetConfigurationError

logger = logging.getLogger(__name__)

# Environment variable names
PUBLISHED_URL_ENV: str = "GOOGLE_SHEETS_PUBLISHED_URL"
REVALIDATE_ENV: str = "SHEET_REVALIDATE_SECONDS"
TIMEOUT_ENV: str = "SHEET_FETCH_TIMEOUT_SECONDS"

# Revalidation window in seconds (how long a fetched sheet is considered fresh)
DEFAULT_REVALIDATE_SECONDS: int = 300

# HTTP timeout for the CSV download
DEFAULT_TIMEOUT_SECONDS: float = 10.0


@dataclass(frozen=True)
class SheetSourceConfig:
    """Where to fetch the sheet from and how long a fetched copy stays fresh."""

    published_url: str | None = None
    revalidate_seconds: int = DEFAULT_REVALIDATE_SECONDS
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS

    @classmethod
    def from_env(
        cls,
        environ: Mapping[str, str] | None = None,
        secrets: Mapping[str, str] | None = None,
    ) -> "SheetSourceConfig":
        """
        Build a config from Streamlit secrets and environment variables.

        The published URL is taken from *secrets* first, then the
        environment.  Numeric settings come from the environment only.

        Missing optional settings fall back to defaults.  A missing URL is
        NOT an error here — it is reported by validate() when a fetch is
        attempted, so the app can still start and show a helpful message.

        Args:
            environ: Mapping to read from (defaults to os.environ).
            secrets: Secrets mapping (st.secrets in the app), checked first
                for the published URL.

        Returns:
            SheetSourceConfig populated from secrets and the environment.
        """
        env = os.environ if environ is None else environ
        secret_url = str((secrets or {}).get(PUBLISHED_URL_ENV) or "").strip()

        return cls(
            published_url=secret_url or (env.get(PUBLISHED_URL_ENV) or "").strip() or None,
            revalidate_seconds=_int_or_default(
                env.get(REVALIDATE_ENV), DEFAULT_REVALIDATE_SECONDS, REVALIDATE_ENV
            ),
            timeout_seconds=_float_or_default(
                env.get(TIMEOUT_ENV), DEFAULT_TIMEOUT_SECONDS, TIMEOUT_ENV
            ),
        )

    def validate(self) -> None:
        """Raise SheetConfigurationError if the published URL is not set."""
        if not self.published_url or not self.published_url.strip():
            raise SheetConfigurationError(
                f"Missing required environment variable: {PUBLISHED_URL_ENV}"
            )

    @property
    def source_label(self) -> str:
        """Short human-readable label for the source (scheme stripped, 60 chars)."""
        if not self.published_url:
            return "not set"
        label = self.published_url
        for prefix in ("https://", "http://"):
            if label.startswith(prefix):
                label = label[len(prefix):]
                break
        return label[:60]


def _int_or_default(raw: str | None, default: int, name: str) -> int:
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError:
        logger.warning(f"Ignoring non-integer {name}={raw!r}; using {default}")
        return default


def _float_or_default(raw: str | None, default: float, name: str) -> float:
    if raw is None or not raw.strip():
        return default
    try:
        return float(raw)
    except ValueError:
        logger.warning(f"Ignoring non-numeric {name}={raw!r}; using {default}")
        return default
