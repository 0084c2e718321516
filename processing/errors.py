"""
Exceptions raised by the ingestion pipeline.

Only whole-cycle failures are exceptions.  Row-level noise (missing names,
ragged rows, blank lines) is dropped silently by the normalizer and builder.
"""


class CatalogError(Exception):
    """Base exception for the catalog."""

    def __init__(self, message: str, details: str | None = None):
        self.message = message
        self.details = details
        super().__init__(self.message)


class SheetConfigurationError(CatalogError):
    """The sheet source is not configured (no published URL)."""


class SheetFetchError(CatalogError):
    """Downloading the published sheet failed (HTTP error or network failure)."""

    def __init__(
        self,
        message: str,
        details: str | None = None,
        status_code: int | None = None,
        is_timeout: bool = False,
    ):
        super().__init__(message, details)
        self.status_code = status_code
        self.is_timeout = is_timeout
