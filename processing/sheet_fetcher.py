"""
Sheet fetcher — downloads the published Google Sheet as CSV.

The configured URL may be any "publish to web" link (``/pubhtml``, ``/pub``,
or the bare document path).  build_csv_url() turns it into the CSV export
endpoint: the path is normalised to end in ``/pub`` and ``output=csv`` is
added unless an ``output`` parameter is already present.

One request per ingestion cycle.  No retries: a failed fetch aborts the
whole cycle and the caller decides whether to retry or keep a prior result.

Public API:
    build_csv_url(raw_url) → str
    fetch_sheet_text(config, session=None) → str
    fetch_sheet_records(config, session=None) → list[SheetRecord]
    fetch_sheet(config, session=None) → SheetReadResult
"""

import logging
from urllib.parse import parse_qsl, urlencode, urlsplit, urlunsplit

import requests

from config.sheet_source import SheetSourceConfig
from processing.csv_parser import parse_csv
from processing.errors import SheetFetchError
from processing.record_normalizer import SheetReadResult, SheetRecord, read_sheet

logger = logging.getLogger(__name__)


# ═══════════════════════════════════════════════════════════════════════════
# Public API
# ═══════════════════════════════════════════════════════════════════════════

def build_csv_url(raw_url: str) -> str:
    """
    Derive the CSV export URL from a published-sheet URL.

    Examples:
        .../d/e/ID/pubhtml          → .../d/e/ID/pub?output=csv
        .../d/e/ID/                 → .../d/e/ID/pub?output=csv
        .../d/e/ID/pub?gid=0        → .../d/e/ID/pub?gid=0&output=csv
        .../d/e/ID/pub?output=tsv   → unchanged

    Args:
        raw_url: The configured published URL.

    Returns:
        URL string pointing at the CSV output.
    """
    parts = urlsplit(raw_url.strip())
    path = parts.path

    if path.endswith("/pubhtml"):
        path = path[: -len("/pubhtml")] + "/pub"
    if not path.endswith("/pub"):
        path = path.rstrip("/") + "/pub"

    query_pairs = parse_qsl(parts.query, keep_blank_values=True)
    if not any(key == "output" for key, _ in query_pairs):
        query_pairs.append(("output", "csv"))

    return urlunsplit(
        (parts.scheme, parts.netloc, path, urlencode(query_pairs), parts.fragment)
    )


def fetch_sheet_text(
    config: SheetSourceConfig,
    session: requests.Session | None = None,
) -> str:
    """
    Download the sheet's CSV text.

    Validates the configuration before any network activity.

    Args:
        config: Sheet source configuration.
        session: Optional requests session (tests inject a mock here).

    Returns:
        The response body as text.

    Raises:
        SheetConfigurationError: No published URL configured.
        SheetFetchError: Non-2xx status, timeout, or network failure.
    """
    config.validate()
    csv_url = build_csv_url(config.published_url)
    http = session or requests

    logger.info(f"Fetching sheet CSV from '{config.source_label}'")
    try:
        response = http.get(csv_url, timeout=config.timeout_seconds)
    except requests.Timeout as exc:
        logger.error(f"Sheet fetch timed out after {config.timeout_seconds}s")
        raise SheetFetchError(
            "Google Sheets publish error: request timed out",
            details=str(exc),
            is_timeout=True,
        ) from exc
    except requests.RequestException as exc:
        logger.error(f"Sheet fetch failed: {exc}")
        raise SheetFetchError(
            "Google Sheets publish error: network failure",
            details=str(exc),
        ) from exc

    if not response.ok:
        logger.error(
            f"Sheet fetch returned HTTP {response.status_code} {response.reason}"
        )
        raise SheetFetchError(
            f"Google Sheets publish error: {response.reason}",
            details=response.text[:500] if response.text else None,
            status_code=response.status_code,
        )

    # Published CSV is UTF-8; requests guesses ISO-8859-1 for text/csv
    # responses without a charset.
    response.encoding = "utf-8"
    return response.text


def fetch_sheet(
    config: SheetSourceConfig,
    session: requests.Session | None = None,
) -> SheetReadResult:
    """Download, parse and normalize the sheet in one step."""
    csv_text = fetch_sheet_text(config, session=session)
    return read_sheet(parse_csv(csv_text))


def fetch_sheet_records(
    config: SheetSourceConfig,
    session: requests.Session | None = None,
) -> list[SheetRecord]:
    """Download the sheet and return its header-keyed records."""
    return fetch_sheet(config, session=session).records
