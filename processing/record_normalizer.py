"""
Record normalizer — turns parsed CSV rows into header-keyed records.

Steps:
  1. Find the header row: the first row with at least one non-empty cell
     after sanitization (BOM stripped, whitespace trimmed).
  2. Sanitize every header.  Headers that sanitize to "" are dropped, and so
     is their column in every record.
  3. Zip each following row against the headers by position.  Missing cells
     become "", extra cells are ignored.
  4. Drop rows whose record values are all blank after sanitization.

Header names keep their original casing.  No fuzzy matching happens here —
alias resolution is the brand builder's job.

Public API:
    sanitize(value) → str
    read_sheet(rows) → SheetReadResult
    normalize_records(rows) → list[SheetRecord]
"""

import logging
from dataclasses import dataclass, field

logger = logging.getLogger(__name__)

# A record maps the sanitized header text to a trimmed cell value.
SheetRecord = dict[str, str]

_BOM = "\ufeff"


# ═══════════════════════════════════════════════════════════════════════════
# Data class
# ═══════════════════════════════════════════════════════════════════════════

@dataclass
class SheetReadResult:
    """Records plus the structural information found while reading them."""

    records: list[SheetRecord] = field(default_factory=list)
    headers: list[str] = field(default_factory=list)
    """Sanitized, non-empty headers in sheet order (duplicates kept once)."""

    header_row_index: int = -1
    """0-based index of the header row in the parsed rows, -1 if none."""

    skipped_rows: list[int] = field(default_factory=list)
    """0-based indexes of data rows dropped because every cell was blank."""


# ═══════════════════════════════════════════════════════════════════════════
# Public API
# ═══════════════════════════════════════════════════════════════════════════

def sanitize(value: str | None) -> str:
    """Strip a leading byte-order mark, then surrounding whitespace."""
    if not value:
        return ""
    if value.startswith(_BOM):
        value = value[len(_BOM):]
    return value.strip()


def read_sheet(rows: list[list[str]]) -> SheetReadResult:
    """
    Detect the header row and build one record per non-blank data row.

    An empty sheet, or one where no row has any content, yields an empty
    result rather than an error.

    Args:
        rows: Output of csv_parser.parse_csv().

    Returns:
        SheetReadResult with records, headers and skipped row indexes.
    """
    result = SheetReadResult()

    header_index = _find_header_row(rows)
    if header_index == -1:
        logger.info("No header row found — sheet is empty")
        return result

    result.header_row_index = header_index
    headers = [sanitize(cell) for cell in rows[header_index]]
    result.headers = list(dict.fromkeys(header for header in headers if header))

    dropped_columns = len(headers) - sum(1 for header in headers if header)
    if dropped_columns:
        logger.debug(f"Dropping {dropped_columns} column(s) with blank headers")

    for row_index in range(header_index + 1, len(rows)):
        cells = [sanitize(cell) for cell in rows[row_index]]

        record: SheetRecord = {}
        for position, header in enumerate(headers):
            if not header:
                continue
            record[header] = cells[position] if position < len(cells) else ""

        # Content only under blank headers (or past the last header) counts
        # as blank too: the record would carry no values.
        if not any(record.values()):
            result.skipped_rows.append(row_index)
            continue
        result.records.append(record)

    logger.info(
        f"Header found at row {header_index} with {len(result.headers)} columns; "
        f"{len(result.records)} records, {len(result.skipped_rows)} blank rows skipped"
    )
    return result


def normalize_records(rows: list[list[str]]) -> list[SheetRecord]:
    """Shortcut for read_sheet(rows).records."""
    return read_sheet(rows).records


# ═══════════════════════════════════════════════════════════════════════════
# Internal helpers
# ═══════════════════════════════════════════════════════════════════════════

def _find_header_row(rows: list[list[str]]) -> int:
    """Index of the first row with any non-empty sanitized cell, or -1."""
    for index, row in enumerate(rows):
        if any(sanitize(cell) for cell in row):
            return index
    return -1
