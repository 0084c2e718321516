"""
Permissive CSV parser for published Google Sheets output.

Handles double-quoted fields, doubled-quote escaping (``""`` → ``"``), commas
and line breaks inside quoted fields, and ``\n`` / ``\r\n`` / ``\r`` line
terminators.  A final row without a trailing newline is kept.

Rows made up entirely of blank cells are dropped — except the very first row,
which is always kept so header detection can scan forward from it.

Malformed quoting never raises: characters are accumulated best-effort.

Public API:
    parse_csv(text) → list[list[str]]
"""

import logging

logger = logging.getLogger(__name__)

_QUOTE = '"'
_DELIMITER = ","


def parse_csv(text: str) -> list[list[str]]:
    """
    Split raw CSV text into rows of cell strings.

    Args:
        text: Raw CSV text (as downloaded; may start with a BOM).

    Returns:
        List of rows, each a list of cell strings.  Cells are NOT trimmed.
    """
    rows: list[list[str]] = []
    row: list[str] = []
    current: list[str] = []
    in_quotes = False

    index = 0
    length = len(text)
    while index < length:
        char = text[index]

        if char == _QUOTE:
            if in_quotes and index + 1 < length and text[index + 1] == _QUOTE:
                current.append(_QUOTE)
                index += 2
                continue
            in_quotes = not in_quotes
            index += 1
            continue

        if char == _DELIMITER and not in_quotes:
            row.append("".join(current))
            current = []
            index += 1
            continue

        if char in "\r\n" and not in_quotes:
            if char == "\r" and index + 1 < length and text[index + 1] == "\n":
                index += 1
            row.append("".join(current))
            rows.append(row)
            row = []
            current = []
            index += 1
            continue

        current.append(char)
        index += 1

    # Final row (no terminating newline, or the empty row after one)
    row.append("".join(current))
    rows.append(row)

    kept = [
        entry for position, entry in enumerate(rows)
        if position == 0 or _has_content(entry)
    ]

    logger.debug(
        f"Parsed CSV: {len(rows)} raw rows, {len(kept)} kept "
        f"({len(rows) - len(kept)} blank rows dropped)"
    )
    return kept


def _has_content(row: list[str]) -> bool:
    """True if at least one cell is non-blank after trimming."""
    return any(cell.strip() for cell in row)
