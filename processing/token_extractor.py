"""
Token extractor — splits free-text multi-value cells into filter tokens.

A cell like "Running, Yoga / Hiking" becomes three tokens.  Cells are split
on runs of newline, comma, slash, pipe, semicolon and ampersand.  Each
fragment is stripped of surrounding whitespace and hyphens.

Every token carries:
  - value: lowercase, internal whitespace collapsed — used for matching.
  - label: whitespace-collapsed original; ALL-CAPS input is title-cased
           ("TRAIL RUNNING" → "Trail Running"), anything else keeps its
           casing.

Every candidate column of a category contributes, not just the first one
that has a value.  Tokens are de-duplicated by value; when two fragments
share a value the later label wins, the earlier position is kept.

Public API:
    split_cell(value) → list[str]
    normalize_token(fragment) → str
    prettify_label(fragment) → str
    get_brand_tokens(brand, category_or_id) → list[FilterToken]
"""

import logging
import re
from dataclasses import dataclass

from config.filter_categories import CATEGORY_ID_ALIASES, CATEGORY_MAP, FilterCategory
from processing.brand_builder import Brand, resolve_column_value

logger = logging.getLogger(__name__)

_DELIMITERS = re.compile(r"[\n,/|;&]+")
_EDGE_CHARS = re.compile(r"^[\s-]+|[\s-]+$")
_WHITESPACE = re.compile(r"\s+")
_WORD_START = re.compile(r"\b\w")


@dataclass(frozen=True)
class FilterToken:
    """A selectable filter value: matching key plus display label."""

    value: str
    label: str


# Filter options and tokens share a shape.
FilterOption = FilterToken


# ═══════════════════════════════════════════════════════════════════════════
# Public API
# ═══════════════════════════════════════════════════════════════════════════

def split_cell(value: str) -> list[str]:
    """Split a multi-value cell into trimmed, non-empty fragments."""
    fragments = (_EDGE_CHARS.sub("", part) for part in _DELIMITERS.split(value))
    return [fragment for fragment in fragments if fragment]


def normalize_token(fragment: str) -> str:
    """Matching key: trimmed, lowercased, whitespace runs → single space."""
    return _WHITESPACE.sub(" ", fragment.strip().lower())


def prettify_label(fragment: str) -> str:
    """Display label: whitespace collapsed; ALL-CAPS re-cased to Title Case."""
    trimmed = _WHITESPACE.sub(" ", fragment.strip())
    if not trimmed:
        return ""
    if trimmed == trimmed.upper():
        return _capitalize_words(trimmed.lower())
    return trimmed


def get_brand_tokens(
    brand: Brand,
    category_or_id: FilterCategory | str,
) -> list[FilterToken]:
    """
    Collect a brand's tokens for one filter category.

    Args:
        brand: The brand whose raw columns are read.
        category_or_id: A FilterCategory or its id (aliases like "region"
            are accepted).

    Returns:
        De-duplicated tokens in first-seen order.

    Raises:
        KeyError: Unknown category id.
    """
    category = resolve_category(category_or_id)

    tokens: dict[str, str] = {}
    for column_key in category.column_keys:
        raw_value = resolve_column_value(brand.columns, column_key)
        if not raw_value:
            continue
        for fragment in split_cell(raw_value):
            normalized = normalize_token(fragment)
            if not normalized:
                continue
            tokens[normalized] = prettify_label(fragment)

    return [FilterToken(value=value, label=label) for value, label in tokens.items()]


def get_brand_token_values(
    brand: Brand,
    category_or_id: FilterCategory | str,
) -> set[str]:
    """Just the matching keys of get_brand_tokens()."""
    return {token.value for token in get_brand_tokens(brand, category_or_id)}


def resolve_category(category_or_id: FilterCategory | str) -> FilterCategory:
    """Return the FilterCategory for an id (or pass a category through)."""
    if isinstance(category_or_id, FilterCategory):
        return category_or_id
    category_id = CATEGORY_ID_ALIASES.get(category_or_id, category_or_id)
    return CATEGORY_MAP[category_id]


# ═══════════════════════════════════════════════════════════════════════════
# Internal helpers
# ═══════════════════════════════════════════════════════════════════════════

def _capitalize_words(value: str) -> str:
    """Upper-case the first character of every word, leave the rest alone."""
    return _WORD_START.sub(lambda match: match.group(0).upper(), value)
