"""
Listing card data — what each brand card in the grid shows.

  - price level: number of "$" signs in the Price cell, else a positive
    number rounded half-up; clamped to 1..6, and 0 when there is nothing
    usable ("abc", "", "0").
  - shipping tag: the raw "Ships To" / "Shipping" cell, if any.
  - made for: activity token labels joined with ", "; when the brand has no
    activity tokens, the raw "Made For" / "Activities" cell.
  - images: the slug-derived icon and background, falling back to the
    placeholder images when the brand's own file is not on disk.

Public API:
    price_level(raw) → int
    shipping_tag(brand) → str | None
    made_for(brand) → str
    resolve_asset(path, placeholder, root=ASSET_ROOT) → Path | None
    build_card(brand) → BrandCard
"""

import logging
import math
from dataclasses import dataclass
from pathlib import Path

from config.brand_fields import (
    ASSET_ROOT,
    CARD_TAGLINE_FALLBACK,
    MADE_FOR_FIELDS,
    MAX_PRICE_LEVEL,
    PLACEHOLDER_ICON,
    PLACEHOLDER_IMAGE,
    PRICE_FIELDS,
    SHIPPING_TAG_FIELDS,
)
from processing.brand_builder import Brand, pick_first
from processing.token_extractor import get_brand_tokens

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BrandCard:
    """Display-ready values for one listing card."""

    name: str
    slug: str
    tagline: str
    price_level: int
    shipping: str | None
    made_for: str
    icon: Path | None
    background: Path | None


# ═══════════════════════════════════════════════════════════════════════════
# Public API
# ═══════════════════════════════════════════════════════════════════════════

def price_level(raw: str | None) -> int:
    """
    Turn a Price cell into a 0–6 level.

    Examples:
        "$$$" → 3, "$$$$$$$$" → 6, "2.5" → 3, "9" → 6, "abc" → 0, "" → 0
    """
    if not raw:
        return 0

    dollar_count = raw.count("$")
    if dollar_count > 0:
        return _clamp(dollar_count)

    try:
        numeric = float(raw)
    except ValueError:
        return 0
    if not math.isfinite(numeric) or numeric <= 0:
        return 0
    return _clamp(math.floor(numeric + 0.5))


def shipping_tag(brand: Brand) -> str | None:
    return pick_first(brand.columns, SHIPPING_TAG_FIELDS)


def made_for(brand: Brand) -> str:
    """Activity labels, or the raw Made For / Activities cell, or ""."""
    tokens = get_brand_tokens(brand, "activity")
    if tokens:
        return ", ".join(token.label for token in tokens)
    return pick_first(brand.columns, MADE_FOR_FIELDS) or ""


def resolve_asset(
    path: str,
    placeholder: str,
    root: Path | str = ASSET_ROOT,
) -> Path | None:
    """
    Locate an asset under *root*, falling back to *placeholder*.

    Returns None when neither file exists.
    """
    root = Path(root)
    for candidate in (path, placeholder):
        full_path = root / candidate
        if full_path.is_file():
            return full_path
    logger.debug(f"No asset or placeholder found for '{path}' under '{root}'")
    return None


def build_card(brand: Brand, root: Path | str = ASSET_ROOT) -> BrandCard:
    return BrandCard(
        name=brand.name,
        slug=brand.slug,
        tagline=brand.tagline or CARD_TAGLINE_FALLBACK,
        price_level=price_level(pick_first(brand.columns, PRICE_FIELDS)),
        shipping=shipping_tag(brand),
        made_for=made_for(brand),
        icon=resolve_asset(brand.assets.icon, PLACEHOLDER_ICON, root),
        background=resolve_asset(brand.assets.background, PLACEHOLDER_IMAGE, root),
    )


# ═══════════════════════════════════════════════════════════════════════════
# Internal helpers
# ═══════════════════════════════════════════════════════════════════════════

def _clamp(level: int) -> int:
    return min(MAX_PRICE_LEVEL, max(1, level))
