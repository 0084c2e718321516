"""
Brand builder — derives canonical Brand entities from sheet records.

Field resolution uses the ordered alias tables in config/brand_fields.py.
For each candidate header the exact key is tried first, then a
case-insensitive scan of the record's keys.  The first non-empty value wins.

Rules:
  - No resolvable name → no Brand (silently dropped, not an error).
  - slug = slugify(explicit Slug/ID column, else the name).
  - id = explicit ID column, else the slug.
  - Asset paths are synthesised from the slug, never read from the sheet.

slugify() is deterministic except when the input has no ASCII letters or
digits at all; then a random UUID is substituted, so that row's slug can
change between ingestion cycles.

Public API:
    slugify(value) → str
    resolve_column_value(record, key) → str
    pick_first(record, candidates) → str | None
    build_brand(record) → Brand | None
    build_brands(records) → list[Brand]
"""

import logging
import re
import uuid
from collections.abc import Iterable, Mapping
from dataclasses import asdict, dataclass, field

from config.brand_fields import (
    ASSET_EXTENSION,
    ICON_BASE,
    ID_FIELDS,
    IMAGE_BASE,
    NAME_FIELDS,
    SLUG_FIELDS,
    TAGLINE_FIELDS,
)

logger = logging.getLogger(__name__)

_NON_ALPHANUMERIC = re.compile(r"[^a-z0-9]+")


# ═══════════════════════════════════════════════════════════════════════════
# Data classes
# ═══════════════════════════════════════════════════════════════════════════

@dataclass(frozen=True)
class BrandAssets:
    """Image references derived from the slug (not validated on disk)."""

    icon: str
    background: str


@dataclass(frozen=True)
class Brand:
    """A brand as shown in the catalog."""

    id: str
    slug: str
    name: str
    tagline: str | None
    assets: BrandAssets
    columns: dict[str, str] = field(default_factory=dict, hash=False)
    """The full original record, keyed by the exact sheet header."""

    def to_dict(self) -> dict:
        return asdict(self)


# ═══════════════════════════════════════════════════════════════════════════
# Public API
# ═══════════════════════════════════════════════════════════════════════════

def slugify(value: str) -> str:
    """
    Make a URL-safe slug: lowercase, non-alphanumeric runs → "-", no edge "-".

    Falls back to a random UUID when nothing alphanumeric remains.
    """
    normalized = _NON_ALPHANUMERIC.sub("-", value.lower().strip()).strip("-")
    if normalized:
        return normalized

    fallback = str(uuid.uuid4())
    logger.warning(
        f"Slug source {value!r} has no usable characters — "
        f"using random slug '{fallback}'"
    )
    return fallback


def resolve_column_value(record: Mapping[str, str], key: str) -> str:
    """
    Look up *key* in *record*: exact header first, then case-insensitive.

    Returns "" when no header matches.  With several headers differing only
    in case, the first non-empty one in record order wins.
    """
    value = record.get(key)
    if value:
        return value

    lower_key = key.lower()
    for header, cell in record.items():
        if cell and header.lower() == lower_key:
            return cell
    return ""


def pick_first(record: Mapping[str, str], candidates: Iterable[str]) -> str | None:
    """First trimmed, non-empty value among the candidate headers."""
    for candidate in candidates:
        value = resolve_column_value(record, candidate)
        if value and value.strip():
            return value.strip()
    return None


def build_brand(record: Mapping[str, str]) -> Brand | None:
    """
    Build a Brand from one sheet record.

    Args:
        record: Header-keyed record from the record normalizer.

    Returns:
        Brand, or None if the record has no name.
    """
    name = pick_first(record, NAME_FIELDS)
    if not name:
        return None

    slug = slugify(pick_first(record, SLUG_FIELDS) or name)
    brand_id = pick_first(record, ID_FIELDS) or slug

    return Brand(
        id=brand_id,
        slug=slug,
        name=name,
        tagline=pick_first(record, TAGLINE_FIELDS),
        assets=BrandAssets(
            icon=f"{ICON_BASE}/{slug}.{ASSET_EXTENSION}",
            background=f"{IMAGE_BASE}/{slug}.{ASSET_EXTENSION}",
        ),
        columns=dict(record),
    )


def build_brands(records: Iterable[Mapping[str, str]]) -> list[Brand]:
    """
    Build Brands for every record that has a name, preserving sheet order.

    Duplicate slugs are kept (lookup by slug returns the first); they are
    only reported in the log.
    """
    brands: list[Brand] = []
    dropped = 0
    seen_slugs: set[str] = set()

    for index, record in enumerate(records):
        brand = build_brand(record)
        if brand is None:
            dropped += 1
            logger.debug(f"Record {index} has no brand name — skipped")
            continue
        if brand.slug in seen_slugs:
            logger.debug(
                f"Duplicate slug '{brand.slug}' at record {index} — "
                "lookups will return the earlier brand"
            )
        seen_slugs.add(brand.slug)
        brands.append(brand)

    logger.info(
        f"Built {len(brands)} brands ({dropped} records without a name skipped)"
    )
    return brands
