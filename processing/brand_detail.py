"""
Brand detail enrichment for the per-brand page.

Promotes extra sheet columns (website, founder, materials, gallery…) into a
BrandDetail using the alias table in config/brand_fields.py.  Missing values
stay None here; the page shows "Data missing:<Label>" placeholders via
value_or_missing().

Public API:
    map_detail(brand) → BrandDetail
    first_missing_required(detail) → str | None
    value_or_missing(value, label) → str
    build_at_a_glance(detail) → list[tuple[str, str]]
    build_json_ld(detail) → dict
    page_title(detail) → str
    page_description(detail) → str
"""

import logging
import re
from dataclasses import dataclass, field

from config.brand_fields import (
    AT_A_GLANCE_FIELDS,
    DETAIL_FIELD_MAP,
    MISSING_DATA_PREFIX,
    REQUIRED_DETAIL_FIELDS,
    SITE_TITLE,
)
from processing.brand_builder import Brand, pick_first

logger = logging.getLogger(__name__)

_GALLERY_SEPARATORS = re.compile(r"[,\n]")


@dataclass
class BrandDetail:
    """Everything the detail page shows about one brand."""

    brand: str
    slug: str
    region: str | None = None
    shipping_locations: str | None = None
    activities: str | None = None
    genders: str | None = None
    price: str | None = None
    values: str | None = None
    featured: str | None = None
    tagline: str | None = None
    description: str | None = None
    website: str | None = None
    instagram: str | None = None
    year_founded: str | None = None
    founder: str | None = None
    country_of_manufacture: str | None = None
    size_range: str | None = None
    materials: str | None = None
    gallery_images: list[str] = field(default_factory=list)


def map_detail(brand: Brand) -> BrandDetail:
    """Resolve every detail field from the brand's raw columns."""
    columns = brand.columns

    def get(field_name: str) -> str | None:
        return pick_first(columns, DETAIL_FIELD_MAP[field_name])

    return BrandDetail(
        brand=get("brand") or brand.name or f"{MISSING_DATA_PREFIX}Brand",
        slug=brand.slug,
        region=get("region"),
        shipping_locations=get("shipping_locations"),
        activities=get("activities"),
        genders=get("genders"),
        price=get("price"),
        values=get("values"),
        featured=get("featured"),
        tagline=get("tagline") or brand.tagline,
        description=get("description"),
        website=get("website"),
        instagram=get("instagram"),
        year_founded=get("year_founded"),
        founder=get("founder"),
        country_of_manufacture=get("country_of_manufacture"),
        size_range=get("size_range"),
        materials=get("materials"),
        gallery_images=parse_gallery(get("gallery_images")),
    )


def parse_gallery(raw: str | None) -> list[str]:
    """Split a gallery cell into image URLs (comma or newline separated)."""
    if not raw:
        return []
    entries = (entry.strip() for entry in _GALLERY_SEPARATORS.split(raw))
    return [entry for entry in entries if entry]


def first_missing_required(detail: BrandDetail) -> str | None:
    """Name of the first required field that is empty, or None."""
    for field_name in REQUIRED_DETAIL_FIELDS:
        if not getattr(detail, field_name):
            return field_name
    return None


def value_or_missing(value: str | None, label: str) -> str:
    if value and value.strip():
        return value
    return f"{MISSING_DATA_PREFIX}{label}"


def build_at_a_glance(detail: BrandDetail) -> list[tuple[str, str]]:
    """(label, value) pairs for the "At a glance" panel, placeholders included."""
    return [
        (label, value_or_missing(getattr(detail, field_name), label))
        for label, field_name in AT_A_GLANCE_FIELDS
    ]


def build_json_ld(detail: BrandDetail) -> dict:
    """schema.org Organization structured data for the page head."""
    json_ld = {
        "@context": "https://schema.org",
        "@type": "Organization",
        "name": detail.brand,
        "url": detail.website,
        "description": detail.description or detail.tagline,
        "sameAs": [detail.instagram] if detail.instagram else None,
        "brand": detail.brand,
    }
    return {key: value for key, value in json_ld.items() if value is not None}


def page_title(detail: BrandDetail) -> str:
    return f"{detail.brand or detail.slug} | {SITE_TITLE}"


def page_description(detail: BrandDetail) -> str:
    return detail.tagline or detail.description or f"{MISSING_DATA_PREFIX}Description"
