"""
Catalog — the boundary the UI talks to.

One ingestion cycle = fetch → parse → normalize → build brands.  Every call
runs a fresh cycle; caching over the revalidation window is the caller's job
(app.py wraps these calls in st.cache_data).  A failed fetch raises and
nothing partial is returned.

Public API:
    BrandCatalog(config, session=None)
        .get_brands() → list[Brand]
        .get_brand_by_slug(slug) → Brand | None
        .get_brand_detail(slug) → BrandDetail | None
        .debug_summary() → dict
    get_brand_by_slug(brands, slug) → Brand | None
    brands_to_dataframe(brands) → pd.DataFrame
"""

import logging
from collections.abc import Iterable

import pandas as pd
import requests

from config.sheet_source import SheetSourceConfig
from processing.brand_builder import Brand, build_brands
from processing.brand_detail import BrandDetail, map_detail
from processing.sheet_fetcher import fetch_sheet

logger = logging.getLogger(__name__)

# Number of brands included in the debug summary sample
DEBUG_SAMPLE_SIZE: int = 3

_BASE_COLUMNS: list[str] = ["id", "slug", "name", "tagline", "icon", "background"]


class BrandCatalog:
    """Reads brands from the configured sheet."""

    def __init__(
        self,
        config: SheetSourceConfig,
        session: requests.Session | None = None,
    ):
        self.config = config
        self.session = session

    def get_brands(self) -> list[Brand]:
        """The full, current brand collection (one fetch)."""
        return build_brands(fetch_sheet(self.config, session=self.session).records)

    def get_brand_by_slug(self, slug: str) -> Brand | None:
        return get_brand_by_slug(self.get_brands(), slug)

    def get_brand_detail(self, slug: str) -> BrandDetail | None:
        brand = self.get_brand_by_slug(slug)
        if brand is None:
            return None
        return map_detail(brand)

    def debug_summary(self) -> dict:
        """
        Inspect what the sheet currently yields.

        Returns:
            {"count", "sample", "headers", "first_row"} — sample holds the
            first few brands as plain dicts, first_row the first raw record.
        """
        sheet = fetch_sheet(self.config, session=self.session)
        brands = build_brands(sheet.records)
        return {
            "count": len(brands),
            "sample": [brand.to_dict() for brand in brands[:DEBUG_SAMPLE_SIZE]],
            "headers": list(sheet.records[0].keys()) if sheet.records else [],
            "first_row": sheet.records[0] if sheet.records else None,
        }


def get_brand_by_slug(brands: Iterable[Brand], slug: str) -> Brand | None:
    """Exact slug lookup; with duplicate slugs the first brand wins."""
    for brand in brands:
        if brand.slug == slug:
            return brand
    logger.info(f"No brand with slug '{slug}'")
    return None


def brands_to_dataframe(brands: Iterable[Brand]) -> pd.DataFrame:
    """
    Flatten brands into a table: canonical fields first, then raw columns.

    Raw columns appear in first-seen order across all brands.  A raw column
    whose name clashes with a canonical field is left out.
    """
    rows: list[dict] = []
    raw_columns: dict[str, None] = {}

    for brand in brands:
        row = {
            "id": brand.id,
            "slug": brand.slug,
            "name": brand.name,
            "tagline": brand.tagline,
            "icon": brand.assets.icon,
            "background": brand.assets.background,
        }
        for header, value in brand.columns.items():
            if header in row:
                continue
            raw_columns.setdefault(header, None)
            row[header] = value
        rows.append(row)

    return pd.DataFrame(rows, columns=_BASE_COLUMNS + list(raw_columns))
