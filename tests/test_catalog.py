"""
Tests for processing/catalog.py

Covers: get_brands over a mocked sheet, slug lookup (first match wins,
not-found), detail lookup, the debug summary, failures propagating without
partial data, and the DataFrame view.
"""

from unittest.mock import MagicMock

import pandas as pd
import pytest

from config.sheet_source import SheetSourceConfig
from processing.brand_builder import build_brand
from processing.catalog import BrandCatalog, brands_to_dataframe, get_brand_by_slug
from processing.errors import SheetConfigurationError, SheetFetchError

SHEET_CSV = (
    "Brand Name,Slug,Region,Activity,Tagline\r\n"
    'Acme,acme,EU,"Running, Yoga",Fast gear\r\n'
    ",,US,Hiking,No name here\r\n"
    "Bolt,,US,Hiking,\r\n"
    "Acme Two,acme,UK,Climbing,Shadowed\r\n"
    "Cora,cora,EU,Yoga,\r\n"
)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _catalog(text: str = SHEET_CSV, status_code: int = 200) -> BrandCatalog:
    response = MagicMock()
    response.text = text
    response.status_code = status_code
    response.reason = "OK" if status_code < 400 else "Bad Gateway"
    response.ok = status_code < 400
    session = MagicMock()
    session.get.return_value = response
    return BrandCatalog(
        SheetSourceConfig(published_url="https://docs.google.com/x/pubhtml"),
        session=session,
    )


# ═══════════════════════════════════════════════════════════════════════════
# BrandCatalog
# ═══════════════════════════════════════════════════════════════════════════

class TestGetBrands:
    """Full ingestion cycle through a mocked session."""

    def test_nameless_rows_dropped(self):
        names = [brand.name for brand in _catalog().get_brands()]
        assert names == ["Acme", "Bolt", "Acme Two", "Cora"]

    def test_slug_derived_when_blank(self):
        brands = _catalog().get_brands()
        assert brands[1].slug == "bolt"

    def test_fresh_fetch_per_call(self):
        """The catalog does not cache; every call fetches again."""
        catalog = _catalog()
        catalog.get_brands()
        catalog.get_brands()
        assert catalog.session.get.call_count == 2

    def test_empty_sheet(self):
        assert _catalog("").get_brands() == []

    def test_fetch_failure_raises(self):
        with pytest.raises(SheetFetchError):
            _catalog(status_code=502).get_brands()

    def test_missing_config_raises(self):
        catalog = BrandCatalog(SheetSourceConfig(published_url=None))
        with pytest.raises(SheetConfigurationError):
            catalog.get_brands()


class TestSlugLookup:
    """Lookup by slug and the detail built from it."""

    def test_found(self):
        brand = _catalog().get_brand_by_slug("cora")
        assert brand is not None
        assert brand.name == "Cora"

    def test_duplicate_slug_first_wins(self):
        brand = _catalog().get_brand_by_slug("acme")
        assert brand.name == "Acme"
        assert brand.tagline == "Fast gear"

    def test_not_found(self):
        assert _catalog().get_brand_by_slug("missing") is None

    def test_exact_match_only(self):
        """Slug lookup is case-sensitive."""
        assert _catalog().get_brand_by_slug("ACME") is None

    def test_detail(self):
        detail = _catalog().get_brand_detail("acme")
        assert detail.region == "EU"
        assert detail.activities == "Running, Yoga"

    def test_detail_not_found(self):
        assert _catalog().get_brand_detail("nope") is None


class TestDebugSummary:
    """Diagnostic summary of the current sheet."""

    def test_summary(self):
        summary = _catalog().debug_summary()
        assert summary["count"] == 4
        assert [entry["name"] for entry in summary["sample"]] == ["Acme", "Bolt", "Acme Two"]
        assert summary["headers"] == ["Brand Name", "Slug", "Region", "Activity", "Tagline"]
        assert summary["first_row"]["Brand Name"] == "Acme"

    def test_summary_empty_sheet(self):
        summary = _catalog("").debug_summary()
        assert summary == {"count": 0, "sample": [], "headers": [], "first_row": None}


# ═══════════════════════════════════════════════════════════════════════════
# Module-level helpers
# ═══════════════════════════════════════════════════════════════════════════

class TestHelpers:
    """Module-level helpers that work on an existing brand list."""

    def test_get_brand_by_slug_on_list(self):
        brands = [build_brand({"Brand": "A"}), build_brand({"Brand": "B"})]
        assert get_brand_by_slug(brands, "b").name == "B"
        assert get_brand_by_slug([], "b") is None

    def test_brands_to_dataframe(self):
        brands = [
            build_brand({"Brand": "A", "Region": "EU"}),
            build_brand({"Brand": "B", "Price": "$$"}),
        ]
        df = brands_to_dataframe(brands)
        assert list(df.columns) == [
            "id", "slug", "name", "tagline", "icon", "background",
            "Brand", "Region", "Price",
        ]
        assert df.at[0, "Region"] == "EU"
        assert pd.isna(df.at[0, "Price"])
        assert df.at[1, "icon"] == "brand-assets/icons/b.png"

    def test_brands_to_dataframe_empty(self):
        df = brands_to_dataframe([])
        assert df.empty
        assert list(df.columns)[:3] == ["id", "slug", "name"]
