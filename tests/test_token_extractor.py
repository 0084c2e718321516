"""
Tests for processing/token_extractor.py

Covers: cell splitting on every delimiter, hyphen/whitespace trimming,
normalized values, label prettifying (ALL-CAPS → Title Case), multi-column
contribution, case-insensitive column lookup, de-duplication, and category
lookup by id.
"""

import pytest

from config.filter_categories import CATEGORY_MAP, FilterCategory
from processing.brand_builder import Brand, build_brand
from processing.token_extractor import (
    FilterToken,
    get_brand_token_values,
    get_brand_tokens,
    normalize_token,
    prettify_label,
    split_cell,
)


# ---------------------------------------------------------------------------
# Helper
# ---------------------------------------------------------------------------

def _brand(**columns: str) -> Brand:
    record = {"Brand": "Test Brand"}
    record.update({key.replace("_", " "): value for key, value in columns.items()})
    return build_brand(record)


# ═══════════════════════════════════════════════════════════════════════════
# split_cell
# ═══════════════════════════════════════════════════════════════════════════

class TestSplitCell:
    """Delimiter splitting and fragment trimming."""

    @pytest.mark.parametrize("cell", [
        "a,b", "a/b", "a|b", "a;b", "a&b", "a\nb",
    ])
    def test_each_delimiter(self, cell):
        assert split_cell(cell) == ["a", "b"]

    def test_consecutive_delimiters_act_as_one(self):
        assert split_cell("a,,/ |b") == ["a", "b"]

    def test_mixed_delimiters(self):
        assert split_cell("Running, Yoga/Hiking") == ["Running", "Yoga", "Hiking"]

    def test_hyphens_and_spaces_trimmed(self):
        assert split_cell("- Running -\n-- Yoga") == ["Running", "Yoga"]

    def test_internal_hyphen_kept(self):
        assert split_cell("Eco-friendly") == ["Eco-friendly"]

    def test_empty_fragments_dropped(self):
        assert split_cell(" , - ,") == []


# ═══════════════════════════════════════════════════════════════════════════
# normalize / prettify
# ═══════════════════════════════════════════════════════════════════════════

class TestNormalizeToken:
    """Comparison values: lowercase, single spaces."""

    def test_lowercase_and_collapse(self):
        assert normalize_token("  Trail   Running ") == "trail running"

    def test_tabs_collapsed(self):
        assert normalize_token("Trail\tRunning") == "trail running"


class TestPrettifyLabel:
    """Display labels: only ALL-CAPS text is re-cased."""

    def test_all_caps_title_cased(self):
        assert prettify_label("TRAIL RUNNING") == "Trail Running"

    def test_mixed_case_preserved(self):
        assert prettify_label("eBay exclusive") == "eBay exclusive"

    def test_lowercase_preserved(self):
        assert prettify_label("yoga") == "yoga"

    def test_whitespace_collapsed(self):
        assert prettify_label("  Trail    Running ") == "Trail Running"

    def test_empty(self):
        assert prettify_label("   ") == ""

    def test_all_caps_with_digits(self):
        assert prettify_label("UNDER $50") == "Under $50"


# ═══════════════════════════════════════════════════════════════════════════
# get_brand_tokens
# ═══════════════════════════════════════════════════════════════════════════

class TestGetBrandTokens:
    """Tokens from every aliased column of a category."""

    def test_activity_example(self):
        brand = _brand(Activity="Running, Yoga/Hiking")
        tokens = get_brand_tokens(brand, "activity")
        assert {token.value for token in tokens} == {"running", "yoga", "hiking"}
        assert [token.label for token in tokens] == ["Running", "Yoga", "Hiking"]

    def test_accepts_category_object(self):
        brand = _brand(Activity="Running")
        tokens = get_brand_tokens(brand, CATEGORY_MAP["activity"])
        assert tokens == [FilterToken(value="running", label="Running")]

    def test_all_alias_columns_contribute(self):
        brand = _brand(Activity="Running", Made_For="Yoga")
        assert get_brand_token_values(brand, "activity") == {"running", "yoga"}

    def test_case_insensitive_column_lookup(self):
        brand = build_brand({"Brand": "Acme", "ACTIVITY": "Climbing"})
        assert get_brand_token_values(brand, "activity") == {"climbing"}

    def test_duplicates_last_label_wins(self):
        """Same value in two columns: one token, labelled by the later column."""
        brand = _brand(Activity="running", Activities="Running")
        tokens = get_brand_tokens(brand, "activity")
        assert tokens == [FilterToken(value="running", label="Running")]

    def test_all_caps_cell(self):
        brand = _brand(Gender="WOMEN & MEN")
        tokens = get_brand_tokens(brand, "gender")
        assert [token.label for token in tokens] == ["Women", "Men"]
        assert [token.value for token in tokens] == ["women", "men"]

    def test_no_columns_no_tokens(self):
        assert get_brand_tokens(_brand(), "values") == []

    def test_blank_cell_no_tokens(self):
        assert get_brand_tokens(_brand(Price=""), "price") == []

    def test_region_alias_id(self):
        brand = _brand(Region="EU")
        assert get_brand_token_values(brand, "region") == {"eu"}
        assert get_brand_token_values(brand, "regions") == {"eu"}

    def test_unknown_category_raises(self):
        with pytest.raises(KeyError):
            get_brand_tokens(_brand(), "colour")

    def test_custom_category(self):
        category = FilterCategory(id="fit", label="Fit", column_keys=("Fit",))
        brand = _brand(Fit="Relaxed; Slim")
        assert get_brand_token_values(brand, category) == {"relaxed", "slim"}
