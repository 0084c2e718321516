"""
Filter category configuration.

Categories are fixed, not data-driven.  Each one lists the sheet headers that
may hold its values, in priority order.  Every listed header contributes
tokens — a brand with both "Activity" and "Made For" populated gets tokens
from both.

Source of truth for the category ids used in saved selections and URLs.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class FilterCategory:
    """One filterable dimension of the catalog."""

    id: str
    label: str
    column_keys: tuple[str, ...]


FILTER_CATEGORIES: list[FilterCategory] = [
    FilterCategory(
        id="regions",
        label="Region",
        column_keys=("Region", "Regions", "Location", "Country"),
    ),
    FilterCategory(
        id="shipping",
        label="Shipping",
        column_keys=("Shipping", "Ships To", "Shipping Regions"),
    ),
    FilterCategory(
        id="activity",
        label="Activity",
        column_keys=("Activity", "Activities", "Made For"),
    ),
    FilterCategory(
        id="gender",
        label="Gender",
        column_keys=("Gender", "Genders"),
    ),
    FilterCategory(
        id="price",
        label="Price",
        column_keys=("Price", "Price Point"),
    ),
    FilterCategory(
        id="values",
        label="Values",
        column_keys=("Values", "Value Props", "Value Proposition"),
    ),
]

# id → category, for lookups by id
CATEGORY_MAP: dict[str, FilterCategory] = {
    category.id: category for category in FILTER_CATEGORIES
}

# Alternate ids accepted in selections (e.g. "region" for "regions").
CATEGORY_ID_ALIASES: dict[str, str] = {
    "region": "regions",
}
