"""
Filter engine — option catalog and selection matching.

build_filter_options() gathers every token each brand has, per category,
into a sorted list of selectable options.  brand_matches_selected() decides
whether a brand passes a selection:

  - AND across categories: every category with a non-empty selection must
    be satisfied.
  - OR within a category: sharing any one selected value is enough.
  - An empty (or missing) selection for a category imposes no constraint.
  - A brand with no tokens in a constrained category fails it.

Everything here is a pure function of its inputs.

Public API:
    create_empty_selection() → SelectedFilters
    build_filter_options(brands, categories=FILTER_CATEGORIES) → FilterOptionsMap
    brand_matches_selected(brand, selected) → bool
    filter_brands(brands, selected) → list[Brand]
"""

import logging
from collections.abc import Iterable, Mapping, Sequence

from config.filter_categories import CATEGORY_ID_ALIASES, FILTER_CATEGORIES, FilterCategory
from processing.brand_builder import Brand
from processing.token_extractor import FilterOption, get_brand_token_values, get_brand_tokens
from utils.text_sort import label_sort_key

logger = logging.getLogger(__name__)

FilterOptionsMap = dict[str, list[FilterOption]]
SelectedFilters = Mapping[str, Iterable[str]]


# ═══════════════════════════════════════════════════════════════════════════
# Public API
# ═══════════════════════════════════════════════════════════════════════════

def create_empty_selection(
    categories: Sequence[FilterCategory] = FILTER_CATEGORIES,
) -> dict[str, list[str]]:
    """A selection with every category present and nothing chosen."""
    return {category.id: [] for category in categories}


def build_filter_options(
    brands: Iterable[Brand],
    categories: Sequence[FilterCategory] = FILTER_CATEGORIES,
) -> FilterOptionsMap:
    """
    Build the selectable options for every category.

    Options are the union of all brands' tokens, de-duplicated by value (the
    last label seen wins) and sorted by label.  Categories without any
    tokens still appear, with an empty list.

    Args:
        brands: The current brand collection.
        categories: Categories to build options for.

    Returns:
        Mapping of category id → ordered list of FilterOption.
    """
    option_maps: dict[str, dict[str, str]] = {
        category.id: {} for category in categories
    }

    for brand in brands:
        for category in categories:
            for token in get_brand_tokens(brand, category):
                option_maps[category.id][token.value] = token.label

    options: FilterOptionsMap = {}
    for category in categories:
        entries = [
            FilterOption(value=value, label=label)
            for value, label in option_maps[category.id].items()
        ]
        # value breaks ties so the order never depends on brand order
        entries.sort(key=lambda option: (label_sort_key(option.label), option.value))
        options[category.id] = entries

    logger.debug(
        "Built filter options: "
        + ", ".join(f"{category_id}={len(opts)}" for category_id, opts in options.items())
    )
    return options


def brand_matches_selected(brand: Brand, selected: SelectedFilters) -> bool:
    """
    True if *brand* satisfies every non-empty category selection.

    Selections are keyed by category id; unknown ids are ignored.  An empty
    mapping matches every brand.
    """
    for category_id, values in _active_selections(selected).items():
        brand_values = get_brand_token_values(brand, category_id)
        if brand_values.isdisjoint(values):
            return False
    return True


def filter_brands(brands: Iterable[Brand], selected: SelectedFilters) -> list[Brand]:
    """Brands matching *selected*, in their original order."""
    active = _active_selections(selected)
    if not active:
        return list(brands)
    return [brand for brand in brands if brand_matches_selected(brand, active)]


# ═══════════════════════════════════════════════════════════════════════════
# Internal helpers
# ═══════════════════════════════════════════════════════════════════════════

def _active_selections(selected: SelectedFilters) -> dict[str, set[str]]:
    """
    Canonical ids → non-empty value sets; unknown ids dropped.

    Values from an id and its alias (e.g. "region" and "regions") are merged.
    """
    known_ids = {category.id for category in FILTER_CATEGORIES}
    active: dict[str, set[str]] = {}

    for raw_id, values in selected.items():
        category_id = CATEGORY_ID_ALIASES.get(raw_id, raw_id)
        if category_id not in known_ids:
            logger.debug(f"Ignoring selection for unknown filter '{raw_id}'")
            continue
        chosen = {value for value in (values or []) if value}
        if chosen:
            active.setdefault(category_id, set()).update(chosen)

    return active
