"""
Streamlit entry point — The Active Collection brand catalog.

Two views:
  1. Listing — brand cards with sidebar filters (Region, Shipping, Activity,
     Gender, Price, Values).
  2. Detail — one brand, selected with the ``?slug=`` query parameter.

Brands are re-read from the published sheet at most once per revalidation
window (st.cache_data ttl).  A failed fetch shows an error instead of data.

Contains NO business logic — only calls processing modules and displays results.
"""

import json
import logging

import streamlit as st

from config.brand_fields import CARD_MADE_FOR_FALLBACK, MAX_PRICE_LEVEL
from config.filter_categories import CATEGORY_MAP
from config.sheet_source import PUBLISHED_URL_ENV, SheetSourceConfig
from processing.brand_builder import Brand
from processing.brand_card import BrandCard, build_card
from processing.brand_detail import (
    build_at_a_glance,
    build_json_ld,
    first_missing_required,
    map_detail,
    page_description,
    page_title,
    value_or_missing,
)
from processing.catalog import BrandCatalog, brands_to_dataframe, get_brand_by_slug
from processing.errors import CatalogError
from processing.filter_engine import build_filter_options, filter_brands

logger = logging.getLogger(__name__)


# ═══════════════════════════════════════════════════════════════════════════
# Page configuration
# ═══════════════════════════════════════════════════════════════════════════

st.set_page_config(
    page_title="The Active Collection",
    page_icon="🏃",
    layout="wide",
    initial_sidebar_state="expanded",
)


# ═══════════════════════════════════════════════════════════════════════════
# Data loading
# ═══════════════════════════════════════════════════════════════════════════

def _load_config() -> SheetSourceConfig:
    """Streamlit secrets first, then the environment, for the published URL."""
    secrets = {PUBLISHED_URL_ENV: st.secrets.get(PUBLISHED_URL_ENV)} if _has_secrets() else None
    return SheetSourceConfig.from_env(secrets=secrets)


def _has_secrets() -> bool:
    try:
        return len(st.secrets) > 0
    except FileNotFoundError:
        return False


sheet_config = _load_config()


@st.cache_data(ttl=sheet_config.revalidate_seconds, show_spinner="Loading brands…")
def _load_brands(_config: SheetSourceConfig, source_label: str) -> list[Brand]:
    """One ingestion cycle, cached per source for the revalidation window."""
    return BrandCatalog(_config).get_brands()


try:
    brands = _load_brands(sheet_config, sheet_config.source_label)
except CatalogError as exc:
    logger.error(f"Ingestion failed: {exc.message}")
    st.error(f"Could not load brands: {exc.message}")
    st.stop()


# ═══════════════════════════════════════════════════════════════════════════
# Detail view
# ═══════════════════════════════════════════════════════════════════════════

def _render_detail(brand: Brand) -> None:
    detail = map_detail(brand)

    missing = first_missing_required(detail)
    if missing:
        st.write(f"Data missing:{missing}")
        return

    st.markdown("[← All brands](?)")
    st.title(detail.brand)
    st.caption(page_title(detail))

    hero = detail.gallery_images[:3]
    if hero:
        st.image(hero, width=320)

    st.subheader(value_or_missing(detail.tagline, "Tagline"))
    link_cols = st.columns(2)
    if detail.website:
        link_cols[0].link_button("Website link", detail.website)
    else:
        link_cols[0].write("Data missing:Website")
    if detail.instagram:
        link_cols[1].link_button("Instagram link", detail.instagram)

    st.header("Blurb/Company description")
    st.write(value_or_missing(detail.description, "Description"))

    st.header("At a glance")
    glance_cols = st.columns(2)
    for idx, (label, value) in enumerate(build_at_a_glance(detail)):
        glance_cols[idx % 2].markdown(f"**{label}**  \n{value}")

    st.header("Recommended products")
    if detail.gallery_images:
        st.image(detail.gallery_images[:3], width=140)
    else:
        st.caption("No product images yet.")

    with st.expander("Structured data"):
        st.code(json.dumps(build_json_ld(detail), indent=2), language="json")
        st.caption(page_description(detail))


# ═══════════════════════════════════════════════════════════════════════════
# Listing view
# ═══════════════════════════════════════════════════════════════════════════

def _render_card(card: BrandCard) -> None:
    if card.background:
        st.image(str(card.background), use_container_width=True)

    title_cols = st.columns([1, 8])
    if card.icon:
        title_cols[0].image(str(card.icon), width=24)
    title_cols[1].markdown(f"### [{card.name}](?slug={card.slug})")
    st.caption(card.tagline)

    # "$" is escaped: Streamlit markdown treats it as a LaTeX delimiter
    active = "\\$" * card.price_level
    inactive = "\\$" * (MAX_PRICE_LEVEL - card.price_level)
    price = f"**{active}**" if active else ""
    if inactive:
        price += f":gray[{inactive}]"
    tag_cols = st.columns(2)
    tag_cols[0].markdown(price)
    if card.shipping:
        tag_cols[1].caption(f"🚚 {card.shipping}")

    st.markdown(f"**Made for:** {card.made_for or CARD_MADE_FOR_FALLBACK}")


def _render_listing(all_brands: list[Brand]) -> None:
    st.title("Move beyond mainstream.")
    st.caption(
        "Emerging activewear brands curated for performance, comfort, "
        "and modern everyday style."
    )

    # ── Sidebar filters ──────────────────────────────────────────
    st.sidebar.title("Filters")
    filter_options = build_filter_options(all_brands)
    selected: dict[str, list[str]] = {}
    for category_id, options in filter_options.items():
        labels = {option.value: option.label for option in options}
        selected[category_id] = st.sidebar.multiselect(
            CATEGORY_MAP[category_id].label,
            options=list(labels),
            format_func=labels.get,
            key=f"filter_{category_id}",
        )

    filtered = filter_brands(all_brands, selected)
    st.metric("Brands", f"{len(filtered)} / {len(all_brands)}")

    if not filtered:
        st.info("No brands match these filters yet. Try clearing a few selections.")
        return

    card_cols = st.columns(3)
    for idx, brand in enumerate(filtered):
        with card_cols[idx % 3].container(border=True):
            _render_card(build_card(brand))

    with st.expander("Sheet data"):
        st.caption(f"Source: {sheet_config.source_label}")
        st.dataframe(brands_to_dataframe(filtered), use_container_width=True, hide_index=True)


# ═══════════════════════════════════════════════════════════════════════════
# Routing
# ═══════════════════════════════════════════════════════════════════════════

requested_slug = st.query_params.get("slug")
if requested_slug:
    match = get_brand_by_slug(brands, requested_slug)
    if match is None:
        st.title("Brand not found")
        st.write(f"No brand with slug '{requested_slug}'.")
        st.markdown("[← All brands](?)")
    else:
        _render_detail(match)
else:
    _render_listing(brands)
