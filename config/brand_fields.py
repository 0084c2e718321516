"""
Column alias tables for brand fields.

Sheet authors are inconsistent about header names, so every logical field
resolves from an ordered list of candidate headers.  The first candidate with
a non-empty value wins.  Lookups try the exact header first and then fall back
to a case-insensitive scan (see processing/brand_builder.py).

Also defines the asset path conventions used to synthesise icon and
background image references from a brand slug.
"""

# ---------------------------------------------------------------------------
# Canonical Brand fields
# ---------------------------------------------------------------------------
NAME_FIELDS: tuple[str, ...] = ("Brand Name", "Brand", "Name")
TAGLINE_FIELDS: tuple[str, ...] = ("Tagline", "Summary", "Description", "Tag Line")
SLUG_FIELDS: tuple[str, ...] = ("Slug", "slug", "ID", "Id")
ID_FIELDS: tuple[str, ...] = ("ID", "Id")

# ---------------------------------------------------------------------------
# Asset path conventions: {base}/{slug}.{ext}
# Brands only carry these paths; processing/brand_card.py checks them on disk.
# ---------------------------------------------------------------------------
ICON_BASE: str = "brand-assets/icons"
IMAGE_BASE: str = "brand-assets/images"
ASSET_EXTENSION: str = "png"

# Directory the asset paths above are relative to, and the images shown
# when a brand's own file is missing.
ASSET_ROOT: str = "public"
PLACEHOLDER_ICON: str = f"{ICON_BASE}/placeholder.png"
PLACEHOLDER_IMAGE: str = f"{IMAGE_BASE}/placeholder.png"

# ---------------------------------------------------------------------------
# Listing card fields (exact header first, then case-insensitive)
# ---------------------------------------------------------------------------
PRICE_FIELDS: tuple[str, ...] = ("Price", "Price Point")
SHIPPING_TAG_FIELDS: tuple[str, ...] = ("Ships To", "Shipping")
MADE_FOR_FIELDS: tuple[str, ...] = ("Made For", "Activities")

# Price is shown as up to this many "$" signs.
MAX_PRICE_LEVEL: int = 6

CARD_TAGLINE_FALLBACK: str = "Tagline coming soon."
CARD_MADE_FOR_FALLBACK: str = "Activities coming soon."

# ---------------------------------------------------------------------------
# Detail page fields: detail attribute → ordered candidate headers
# ---------------------------------------------------------------------------
DETAIL_FIELD_MAP: dict[str, tuple[str, ...]] = {
    "brand": ("Brand", "Brand Name", "Name"),
    "slug": ("Slug", "slug", "ID", "Id"),
    "region": ("Region",),
    "shipping_locations": ("ShippingLocations", "Shipping Locations", "Ships To"),
    "activities": ("Activities", "Activity"),
    "genders": ("Genders", "Gender"),
    "price": ("Price",),
    "values": ("Values",),
    "featured": ("Featured",),
    "tagline": ("Tagline", "Summary", "Tag Line"),
    "description": ("Description", "About"),
    "website": ("Website", "Site"),
    "instagram": ("Instagram", "Instagram URL"),
    "year_founded": ("YearFounded", "Year Founded", "Founded"),
    "founder": ("Founder", "Founders"),
    "country_of_manufacture": (
        "CountryOfManufacture", "Country of Manufacture", "Made In",
    ),
    "size_range": ("SizeRange", "Sizes"),
    "materials": ("Materials",),
    "gallery_images": ("GalleryImages", "Gallery"),
}

# Detail attributes that must be present for a detail page to render.
REQUIRED_DETAIL_FIELDS: tuple[str, ...] = ("brand", "slug")

# "At a glance" panel: display label → detail attribute, in display order.
AT_A_GLANCE_FIELDS: list[tuple[str, str]] = [
    ("Region", "region"),
    ("Shipping Locations", "shipping_locations"),
    ("Price", "price"),
    ("Activities", "activities"),
    ("Genders", "genders"),
    ("Size Range", "size_range"),
    ("Country of Manufacture", "country_of_manufacture"),
]

# Placeholder prefix shown wherever a field has no data.
MISSING_DATA_PREFIX: str = "Data missing:"

SITE_TITLE: str = "The Active Collection"
