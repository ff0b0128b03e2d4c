"""Product Catalog Engine.

Provides variant pricing, per-card variant state, the category-filtered
catalog store, cart composition, and the one-shot catalog loader.
"""

from storefront.catalog.cart_bridge import (
    CartBridge,
    CartCollaborator,
    CartLineCandidate,
    Notifier,
)
from storefront.catalog.loader import CancellationToken, CatalogLoader, ProductSource
from storefront.catalog.models import (
    ALL_CATEGORIES,
    DEFAULT_VARIANT_OPTIONS,
    Product,
    ProductRecord,
    VariantOptions,
    VariantSelection,
)
from storefront.catalog.pricing import (
    PriceAdjustment,
    PriceQuote,
    classify_price,
    compute_price,
    quote_price,
)
from storefront.catalog.store import CatalogStore
from storefront.catalog.variants import VariantState

__all__ = [
    # Models
    "ALL_CATEGORIES",
    "DEFAULT_VARIANT_OPTIONS",
    "Product",
    "ProductRecord",
    "VariantOptions",
    "VariantSelection",
    # Pricing
    "PriceAdjustment",
    "PriceQuote",
    "classify_price",
    "compute_price",
    "quote_price",
    # State
    "CatalogStore",
    "VariantState",
    # Cart
    "CartBridge",
    "CartCollaborator",
    "CartLineCandidate",
    "Notifier",
    # Loader
    "CancellationToken",
    "CatalogLoader",
    "ProductSource",
]
