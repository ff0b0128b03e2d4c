"""Application layer - services that drive the catalog engine."""

from storefront.application.catalog_view import (
    CatalogView,
    category_label,
    description_excerpt,
    display_title,
)

__all__ = ["CatalogView", "category_label", "description_excerpt", "display_title"]
