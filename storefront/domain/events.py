"""Domain events for the storefront catalog.

Domain events record significant occurrences on the catalog screen.
They are kept by the component that raised them until collected and
are used for audit logging and for inspecting what was sent to the cart.
"""

from dataclasses import dataclass
from typing import Any, ClassVar

from storefront.domain.base import DomainEvent


# ============================================================================
# Catalog Events
# ============================================================================


@dataclass(frozen=True)
class CatalogLoaded(DomainEvent):
    """Event raised when a fetched catalog replaces the current one."""

    event_type: ClassVar[str] = "catalog.loaded"

    product_count: int = 0
    in_stock_count: int = 0
    categories: tuple[str, ...] = ()

    def _payload(self) -> dict[str, Any]:
        """Get event-specific payload."""
        return {
            "product_count": self.product_count,
            "in_stock_count": self.in_stock_count,
            "categories": list(self.categories),
        }


# ============================================================================
# Cart Events
# ============================================================================


@dataclass(frozen=True)
class CartItemAddRequested(DomainEvent):
    """Event raised when a configured item is sent to the cart."""

    event_type: ClassVar[str] = "cart.item_add_requested"

    product_id: str = ""
    title: str = ""
    size: str = ""
    color: str = ""
    base_price: str = "0.00"
    resolved_price: str = "0.00"
    quantity_delta: int = 0

    def _payload(self) -> dict[str, Any]:
        """Get event-specific payload."""
        return {
            "product_id": self.product_id,
            "title": self.title,
            "size": self.size,
            "color": self.color,
            "base_price": self.base_price,
            "resolved_price": self.resolved_price,
            "quantity_delta": self.quantity_delta,
        }
