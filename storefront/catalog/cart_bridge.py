"""Cart bridge.

Composes the record that is handed to the external cart when a shopper
adds a configured product, and fires the success notification. The cart's
own storage and aggregation live outside this package.
"""

from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Protocol

import structlog

from storefront.catalog.models import Product, VariantSelection
from storefront.domain.base import ValueObject
from storefront.domain.events import CartItemAddRequested

logger = structlog.get_logger()

ADDED_TO_CART_MESSAGE = "Added to cart"


@dataclass(frozen=True)
class CartLineCandidate(ValueObject):
    """One add-to-cart action for a configured product.

    Attributes:
        product_id: Product being added.
        title: Product title.
        image: Product image URL.
        category: Product category.
        base_price: Unmodified product price.
        resolved_price: Price for the selected variant.
        selection: Selected size and color.
        quantity_delta: Units added by this action (always 1).
    """

    product_id: str
    title: str
    image: str
    category: str
    base_price: Decimal
    resolved_price: Decimal
    selection: VariantSelection
    quantity_delta: int = 1

    def to_dict(self) -> dict[str, Any]:
        """Convert to the outbound cart record.

        Returns:
            Dictionary representation.
        """
        return {
            "product_id": self.product_id,
            "title": self.title,
            "image": self.image,
            "category": self.category,
            "base_price": str(self.base_price),
            "resolved_price": str(self.resolved_price),
            "selected_variant": self.selection.to_dict(),
            "quantity_delta": self.quantity_delta,
        }


class CartCollaborator(Protocol):
    """External cart that accepts add-to-cart records."""

    def add(self, candidate: CartLineCandidate) -> None: ...


class Notifier(Protocol):
    """External fire-and-forget user notifications."""

    def success(self, message: str) -> None: ...


class CartBridge:
    """Sends configured products to the cart.

    Every call adds exactly one unit; accumulating units across calls is
    the cart's job.
    """

    def __init__(self, cart: CartCollaborator, notifier: Notifier) -> None:
        """Initialize bridge.

        Args:
            cart: Receiver of cart-add records.
            notifier: Receiver of the success notification.
        """
        self.cart = cart
        self.notifier = notifier
        self._events: list[CartItemAddRequested] = []

    def compose_and_emit(
        self,
        product: Product,
        selection: VariantSelection,
        resolved_price: Decimal,
    ) -> CartLineCandidate | None:
        """Build the cart record and hand it to the cart.

        Args:
            product: Product being added.
            selection: Selected size and color.
            resolved_price: Price for the selection.

        Returns:
            The emitted candidate, or None if the product is out of stock
            (nothing is sent in that case).
        """
        if not product.in_stock:
            logger.warning(
                "Ignoring add to cart for out of stock product",
                product_id=product.id,
            )
            return None

        candidate = CartLineCandidate(
            product_id=product.id,
            title=product.title,
            image=product.image,
            category=product.category,
            base_price=product.base_price,
            resolved_price=resolved_price,
            selection=selection,
        )
        self.cart.add(candidate)
        self.notifier.success(ADDED_TO_CART_MESSAGE)

        self._events.append(
            CartItemAddRequested(
                aggregate_id=product.id,
                aggregate_type="Product",
                product_id=product.id,
                title=product.title,
                size=selection.size,
                color=selection.color,
                base_price=str(product.base_price),
                resolved_price=str(resolved_price),
                quantity_delta=candidate.quantity_delta,
            )
        )
        logger.info(
            "Item sent to cart",
            product_id=product.id,
            size=selection.size,
            color=selection.color,
            resolved_price=str(resolved_price),
        )
        return candidate

    def collect_events(self) -> list[CartItemAddRequested]:
        """Collect and clear recorded events."""
        events = self._events.copy()
        self._events.clear()
        return events
