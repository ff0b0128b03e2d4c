"""Per-card variant state.

Each displayed product card owns one VariantState holding the shopper's
size, color and pending quantity. It lives as long as the card does.
"""

from decimal import Decimal

import structlog

from storefront.catalog.cart_bridge import CartBridge, CartLineCandidate
from storefront.catalog.models import Product, VariantSelection
from storefront.catalog.pricing import PriceQuote, compute_price, quote_price

logger = structlog.get_logger()


class VariantState:
    """Size, color and pending quantity for one product card.

    When the product is out of stock the size and color controls and
    ``increment`` do nothing; ``decrement`` keeps working.

    The pending quantity is a local counter. Decrementing it does not
    take anything back out of the cart.
    """

    def __init__(self, product: Product, bridge: CartBridge) -> None:
        """Initialize with the product's default variant.

        Args:
            product: Product shown on the card.
            bridge: Where add-to-cart actions are sent.
        """
        self.product = product
        self.bridge = bridge
        self.size = product.variant_options.default_size
        self.color = product.variant_options.default_color
        self.pending_quantity = 0

    @property
    def selection(self) -> VariantSelection:
        """Currently selected variant."""
        return VariantSelection(size=self.size, color=self.color)

    @property
    def price(self) -> Decimal:
        """Resolved price for the current selection."""
        return compute_price(self.product.base_price, self.size, self.color)

    @property
    def quote(self) -> PriceQuote:
        """Resolved price with its badge data."""
        return quote_price(self.product.base_price, self.selection)

    def set_size(self, new_size: str) -> bool:
        """Select a size.

        Returns:
            True if applied, False if ignored.
        """
        if not self._accepts_changes("size"):
            return False
        if new_size not in self.product.variant_options.sizes:
            logger.warning(
                "Ignoring unknown size",
                product_id=self.product.id,
                size=new_size,
            )
            return False
        self.size = new_size
        return True

    def set_color(self, new_color: str) -> bool:
        """Select a color.

        Returns:
            True if applied, False if ignored.
        """
        if not self._accepts_changes("color"):
            return False
        if new_color not in self.product.variant_options.colors:
            logger.warning(
                "Ignoring unknown color",
                product_id=self.product.id,
                color=new_color,
            )
            return False
        self.color = new_color
        return True

    def increment(self) -> CartLineCandidate | None:
        """Add one unit of the current variant to the cart.

        Returns:
            The candidate sent to the cart, or None for an out of stock
            product.
        """
        if not self._accepts_changes("quantity"):
            return None
        candidate = self.bridge.compose_and_emit(self.product, self.selection, self.price)
        self.pending_quantity += 1
        return candidate

    def decrement(self) -> int:
        """Lower the pending quantity, never below zero.

        Returns:
            The new pending quantity.
        """
        self.pending_quantity = max(self.pending_quantity - 1, 0)
        return self.pending_quantity

    def _accepts_changes(self, control: str) -> bool:
        if self.product.in_stock:
            return True
        logger.debug(
            "Control disabled for out of stock product",
            product_id=self.product.id,
            control=control,
        )
        return False
