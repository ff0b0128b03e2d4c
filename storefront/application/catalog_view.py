"""Catalog view application service.

Ties the catalog engine together the way the product listing screen
uses it: mount triggers the load, the category buttons drive the store
filter, and each visible product gets a card with its own variant state.
Cards for products that leave the view are dropped, so their selection
and pending quantity start over if the product is shown again.
"""

from typing import Any

import structlog

from storefront.catalog.cart_bridge import CartBridge
from storefront.catalog.loader import CancellationToken, CatalogLoader
from storefront.catalog.models import ALL_CATEGORIES, Product
from storefront.catalog.pricing import color_label, size_label
from storefront.catalog.store import CatalogStore
from storefront.catalog.variants import VariantState
from storefront.domain.exceptions import ProductNotFoundError

logger = structlog.get_logger()

ALL_CATEGORIES_LABEL = "All Products"
TITLE_DISPLAY_LENGTH = 50
DESCRIPTION_DISPLAY_LENGTH = 100
ELLIPSIS = "..."


def category_label(category: str) -> str:
    """Button label for a category filter value."""
    if category == ALL_CATEGORIES:
        return ALL_CATEGORIES_LABEL
    return category[:1].upper() + category[1:]


def display_title(title: str) -> str:
    """Card title, shortened with an ellipsis past 50 characters."""
    if len(title) > TITLE_DISPLAY_LENGTH:
        return title[:TITLE_DISPLAY_LENGTH] + ELLIPSIS
    return title


def description_excerpt(description: str) -> str:
    """Card teaser: the first 100 characters, always followed by an ellipsis."""
    return description[:DESCRIPTION_DISPLAY_LENGTH] + ELLIPSIS


class CatalogView:
    """The product listing screen.

    Example usage:
        view = CatalogView(store, loader, bridge)
        await view.mount()
        view.select_category("jewelery")
        card = view.card("5")
        card.set_size("XL")
        card.increment()
    """

    def __init__(
        self,
        store: CatalogStore,
        loader: CatalogLoader,
        bridge: CartBridge,
    ) -> None:
        """Initialize view.

        Args:
            store: Catalog store shared with the loader.
            loader: Loader that fills the store on mount.
            bridge: Cart bridge handed to every card.
        """
        self.store = store
        self.loader = loader
        self.bridge = bridge
        self._cards: dict[str, VariantState] = {}
        self._token: CancellationToken | None = None

    @property
    def loading(self) -> bool:
        """Whether the catalog is still being fetched."""
        return self.loader.loading

    @property
    def mounted(self) -> bool:
        """Whether the view is mounted and not yet torn down."""
        return self._token is not None and not self._token.cancelled

    async def mount(self) -> bool:
        """Mount the view and load the catalog.

        Mounting again (a reload) cancels any load still in flight, so
        its result can never replace the newer catalog.

        Returns:
            True if the catalog was loaded.
        """
        if self._token is not None:
            self._token.cancel()
        self._token = CancellationToken()
        loaded = await self.loader.load(self._token)
        self._sync_cards()
        return loaded

    def unmount(self) -> None:
        """Tear the view down; a load still in flight is discarded."""
        if self._token is not None:
            self._token.cancel()
        self._cards.clear()
        logger.info("Catalog view unmounted")

    def select_category(self, category: str) -> bool:
        """Apply a category filter.

        Returns:
            True if the filter was applied.
        """
        applied = self.store.set_filter(category)
        self._sync_cards()
        return applied

    def filter_options(self) -> list[dict[str, Any]]:
        """Category buttons with their labels and active state."""
        return [
            {
                "value": category,
                "label": category_label(category),
                "active": self.store.is_active(category),
            }
            for category in [ALL_CATEGORIES, *self.store.categories()]
        ]

    def cards(self) -> list[VariantState]:
        """Cards for all visible products, in display order."""
        self._sync_cards()
        return [self._card_for(product) for product in self.store.visible_products()]

    def card(self, product_id: str) -> VariantState:
        """Card for a visible product.

        Raises:
            ProductNotFoundError: If the product is not currently visible.
        """
        self._sync_cards()
        for product in self.store.visible_products():
            if product.id == product_id:
                return self._card_for(product)
        raise ProductNotFoundError(product_id)

    def render_card(self, card: VariantState) -> dict[str, Any]:
        """Serialize a card with its product, display text, selection and price."""
        return {
            "product": card.product.to_dict(),
            "display_title": display_title(card.product.title),
            "description_excerpt": description_excerpt(card.product.description),
            "selection": card.selection.to_dict(),
            "price": card.quote.to_dict(),
            "pending_quantity": card.pending_quantity,
            "enabled": card.product.in_stock,
            "size_options": [
                {"value": s, "label": size_label(s)}
                for s in card.product.variant_options.sizes
            ],
            "color_options": [
                {"value": c, "label": color_label(c)}
                for c in card.product.variant_options.colors
            ],
        }

    def _card_for(self, product: Product) -> VariantState:
        card = self._cards.get(product.id)
        if card is None:
            card = VariantState(product, self.bridge)
            self._cards[product.id] = card
        return card

    def _sync_cards(self) -> None:
        # A card survives only while the exact product object it was built
        # for is visible; reloads produce new Product objects.
        visible = {id(p) for p in self.store.visible_products()}
        for product_id in [pid for pid, c in self._cards.items() if id(c.product) not in visible]:
            del self._cards[product_id]
