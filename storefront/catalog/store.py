"""Catalog store.

Owns the full product set of the current session and the active
category filter. The visible products are always projected from the
full set on demand, so the two can never drift apart.
"""

import random
from collections.abc import Iterable, Mapping
from typing import Any, Protocol

import structlog
from pydantic import ValidationError

from storefront.catalog.models import ALL_CATEGORIES, Product, ProductRecord
from storefront.domain.events import CatalogLoaded
from storefront.domain.exceptions import ProductRecordError

logger = structlog.get_logger()

DEFAULT_STOCK_PROBABILITY = 0.8


class RandomSource(Protocol):
    """Anything with ``random.Random.random`` semantics."""

    def random(self) -> float: ...


class CatalogStore:
    """Full product set plus the active category filter.

    Only the store's own operations mutate its state. ``load`` builds the
    complete replacement before swapping it in, so callers never see a
    half-loaded catalog or a filter left over from the previous one.

    Example usage:
        store = CatalogStore(rng=random.Random(7))
        store.load(records)
        store.set_filter("electronics")
        for product in store.visible_products():
            ...
    """

    def __init__(
        self,
        rng: RandomSource | None = None,
        stock_probability: float = DEFAULT_STOCK_PROBABILITY,
    ) -> None:
        """Initialize an empty store.

        Args:
            rng: Source of availability draws (seeded in tests).
            stock_probability: Chance that a loaded product is in stock.
        """
        if not 0.0 <= stock_probability <= 1.0:
            raise ValueError("stock_probability must be between 0 and 1")
        self._rng = rng or random.Random()
        self._stock_probability = stock_probability
        self._products: tuple[Product, ...] = ()
        self._active_filter = ALL_CATEGORIES
        self._events: list[CatalogLoaded] = []

    @property
    def all_products(self) -> tuple[Product, ...]:
        """Every loaded product, in load order."""
        return self._products

    @property
    def active_filter(self) -> str:
        """Current category filter (``ALL_CATEGORIES`` for none)."""
        return self._active_filter

    def load(self, raw_records: Iterable[Mapping[str, Any]]) -> tuple[Product, ...]:
        """Replace the catalog with freshly fetched records.

        Each record gets an independent availability draw and the fixed
        variant options. The filter is reset to ``ALL_CATEGORIES``.

        Args:
            raw_records: Records from the product data source.

        Returns:
            The newly loaded products.

        Raises:
            ProductRecordError: If any record is malformed. The current
                catalog is left untouched.
        """
        products: list[Product] = []
        for index, raw in enumerate(raw_records):
            try:
                record = ProductRecord.model_validate(raw)
            except ValidationError as e:
                raise ProductRecordError(index, e.errors()) from e
            products.append(Product.from_record(record, in_stock=self._draw_in_stock()))

        self._products = tuple(products)
        self._active_filter = ALL_CATEGORIES

        event = CatalogLoaded(
            aggregate_type="Catalog",
            product_count=len(self._products),
            in_stock_count=sum(1 for p in self._products if p.in_stock),
            categories=tuple(self.categories()),
        )
        self._events.append(event)
        logger.info(
            "Catalog loaded",
            product_count=event.product_count,
            in_stock_count=event.in_stock_count,
            categories=list(event.categories),
        )
        return self._products

    def set_filter(self, category: str) -> bool:
        """Select the category to show.

        Args:
            category: ``ALL_CATEGORIES`` or a category present in the catalog.

        Returns:
            True if the filter was applied, False if the category is unknown.
        """
        if category != ALL_CATEGORIES and category not in self.categories():
            logger.warning(
                "Ignoring unknown category filter",
                category=category,
                known=self.categories(),
            )
            return False
        self._active_filter = category
        return True

    def visible_products(self) -> tuple[Product, ...]:
        """Products matching the active filter, in load order."""
        if self._active_filter == ALL_CATEGORIES:
            return self._products
        return tuple(p for p in self._products if p.category == self._active_filter)

    def categories(self) -> list[str]:
        """Distinct categories in the order they first appear."""
        return list(dict.fromkeys(p.category for p in self._products))

    def is_active(self, category: str) -> bool:
        """Whether ``category`` is the current filter."""
        return self._active_filter == category

    def get(self, product_id: str) -> Product | None:
        """Get a loaded product by ID."""
        return next((p for p in self._products if p.id == product_id), None)

    def collect_events(self) -> list[CatalogLoaded]:
        """Collect and clear recorded events."""
        events = self._events.copy()
        self._events.clear()
        return events

    def _draw_in_stock(self) -> bool:
        return self._rng.random() < self._stock_probability
