"""Tests for the catalog store."""

import random
from decimal import Decimal
from typing import Any

import pytest

from storefront.catalog.models import ALL_CATEGORIES, DEFAULT_VARIANT_OPTIONS
from storefront.catalog.store import CatalogStore
from storefront.domain.exceptions import ProductRecordError
from tests.factories import IN_STOCK, OUT_OF_STOCK, SequenceRandom, make_record


class TestLoad:
    """Tests for CatalogStore.load."""

    def test_starts_empty(self) -> None:
        """A new store has no products and no filter."""
        store = CatalogStore()
        assert store.all_products == ()
        assert store.visible_products() == ()
        assert store.active_filter == ALL_CATEGORIES

    def test_load_keeps_source_order(
        self, raw_records: list[dict[str, Any]], all_in_stock: SequenceRandom
    ) -> None:
        """Products are stored in load order."""
        store = CatalogStore(rng=all_in_stock)
        store.load(raw_records)
        assert [p.id for p in store.all_products] == ["1", "2", "3", "4", "5", "6", "7"]

    def test_load_copies_price_into_base_price(self, all_in_stock: SequenceRandom) -> None:
        """The source price becomes the exact base price."""
        store = CatalogStore(rng=all_in_stock)
        (product,) = store.load([make_record(1, "jewelery", 109.95)])
        assert product.base_price == Decimal("109.95")

    def test_load_attaches_fixed_variant_options(
        self, raw_records: list[dict[str, Any]], all_in_stock: SequenceRandom
    ) -> None:
        """Every product offers the same sizes and colors."""
        store = CatalogStore(rng=all_in_stock)
        store.load(raw_records)
        assert all(p.variant_options == DEFAULT_VARIANT_OPTIONS for p in store.all_products)
        assert DEFAULT_VARIANT_OPTIONS.sizes == ("XS", "S", "M", "L", "XL")
        assert DEFAULT_VARIANT_OPTIONS.colors == ("Black", "White", "Navy", "Gray")

    def test_in_stock_uses_one_draw_per_product(self) -> None:
        """Availability follows the injected draws."""
        rng = SequenceRandom([IN_STOCK, OUT_OF_STOCK, IN_STOCK])
        store = CatalogStore(rng=rng)
        store.load([make_record(i, "electronics") for i in range(1, 4)])
        assert [p.in_stock for p in store.all_products] == [True, False, True]
        assert rng.calls == 3

    def test_stock_probability_boundary(self) -> None:
        """A draw equal to the probability is out of stock."""
        store = CatalogStore(rng=SequenceRandom([0.8]))
        (product,) = store.load([make_record(1, "electronics")])
        assert product.in_stock is False

    def test_seeded_random_is_reproducible(self, raw_records: list[dict[str, Any]]) -> None:
        """Same seed gives the same availability."""
        first = CatalogStore(rng=random.Random(42))
        second = CatalogStore(rng=random.Random(42))
        first.load(raw_records)
        second.load(raw_records)
        assert [p.in_stock for p in first.all_products] == [
            p.in_stock for p in second.all_products
        ]

    def test_invalid_stock_probability(self) -> None:
        """Probability must be within [0, 1]."""
        with pytest.raises(ValueError):
            CatalogStore(stock_probability=1.5)

    def test_second_load_replaces(
        self, raw_records: list[dict[str, Any]], all_in_stock: SequenceRandom
    ) -> None:
        """A reload replaces the products without merging."""
        store = CatalogStore(rng=all_in_stock)
        store.load(raw_records)
        store.load([make_record(99, "books")])
        assert [p.id for p in store.all_products] == ["99"]

    def test_load_resets_filter(
        self, raw_records: list[dict[str, Any]], all_in_stock: SequenceRandom
    ) -> None:
        """A filter set before a reload does not apply to the new data."""
        store = CatalogStore(rng=all_in_stock)
        store.load(raw_records)
        assert store.set_filter("electronics")
        store.load(raw_records)
        assert store.active_filter == ALL_CATEGORIES
        assert len(store.visible_products()) == len(raw_records)

    def test_bad_record_leaves_catalog_untouched(
        self, raw_records: list[dict[str, Any]], all_in_stock: SequenceRandom
    ) -> None:
        """A malformed record fails the load atomically."""
        store = CatalogStore(rng=all_in_stock)
        store.load(raw_records)
        store.set_filter("jewelery")
        before = store.all_products

        bad = [make_record(10, "books"), {"id": 11, "title": "No price"}]
        with pytest.raises(ProductRecordError) as exc_info:
            store.load(bad)

        assert exc_info.value.details["index"] == 1
        assert store.all_products is before
        assert store.active_filter == "jewelery"

    def test_non_positive_price_is_rejected(self, all_in_stock: SequenceRandom) -> None:
        """Base prices must be positive."""
        store = CatalogStore(rng=all_in_stock)
        with pytest.raises(ProductRecordError):
            store.load([make_record(1, "books", 0.0)])

    def test_load_records_event(
        self, raw_records: list[dict[str, Any]], all_in_stock: SequenceRandom
    ) -> None:
        """Each load records a CatalogLoaded event."""
        store = CatalogStore(rng=all_in_stock)
        store.load(raw_records)
        events = store.collect_events()
        assert len(events) == 1
        assert events[0].product_count == 7
        assert events[0].in_stock_count == 7
        assert store.collect_events() == []


class TestFilter:
    """Tests for the category filter and visible products."""

    @pytest.fixture
    def store(
        self, raw_records: list[dict[str, Any]], all_in_stock: SequenceRandom
    ) -> CatalogStore:
        """Store loaded with the mixed catalog."""
        store = CatalogStore(rng=all_in_stock)
        store.load(raw_records)
        return store

    def test_all_returns_full_catalog_in_order(self, store: CatalogStore) -> None:
        """ALL shows every product unchanged."""
        assert store.visible_products() == store.all_products

    def test_category_filter(self, store: CatalogStore) -> None:
        """Only products of the category are shown, in original order."""
        store.set_filter("electronics")
        visible = store.visible_products()
        assert [p.id for p in visible] == ["2", "4", "7"]
        assert all(p.category == "electronics" for p in visible)

    def test_filter_back_to_all(self, store: CatalogStore) -> None:
        """Selecting ALL again restores the full catalog."""
        store.set_filter("jewelery")
        store.set_filter(ALL_CATEGORIES)
        assert store.visible_products() == store.all_products

    def test_visible_is_recomputed_after_reload(self, store: CatalogStore) -> None:
        """The projection follows the current products."""
        store.set_filter("electronics")
        store.load([make_record(50, "electronics"), make_record(51, "books")])
        assert [p.id for p in store.visible_products()] == ["50", "51"]
        store.set_filter("electronics")
        assert [p.id for p in store.visible_products()] == ["50"]

    def test_unknown_category_is_ignored(self, store: CatalogStore) -> None:
        """Categories not in the catalog leave the filter alone."""
        store.set_filter("jewelery")
        assert store.set_filter("garden") is False
        assert store.active_filter == "jewelery"

    def test_categories_in_first_seen_order(self, store: CatalogStore) -> None:
        """Distinct categories keep their first appearance order."""
        assert store.categories() == [
            "men's clothing",
            "electronics",
            "jewelery",
            "women's clothing",
        ]

    def test_is_active(self, store: CatalogStore) -> None:
        """The active filter is reported for button highlighting."""
        assert store.is_active(ALL_CATEGORIES)
        store.set_filter("jewelery")
        assert store.is_active("jewelery")
        assert not store.is_active(ALL_CATEGORIES)

    def test_get(self, store: CatalogStore) -> None:
        """Products can be looked up by ID."""
        assert store.get("3").category == "jewelery"
        assert store.get("missing") is None
