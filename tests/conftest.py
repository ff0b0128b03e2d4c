"""Shared fixtures for storefront tests."""

from typing import Any

import pytest

from storefront.catalog.cart_bridge import CartBridge
from storefront.infrastructure.collaborators import InMemoryCartSink, LogNotifier
from tests.factories import IN_STOCK, SequenceRandom, make_record


@pytest.fixture
def raw_records() -> list[dict[str, Any]]:
    """Catalog mixing four categories."""
    return [
        make_record(1, "men's clothing", 109.95),
        make_record(2, "electronics", 64.0),
        make_record(3, "jewelery", 695.0),
        make_record(4, "electronics", 109.0),
        make_record(5, "women's clothing", 9.85),
        make_record(6, "jewelery", 168.0),
        make_record(7, "electronics", 599.0),
    ]


@pytest.fixture
def all_in_stock() -> SequenceRandom:
    """Random source that stocks every product."""
    return SequenceRandom([IN_STOCK])


@pytest.fixture
def cart() -> InMemoryCartSink:
    """Recording cart."""
    return InMemoryCartSink()


@pytest.fixture
def notifier() -> LogNotifier:
    """Recording notifier."""
    return LogNotifier()


@pytest.fixture
def bridge(cart: InMemoryCartSink, notifier: LogNotifier) -> CartBridge:
    """Cart bridge wired to the recording collaborators."""
    return CartBridge(cart, notifier)
