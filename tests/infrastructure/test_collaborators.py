"""Tests for the default cart and notification collaborators."""

from decimal import Decimal

from structlog.testing import capture_logs

from storefront.catalog.cart_bridge import CartLineCandidate
from storefront.catalog.models import VariantSelection
from storefront.infrastructure.collaborators import InMemoryCartSink, LogNotifier


def _candidate(product_id: str) -> CartLineCandidate:
    return CartLineCandidate(
        product_id=product_id,
        title="Backpack",
        image="https://img.example.com/1.jpg",
        category="men's clothing",
        base_price=Decimal("109.95"),
        resolved_price=Decimal("109.95"),
        selection=VariantSelection(),
    )


def test_cart_sink_records_in_order() -> None:
    """Records are kept in arrival order without merging."""
    sink = InMemoryCartSink()
    sink.add(_candidate("1"))
    sink.add(_candidate("1"))
    sink.add(_candidate("2"))

    assert [c.product_id for c in sink.received] == ["1", "1", "2"]

    sink.clear()
    assert sink.received == []


def test_notifier_logs_and_keeps_recent() -> None:
    """Notifications are logged and the latest ones retained."""
    notifier = LogNotifier(history_size=2)
    with capture_logs() as logs:
        notifier.success("one")
        notifier.success("two")
        notifier.success("three")

    assert list(notifier.recent) == ["two", "three"]
    assert [log["message"] for log in logs] == ["one", "two", "three"]
