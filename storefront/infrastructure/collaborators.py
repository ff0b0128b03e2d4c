"""Default cart and notification collaborators.

In-process stand-ins for the external cart and toast services. The cart
sink only records what it receives; it does not merge or total lines.
"""

from collections import deque

import structlog

from storefront.catalog.cart_bridge import CartLineCandidate

logger = structlog.get_logger()


class InMemoryCartSink:
    """Records every cart-add record it receives, in order."""

    def __init__(self) -> None:
        self._received: list[CartLineCandidate] = []

    def add(self, candidate: CartLineCandidate) -> None:
        """Accept a cart-add record."""
        self._received.append(candidate)

    @property
    def received(self) -> list[CartLineCandidate]:
        """Records received so far."""
        return list(self._received)

    def clear(self) -> None:
        """Forget all received records."""
        self._received.clear()


class LogNotifier:
    """Logs success notifications and keeps the most recent ones."""

    def __init__(self, history_size: int = 20) -> None:
        """Initialize notifier.

        Args:
            history_size: Number of recent messages to keep.
        """
        self.recent: deque[str] = deque(maxlen=history_size)

    def success(self, message: str) -> None:
        """Send a success notification."""
        self.recent.append(message)
        logger.info("Notification", level="success", message=message)
