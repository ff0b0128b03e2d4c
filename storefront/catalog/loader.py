"""Catalog loader.

Runs the one-shot fetch-and-load sequence when the catalog screen is
mounted. The fetch is the only await; the result is applied to the
store only if the screen has not been torn down in the meantime.
"""

from typing import Any, Protocol

import structlog

from storefront.catalog.store import CatalogStore
from storefront.domain.exceptions import CatalogLoadError

logger = structlog.get_logger()


class ProductSource(Protocol):
    """External source of raw product records."""

    async def fetch_products(self) -> list[dict[str, Any]]: ...


class CancellationToken:
    """Signals that the consumer of a pending load has gone away."""

    def __init__(self) -> None:
        self._cancelled = False

    @property
    def cancelled(self) -> bool:
        """Whether ``cancel`` has been called."""
        return self._cancelled

    def cancel(self) -> None:
        """Mark the token as cancelled. Idempotent."""
        self._cancelled = True


class CatalogLoader:
    """Fetches the catalog and loads it into a store.

    ``loading`` is True from the start of ``load`` until the latest load
    applies its records, fails, or has its result discarded. Starting a
    new load supersedes any load still in flight: the older result is
    discarded when it arrives and its completion leaves ``loading`` alone.

    Failures are not retried. They leave the store as it was, which at
    mount time means an empty catalog.
    """

    def __init__(self, source: ProductSource, store: CatalogStore) -> None:
        """Initialize loader.

        Args:
            source: Product data source.
            store: Store that receives the fetched records.
        """
        self.source = source
        self.store = store
        self._current: CancellationToken | None = None

    @property
    def loading(self) -> bool:
        """Whether a load is in progress."""
        return self._current is not None

    async def load(self, token: CancellationToken) -> bool:
        """Fetch the catalog and apply it to the store.

        Args:
            token: Cancelled by the consumer when it is torn down.

        Returns:
            True if the catalog was replaced, False if the load failed or
            its result was discarded.
        """
        self._current = token
        try:
            records = await self.source.fetch_products()
            if token.cancelled:
                logger.info("Discarding catalog fetched after teardown", record_count=len(records))
                return False
            if token is not self._current:
                logger.info("Discarding superseded catalog fetch", record_count=len(records))
                return False
            self.store.load(records)
            return True
        except CatalogLoadError as e:
            if token is self._current:
                logger.error("Catalog fetch failed", error=e.message, details=e.details)
            else:
                logger.info("Ignoring failure of superseded catalog fetch", error=e.message)
            return False
        finally:
            if self._current is token:
                self._current = None
