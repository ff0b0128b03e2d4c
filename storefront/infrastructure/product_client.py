"""Product data source HTTP client.

Fetches the raw product record list from the catalog endpoint.
"""

from typing import Any

import httpx
import structlog

from storefront.domain.exceptions import ProductSourceError

logger = structlog.get_logger()


class ProductSourceClient:
    """HTTP client for the catalog endpoint.

    Issues a single unauthenticated GET and returns the decoded record
    list. Any transport, status or decoding problem is raised as
    ProductSourceError; logging it is left to the caller.
    """

    def __init__(self, url: str, timeout: float = 10.0) -> None:
        """Initialize client.

        Args:
            url: Catalog endpoint URL.
            timeout: Request timeout in seconds.
        """
        self.url = url
        self.timeout = timeout
        self._client: httpx.AsyncClient | None = None

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create HTTP client."""
        if self._client is None:
            self._client = httpx.AsyncClient(
                timeout=self.timeout,
                headers={"Accept": "application/json"},
            )
        return self._client

    async def close(self) -> None:
        """Close the HTTP client."""
        if self._client:
            await self._client.aclose()
            self._client = None

    async def fetch_products(self) -> list[dict[str, Any]]:
        """Fetch all product records.

        Returns:
            Raw product records in source order.

        Raises:
            ProductSourceError: On an invalid URL, transport error, non-200
                status, or a body that is not a JSON list.
        """
        try:
            client = await self._get_client()
            logger.debug("Fetching product catalog", url=self.url)
            response = await client.get(self.url)
        except httpx.TimeoutException as e:
            raise ProductSourceError(self.url, f"Request timed out: {e}") from e
        except httpx.RequestError as e:
            raise ProductSourceError(self.url, f"Request failed: {e}") from e
        except (httpx.InvalidURL, httpx.HTTPError) as e:
            raise ProductSourceError(self.url, f"Invalid request: {e}") from e

        if response.status_code != 200:
            raise ProductSourceError(
                self.url,
                f"Unexpected status: {response.text}",
                response.status_code,
            )

        try:
            data = response.json()
        except ValueError as e:
            raise ProductSourceError(self.url, f"Invalid JSON body: {e}", 200) from e

        if not isinstance(data, list):
            raise ProductSourceError(
                self.url,
                f"Expected a list of products, got {type(data).__name__}",
                200,
            )
        return data
