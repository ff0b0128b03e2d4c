"""Shared fixtures for API tests."""

import asyncio
from typing import Any
from unittest.mock import AsyncMock

import pytest
from fastapi.testclient import TestClient

from storefront.infrastructure.config import Settings
from storefront.main import Storefront, build_storefront, create_app


@pytest.fixture
def source(raw_records: list[dict[str, Any]]) -> AsyncMock:
    """Product source returning the mixed catalog."""
    source = AsyncMock()
    source.fetch_products.return_value = raw_records
    return source


@pytest.fixture
def storefront(source: AsyncMock) -> Storefront:
    """Storefront with every product in stock and the catalog loaded."""
    storefront = build_storefront(Settings(stock_probability=1.0), source=source)
    asyncio.run(storefront.view.mount())
    return storefront


@pytest.fixture
def client(storefront: Storefront) -> TestClient:
    """Test client over the loaded storefront (lifespan not run)."""
    return TestClient(create_app(storefront))


@pytest.fixture
def sold_out_client(source: AsyncMock) -> TestClient:
    """Test client where every product is out of stock."""
    storefront = build_storefront(Settings(stock_probability=0.0), source=source)
    asyncio.run(storefront.view.mount())
    return TestClient(create_app(storefront))
