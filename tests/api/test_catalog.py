"""Tests for catalog API endpoints."""

from unittest.mock import AsyncMock

from fastapi.testclient import TestClient

from storefront.domain.exceptions import ProductSourceError


class TestGetCatalog:
    """Tests for GET /catalog."""

    def test_lists_all_products(self, client: TestClient) -> None:
        """All products are shown with their cards."""
        response = client.get("/catalog")

        assert response.status_code == 200
        data = response.json()
        assert data["loading"] is False
        assert data["active_filter"] == "all"
        assert data["total"] == 7
        assert [p["product"]["id"] for p in data["products"]] == [
            "1", "2", "3", "4", "5", "6", "7",
        ]

    def test_card_shape(self, client: TestClient) -> None:
        """Cards include the default selection, neutral price and link."""
        card = client.get("/catalog").json()["products"][0]

        assert card["product"]["link"] == "/product/1"
        assert card["display_title"] == "Product 1"
        assert card["description_excerpt"] == "Description of product 1..."
        assert card["product"]["base_price"] == "109.95"
        assert card["selection"] == {"size": "M", "color": "Black"}
        assert card["price"]["resolved_price"] == "109.95"
        assert card["price"]["adjustment"] == "neutral"
        assert card["pending_quantity"] == 0
        assert card["enabled"] is True

    def test_filter_buttons(self, client: TestClient) -> None:
        """Filter buttons start with All Products active."""
        filters = client.get("/catalog").json()["filters"]

        assert filters[0] == {"value": "all", "label": "All Products", "active": True}
        assert {f["value"] for f in filters[1:]} == {
            "men's clothing",
            "electronics",
            "jewelery",
            "women's clothing",
        }

    def test_request_id_header(self, client: TestClient) -> None:
        """Request IDs are echoed back."""
        response = client.get("/catalog", headers={"X-Request-ID": "req-1"})
        assert response.headers["X-Request-ID"] == "req-1"


class TestSetFilter:
    """Tests for PUT /catalog/filter."""

    def test_filter_by_category(self, client: TestClient) -> None:
        """Only the chosen category is shown, in load order."""
        response = client.put("/catalog/filter", json={"category": "electronics"})

        assert response.status_code == 200
        data = response.json()
        assert data["active_filter"] == "electronics"
        assert [p["product"]["id"] for p in data["products"]] == ["2", "4", "7"]

    def test_back_to_all(self, client: TestClient) -> None:
        """Selecting all restores the full catalog."""
        client.put("/catalog/filter", json={"category": "jewelery"})
        data = client.put("/catalog/filter", json={"category": "all"}).json()
        assert data["total"] == 7

    def test_unknown_category(self, client: TestClient) -> None:
        """Unknown categories are rejected and the filter is kept."""
        client.put("/catalog/filter", json={"category": "jewelery"})
        response = client.put("/catalog/filter", json={"category": "garden"})

        assert response.status_code == 422
        assert response.json()["error_code"] == "UNKNOWN_CATEGORY"
        assert client.get("/catalog").json()["active_filter"] == "jewelery"


class TestReload:
    """Tests for POST /catalog/reload."""

    def test_reload_resets_filter(self, client: TestClient) -> None:
        """A reload replaces the catalog and clears the filter."""
        client.put("/catalog/filter", json={"category": "jewelery"})

        response = client.post("/catalog/reload")

        assert response.status_code == 200
        assert response.json() == {"loaded": True, "product_count": 7}
        assert client.get("/catalog").json()["active_filter"] == "all"

    def test_reload_failure(self, client: TestClient, source: AsyncMock) -> None:
        """A failed reload keeps the current catalog."""
        source.fetch_products.side_effect = ProductSourceError("u", "down")

        response = client.post("/catalog/reload")

        assert response.json() == {"loaded": False, "product_count": 7}


class TestHealth:
    """Tests for health endpoints."""

    def test_health(self, client: TestClient) -> None:
        """Health endpoint reports the service."""
        data = client.get("/health").json()
        assert data["status"] == "healthy"
        assert data["service"] == "storefront"

    def test_ready(self, client: TestClient) -> None:
        """Readiness reports the loaded catalog."""
        assert client.get("/ready").json() == {
            "status": "ready",
            "loading": False,
            "product_count": 7,
        }
