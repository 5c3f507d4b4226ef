"""
==============================================================================
API Integration Tests
==============================================================================

Tests for REST API endpoints over the demo catalog
(1 Laptop 20, 2 Container 5, 3 Tablet 15, 4 Smartphone 25).

==============================================================================
"""

from fastapi.testclient import TestClient


class TestHealthEndpoints:
    """Tests for health check endpoints."""

    def test_health_check(self, client: TestClient):
        """Test health check returns status."""
        response = client.get("/api/v1/health")
        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert data["details"]["products_loaded"] == 4

    def test_readiness_probe(self, client: TestClient):
        response = client.get("/api/v1/health/ready")
        assert response.status_code == 200
        assert response.json()["ready"] is True

    def test_liveness_probe(self, client: TestClient):
        response = client.get("/api/v1/health/live")
        assert response.status_code == 200
        assert response.json()["alive"] is True


class TestProductEndpoints:
    """Tests for product endpoints."""

    def test_list_products(self, client: TestClient):
        response = client.get("/api/v1/products")
        assert response.status_code == 200
        data = response.json()
        assert data["total"] == 4
        assert [p["name"] for p in data["products"]] == ["Laptop", "Container", "Tablet", "Smartphone"]
        assert data["listing"].splitlines()[0] == "ID: 1, Name: Laptop, Quantity: 20, Price: 1500.0, Type: Good"

    def test_get_product(self, client: TestClient):
        response = client.get("/api/v1/products/2")
        assert response.status_code == 200
        assert response.json()["type"] == "cargo"

    def test_get_unknown_product(self, client: TestClient):
        response = client.get("/api/v1/products/99")
        assert response.status_code == 404
        assert response.json()["error"]["message"] == "Product not found: 99"

    def test_create_product(self, client: TestClient):
        response = client.post(
            "/api/v1/products",
            json={"name": "Pallet", "quantity": 12, "price": 40.0, "mode": "SEA"}
        )
        assert response.status_code == 201
        data = response.json()
        assert data["success"] is True
        assert data["message"] == "Added product Pallet, Quantity: 12, Price: 40.0 to inventory"
        assert data["product"]["id"] == "5"
        assert data["product"]["type"] == "cargo"

    def test_create_duplicate_product(self, client: TestClient):
        response = client.post(
            "/api/v1/products",
            json={"name": "laptop", "quantity": 5, "price": 100.0, "mode": "land"}
        )
        assert response.status_code == 409
        error = response.json()["error"]
        assert error["code"] == "DUPLICATE_NAME"
        assert error["message"] == "Item already exists: laptop"
        assert client.get("/api/v1/products").json()["total"] == 4

    def test_create_with_invalid_mode(self, client: TestClient):
        response = client.post(
            "/api/v1/products",
            json={"name": "Pallet", "quantity": 12, "price": 40.0, "mode": "air"}
        )
        assert response.status_code == 422

    def test_create_with_negative_quantity(self, client: TestClient):
        response = client.post(
            "/api/v1/products",
            json={"name": "Pallet", "quantity": -1, "price": 40.0, "mode": "land"}
        )
        assert response.status_code == 422

    def test_update_product(self, client: TestClient):
        response = client.patch("/api/v1/products/1", json={"quantity": 30, "mode": "sea"})
        assert response.status_code == 200
        data = response.json()
        assert data["message"] == "Updated Product ID: 1, Quantity: 30, New Type: cargo."
        assert data["product"]["quantity"] == 30
        assert data["product"]["type"] == "cargo"

        stats = client.get("/api/v1/inventory/statistics").json()
        assert stats["summary"] == "Total Products: 75\nGoods: 2\nCargo: 2"

    def test_update_with_unrecognized_mode(self, client: TestClient):
        response = client.patch("/api/v1/products/1", json={"mode": "air"})
        assert response.status_code == 200
        data = response.json()
        assert data["warnings"] == ["Warning: Unrecognized shipment mode. Type will not be set."]
        assert data["product"]["type"] == "good"

    def test_update_unknown_product(self, client: TestClient):
        response = client.patch("/api/v1/products/42", json={"name": "Desk"})
        assert response.status_code == 404

    def test_restock_product(self, client: TestClient):
        response = client.put("/api/v1/products/2/quantity", json={"quantity": 50})
        assert response.status_code == 200
        assert response.json()["message"] == "Stock for Container set to 50"
        assert client.get("/api/v1/products/2").json()["quantity"] == 50

    def test_restock_unknown_product(self, client: TestClient):
        response = client.put("/api/v1/products/42/quantity", json={"quantity": 50})
        assert response.status_code == 404


class TestProcurementEndpoints:
    """Tests for procurement endpoint."""

    def test_procure(self, client: TestClient):
        response = client.post(
            "/api/v1/procurements",
            json={"product_id": "1", "quantity": 15, "mode": "land"}
        )
        assert response.status_code == 200
        data = response.json()
        assert data["message"].startswith("Procured 15 of Laptop\nExpected Delivery Date: ")
        assert data["message"].endswith(data["delivery_date"])
        assert data["remaining"] == 5
        assert "Low stock notification for Laptop" in data["low_stock_notifications"]

    def test_procure_insufficient_stock(self, client: TestClient):
        response = client.post(
            "/api/v1/procurements",
            json={"product_id": "2", "quantity": 100, "mode": "sea"}
        )
        assert response.status_code == 409
        error = response.json()["error"]
        assert error["code"] == "INSUFFICIENT_STOCK"
        assert error["message"] == "Insufficient stock for Container. Requested: 100, Available: 5"
        assert client.get("/api/v1/products/2").json()["quantity"] == 5

    def test_procure_out_of_stock(self, client: TestClient):
        client.post("/api/v1/procurements", json={"product_id": "2", "quantity": 5})
        response = client.post("/api/v1/procurements", json={"product_id": "2", "quantity": 1})
        assert response.status_code == 409
        assert response.json()["error"]["message"] == "Product out of stock: Container"

    def test_procure_unknown_product(self, client: TestClient):
        response = client.post("/api/v1/procurements", json={"product_id": "99", "quantity": 1})
        assert response.status_code == 404
        assert response.json()["error"]["message"] == "Product not found: 99"

    def test_procure_without_id(self, client: TestClient):
        response = client.post("/api/v1/procurements", json={"quantity": 1})
        assert response.status_code == 404
        assert response.json()["error"]["message"] == "Product not found: ID is missing."

    def test_procure_zero_quantity(self, client: TestClient):
        response = client.post("/api/v1/procurements", json={"product_id": "1", "quantity": 0})
        assert response.status_code == 422


class TestInventoryEndpoints:
    """Tests for statistics and low stock endpoints."""

    def test_statistics(self, client: TestClient):
        response = client.get("/api/v1/inventory/statistics")
        assert response.status_code == 200
        data = response.json()
        assert data["summary"] == "Total Products: 65\nGoods: 3\nCargo: 1"
        assert data["stats"]["total_stock"] == 65

    def test_statistics_after_procurement(self, client: TestClient):
        client.post("/api/v1/procurements", json={"product_id": "4", "quantity": 5})
        data = client.get("/api/v1/inventory/statistics").json()
        assert data["summary"] == "Total Products: 60\nGoods: 3\nCargo: 1"

    def test_low_stock(self, client: TestClient):
        assert client.get("/api/v1/inventory/low-stock").json()["notifications"] == []

        client.post("/api/v1/procurements", json={"product_id": "3", "quantity": 10})
        client.post("/api/v1/procurements", json={"product_id": "3", "quantity": 1})

        data = client.get("/api/v1/inventory/low-stock").json()
        assert data["threshold"] == 10
        assert data["notifications"] == ["Low stock notification for Tablet"]
