"""Integration tests for the dashboard summary.

Requires PostgreSQL to be running: docker-compose up -d
"""

import pytest

CUSTOMER = {
    "name": "Ravi",
    "email": "ravi@example.com",
    "phone": "9876543210",
    "address": "Pune",
}


@pytest.mark.integration
@pytest.mark.asyncio
class TestDashboardIntegration:
    """Summary computed from orders and products in a real database."""

    async def test_summary_reflects_only_callers_data(
        self, db_client, seller_headers, other_seller_headers
    ):
        product = await db_client.post(
            "/products",
            json={"title": "Lamp", "price": "100.00", "category": "home"},
            headers=seller_headers,
        )
        product_id = product.json()["product"]["id"]
        await db_client.put(
            f"/products/{product_id}", json={"units_sold": 6}, headers=seller_headers
        )
        for quantity in (1, 2):
            await db_client.post(
                "/orders",
                json={"product_id": product_id, "quantity": quantity, "customer": CUSTOMER},
                headers=seller_headers,
            )

        response = await db_client.get("/dashboard/summary?range=daily", headers=seller_headers)

        assert response.status_code == 200
        data = response.json()
        assert data["range"] == "daily"
        assert data["total_orders"] == 2
        assert data["total_revenue"] == 300.0
        assert data["total_units"] == 3
        assert data["pending_orders"] == 2
        assert data["revenue_trend"][-1]["revenue"] == 300.0
        assert data["category_performance"] == [{"name": "home", "value": 6}]
        assert len(data["recent_activity"]) == 3

        other = await db_client.get("/dashboard/summary", headers=other_seller_headers)
        assert other.json()["total_orders"] == 0
        assert other.json()["total_products"] == 0
