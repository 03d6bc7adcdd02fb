"""Route tests for order endpoints."""

from unittest.mock import AsyncMock, patch

import pytest

from sellerdesk.core.exceptions import BadRequestError


@pytest.mark.asyncio
class TestOrderRoutes:
    """Tests for /orders endpoints with the service layer patched."""

    @pytest.mark.parametrize(
        ("method", "path"),
        [("get", "/orders"), ("post", "/orders"), ("get", "/orders/1"), ("put", "/orders/1")],
    )
    async def test_requires_token(self, client, method, path):
        response = await client.request(method.upper(), path, json={})

        assert response.status_code == 401

    async def test_invalid_status_filter_rejected(self, client, auth_headers):
        response = await client.get("/orders?status=lost", headers=auth_headers)

        assert response.status_code == 422

    async def test_invalid_transition_returns_400(self, client, auth_headers):
        with patch(
            "sellerdesk.features.orders.routes.OrderService.update_order",
            new=AsyncMock(
                side_effect=BadRequestError("Cannot change order status from 'delivered' to 'pending'")
            ),
        ):
            response = await client.put(
                "/orders/1", headers=auth_headers, json={"status": "pending"}
            )

        assert response.status_code == 400
        assert response.json()["code"] == "BAD_REQUEST"
