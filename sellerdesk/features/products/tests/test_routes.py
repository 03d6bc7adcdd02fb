"""Route tests for product endpoints with the service layer patched."""

from datetime import UTC, datetime
from decimal import Decimal
from unittest.mock import AsyncMock, patch

import pytest

from sellerdesk.conftest import TEST_SELLER_ID
from sellerdesk.core.exceptions import NotFoundError
from sellerdesk.features.products.schemas import DeliveryOptions, ProductResponse
from sellerdesk.shared.schemas import PaginatedResponse


def make_product_response(product_id: int = 1) -> ProductResponse:
    now = datetime(2026, 10, 19, tzinfo=UTC)
    return ProductResponse(
        id=product_id,
        seller_id=TEST_SELLER_ID,
        title="Kurta",
        description="",
        price=Decimal("499.00"),
        original_price=Decimal("0"),
        category="clothing",
        subcategory="",
        size="M",
        material="Cotton",
        stock=10,
        images=[],
        colors=[],
        tags=[],
        units_sold=0,
        is_active=True,
        is_featured=False,
        delivery=DeliveryOptions(),
        rating_average=Decimal("0"),
        rating_count=0,
        created_at=now,
        updated_at=now,
    )


@pytest.mark.asyncio
class TestProductRoutes:
    """Tests for /products endpoints."""

    @pytest.mark.parametrize(
        ("method", "path"),
        [
            ("get", "/products"),
            ("post", "/products"),
            ("get", "/products/1"),
            ("put", "/products/1"),
            ("delete", "/products/1"),
        ],
    )
    async def test_requires_token(self, client, method, path):
        response = await client.request(method.upper(), path, json={})

        assert response.status_code == 401
        assert response.json()["code"] == "UNAUTHORIZED"

    async def test_create_returns_201(self, client, auth_headers):
        create = AsyncMock(return_value=make_product_response())
        with patch("sellerdesk.features.products.routes.ProductService.create_product", new=create):
            response = await client.post(
                "/products",
                headers=auth_headers,
                json={"title": "Kurta", "price": 499, "category": "clothing"},
            )

        assert response.status_code == 201
        assert response.json()["message"] == "Product created successfully"
        assert create.await_args.kwargs["seller_id"] == TEST_SELLER_ID

    async def test_create_missing_title_returns_422(self, client, auth_headers):
        response = await client.post(
            "/products", headers=auth_headers, json={"price": 499, "category": "clothing"}
        )

        assert response.status_code == 422

    async def test_list_passes_pagination_and_filter(self, client, auth_headers):
        page = PaginatedResponse[ProductResponse](
            items=[make_product_response()], total=1, page=2, page_size=5, pages=1
        )
        list_products = AsyncMock(return_value=page)
        with patch(
            "sellerdesk.features.products.routes.ProductService.list_products", new=list_products
        ):
            response = await client.get(
                "/products?page=2&page_size=5&category=clothing", headers=auth_headers
            )

        assert response.status_code == 200
        assert response.json()["total"] == 1
        kwargs = list_products.await_args.kwargs
        assert kwargs["pagination"].page == 2
        assert kwargs["pagination"].page_size == 5
        assert kwargs["category"].value == "clothing"

    async def test_page_size_above_limit_rejected(self, client, auth_headers):
        response = await client.get("/products?page_size=101", headers=auth_headers)

        assert response.status_code == 422

    async def test_not_owned_product_is_404(self, client, auth_headers):
        with patch(
            "sellerdesk.features.products.routes.ProductService.get_product",
            new=AsyncMock(side_effect=NotFoundError("Product not found")),
        ):
            response = await client.get("/products/99", headers=auth_headers)

        assert response.status_code == 404
        assert response.json()["detail"] == "Product not found"

    async def test_delete_returns_message(self, client, auth_headers):
        with patch(
            "sellerdesk.features.products.routes.ProductService.delete_product",
            new=AsyncMock(return_value=None),
        ):
            response = await client.delete("/products/1", headers=auth_headers)

        assert response.status_code == 200
        assert response.json() == {"message": "Product deleted"}
