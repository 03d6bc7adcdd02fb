"""Service layer for product catalog operations.

Every statement filters on ``seller_id`` so another seller's product is
never loaded, only reported as not found.
"""

from typing import Any

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from sellerdesk.core.exceptions import NotFoundError
from sellerdesk.core.logging import get_logger
from sellerdesk.features.products.models import Product, ProductCategory
from sellerdesk.features.products.schemas import (
    ProductCreate,
    ProductResponse,
    ProductUpdate,
)
from sellerdesk.shared.schemas import PaginatedResponse, PaginationParams
from sellerdesk.shared.utils import fetch_page

logger = get_logger(__name__)


class ProductService:
    """Owner-scoped product CRUD."""

    async def list_products(
        self,
        db: AsyncSession,
        seller_id: int,
        pagination: PaginationParams,
        category: ProductCategory | None = None,
    ) -> PaginatedResponse[ProductResponse]:
        """List the seller's products, newest first.

        Args:
            db: Database session.
            seller_id: Calling seller.
            pagination: Page to return.
            category: Filter by category (optional).

        Returns:
            One page of products.
        """
        stmt = select(Product).where(Product.seller_id == seller_id)
        if category is not None:
            stmt = stmt.where(Product.category == category.value)
        stmt = stmt.order_by(Product.created_at.desc(), Product.id.desc())

        return await fetch_page(db, stmt, pagination, ProductResponse.model_validate)

    async def create_product(
        self,
        db: AsyncSession,
        seller_id: int,
        product_create: ProductCreate,
    ) -> ProductResponse:
        """Create a product owned by the calling seller."""
        values = product_create.model_dump(mode="json")
        values["price"] = product_create.price
        values["original_price"] = product_create.original_price

        product = Product(seller_id=seller_id, **values)
        db.add(product)
        await db.flush()
        await db.refresh(product)

        logger.info(
            "products.product_created",
            product_id=product.id,
            category=product.category,
        )
        return ProductResponse.model_validate(product)

    async def get_product(
        self,
        db: AsyncSession,
        seller_id: int,
        product_id: int,
    ) -> ProductResponse:
        """Get one of the seller's products.

        Raises:
            NotFoundError: If absent or owned by another seller.
        """
        product = await self._get_owned(db, seller_id, product_id)
        return ProductResponse.model_validate(product)

    async def update_product(
        self,
        db: AsyncSession,
        seller_id: int,
        product_id: int,
        product_update: ProductUpdate,
    ) -> ProductResponse:
        """Apply a partial update to one of the seller's products.

        Raises:
            NotFoundError: If absent or owned by another seller.
        """
        product = await self._get_owned(db, seller_id, product_id)

        changes: dict[str, Any] = product_update.model_dump(exclude_unset=True)
        for field, value in changes.items():
            if value is None:
                continue
            if field == "delivery":
                value = product_update.delivery.model_dump(mode="json")  # type: ignore[union-attr]
            elif field == "category":
                value = value.value
            setattr(product, field, value)

        await db.flush()
        await db.refresh(product)

        logger.info(
            "products.product_updated",
            product_id=product_id,
            fields=sorted(changes),
        )
        return ProductResponse.model_validate(product)

    async def delete_product(
        self,
        db: AsyncSession,
        seller_id: int,
        product_id: int,
    ) -> None:
        """Delete one of the seller's products.

        Raises:
            NotFoundError: If absent or owned by another seller.
        """
        product = await self._get_owned(db, seller_id, product_id)
        await db.delete(product)
        await db.flush()

        logger.info("products.product_deleted", product_id=product_id)

    async def _get_owned(
        self,
        db: AsyncSession,
        seller_id: int,
        product_id: int,
    ) -> Product:
        stmt = select(Product).where(
            Product.id == product_id,
            Product.seller_id == seller_id,
        )
        product = (await db.execute(stmt)).scalar_one_or_none()
        if product is None:
            raise NotFoundError("Product not found")
        return product
