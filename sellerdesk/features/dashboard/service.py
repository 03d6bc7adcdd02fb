"""Service layer for the dashboard summary.

Loads the seller's orders and products, converts them into plain records and
hands them to the pure aggregator.
"""

from datetime import UTC, datetime

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from sellerdesk.core.exceptions import DatabaseError
from sellerdesk.core.logging import get_logger
from sellerdesk.features.dashboard.aggregator import OrderRecord, ProductRecord, summarize
from sellerdesk.features.dashboard.schemas import DashboardSummary, Granularity
from sellerdesk.features.orders.models import Order
from sellerdesk.features.products.models import Product

logger = get_logger(__name__)


class DashboardService:
    """Computes dashboard summaries for a seller."""

    async def get_summary(
        self,
        db: AsyncSession,
        seller_id: int,
        granularity: Granularity,
        now: datetime | None = None,
    ) -> DashboardSummary:
        """Compute the dashboard summary for one seller.

        Args:
            db: Database session.
            seller_id: Calling seller.
            granularity: Trend bucketing unit.
            now: Reference instant (defaults to the current UTC time).

        Returns:
            Dashboard summary.

        Raises:
            DatabaseError: If either read fails.
        """
        now = now or datetime.now(UTC)

        try:
            orders = await self._load_orders(db, seller_id)
            products = await self._load_products(db, seller_id)
        except SQLAlchemyError as e:
            logger.error(
                "dashboard.summary_failed",
                error=str(e),
                error_type=type(e).__name__,
            )
            raise DatabaseError("Failed to load dashboard data") from e

        summary = summarize(now, granularity, orders, products)

        logger.info(
            "dashboard.summary_computed",
            range=granularity.value,
            order_count=summary.total_orders,
            product_count=summary.total_products,
        )
        return summary

    async def _load_orders(self, db: AsyncSession, seller_id: int) -> list[OrderRecord]:
        stmt = select(
            Order.id,
            Order.order_id,
            Order.status,
            Order.total_amount,
            Order.quantity,
            Order.created_at,
        ).where(Order.seller_id == seller_id)
        result = await db.execute(stmt)
        return [
            OrderRecord(
                id=row.id,
                order_id=row.order_id,
                status=row.status,
                total_amount=float(row.total_amount),
                quantity=row.quantity,
                created_at=row.created_at,
            )
            for row in result
        ]

    async def _load_products(self, db: AsyncSession, seller_id: int) -> list[ProductRecord]:
        stmt = select(
            Product.id,
            Product.title,
            Product.category,
            Product.units_sold,
            Product.created_at,
            Product.updated_at,
        ).where(Product.seller_id == seller_id)
        result = await db.execute(stmt)
        return [
            ProductRecord(
                id=row.id,
                title=row.title,
                category=row.category,
                units_sold=row.units_sold,
                created_at=row.created_at,
                updated_at=row.updated_at,
            )
            for row in result
        ]
