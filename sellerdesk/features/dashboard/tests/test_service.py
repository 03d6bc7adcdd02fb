"""Unit tests for DashboardService with a mocked session."""

from datetime import UTC, datetime
from decimal import Decimal
from types import SimpleNamespace
from unittest.mock import AsyncMock

import pytest
from sqlalchemy.exc import OperationalError

from sellerdesk.core.exceptions import DatabaseError
from sellerdesk.features.dashboard.schemas import Granularity
from sellerdesk.features.dashboard.service import DashboardService


@pytest.mark.asyncio
class TestDashboardService:
    """Tests for DashboardService.get_summary."""

    async def test_rows_converted_and_summarized(self, fixed_now):
        order_rows = [
            SimpleNamespace(
                id=1,
                order_id="ORD-1",
                status="pending",
                total_amount=Decimal("120.50"),
                quantity=2,
                created_at=datetime(2026, 10, 3, tzinfo=UTC),
            )
        ]
        product_rows = [
            SimpleNamespace(
                id=4,
                title="Lamp",
                category="home",
                units_sold=9,
                created_at=datetime(2026, 10, 2, tzinfo=UTC),
                updated_at=datetime(2026, 10, 4, tzinfo=UTC),
            )
        ]
        db = AsyncMock()
        db.execute = AsyncMock(side_effect=[order_rows, product_rows])

        summary = await DashboardService().get_summary(
            db, seller_id=1, granularity=Granularity.MONTHLY, now=fixed_now
        )

        assert summary.total_revenue == 120.5
        assert summary.pending_orders == 1
        assert summary.category_performance[0].name == "home"
        assert summary.new_products == 1
        assert db.execute.await_count == 2

    async def test_read_failure_raises_database_error(self, fixed_now):
        db = AsyncMock()
        db.execute = AsyncMock(side_effect=OperationalError("SELECT", {}, Exception("down")))

        with pytest.raises(DatabaseError):
            await DashboardService().get_summary(
                db, seller_id=1, granularity=Granularity.DAILY, now=fixed_now
            )

    async def test_second_read_failure_raises_database_error(self, fixed_now):
        db = AsyncMock()
        db.execute = AsyncMock(
            side_effect=[[], OperationalError("SELECT", {}, Exception("down"))]
        )

        with pytest.raises(DatabaseError, match="Failed to load dashboard data"):
            await DashboardService().get_summary(
                db, seller_id=1, granularity=Granularity.DAILY, now=fixed_now
            )
