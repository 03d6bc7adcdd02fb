"""Pydantic schemas for the dashboard summary endpoint."""

from datetime import datetime
from enum import Enum
from typing import Annotated, Literal

from pydantic import BaseModel, Field


class Granularity(str, Enum):
    """Bucketing unit for the revenue trend."""

    DAILY = "daily"
    WEEKLY = "weekly"
    MONTHLY = "monthly"
    YEARLY = "yearly"

    @classmethod
    def parse(cls, value: str | None) -> "Granularity":
        """Map a ``range`` query value to a granularity, defaulting to monthly."""
        try:
            return cls((value or "").strip().lower())
        except ValueError:
            return cls.MONTHLY

    @property
    def periods(self) -> int:
        """Number of buckets in the trend series."""
        return _PERIODS[self]


_PERIODS = {
    Granularity.DAILY: 7,
    Granularity.WEEKLY: 8,
    Granularity.MONTHLY: 6,
    Granularity.YEARLY: 5,
}


class TrendPoint(BaseModel):
    """Revenue and units for one period."""

    name: str = Field(..., description="Display label, e.g. 'Oct 19', '2026-W43', 'Oct', '2026'")
    revenue: float = Field(..., ge=0)
    units: int = Field(..., ge=0)


class CategoryPerformance(BaseModel):
    """Units sold across all products in one category."""

    name: str
    value: int = Field(..., ge=0)


class OrderActivity(BaseModel):
    """A recently created order."""

    kind: Literal["order"] = "order"
    id: int
    order_id: str
    status: str
    amount: float
    occurred_at: datetime


class ProductActivity(BaseModel):
    """A recently updated product."""

    kind: Literal["product"] = "product"
    id: int
    title: str
    occurred_at: datetime


RecentActivity = Annotated[OrderActivity | ProductActivity, Field(discriminator="kind")]


class DashboardSummary(BaseModel):
    """Seller dashboard figures for one granularity."""

    total_revenue: float = Field(..., ge=0, description="Revenue across all orders")
    total_units: int = Field(..., ge=0, description="Units across all orders")
    total_products: int = Field(..., ge=0)
    total_orders: int = Field(..., ge=0)
    revenue_trend: list[TrendPoint] = Field(..., description="Oldest to newest")
    category_performance: list[CategoryPerformance]
    pending_orders: int = Field(..., ge=0)
    new_products: int = Field(..., ge=0, description="Products created in the current period")
    revenue_growth: float = Field(..., description="Last vs previous period, percent")
    units_growth: float = Field(..., description="Last vs previous period, percent")
    recent_activity: list[RecentActivity] = Field(..., max_length=10)
    range: Granularity
