"""Period aggregation for the seller dashboard.

Buckets a seller's orders into a fixed-length trend series and derives
period-over-period growth, category rollups, the new-product count and a
recent-activity feed.

Everything here is a pure function of ``(now, granularity, orders, products)``:
no database access, no clock reads, no shared state. All timestamps are
normalized to UTC (naive values are taken as UTC) before keying.
"""

import math
from collections import defaultdict
from collections.abc import Sequence
from dataclasses import dataclass
from datetime import UTC, date, datetime, timedelta

from sellerdesk.features.dashboard.schemas import (
    CategoryPerformance,
    DashboardSummary,
    Granularity,
    OrderActivity,
    ProductActivity,
    RecentActivity,
    TrendPoint,
)

RECENT_PER_KIND = 5
RECENT_ACTIVITY_LIMIT = 10

# Fixed English abbreviations; strftime("%b") follows the process locale
MONTH_ABBR = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")


@dataclass(frozen=True)
class OrderRecord:
    """The order fields the aggregator reads."""

    id: int
    order_id: str
    status: str
    total_amount: float
    quantity: int
    created_at: datetime


@dataclass(frozen=True)
class ProductRecord:
    """The product fields the aggregator reads."""

    id: int
    title: str
    category: str
    units_sold: int
    created_at: datetime
    updated_at: datetime


# =============================================================================
# Period keys
# =============================================================================


def as_utc(value: datetime) -> datetime:
    """Return ``value`` in UTC, treating naive datetimes as UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value.astimezone(UTC)


def _sunday_weekday(day: date) -> int:
    """Weekday with Sunday as 0 and Saturday as 6."""
    return day.isoweekday() % 7


def week_number(day: date) -> int:
    """Sunday-based week of year; the week containing 1 January is week 1."""
    jan1 = date(day.year, 1, 1)
    day_of_year = day.toordinal() - jan1.toordinal() + 1
    return math.ceil((day_of_year + _sunday_weekday(jan1)) / 7)


def period_key(moment: datetime, granularity: Granularity) -> str:
    """Key identifying the period ``moment`` falls in.

    Examples:
        daily ``2026-10-19``, weekly ``2026-W43``, monthly ``2026-10``,
        yearly ``2026``.
    """
    day = as_utc(moment).date()
    if granularity is Granularity.DAILY:
        return day.isoformat()
    if granularity is Granularity.WEEKLY:
        return f"{day.year}-W{week_number(day)}"
    if granularity is Granularity.YEARLY:
        return str(day.year)
    return f"{day.year}-{day.month:02d}"


def _anchor(now: datetime, granularity: Granularity, periods_back: int) -> datetime:
    """An instant inside the period ``periods_back`` periods before now."""
    if granularity is Granularity.DAILY:
        return now - timedelta(days=periods_back)
    if granularity is Granularity.WEEKLY:
        return now - timedelta(days=7 * periods_back)
    if granularity is Granularity.YEARLY:
        return datetime(now.year - periods_back, 1, 1, tzinfo=UTC)
    year, month_index = divmod(now.year * 12 + now.month - 1 - periods_back, 12)
    return datetime(year, month_index + 1, 1, tzinfo=UTC)


def _label(anchor: datetime, granularity: Granularity, key: str) -> str:
    if granularity is Granularity.DAILY:
        return f"{MONTH_ABBR[anchor.month - 1]} {anchor.day}"
    if granularity is Granularity.WEEKLY:
        return key
    if granularity is Granularity.YEARLY:
        return str(anchor.year)
    return MONTH_ABBR[anchor.month - 1]


def start_of_period(now: datetime, granularity: Granularity) -> datetime:
    """Start of the period containing ``now``; weeks start on Sunday."""
    midnight = datetime(now.year, now.month, now.day, tzinfo=UTC)
    if granularity is Granularity.DAILY:
        return midnight
    if granularity is Granularity.WEEKLY:
        return midnight - timedelta(days=_sunday_weekday(midnight.date()))
    if granularity is Granularity.YEARLY:
        return datetime(now.year, 1, 1, tzinfo=UTC)
    return datetime(now.year, now.month, 1, tzinfo=UTC)


# =============================================================================
# Derived figures
# =============================================================================


def build_trend(
    now: datetime,
    granularity: Granularity,
    orders: Sequence[OrderRecord],
) -> list[TrendPoint]:
    """Revenue and units per period, oldest to newest, empty periods zeroed."""
    revenue_by_key: dict[str, float] = defaultdict(float)
    units_by_key: dict[str, int] = defaultdict(int)
    for order in orders:
        key = period_key(order.created_at, granularity)
        revenue_by_key[key] += order.total_amount
        units_by_key[key] += order.quantity

    trend: list[TrendPoint] = []
    for periods_back in range(granularity.periods - 1, -1, -1):
        anchor = _anchor(now, granularity, periods_back)
        key = period_key(anchor, granularity)
        trend.append(
            TrendPoint(
                name=_label(anchor, granularity, key),
                revenue=round(revenue_by_key.get(key, 0.0), 2),
                units=units_by_key.get(key, 0),
            )
        )
    return trend


def growth_percent(previous: float, current: float) -> float:
    """Percent change from ``previous`` to ``current``, 0 when previous is 0."""
    if previous == 0:
        return 0.0
    return round((current - previous) / previous * 100, 1)


def compute_growth(trend: Sequence[TrendPoint]) -> tuple[float, float]:
    """Revenue and units growth of the last period over the one before it.

    Returns:
        Tuple of (revenue_growth, units_growth).
    """
    if len(trend) < 2:
        return 0.0, 0.0
    previous, last = trend[-2], trend[-1]
    return (
        growth_percent(previous.revenue, last.revenue),
        growth_percent(previous.units, last.units),
    )


def rollup_categories(products: Sequence[ProductRecord]) -> list[CategoryPerformance]:
    """Units sold per category, largest first then by name."""
    units: dict[str, int] = defaultdict(int)
    for product in products:
        units[product.category] += product.units_sold
    return [
        CategoryPerformance(name=name, value=value)
        for name, value in sorted(units.items(), key=lambda item: (-item[1], item[0]))
    ]


def recent_activity(
    orders: Sequence[OrderRecord],
    products: Sequence[ProductRecord],
) -> list[RecentActivity]:
    """Latest orders (by creation) and products (by update), newest first."""
    latest_orders = sorted(orders, key=lambda o: as_utc(o.created_at), reverse=True)
    latest_products = sorted(products, key=lambda p: as_utc(p.updated_at), reverse=True)

    feed: list[RecentActivity] = [
        OrderActivity(
            id=o.id,
            order_id=o.order_id,
            status=o.status,
            amount=o.total_amount,
            occurred_at=as_utc(o.created_at),
        )
        for o in latest_orders[:RECENT_PER_KIND]
    ]
    feed.extend(
        ProductActivity(id=p.id, title=p.title, occurred_at=as_utc(p.updated_at))
        for p in latest_products[:RECENT_PER_KIND]
    )
    feed.sort(key=lambda entry: entry.occurred_at, reverse=True)
    return feed[:RECENT_ACTIVITY_LIMIT]


def summarize(
    now: datetime,
    granularity: Granularity,
    orders: Sequence[OrderRecord],
    products: Sequence[ProductRecord],
) -> DashboardSummary:
    """Compute the dashboard summary.

    Args:
        now: Current instant; naive values are taken as UTC.
        granularity: Bucketing unit for the trend and new-product window.
        orders: All of the seller's orders.
        products: All of the seller's products.

    Returns:
        Totals over all orders, the trend series with growth, category
        rollup, new-product count and recent activity.
    """
    now = as_utc(now)
    trend = build_trend(now, granularity, orders)
    revenue_growth, units_growth = compute_growth(trend)

    period_start = start_of_period(now, granularity)
    new_products = sum(
        1 for p in products if period_start <= as_utc(p.created_at) <= now
    )

    return DashboardSummary(
        total_revenue=round(sum(o.total_amount for o in orders), 2),
        total_units=sum(o.quantity for o in orders),
        total_products=len(products),
        total_orders=len(orders),
        revenue_trend=trend,
        category_performance=rollup_categories(products),
        pending_orders=sum(1 for o in orders if o.status == "pending"),
        new_products=new_products,
        revenue_growth=revenue_growth,
        units_growth=units_growth,
        recent_activity=recent_activity(orders, products),
        range=granularity,
    )
