"""API routes for the seller dashboard."""

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from sellerdesk.core.database import get_db
from sellerdesk.core.security import CurrentSeller
from sellerdesk.features.dashboard.schemas import DashboardSummary, Granularity
from sellerdesk.features.dashboard.service import DashboardService

router = APIRouter(prefix="/dashboard", tags=["dashboard"])


@router.get(
    "/summary",
    response_model=DashboardSummary,
    summary="Dashboard summary",
    description="""
Revenue, units, trend series and recent activity for the calling seller.

**Ranges** (`range` query parameter):
- `daily`: last 7 days
- `weekly`: last 8 Sunday-based weeks
- `monthly` (default): last 6 months
- `yearly`: last 5 years

Unrecognized values are served as `monthly`.

**Growth**: last period vs the one before, in percent, one decimal.
0 when the previous period is empty.
""",
)
async def get_dashboard_summary(
    seller: CurrentSeller,
    db: AsyncSession = Depends(get_db),
    range_: str | None = Query(None, alias="range", description="daily, weekly, monthly or yearly"),
) -> DashboardSummary:
    """Compute the dashboard summary for the caller."""
    return await DashboardService().get_summary(
        db=db,
        seller_id=seller.id,
        granularity=Granularity.parse(range_),
    )
