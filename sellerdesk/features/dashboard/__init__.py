"""Seller dashboard: period aggregation and summary endpoint."""

from sellerdesk.features.dashboard.aggregator import OrderRecord, ProductRecord, summarize
from sellerdesk.features.dashboard.routes import router
from sellerdesk.features.dashboard.schemas import DashboardSummary, Granularity
from sellerdesk.features.dashboard.service import DashboardService

__all__ = [
    "DashboardService",
    "DashboardSummary",
    "Granularity",
    "OrderRecord",
    "ProductRecord",
    "router",
    "summarize",
]
