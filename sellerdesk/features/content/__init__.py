"""Seller content: posts, engagement counters and analytics."""

from sellerdesk.features.content.analytics import compute_content_analytics
from sellerdesk.features.content.models import MediaType, Post
from sellerdesk.features.content.routes import router
from sellerdesk.features.content.schemas import ContentAnalytics, PostCreate, PostResponse
from sellerdesk.features.content.service import ContentService

__all__ = [
    "ContentAnalytics",
    "ContentService",
    "MediaType",
    "Post",
    "PostCreate",
    "PostResponse",
    "compute_content_analytics",
    "router",
]
