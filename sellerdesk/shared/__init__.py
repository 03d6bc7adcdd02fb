"""Shared utilities used across 3+ features."""

from sellerdesk.shared.models import SellerOwnedMixin, TimestampMixin
from sellerdesk.shared.schemas import MessageResponse, PaginatedResponse, PaginationParams
from sellerdesk.shared.utils import fetch_page, paginate_response

__all__ = [
    "MessageResponse",
    "PaginatedResponse",
    "PaginationParams",
    "SellerOwnedMixin",
    "TimestampMixin",
    "fetch_page",
    "paginate_response",
]
