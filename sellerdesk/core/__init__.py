"""Core infrastructure: config, database, logging, middleware, exceptions, security."""

from sellerdesk.core.config import Settings, get_settings
from sellerdesk.core.database import Base, get_db
from sellerdesk.core.logging import get_logger, request_id_ctx, seller_id_ctx
from sellerdesk.core.security import CurrentSeller, TokenSeller, get_current_seller

__all__ = [
    "Base",
    "CurrentSeller",
    "Settings",
    "TokenSeller",
    "get_current_seller",
    "get_db",
    "get_logger",
    "get_settings",
    "request_id_ctx",
    "seller_id_ctx",
]
