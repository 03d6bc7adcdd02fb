"""Order tracking for the calling seller's products."""

from sellerdesk.features.orders.models import Order, OrderStatus, PaymentMethod, PaymentStatus
from sellerdesk.features.orders.routes import router
from sellerdesk.features.orders.schemas import OrderCreate, OrderResponse, OrderUpdate
from sellerdesk.features.orders.service import OrderService

__all__ = [
    "Order",
    "OrderCreate",
    "OrderResponse",
    "OrderService",
    "OrderStatus",
    "OrderUpdate",
    "PaymentMethod",
    "PaymentStatus",
    "router",
]
