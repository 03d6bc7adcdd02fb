"""Service layer for order tracking.

Orders are always looked up with ``seller_id`` in the WHERE clause; an order
belonging to another seller is indistinguishable from a missing one.
"""

import uuid

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from sellerdesk.core.exceptions import BadRequestError, NotFoundError
from sellerdesk.core.logging import get_logger
from sellerdesk.features.orders.models import (
    VALID_ORDER_TRANSITIONS,
    Order,
    OrderStatus,
)
from sellerdesk.features.orders.schemas import (
    CustomerInfo,
    OrderCreate,
    OrderResponse,
    OrderUpdate,
)
from sellerdesk.features.products.models import Product
from sellerdesk.shared.schemas import PaginatedResponse, PaginationParams
from sellerdesk.shared.utils import fetch_page

logger = get_logger(__name__)


def generate_order_reference() -> str:
    """Generate an external order reference such as ``ORD-1A2B3C4D5E6F``."""
    return f"ORD-{uuid.uuid4().hex[:12].upper()}"


class OrderService:
    """Owner-scoped order listing, creation and fulfilment updates."""

    async def list_orders(
        self,
        db: AsyncSession,
        seller_id: int,
        pagination: PaginationParams,
        status: OrderStatus | None = None,
    ) -> PaginatedResponse[OrderResponse]:
        """List the seller's orders, newest first.

        Args:
            db: Database session.
            seller_id: Calling seller.
            pagination: Page to return.
            status: Filter by status (optional).

        Returns:
            One page of orders.
        """
        stmt = select(Order).where(Order.seller_id == seller_id)
        if status is not None:
            stmt = stmt.where(Order.status == status.value)
        stmt = stmt.order_by(Order.created_at.desc(), Order.id.desc())

        return await fetch_page(db, stmt, pagination, self._to_response)

    async def get_order(self, db: AsyncSession, seller_id: int, order_id: int) -> OrderResponse:
        """Get one of the seller's orders.

        Raises:
            NotFoundError: If absent or owned by another seller.
        """
        return self._to_response(await self._get_owned(db, seller_id, order_id))

    async def create_order(
        self,
        db: AsyncSession,
        seller_id: int,
        order_create: OrderCreate,
    ) -> OrderResponse:
        """Record an order for one of the seller's products.

        Raises:
            NotFoundError: If the product is absent or owned by another seller.
        """
        product_stmt = select(Product).where(
            Product.id == order_create.product_id,
            Product.seller_id == seller_id,
        )
        product = (await db.execute(product_stmt)).scalar_one_or_none()
        if product is None:
            raise NotFoundError("Product not found")

        unit_price = order_create.price if order_create.price is not None else product.price
        order = Order(
            order_id=generate_order_reference(),
            seller_id=seller_id,
            product_id=product.id,
            quantity=order_create.quantity,
            price=unit_price,
            total_amount=unit_price * order_create.quantity,
            status=OrderStatus.PENDING.value,
            customer_name=order_create.customer.name,
            customer_email=order_create.customer.email,
            customer_phone=order_create.customer.phone,
            customer_address=order_create.customer.address,
            payment_method=order_create.payment_method.value,
            notes=order_create.notes,
        )
        db.add(order)
        await db.flush()
        await db.refresh(order)

        logger.info(
            "orders.order_created",
            order_id=order.order_id,
            product_id=product.id,
            quantity=order.quantity,
            total_amount=float(order.total_amount),
        )
        return self._to_response(order)

    async def update_order(
        self,
        db: AsyncSession,
        seller_id: int,
        order_id: int,
        order_update: OrderUpdate,
    ) -> OrderResponse:
        """Apply a fulfilment update to one of the seller's orders.

        Raises:
            NotFoundError: If absent or owned by another seller.
            BadRequestError: If the status change is not a valid transition.
        """
        order = await self._get_owned(db, seller_id, order_id)

        if order_update.status is not None:
            current = OrderStatus(order.status)
            target = order_update.status
            if target != current and target not in VALID_ORDER_TRANSITIONS[current]:
                raise BadRequestError(
                    f"Cannot change order status from '{current.value}' to '{target.value}'"
                )
            order.status = target.value
        if order_update.payment_status is not None:
            order.payment_status = order_update.payment_status.value
        if order_update.tracking_number is not None:
            order.tracking_number = order_update.tracking_number
        if order_update.notes is not None:
            order.notes = order_update.notes

        await db.flush()
        await db.refresh(order)

        logger.info(
            "orders.order_updated",
            order_id=order.order_id,
            status=order.status,
            payment_status=order.payment_status,
        )
        return self._to_response(order)

    async def _get_owned(self, db: AsyncSession, seller_id: int, order_id: int) -> Order:
        stmt = select(Order).where(Order.id == order_id, Order.seller_id == seller_id)
        order = (await db.execute(stmt)).scalar_one_or_none()
        if order is None:
            raise NotFoundError("Order not found")
        return order

    def _to_response(self, order: Order) -> OrderResponse:
        """Convert ORM model to response schema."""
        return OrderResponse(
            id=order.id,
            order_id=order.order_id,
            seller_id=order.seller_id,
            product_id=order.product_id,
            quantity=order.quantity,
            price=order.price,
            total_amount=order.total_amount,
            status=OrderStatus(order.status),
            customer=CustomerInfo(
                name=order.customer_name,
                email=order.customer_email,
                phone=order.customer_phone,
                address=order.customer_address,
            ),
            payment_method=order.payment_method,  # type: ignore[arg-type]
            payment_status=order.payment_status,  # type: ignore[arg-type]
            tracking_number=order.tracking_number,
            notes=order.notes,
            created_at=order.created_at,
            updated_at=order.updated_at,
        )
