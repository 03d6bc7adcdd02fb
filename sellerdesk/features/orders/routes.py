"""API routes for order tracking."""

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from sellerdesk.core.database import get_db
from sellerdesk.core.security import CurrentSeller
from sellerdesk.features.orders.models import OrderStatus
from sellerdesk.features.orders.schemas import (
    OrderCreate,
    OrderMutationResponse,
    OrderResponse,
    OrderUpdate,
)
from sellerdesk.features.orders.service import OrderService
from sellerdesk.shared.schemas import PaginatedResponse, PaginationParams

router = APIRouter(prefix="/orders", tags=["orders"])


@router.get(
    "",
    response_model=PaginatedResponse[OrderResponse],
    summary="List orders",
    description="""
List the calling seller's orders, newest first.

**Filtering**:
- `status`: pending, confirmed, shipped, delivered or cancelled
""",
)
async def list_orders(
    seller: CurrentSeller,
    db: AsyncSession = Depends(get_db),
    page: int = Query(1, ge=1, description="Page number (1-indexed)"),
    page_size: int = Query(20, ge=1, le=100, description="Orders per page (max 100)"),
    status: OrderStatus | None = Query(None, description="Filter by status"),
) -> PaginatedResponse[OrderResponse]:
    """List orders owned by the caller."""
    return await OrderService().list_orders(
        db=db,
        seller_id=seller.id,
        pagination=PaginationParams(page=page, page_size=page_size),
        status=status,
    )


@router.post(
    "",
    response_model=OrderMutationResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Record an order",
    description="Returns 404 if the product does not belong to the caller.",
)
async def create_order(
    order_create: OrderCreate,
    seller: CurrentSeller,
    db: AsyncSession = Depends(get_db),
) -> OrderMutationResponse:
    """Record an order against one of the caller's products."""
    order = await OrderService().create_order(db=db, seller_id=seller.id, order_create=order_create)
    return OrderMutationResponse(message="Order created successfully", order=order)


@router.get(
    "/{order_id}",
    response_model=OrderResponse,
    summary="Get an order",
)
async def get_order(
    order_id: int,
    seller: CurrentSeller,
    db: AsyncSession = Depends(get_db),
) -> OrderResponse:
    """Get a single order owned by the caller."""
    return await OrderService().get_order(db=db, seller_id=seller.id, order_id=order_id)


@router.put(
    "/{order_id}",
    response_model=OrderMutationResponse,
    summary="Update order fulfilment",
    description="""
Update status, payment status, tracking number or notes.

**Status transitions**: pending → confirmed → shipped → delivered;
pending or confirmed → cancelled. Anything else returns 400.
""",
)
async def update_order(
    order_id: int,
    order_update: OrderUpdate,
    seller: CurrentSeller,
    db: AsyncSession = Depends(get_db),
) -> OrderMutationResponse:
    """Update an order owned by the caller."""
    order = await OrderService().update_order(
        db=db,
        seller_id=seller.id,
        order_id=order_id,
        order_update=order_update,
    )
    return OrderMutationResponse(message="Order updated", order=order)
