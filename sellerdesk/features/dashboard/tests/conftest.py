"""Test fixtures for dashboard module."""

from datetime import datetime

from sellerdesk.features.dashboard.aggregator import OrderRecord, ProductRecord


def make_order(
    created_at: datetime,
    total_amount: float = 100.0,
    quantity: int = 1,
    status: str = "delivered",
    order_pk: int = 1,
) -> OrderRecord:
    """Build an order record with sensible defaults."""
    return OrderRecord(
        id=order_pk,
        order_id=f"ORD-{order_pk:012d}",
        status=status,
        total_amount=total_amount,
        quantity=quantity,
        created_at=created_at,
    )


def make_product(
    created_at: datetime,
    category: str = "clothing",
    units_sold: int = 0,
    updated_at: datetime | None = None,
    product_pk: int = 1,
) -> ProductRecord:
    """Build a product record with sensible defaults."""
    return ProductRecord(
        id=product_pk,
        title=f"Product {product_pk}",
        category=category,
        units_sold=units_sold,
        created_at=created_at,
        updated_at=updated_at or created_at,
    )
