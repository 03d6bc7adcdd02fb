"""Shared query and response helpers."""

import math
from collections.abc import Callable, Sequence
from typing import Any, TypeVar

from sqlalchemy import Select, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from sellerdesk.shared.schemas import PaginatedResponse, PaginationParams

T = TypeVar("T")


def paginate_response(
    items: list[T],
    total: int,
    pagination: PaginationParams,
) -> PaginatedResponse[T]:
    """Create a paginated response from items and total count.

    Args:
        items: List of items for the current page.
        total: Total count of all items.
        pagination: Pagination parameters used for the query.

    Returns:
        PaginatedResponse with computed page count.
    """
    pages = math.ceil(total / pagination.page_size) if total > 0 else 0
    return PaginatedResponse[T](
        items=items,
        total=total,
        page=pagination.page,
        page_size=pagination.page_size,
        pages=pages,
    )


async def fetch_page(
    db: AsyncSession,
    stmt: Select[Any],
    pagination: PaginationParams,
    to_item: Callable[[Any], T],
) -> PaginatedResponse[T]:
    """Run a filtered, ordered select as one page plus a total count.

    Args:
        db: Database session.
        stmt: Select with filters and ordering already applied.
        pagination: Page to fetch.
        to_item: Converts one ORM row into a response item.

    Returns:
        One page of converted items.
    """
    count_stmt = select(func.count()).select_from(stmt.order_by(None).subquery())
    total = (await db.execute(count_stmt)).scalar_one()

    result = await db.execute(stmt.offset(pagination.offset).limit(pagination.limit))
    rows: Sequence[Any] = result.scalars().all()

    return paginate_response([to_item(row) for row in rows], total, pagination)
