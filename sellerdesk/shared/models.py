"""Shared SQLAlchemy model mixins."""

from datetime import datetime

from sqlalchemy import DateTime, ForeignKey, Integer, func
from sqlalchemy.orm import Mapped, declared_attr, mapped_column


class TimestampMixin:
    """Mixin providing created_at and updated_at timestamps."""

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        nullable=False,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        onupdate=func.now(),
        nullable=False,
    )


class SellerOwnedMixin:
    """Mixin for rows owned by a single seller.

    Every read or write of these rows must filter on ``seller_id``.
    """

    @declared_attr
    def seller_id(cls) -> Mapped[int]:  # noqa: N805
        return mapped_column(
            Integer,
            ForeignKey("seller.id", ondelete="CASCADE"),
            nullable=False,
            index=True,
        )
