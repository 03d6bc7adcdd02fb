"""Post ORM model."""

from enum import Enum

from sqlalchemy import Boolean, CheckConstraint, ForeignKey, Index, Integer, String, Text
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import Mapped, mapped_column

from sellerdesk.core.database import Base
from sellerdesk.shared.models import SellerOwnedMixin, TimestampMixin


class MediaType(str, Enum):
    IMAGE = "image"
    VIDEO = "video"


class Post(SellerOwnedMixin, TimestampMixin, Base):
    """A piece of promotional content published by a seller.

    Attributes:
        id: Primary key.
        seller_id: Owning seller (FK to seller).
        title: Post title.
        description: Post body.
        media: Media URLs, first one is the cover.
        media_type: image or video.
        tagged_product_id: Promoted product (FK to product, nulled if deleted).
        views: View counter.
        likes: Like counter.
        comments: Comment counter.
        liked_by: Seller ids that liked the post; one like per seller.
        is_active: Whether the post is published.
    """

    __tablename__ = "post"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    title: Mapped[str] = mapped_column(String(200))
    description: Mapped[str] = mapped_column(Text)
    media: Mapped[list[str]] = mapped_column(JSONB, default=list)
    media_type: Mapped[str] = mapped_column(String(10), default=MediaType.IMAGE.value)
    tagged_product_id: Mapped[int | None] = mapped_column(
        Integer,
        ForeignKey("product.id", ondelete="SET NULL"),
        nullable=True,
    )
    views: Mapped[int] = mapped_column(Integer, default=0)
    likes: Mapped[int] = mapped_column(Integer, default=0)
    comments: Mapped[int] = mapped_column(Integer, default=0)
    liked_by: Mapped[list[int]] = mapped_column(JSONB, default=list)
    is_active: Mapped[bool] = mapped_column(Boolean, default=True)

    __table_args__ = (
        Index("ix_post_seller_created", "seller_id", "created_at"),
        CheckConstraint("media_type IN ('image', 'video')", name="ck_post_valid_media_type"),
        CheckConstraint(
            "views >= 0 AND likes >= 0 AND comments >= 0",
            name="ck_post_counters_non_negative",
        ),
    )
