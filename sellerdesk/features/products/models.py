"""Product ORM model."""

from decimal import Decimal
from enum import Enum
from typing import Any

from sqlalchemy import Boolean, CheckConstraint, Index, Integer, Numeric, String, Text
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import Mapped, mapped_column

from sellerdesk.core.database import Base
from sellerdesk.shared.models import SellerOwnedMixin, TimestampMixin


class ProductCategory(str, Enum):
    """Catalog categories a product can be listed under."""

    CLOTHING = "clothing"
    ELECTRONICS = "electronics"
    HOME = "home"
    BEAUTY = "beauty"
    BOOKS = "books"
    SPORTS = "sports"
    OTHER = "other"


def default_delivery() -> dict[str, Any]:
    return {
        "is_cod": False,
        "is_returnable": False,
        "delivery_time": "3-5 days",
        "shipping_cost": 0,
    }


class Product(SellerOwnedMixin, TimestampMixin, Base):
    """A catalog listing owned by one seller.

    Attributes:
        id: Primary key.
        seller_id: Owning seller (FK to seller).
        title: Listing title.
        description: Listing body.
        price: Current selling price.
        original_price: Pre-discount price (0 when not discounted).
        category: One of ProductCategory.
        subcategory: Free-form subcategory.
        size: Size label.
        material: Material label.
        stock: Units on hand.
        images: Image URLs.
        colors: Available colours.
        tags: Search tags.
        units_sold: Lifetime units sold; feeds the category rollup.
        is_active: Whether the listing is live.
        is_featured: Whether the listing is promoted.
        delivery: is_cod, is_returnable, delivery_time, shipping_cost.
        rating_average: Mean customer rating.
        rating_count: Number of ratings.
    """

    __tablename__ = "product"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    title: Mapped[str] = mapped_column(String(200))
    description: Mapped[str] = mapped_column(Text, default="")
    price: Mapped[Decimal] = mapped_column(Numeric(12, 2))
    original_price: Mapped[Decimal] = mapped_column(Numeric(12, 2), default=Decimal("0"))
    category: Mapped[str] = mapped_column(String(30))
    subcategory: Mapped[str] = mapped_column(String(100), default="")
    size: Mapped[str] = mapped_column(String(50), default="")
    material: Mapped[str] = mapped_column(String(100), default="")
    stock: Mapped[int] = mapped_column(Integer, default=0)
    images: Mapped[list[str]] = mapped_column(JSONB, default=list)
    colors: Mapped[list[str]] = mapped_column(JSONB, default=list)
    tags: Mapped[list[str]] = mapped_column(JSONB, default=list)
    units_sold: Mapped[int] = mapped_column(Integer, default=0)
    is_active: Mapped[bool] = mapped_column(Boolean, default=True)
    is_featured: Mapped[bool] = mapped_column(Boolean, default=False)
    delivery: Mapped[dict[str, Any]] = mapped_column(JSONB, default=default_delivery)
    rating_average: Mapped[Decimal] = mapped_column(Numeric(3, 2), default=Decimal("0"))
    rating_count: Mapped[int] = mapped_column(Integer, default=0)

    __table_args__ = (
        Index("ix_product_seller_category", "seller_id", "category"),
        Index("ix_product_seller_created", "seller_id", "created_at"),
        CheckConstraint(
            "category IN ('clothing', 'electronics', 'home', 'beauty', 'books', 'sports', 'other')",
            name="ck_product_valid_category",
        ),
        CheckConstraint("price >= 0", name="ck_product_price_non_negative"),
        CheckConstraint("stock >= 0", name="ck_product_stock_non_negative"),
        CheckConstraint("units_sold >= 0", name="ck_product_units_sold_non_negative"),
    )
