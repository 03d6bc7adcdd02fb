"""Order ORM model and fulfilment lifecycle."""

from decimal import Decimal
from enum import Enum

from sqlalchemy import CheckConstraint, ForeignKey, Index, Integer, Numeric, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from sellerdesk.core.database import Base
from sellerdesk.shared.models import SellerOwnedMixin, TimestampMixin


class OrderStatus(str, Enum):
    """Order fulfilment states.

    State transitions:
    - PENDING -> CONFIRMED -> SHIPPED -> DELIVERED
    - PENDING | CONFIRMED -> CANCELLED
    """

    PENDING = "pending"
    CONFIRMED = "confirmed"
    SHIPPED = "shipped"
    DELIVERED = "delivered"
    CANCELLED = "cancelled"


class PaymentMethod(str, Enum):
    COD = "cod"
    ONLINE = "online"
    WALLET = "wallet"


class PaymentStatus(str, Enum):
    PENDING = "pending"
    PAID = "paid"
    FAILED = "failed"
    REFUNDED = "refunded"


VALID_ORDER_TRANSITIONS: dict[OrderStatus, set[OrderStatus]] = {
    OrderStatus.PENDING: {OrderStatus.CONFIRMED, OrderStatus.CANCELLED},
    OrderStatus.CONFIRMED: {OrderStatus.SHIPPED, OrderStatus.CANCELLED},
    OrderStatus.SHIPPED: {OrderStatus.DELIVERED},
    OrderStatus.DELIVERED: set(),  # Terminal state
    OrderStatus.CANCELLED: set(),  # Terminal state
}


class Order(SellerOwnedMixin, TimestampMixin, Base):
    """A customer order for one of the seller's products.

    Attributes:
        id: Primary key.
        order_id: Unique external order reference (e.g. "ORD-1A2B3C4D5E6F").
        seller_id: Owning seller (FK to seller).
        product_id: Ordered product (FK to product, nulled if the product is deleted).
        quantity: Units ordered (>= 1).
        price: Unit price at order time.
        total_amount: Amount charged for the order.
        status: Fulfilment state.
        customer_name: Buyer name.
        customer_email: Buyer email.
        customer_phone: Buyer phone.
        customer_address: Shipping address.
        payment_method: cod, online or wallet.
        payment_status: pending, paid, failed or refunded.
        tracking_number: Carrier tracking reference.
        notes: Seller notes.
    """

    __tablename__ = "customer_order"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    order_id: Mapped[str] = mapped_column(String(40), unique=True, index=True)
    product_id: Mapped[int | None] = mapped_column(
        Integer,
        ForeignKey("product.id", ondelete="SET NULL"),
        nullable=True,
        index=True,
    )
    quantity: Mapped[int] = mapped_column(Integer)
    price: Mapped[Decimal] = mapped_column(Numeric(12, 2))
    total_amount: Mapped[Decimal] = mapped_column(Numeric(14, 2))
    status: Mapped[str] = mapped_column(String(20), default=OrderStatus.PENDING.value)
    customer_name: Mapped[str] = mapped_column(String(100))
    customer_email: Mapped[str] = mapped_column(String(255))
    customer_phone: Mapped[str] = mapped_column(String(30))
    customer_address: Mapped[str] = mapped_column(Text)
    payment_method: Mapped[str] = mapped_column(String(20), default=PaymentMethod.COD.value)
    payment_status: Mapped[str] = mapped_column(String(20), default=PaymentStatus.PENDING.value)
    tracking_number: Mapped[str] = mapped_column(String(100), default="")
    notes: Mapped[str] = mapped_column(Text, default="")

    __table_args__ = (
        Index("ix_customer_order_seller_status", "seller_id", "status"),
        Index("ix_customer_order_seller_created", "seller_id", "created_at"),
        CheckConstraint("quantity >= 1", name="ck_customer_order_quantity_positive"),
        CheckConstraint("total_amount >= 0", name="ck_customer_order_total_non_negative"),
        CheckConstraint(
            "status IN ('pending', 'confirmed', 'shipped', 'delivered', 'cancelled')",
            name="ck_customer_order_valid_status",
        ),
        CheckConstraint(
            "payment_method IN ('cod', 'online', 'wallet')",
            name="ck_customer_order_valid_payment_method",
        ),
        CheckConstraint(
            "payment_status IN ('pending', 'paid', 'failed', 'refunded')",
            name="ck_customer_order_valid_payment_status",
        ),
    )
