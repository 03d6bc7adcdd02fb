"""Pydantic schemas for order endpoints."""

from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, EmailStr, Field

from sellerdesk.features.orders.models import OrderStatus, PaymentMethod, PaymentStatus


class CustomerInfo(BaseModel):
    """Buyer contact and shipping details."""

    name: str = Field(..., min_length=1, max_length=100)
    email: EmailStr
    phone: str = Field(..., min_length=3, max_length=30)
    address: str = Field(..., min_length=1)


class OrderCreate(BaseModel):
    """Request body for recording an order against one of the seller's products.

    ``price`` defaults to the product's current price; ``total_amount`` is
    always ``price * quantity``.
    """

    product_id: int = Field(..., ge=1)
    quantity: int = Field(..., ge=1)
    price: Decimal | None = Field(None, ge=0, max_digits=12, decimal_places=2)
    customer: CustomerInfo
    payment_method: PaymentMethod = PaymentMethod.COD
    notes: str = ""


class OrderUpdate(BaseModel):
    """Fulfilment update; only fields present in the body are written."""

    status: OrderStatus | None = None
    payment_status: PaymentStatus | None = None
    tracking_number: str | None = Field(None, max_length=100)
    notes: str | None = None


class OrderResponse(BaseModel):
    """An order as returned to its seller."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    order_id: str
    seller_id: int
    product_id: int | None
    quantity: int
    price: Decimal
    total_amount: Decimal
    status: OrderStatus
    customer: CustomerInfo
    payment_method: PaymentMethod
    payment_status: PaymentStatus
    tracking_number: str
    notes: str
    created_at: datetime
    updated_at: datetime


class OrderMutationResponse(BaseModel):
    """Acknowledgement carrying the affected order."""

    message: str
    order: OrderResponse
