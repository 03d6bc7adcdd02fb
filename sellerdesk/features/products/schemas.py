"""Pydantic schemas for product endpoints."""

from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from sellerdesk.features.products.models import ProductCategory


class DeliveryOptions(BaseModel):
    """Shipping terms for a listing."""

    is_cod: bool = False
    is_returnable: bool = False
    delivery_time: str = Field("3-5 days", max_length=50)
    shipping_cost: Decimal = Field(Decimal("0"), ge=0)


class ProductBase(BaseModel):
    """Editable product fields other than the required trio."""

    description: str = ""
    original_price: Decimal = Field(Decimal("0"), ge=0)
    subcategory: str = Field("", max_length=100)
    size: str = Field("", max_length=50)
    material: str = Field("", max_length=100)
    stock: int = Field(0, ge=0)
    images: list[str] = Field(default_factory=list)
    colors: list[str] = Field(default_factory=list)
    tags: list[str] = Field(default_factory=list)
    is_active: bool = True
    is_featured: bool = False
    delivery: DeliveryOptions = Field(default_factory=DeliveryOptions)


class ProductCreate(ProductBase):
    """Request body for creating a product. Title, price and category are required."""

    title: str = Field(..., min_length=1, max_length=200)
    price: Decimal = Field(..., gt=0, max_digits=12, decimal_places=2)
    category: ProductCategory

    @field_validator("title")
    @classmethod
    def strip_title(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("must not be blank")
        return v


class ProductUpdate(BaseModel):
    """Partial update; only fields present in the body are written."""

    title: str | None = Field(None, min_length=1, max_length=200)
    description: str | None = None
    price: Decimal | None = Field(None, gt=0, max_digits=12, decimal_places=2)
    original_price: Decimal | None = Field(None, ge=0)
    category: ProductCategory | None = None
    subcategory: str | None = Field(None, max_length=100)
    size: str | None = Field(None, max_length=50)
    material: str | None = Field(None, max_length=100)
    stock: int | None = Field(None, ge=0)
    images: list[str] | None = None
    colors: list[str] | None = None
    tags: list[str] | None = None
    units_sold: int | None = Field(None, ge=0)
    is_active: bool | None = None
    is_featured: bool | None = None
    delivery: DeliveryOptions | None = None


class ProductResponse(BaseModel):
    """A product as returned to its owner."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    seller_id: int
    title: str
    description: str
    price: Decimal
    original_price: Decimal
    category: ProductCategory
    subcategory: str
    size: str
    material: str
    stock: int
    images: list[str]
    colors: list[str]
    tags: list[str]
    units_sold: int
    is_active: bool
    is_featured: bool
    delivery: DeliveryOptions
    rating_average: Decimal
    rating_count: int
    created_at: datetime
    updated_at: datetime


class ProductMutationResponse(BaseModel):
    """Acknowledgement carrying the affected product."""

    message: str
    product: ProductResponse
