"""API routes for the seller's product catalog."""

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from sellerdesk.core.database import get_db
from sellerdesk.core.security import CurrentSeller
from sellerdesk.features.products.models import ProductCategory
from sellerdesk.features.products.schemas import (
    ProductCreate,
    ProductMutationResponse,
    ProductResponse,
    ProductUpdate,
)
from sellerdesk.features.products.service import ProductService
from sellerdesk.shared.schemas import MessageResponse, PaginatedResponse, PaginationParams

router = APIRouter(prefix="/products", tags=["products"])


@router.get(
    "",
    response_model=PaginatedResponse[ProductResponse],
    summary="List products",
    description="List the calling seller's products, newest first.",
)
async def list_products(
    seller: CurrentSeller,
    db: AsyncSession = Depends(get_db),
    page: int = Query(1, ge=1, description="Page number (1-indexed)"),
    page_size: int = Query(20, ge=1, le=100, description="Products per page (max 100)"),
    category: ProductCategory | None = Query(None, description="Filter by category"),
) -> PaginatedResponse[ProductResponse]:
    """List products owned by the caller."""
    return await ProductService().list_products(
        db=db,
        seller_id=seller.id,
        pagination=PaginationParams(page=page, page_size=page_size),
        category=category,
    )


@router.post(
    "",
    response_model=ProductMutationResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a product",
    description="Title, price and category are required; the owner is always the caller.",
)
async def create_product(
    product_create: ProductCreate,
    seller: CurrentSeller,
    db: AsyncSession = Depends(get_db),
) -> ProductMutationResponse:
    """Create a product."""
    product = await ProductService().create_product(
        db=db, seller_id=seller.id, product_create=product_create
    )
    return ProductMutationResponse(message="Product created successfully", product=product)


@router.get(
    "/{product_id}",
    response_model=ProductResponse,
    summary="Get a product",
    description="Returns 404 if the product does not exist or belongs to another seller.",
)
async def get_product(
    product_id: int,
    seller: CurrentSeller,
    db: AsyncSession = Depends(get_db),
) -> ProductResponse:
    """Get a single product owned by the caller."""
    return await ProductService().get_product(db=db, seller_id=seller.id, product_id=product_id)


@router.put(
    "/{product_id}",
    response_model=ProductMutationResponse,
    summary="Update a product",
    description="Partial update; fields absent from the body are left unchanged.",
)
async def update_product(
    product_id: int,
    product_update: ProductUpdate,
    seller: CurrentSeller,
    db: AsyncSession = Depends(get_db),
) -> ProductMutationResponse:
    """Update a product owned by the caller."""
    product = await ProductService().update_product(
        db=db,
        seller_id=seller.id,
        product_id=product_id,
        product_update=product_update,
    )
    return ProductMutationResponse(message="Product updated", product=product)


@router.delete(
    "/{product_id}",
    response_model=MessageResponse,
    summary="Delete a product",
)
async def delete_product(
    product_id: int,
    seller: CurrentSeller,
    db: AsyncSession = Depends(get_db),
) -> MessageResponse:
    """Delete a product owned by the caller."""
    await ProductService().delete_product(db=db, seller_id=seller.id, product_id=product_id)
    return MessageResponse(message="Product deleted")
