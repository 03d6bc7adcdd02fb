"""Product catalog management, scoped to the calling seller."""

from sellerdesk.features.products.models import Product, ProductCategory
from sellerdesk.features.products.routes import router
from sellerdesk.features.products.schemas import ProductCreate, ProductResponse, ProductUpdate
from sellerdesk.features.products.service import ProductService

__all__ = [
    "Product",
    "ProductCategory",
    "ProductCreate",
    "ProductResponse",
    "ProductService",
    "ProductUpdate",
    "router",
]
