"""Seller accounts: registration, login and token-backed identity."""

from sellerdesk.features.auth.models import Seller, SellerRole
from sellerdesk.features.auth.routes import router
from sellerdesk.features.auth.schemas import AuthResponse, SellerResponse
from sellerdesk.features.auth.service import AuthService

__all__ = [
    "AuthResponse",
    "AuthService",
    "Seller",
    "SellerResponse",
    "SellerRole",
    "router",
]
