"""Seller profile, onboarding and KYC documents."""

from sellerdesk.features.profile.routes import router
from sellerdesk.features.profile.schemas import DocumentUpload, ProfileUpdate
from sellerdesk.features.profile.service import ProfileService
from sellerdesk.features.profile.storage import DocumentStorage, LocalDocumentStorage

__all__ = [
    "DocumentStorage",
    "DocumentUpload",
    "LocalDocumentStorage",
    "ProfileService",
    "ProfileUpdate",
    "router",
]
