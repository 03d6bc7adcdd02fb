"""API routes for the seller profile and onboarding."""

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from sellerdesk.core.database import get_db
from sellerdesk.core.security import CurrentSeller
from sellerdesk.features.profile.schemas import (
    DocumentUpload,
    DocumentUploadResponse,
    ProfileResponse,
    ProfileUpdate,
)
from sellerdesk.features.profile.service import ProfileService
from sellerdesk.features.profile.storage import DocumentStorage, get_document_storage

router = APIRouter(prefix="/profile", tags=["profile"])


@router.put(
    "",
    response_model=ProfileResponse,
    summary="Update profile",
    description="""
Update storefront details, social links, bank details or the onboarding step.

Email, password, role, followers and verification status cannot be changed here.
""",
)
async def update_profile(
    profile_update: ProfileUpdate,
    seller: CurrentSeller,
    db: AsyncSession = Depends(get_db),
) -> ProfileResponse:
    """Update the caller's profile."""
    updated = await ProfileService().update_profile(
        db=db, seller_id=seller.id, profile_update=profile_update
    )
    return ProfileResponse(message="Profile updated", seller=updated)


@router.post(
    "/documents",
    response_model=DocumentUploadResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Upload a KYC document",
    description="""
Upload an aadhar, pan or gst document as base64 or a data URI.

**Errors**:
- 400 if the file is not valid base64, is empty, or exceeds the size limit
- 422 if `file` or `type` is missing or `type` is unknown
""",
)
async def upload_document(
    upload: DocumentUpload,
    seller: CurrentSeller,
    db: AsyncSession = Depends(get_db),
    storage: DocumentStorage = Depends(get_document_storage),
) -> DocumentUploadResponse:
    """Store a KYC document for the caller."""
    url = await ProfileService().upload_document(
        db=db, seller_id=seller.id, upload=upload, storage=storage
    )
    return DocumentUploadResponse(message="Document uploaded", url=url)
