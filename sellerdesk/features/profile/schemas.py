"""Pydantic schemas for profile and onboarding endpoints."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from sellerdesk.features.auth.schemas import BankDetails, SellerResponse, SocialLinks


class ProfileUpdate(BaseModel):
    """Partial profile update.

    Email, password, role, followers and verification status are not
    editable here; unknown fields are rejected.
    """

    model_config = ConfigDict(extra="forbid")

    name: str | None = Field(None, min_length=1, max_length=100)
    city: str | None = Field(None, max_length=100)
    store_name: str | None = Field(None, max_length=200)
    store_description: str | None = None
    profile_image: str | None = Field(None, max_length=500)
    social_links: SocialLinks | None = None
    bank_details: BankDetails | None = None
    onboarding_step: int | None = Field(None, ge=1)


class ProfileResponse(BaseModel):
    """Acknowledgement carrying the updated seller."""

    message: str
    seller: SellerResponse


class DocumentUpload(BaseModel):
    """KYC document upload body."""

    file: str = Field(..., min_length=1, description="Base64 file content or data URI")
    type: Literal["aadhar", "pan", "gst"]


class DocumentUploadResponse(BaseModel):
    message: str
    url: str
