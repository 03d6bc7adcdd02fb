"""Pydantic schemas for authentication endpoints."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator

from sellerdesk.features.auth.models import SellerRole

# =============================================================================
# Nested profile blocks
# =============================================================================


class SocialLinks(BaseModel):
    """Storefront social profile URLs."""

    instagram: str = ""
    youtube: str = ""
    facebook: str = ""
    twitter: str = ""


class BankDetails(BaseModel):
    """Payout bank account."""

    account_number: str = ""
    ifsc: str = ""
    account_holder: str = ""


class SellerDocuments(BaseModel):
    """KYC document URLs."""

    aadhar: str = ""
    pan: str = ""
    gst: str = ""


# =============================================================================
# Requests
# =============================================================================


PASSWORD_MAX_BYTES = 72


def check_password_bytes(v: str) -> str:
    """Reject passwords bcrypt cannot hash (its limit is bytes, not characters)."""
    if len(v.encode("utf-8")) > PASSWORD_MAX_BYTES:
        raise ValueError(f"must be at most {PASSWORD_MAX_BYTES} bytes when UTF-8 encoded")
    return v


class RegisterRequest(BaseModel):
    """Request body for seller registration."""

    name: str = Field(..., min_length=1, max_length=100)
    email: EmailStr
    password: str = Field(..., min_length=6, max_length=72)
    city: str = Field(..., min_length=1, max_length=100)

    @field_validator("name", "city")
    @classmethod
    def strip_required(cls, v: str) -> str:
        """Reject whitespace-only values."""
        v = v.strip()
        if not v:
            raise ValueError("must not be blank")
        return v

    @field_validator("email")
    @classmethod
    def normalize_email(cls, v: str) -> str:
        """Store emails lower-cased so lookups are case-insensitive."""
        return v.strip().lower()

    @field_validator("password")
    @classmethod
    def password_fits_bcrypt(cls, v: str) -> str:
        return check_password_bytes(v)


class LoginRequest(BaseModel):
    """Request body for seller login."""

    email: EmailStr
    password: str = Field(..., min_length=1, max_length=72)

    @field_validator("email")
    @classmethod
    def normalize_email(cls, v: str) -> str:
        return v.strip().lower()

    @field_validator("password")
    @classmethod
    def password_fits_bcrypt(cls, v: str) -> str:
        return check_password_bytes(v)


# =============================================================================
# Responses
# =============================================================================


class SellerResponse(BaseModel):
    """Public view of a seller account. Never includes the password hash."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    email: str
    role: SellerRole
    city: str
    followers: int
    store_name: str
    store_description: str
    profile_image: str
    social_links: SocialLinks
    onboarding_step: int
    is_verified: bool
    bank_details: BankDetails
    documents: SellerDocuments
    created_at: datetime
    updated_at: datetime


class AuthResponse(BaseModel):
    """Token issued on register or login."""

    message: str
    token: str = Field(..., description="Bearer token for the Authorization header.")
    seller: SellerResponse
