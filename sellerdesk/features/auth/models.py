"""Seller ORM model.

A seller is the authenticated subject of every request; products, orders and
posts all hang off ``seller.id``.
"""

from enum import Enum
from typing import Any

from sqlalchemy import Boolean, CheckConstraint, Integer, String, Text
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import Mapped, mapped_column

from sellerdesk.core.database import Base
from sellerdesk.shared.models import TimestampMixin


class SellerRole(str, Enum):
    """Account roles."""

    SELLER = "seller"
    ADMIN = "admin"


SOCIAL_LINK_KEYS = ("instagram", "youtube", "facebook", "twitter")
BANK_DETAIL_KEYS = ("account_number", "ifsc", "account_holder")
DOCUMENT_TYPES = ("aadhar", "pan", "gst")


def empty_social_links() -> dict[str, str]:
    return dict.fromkeys(SOCIAL_LINK_KEYS, "")


def empty_bank_details() -> dict[str, str]:
    return dict.fromkeys(BANK_DETAIL_KEYS, "")


def empty_documents() -> dict[str, str]:
    return dict.fromkeys(DOCUMENT_TYPES, "")


class Seller(TimestampMixin, Base):
    """Seller account and storefront profile.

    Attributes:
        id: Primary key; the ``sub`` claim of issued tokens.
        name: Display name.
        email: Unique login email, stored lower-cased.
        password_hash: bcrypt hash. Never serialized.
        role: Account role (seller, admin).
        city: Seller location.
        followers: Follower count shown on the storefront.
        store_name: Storefront name.
        store_description: Storefront blurb.
        profile_image: Avatar URL.
        social_links: instagram/youtube/facebook/twitter URLs.
        onboarding_step: Current step of the onboarding wizard (1-based).
        is_verified: Whether KYC has been approved.
        bank_details: account_number/ifsc/account_holder.
        documents: aadhar/pan/gst document URLs.
    """

    __tablename__ = "seller"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    name: Mapped[str] = mapped_column(String(100))
    email: Mapped[str] = mapped_column(String(255), unique=True, index=True)
    password_hash: Mapped[str] = mapped_column(String(100))
    role: Mapped[str] = mapped_column(String(20), default=SellerRole.SELLER.value)
    city: Mapped[str] = mapped_column(String(100), default="")
    followers: Mapped[int] = mapped_column(Integer, default=0)
    store_name: Mapped[str] = mapped_column(String(200), default="")
    store_description: Mapped[str] = mapped_column(Text, default="")
    profile_image: Mapped[str] = mapped_column(String(500), default="")
    social_links: Mapped[dict[str, Any]] = mapped_column(JSONB, default=empty_social_links)
    onboarding_step: Mapped[int] = mapped_column(Integer, default=1)
    is_verified: Mapped[bool] = mapped_column(Boolean, default=False)
    bank_details: Mapped[dict[str, Any]] = mapped_column(JSONB, default=empty_bank_details)
    documents: Mapped[dict[str, Any]] = mapped_column(JSONB, default=empty_documents)

    __table_args__ = (
        CheckConstraint("role IN ('seller', 'admin')", name="ck_seller_valid_role"),
        CheckConstraint("followers >= 0", name="ck_seller_followers_non_negative"),
        CheckConstraint("onboarding_step >= 1", name="ck_seller_onboarding_step_positive"),
    )
