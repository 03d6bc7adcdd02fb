"""Pydantic schemas for content endpoints."""

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from sellerdesk.features.content.models import MediaType


class PostCreate(BaseModel):
    """Request body for publishing a post. Title and description are required."""

    title: str = Field(..., min_length=1, max_length=200)
    description: str = Field(..., min_length=1)
    media: list[str] = Field(default_factory=list)
    media_type: MediaType = MediaType.IMAGE
    tagged_product_id: int | None = Field(None, ge=1)

    @field_validator("title", "description")
    @classmethod
    def not_blank(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("must not be blank")
        return v


class PostUpdate(BaseModel):
    """Partial update; counters and likes cannot be edited directly."""

    title: str | None = Field(None, min_length=1, max_length=200)
    description: str | None = Field(None, min_length=1)
    media: list[str] | None = None
    media_type: MediaType | None = None
    tagged_product_id: int | None = Field(None, ge=1)
    is_active: bool | None = None


class PostAction(BaseModel):
    """Engagement action recorded against a post."""

    action: Literal["like", "comment", "view"]


class PostResponse(BaseModel):
    """A post as returned to its owner."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    seller_id: int
    title: str
    description: str
    media: list[str]
    media_type: MediaType
    tagged_product_id: int | None
    views: int
    likes: int
    comments: int
    is_active: bool
    created_at: datetime
    updated_at: datetime


class PostMutationResponse(BaseModel):
    """Acknowledgement carrying the affected post."""

    message: str
    post: PostResponse


class BestContent(BaseModel):
    """One entry of the top-performing posts list."""

    id: int
    title: str
    media_url: str = Field(..., description="First media URL, empty when the post has none")
    views: int
    likes: int
    comments: int


class ContentAnalytics(BaseModel):
    """Aggregate engagement figures across a seller's posts."""

    total_views: int = Field(..., ge=0)
    total_likes: int = Field(..., ge=0)
    total_comments: int = Field(..., ge=0)
    engagement_rate: float = Field(
        ..., ge=0, description="(likes + comments) per post, as a percentage"
    )
    follower_count: int = Field(..., ge=0)
    content_score: int = Field(..., ge=0, description="Mean interactions per post")
    best_content: list[BestContent]
