"""API routes for seller content and engagement analytics."""

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from sellerdesk.core.database import get_db
from sellerdesk.core.security import CurrentSeller
from sellerdesk.features.content.schemas import (
    ContentAnalytics,
    PostAction,
    PostCreate,
    PostMutationResponse,
    PostResponse,
    PostUpdate,
)
from sellerdesk.features.content.service import ContentService
from sellerdesk.shared.schemas import MessageResponse, PaginatedResponse, PaginationParams

router = APIRouter(prefix="/content", tags=["content"])


@router.get(
    "",
    response_model=PaginatedResponse[PostResponse],
    summary="List posts",
)
async def list_posts(
    seller: CurrentSeller,
    db: AsyncSession = Depends(get_db),
    page: int = Query(1, ge=1, description="Page number (1-indexed)"),
    page_size: int = Query(20, ge=1, le=100, description="Posts per page (max 100)"),
) -> PaginatedResponse[PostResponse]:
    """List the caller's posts, newest first."""
    return await ContentService().list_posts(
        db=db,
        seller_id=seller.id,
        pagination=PaginationParams(page=page, page_size=page_size),
    )


@router.post(
    "",
    response_model=PostMutationResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Publish a post",
)
async def create_post(
    post_create: PostCreate,
    seller: CurrentSeller,
    db: AsyncSession = Depends(get_db),
) -> PostMutationResponse:
    """Publish a post, optionally tagging one of the caller's products."""
    post = await ContentService().create_post(db=db, seller_id=seller.id, post_create=post_create)
    return PostMutationResponse(message="Post created", post=post)


# Declared before /{post_id} so "analytics" is never parsed as an id
@router.get(
    "/analytics",
    response_model=ContentAnalytics,
    summary="Content analytics",
    description="""
Engagement totals across the caller's posts.

- `engagement_rate`: (likes + comments) / posts × 100, 2 decimals
- `content_score`: (likes + comments + views) / posts, rounded
- `best_content`: top 5 posts by views + likes + comments
""",
)
async def get_content_analytics(
    seller: CurrentSeller,
    db: AsyncSession = Depends(get_db),
) -> ContentAnalytics:
    """Compute engagement analytics for the caller."""
    return await ContentService().get_analytics(db=db, seller_id=seller.id)


@router.put(
    "/{post_id}",
    response_model=PostMutationResponse,
    summary="Update a post",
)
async def update_post(
    post_id: int,
    post_update: PostUpdate,
    seller: CurrentSeller,
    db: AsyncSession = Depends(get_db),
) -> PostMutationResponse:
    """Update a post owned by the caller."""
    post = await ContentService().update_post(
        db=db, seller_id=seller.id, post_id=post_id, post_update=post_update
    )
    return PostMutationResponse(message="Post updated", post=post)


@router.patch(
    "/{post_id}",
    response_model=PostMutationResponse,
    summary="Record engagement",
    description="Increment the like, comment or view counter. A second like returns 400.",
)
async def record_post_action(
    post_id: int,
    post_action: PostAction,
    seller: CurrentSeller,
    db: AsyncSession = Depends(get_db),
) -> PostMutationResponse:
    """Record a like, comment or view on a post owned by the caller."""
    post = await ContentService().record_action(
        db=db, seller_id=seller.id, post_id=post_id, action=post_action.action
    )
    return PostMutationResponse(message="Post updated", post=post)


@router.delete(
    "/{post_id}",
    response_model=MessageResponse,
    summary="Delete a post",
)
async def delete_post(
    post_id: int,
    seller: CurrentSeller,
    db: AsyncSession = Depends(get_db),
) -> MessageResponse:
    """Delete a post owned by the caller."""
    await ContentService().delete_post(db=db, seller_id=seller.id, post_id=post_id)
    return MessageResponse(message="Post deleted")
