"""Service layer for seller content (posts) and engagement."""

from typing import Literal

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from sellerdesk.core.exceptions import BadRequestError, NotFoundError
from sellerdesk.core.logging import get_logger
from sellerdesk.features.auth.models import Seller
from sellerdesk.features.content.analytics import compute_content_analytics
from sellerdesk.features.content.models import Post
from sellerdesk.features.content.schemas import (
    ContentAnalytics,
    PostCreate,
    PostResponse,
    PostUpdate,
)
from sellerdesk.features.products.models import Product
from sellerdesk.shared.schemas import PaginatedResponse, PaginationParams
from sellerdesk.shared.utils import fetch_page

logger = get_logger(__name__)


class ContentService:
    """Owner-scoped post CRUD, engagement counters and analytics."""

    async def list_posts(
        self,
        db: AsyncSession,
        seller_id: int,
        pagination: PaginationParams,
    ) -> PaginatedResponse[PostResponse]:
        """List the seller's posts, newest first."""
        stmt = (
            select(Post)
            .where(Post.seller_id == seller_id)
            .order_by(Post.created_at.desc(), Post.id.desc())
        )
        return await fetch_page(db, stmt, pagination, PostResponse.model_validate)

    async def create_post(
        self,
        db: AsyncSession,
        seller_id: int,
        post_create: PostCreate,
    ) -> PostResponse:
        """Publish a post.

        Raises:
            NotFoundError: If the tagged product is not one of the seller's.
        """
        if post_create.tagged_product_id is not None:
            await self._ensure_product_owned(db, seller_id, post_create.tagged_product_id)

        post = Post(
            seller_id=seller_id,
            title=post_create.title,
            description=post_create.description,
            media=list(post_create.media),
            media_type=post_create.media_type.value,
            tagged_product_id=post_create.tagged_product_id,
        )
        db.add(post)
        await db.flush()
        await db.refresh(post)

        logger.info("content.post_created", post_id=post.id, media_type=post.media_type)
        return PostResponse.model_validate(post)

    async def update_post(
        self,
        db: AsyncSession,
        seller_id: int,
        post_id: int,
        post_update: PostUpdate,
    ) -> PostResponse:
        """Apply a partial update to one of the seller's posts.

        Raises:
            NotFoundError: If the post, or a newly tagged product, is absent
                or owned by another seller.
        """
        post = await self._get_owned(db, seller_id, post_id)

        changes = post_update.model_dump(exclude_unset=True)
        if changes.get("tagged_product_id") is not None:
            await self._ensure_product_owned(db, seller_id, changes["tagged_product_id"])

        for field, value in changes.items():
            if value is None and field != "tagged_product_id":
                continue
            if field == "media_type":
                value = value.value
            setattr(post, field, value)

        await db.flush()
        await db.refresh(post)

        logger.info("content.post_updated", post_id=post_id, fields=sorted(changes))
        return PostResponse.model_validate(post)

    async def record_action(
        self,
        db: AsyncSession,
        seller_id: int,
        post_id: int,
        action: Literal["like", "comment", "view"],
    ) -> PostResponse:
        """Increment an engagement counter on one of the seller's posts.

        A like is recorded at most once per seller.

        Raises:
            NotFoundError: If absent or owned by another seller.
            BadRequestError: If the caller already liked the post.
        """
        post = await self._get_owned(db, seller_id, post_id)

        if action == "like":
            if seller_id in post.liked_by:
                raise BadRequestError("Already liked")
            post.likes += 1
            # Reassign so the JSONB change is flushed
            post.liked_by = [*post.liked_by, seller_id]
        elif action == "comment":
            post.comments += 1
        else:
            post.views += 1

        await db.flush()
        await db.refresh(post)

        logger.info("content.post_engagement", post_id=post_id, action=action)
        return PostResponse.model_validate(post)

    async def delete_post(self, db: AsyncSession, seller_id: int, post_id: int) -> None:
        """Delete one of the seller's posts.

        Raises:
            NotFoundError: If absent or owned by another seller.
        """
        post = await self._get_owned(db, seller_id, post_id)
        await db.delete(post)
        await db.flush()

        logger.info("content.post_deleted", post_id=post_id)

    async def get_analytics(self, db: AsyncSession, seller_id: int) -> ContentAnalytics:
        """Compute engagement statistics across all of the seller's posts."""
        posts = (await db.execute(select(Post).where(Post.seller_id == seller_id))).scalars().all()
        followers = (
            await db.execute(select(Seller.followers).where(Seller.id == seller_id))
        ).scalar_one_or_none()

        analytics = compute_content_analytics(posts, followers or 0)

        logger.info(
            "content.analytics_computed",
            post_count=len(posts),
            engagement_rate=analytics.engagement_rate,
        )
        return analytics

    async def _get_owned(self, db: AsyncSession, seller_id: int, post_id: int) -> Post:
        stmt = select(Post).where(Post.id == post_id, Post.seller_id == seller_id)
        post = (await db.execute(stmt)).scalar_one_or_none()
        if post is None:
            raise NotFoundError("Post not found")
        return post

    async def _ensure_product_owned(self, db: AsyncSession, seller_id: int, product_id: int) -> None:
        stmt = select(Product.id).where(Product.id == product_id, Product.seller_id == seller_id)
        if (await db.execute(stmt)).scalar_one_or_none() is None:
            raise NotFoundError("Product not found")
