"""Unit tests for engagement actions with a mocked session."""

from datetime import UTC, datetime
from unittest.mock import AsyncMock, MagicMock

import pytest

from sellerdesk.core.exceptions import BadRequestError, NotFoundError
from sellerdesk.features.content.models import Post
from sellerdesk.features.content.service import ContentService


def make_post(**overrides) -> Post:
    now = datetime(2026, 10, 19, tzinfo=UTC)
    values = {
        "id": 9,
        "seller_id": 1,
        "title": "New drop",
        "description": "Autumn collection",
        "media": [],
        "media_type": "image",
        "tagged_product_id": None,
        "views": 0,
        "likes": 0,
        "comments": 0,
        "liked_by": [],
        "is_active": True,
        "created_at": now,
        "updated_at": now,
    }
    values.update(overrides)
    return Post(**values)


def session_returning(row) -> AsyncMock:
    result = MagicMock()
    result.scalar_one_or_none.return_value = row
    db = AsyncMock()
    db.execute = AsyncMock(return_value=result)
    return db


@pytest.mark.asyncio
class TestRecordAction:
    """Tests for ContentService.record_action."""

    async def test_like_records_liker(self):
        post = make_post()

        response = await ContentService().record_action(
            session_returning(post), seller_id=1, post_id=9, action="like"
        )

        assert response.likes == 1
        assert post.liked_by == [1]

    async def test_second_like_rejected(self):
        post = make_post(likes=1, liked_by=[1])

        with pytest.raises(BadRequestError, match="Already liked"):
            await ContentService().record_action(
                session_returning(post), seller_id=1, post_id=9, action="like"
            )

        assert post.likes == 1

    @pytest.mark.parametrize(("action", "counter"), [("comment", "comments"), ("view", "views")])
    async def test_counters_increment(self, action, counter):
        post = make_post()

        await ContentService().record_action(
            session_returning(post), seller_id=1, post_id=9, action=action
        )

        assert getattr(post, counter) == 1

    async def test_missing_post_is_not_found(self):
        with pytest.raises(NotFoundError, match="Post not found"):
            await ContentService().record_action(
                session_returning(None), seller_id=1, post_id=9, action="view"
            )
