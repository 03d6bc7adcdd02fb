"""Route tests for content endpoints."""

from unittest.mock import AsyncMock, patch

import pytest

from sellerdesk.features.content.schemas import ContentAnalytics


@pytest.mark.asyncio
class TestContentRoutes:
    """Tests for /content endpoints with the service layer patched."""

    @pytest.mark.parametrize(
        ("method", "path"),
        [
            ("get", "/content"),
            ("post", "/content"),
            ("put", "/content/1"),
            ("patch", "/content/1"),
            ("delete", "/content/1"),
            ("get", "/content/analytics"),
        ],
    )
    async def test_requires_token(self, client, method, path):
        response = await client.request(method.upper(), path, json={})

        assert response.status_code == 401

    async def test_analytics_route_not_shadowed_by_post_id(self, client, auth_headers):
        analytics = ContentAnalytics(
            total_views=10,
            total_likes=2,
            total_comments=1,
            engagement_rate=300.0,
            follower_count=5,
            content_score=13,
            best_content=[],
        )
        with patch(
            "sellerdesk.features.content.routes.ContentService.get_analytics",
            new=AsyncMock(return_value=analytics),
        ):
            response = await client.get("/content/analytics", headers=auth_headers)

        assert response.status_code == 200
        assert response.json()["total_views"] == 10

    async def test_unknown_action_returns_422(self, client, auth_headers):
        response = await client.patch("/content/1", headers=auth_headers, json={"action": "share"})

        assert response.status_code == 422
        assert response.json()["code"] == "VALIDATION_ERROR"
