"""Integration tests for profile routes.

Requires PostgreSQL to be running: docker-compose up -d
"""

import base64

import pytest

from sellerdesk.features.profile.storage import LocalDocumentStorage, get_document_storage
from sellerdesk.main import app


@pytest.mark.integration
@pytest.mark.asyncio
class TestProfileRoutesIntegration:
    """Profile update and document upload against a real database."""

    async def test_update_profile_and_onboarding(self, db_client, seller_headers):
        response = await db_client.put(
            "/profile",
            json={
                "store_name": "Asha Crafts",
                "social_links": {"instagram": "https://instagram.com/ashacrafts"},
                "onboarding_step": 3,
            },
            headers=seller_headers,
        )

        assert response.status_code == 200
        seller = response.json()["seller"]
        assert seller["store_name"] == "Asha Crafts"
        assert seller["social_links"]["instagram"] == "https://instagram.com/ashacrafts"
        assert seller["onboarding_step"] == 3
        assert seller["email"] == "owner@example.com"

    async def test_document_upload_recorded_on_profile(self, db_client, seller_headers, tmp_path):
        app.dependency_overrides[get_document_storage] = lambda: LocalDocumentStorage(
            root_dir=tmp_path
        )
        payload = base64.b64encode(b"%PDF-1.4").decode()

        response = await db_client.post(
            "/profile/documents",
            json={"file": f"data:application/pdf;base64,{payload}", "type": "gst"},
            headers=seller_headers,
        )

        assert response.status_code == 201
        url = response.json()["url"]

        me = await db_client.get("/auth/me", headers=seller_headers)
        assert me.json()["documents"]["gst"] == url

    async def test_replacing_document_removes_previous_file(
        self, db_client, seller_headers, tmp_path
    ):
        app.dependency_overrides[get_document_storage] = lambda: LocalDocumentStorage(
            root_dir=tmp_path
        )
        urls = []
        for content in (b"first", b"second"):
            response = await db_client.post(
                "/profile/documents",
                json={"file": base64.b64encode(content).decode(), "type": "pan"},
                headers=seller_headers,
            )
            assert response.status_code == 201
            urls.append(response.json()["url"])

        stored = sorted(p.read_bytes() for p in tmp_path.rglob("*") if p.is_file())
        assert stored == [b"second"]
        me = await db_client.get("/auth/me", headers=seller_headers)
        assert me.json()["documents"]["pan"] == urls[1]
