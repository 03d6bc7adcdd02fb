"""Integration tests for authentication routes.

Requires PostgreSQL to be running: docker-compose up -d
"""

import pytest

REGISTER_BODY = {
    "name": "Asha",
    "email": "Asha@Example.com",
    "password": "secret123",
    "city": "Pune",
}


@pytest.mark.integration
@pytest.mark.asyncio
class TestAuthFlowIntegration:
    """Register, log in and read the profile against a real database."""

    async def test_register_login_me(self, db_client):
        registered = await db_client.post("/auth/register", json=REGISTER_BODY)
        assert registered.status_code == 201
        assert registered.json()["seller"]["email"] == "asha@example.com"

        login = await db_client.post(
            "/auth/login", json={"email": "asha@example.com", "password": "secret123"}
        )
        assert login.status_code == 200
        token = login.json()["token"]

        me = await db_client.get("/auth/me", headers={"Authorization": f"Bearer {token}"})
        assert me.status_code == 200
        assert me.json()["name"] == "Asha"
        assert me.json()["onboarding_step"] == 1

    async def test_duplicate_email_conflicts(self, db_client):
        await db_client.post("/auth/register", json=REGISTER_BODY)

        response = await db_client.post("/auth/register", json=REGISTER_BODY)

        assert response.status_code == 409

    async def test_wrong_password_rejected(self, db_client):
        await db_client.post("/auth/register", json=REGISTER_BODY)

        response = await db_client.post(
            "/auth/login", json={"email": "asha@example.com", "password": "wrong-pass"}
        )

        assert response.status_code == 401
        assert response.json()["code"] == "INVALID_CREDENTIALS"
