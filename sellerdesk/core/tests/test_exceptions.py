"""Tests for the error taxonomy and RFC 7807 rendering."""

from unittest.mock import AsyncMock, patch

import pytest

from sellerdesk.core.exceptions import (
    AuthenticationError,
    BadRequestError,
    ConflictError,
    DatabaseError,
    NotFoundError,
    SellerDeskError,
)


class TestExceptionClasses:
    """Tests for status codes and error codes of each exception type."""

    @pytest.mark.parametrize(
        ("exc", "status_code", "code"),
        [
            (AuthenticationError(), 401, "UNAUTHORIZED"),
            (AuthenticationError("Invalid token", code="INVALID_TOKEN"), 401, "INVALID_TOKEN"),
            (NotFoundError(), 404, "NOT_FOUND"),
            (ConflictError(), 409, "CONFLICT"),
            (BadRequestError(), 400, "BAD_REQUEST"),
            (DatabaseError(), 500, "DATABASE_ERROR"),
        ],
    )
    def test_status_and_code(self, exc, status_code, code):
        assert isinstance(exc, SellerDeskError)
        assert exc.status_code == status_code
        assert exc.code == code

    def test_title_derived_from_code(self):
        assert NotFoundError().title == "Not Found"


@pytest.mark.asyncio
class TestProblemResponses:
    """Tests for handler output through the app."""

    async def test_missing_token_problem(self, client):
        response = await client.get("/products")

        assert response.status_code == 401
        assert response.headers["content-type"].startswith("application/problem+json")
        assert response.headers["www-authenticate"] == "Bearer"
        data = response.json()
        assert data["code"] == "UNAUTHORIZED"
        assert data["detail"] == "No token provided"
        assert data["type"] == "/errors/unauthorized"
        assert data["status"] == 401

    async def test_forged_token_problem(self, client):
        response = await client.get(
            "/products", headers={"Authorization": "Bearer forged.token.value"}
        )

        assert response.status_code == 401
        data = response.json()
        assert data["code"] == "INVALID_TOKEN"
        assert data["detail"] == "Invalid token"

    async def test_validation_problem_lists_fields(self, client):
        response = await client.post("/auth/register", json={"email": "not-an-email"})

        assert response.status_code == 422
        data = response.json()
        assert data["code"] == "VALIDATION_ERROR"
        fields = {error["field"] for error in data["errors"]}
        assert {"name", "email", "password", "city"} <= fields

    async def test_unknown_route_problem(self, client):
        response = await client.get("/does-not-exist")

        assert response.status_code == 404
        assert response.json()["code"] == "NOT_FOUND"

    async def test_database_error_problem(self, client, auth_headers):
        with patch(
            "sellerdesk.features.dashboard.routes.DashboardService.get_summary",
            new=AsyncMock(side_effect=DatabaseError("Failed to load dashboard data")),
        ):
            response = await client.get("/dashboard/summary", headers=auth_headers)

        assert response.status_code == 500
        data = response.json()
        assert data["code"] == "DATABASE_ERROR"
        assert data["detail"] == "Failed to load dashboard data"

    async def test_problem_carries_path_and_request_id(self, client):
        response = await client.get("/orders/7", headers={"X-Request-ID": "req-42"})

        data = response.json()
        assert data["instance"] == "/orders/7"
        assert data["request_id"] == "req-42"
        assert response.headers["x-request-id"] == "req-42"


class TestErrorDefaults:
    """Tests for message and code overrides on the error classes."""

    def test_message_overrides_default(self):
        exc = NotFoundError("Order not found")

        assert exc.message == "Order not found"
        assert str(exc) == "Order not found"
        assert exc.code == "NOT_FOUND"

    def test_unauthenticated_sets_bearer_challenge(self):
        assert AuthenticationError().headers == {"WWW-Authenticate": "Bearer"}

    def test_base_error_is_internal(self):
        exc = SellerDeskError()

        assert exc.status_code == 500
        assert exc.code == "INTERNAL_ERROR"
        assert exc.headers is None
