"""RFC 7807 Problem Details for HTTP APIs.

Every error leaving the API is rendered as ``application/problem+json`` so
the dashboard frontend can branch on ``code`` instead of parsing messages.
``instance`` is the request path and ``request_id`` matches the
``X-Request-ID`` response header.

Reference: https://datatracker.ietf.org/doc/html/rfc7807
"""

from typing import Any

from fastapi.responses import JSONResponse
from pydantic import BaseModel, ConfigDict, Field

from sellerdesk.core.logging import request_id_ctx

ERROR_TYPE_BASE = "/errors"

# Error code -> problem type URI. Codes not listed get /errors/<code>.
ERROR_TYPES = {
    "BAD_REQUEST": f"{ERROR_TYPE_BASE}/bad-request",
    "CONFLICT": f"{ERROR_TYPE_BASE}/conflict",
    "DATABASE_ERROR": f"{ERROR_TYPE_BASE}/database",
    "INTERNAL_ERROR": f"{ERROR_TYPE_BASE}/internal",
    "INVALID_CREDENTIALS": f"{ERROR_TYPE_BASE}/invalid-credentials",
    "INVALID_TOKEN": f"{ERROR_TYPE_BASE}/invalid-token",
    "NOT_FOUND": f"{ERROR_TYPE_BASE}/not-found",
    "STORAGE_ERROR": f"{ERROR_TYPE_BASE}/storage",
    "UNAUTHORIZED": f"{ERROR_TYPE_BASE}/unauthorized",
    "VALIDATION_ERROR": f"{ERROR_TYPE_BASE}/validation",
}


def error_type_uri(code: str) -> str:
    """Problem type URI for an error code."""
    return ERROR_TYPES.get(code, f"{ERROR_TYPE_BASE}/{code.lower().replace('_', '-')}")


class ProblemDetail(BaseModel):
    """Problem body with the ``code``, ``request_id`` and ``errors`` extensions."""

    model_config = ConfigDict(extra="allow")

    type: str = "about:blank"
    title: str
    status: int = Field(..., ge=400, le=599)
    detail: str | None = None
    instance: str | None = Field(None, description="Path of the failing request")
    code: str | None = Field(None, description="Machine-readable error code")
    request_id: str | None = None
    errors: list[dict[str, Any]] | None = Field(
        None, description="Field-level validation errors, 422 only"
    )


class ProblemDetailResponse(JSONResponse):
    media_type = "application/problem+json"


def problem_response(
    status: int,
    title: str,
    code: str,
    detail: str | None = None,
    instance: str | None = None,
    errors: list[dict[str, Any]] | None = None,
    headers: dict[str, str] | None = None,
) -> ProblemDetailResponse:
    """Build a problem+json response for the request in flight.

    Args:
        status: HTTP status code.
        title: Short summary of the problem type.
        code: Machine-readable error code; also selects the type URI.
        detail: Explanation of this occurrence.
        instance: Request path.
        errors: Field-level validation errors.
        headers: Extra response headers, e.g. WWW-Authenticate.

    Returns:
        Response with the ``application/problem+json`` media type.
    """
    problem = ProblemDetail(
        type=error_type_uri(code),
        title=title,
        status=status,
        detail=detail,
        instance=instance,
        code=code,
        request_id=request_id_ctx.get(),
        errors=errors,
    )
    return ProblemDetailResponse(
        status_code=status,
        content=problem.model_dump(exclude_none=True),
        headers=headers,
    )
