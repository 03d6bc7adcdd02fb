"""Error taxonomy and FastAPI exception handlers.

Every failure leaves the API as an RFC 7807 problem (see
``sellerdesk.core.problem_details``). Handlers only ever produce four kinds:
unauthenticated (401), unauthorized-or-absent (404, "not owned" is never
distinguished from "does not exist"), validation (422) and internal (500),
plus 400/409 for requests that are valid but cannot be applied.
"""

from typing import Any, ClassVar

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from sellerdesk.core.logging import get_logger
from sellerdesk.core.problem_details import ProblemDetailResponse, problem_response

logger = get_logger(__name__)


# =============================================================================
# Exception Classes
# =============================================================================


class SellerDeskError(Exception):
    """Base exception for SellerDesk application errors.

    Subclasses set ``default_code``, ``default_message`` and ``status_code``
    as class attributes; the error code also selects the problem type URI.
    """

    default_code: ClassVar[str] = "INTERNAL_ERROR"
    default_message: ClassVar[str] = "Internal server error"
    default_status: ClassVar[int] = 500
    default_headers: ClassVar[dict[str, str] | None] = None

    def __init__(
        self,
        message: str | None = None,
        code: str | None = None,
        status_code: int | None = None,
        details: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
    ) -> None:
        """Initialize application error.

        Args:
            message: Human-readable error message, returned as ``detail``.
            code: Machine-readable error code.
            status_code: HTTP status code.
            details: Additional error context (logged, not returned).
            headers: Extra response headers.
        """
        self.message = message or self.default_message
        super().__init__(self.message)
        self.code = code or self.default_code
        self.status_code = status_code or self.default_status
        self.details = details or {}
        self.headers = headers or self.default_headers

    @property
    def title(self) -> str:
        """RFC 7807 title - short summary of problem type."""
        return self.code.replace("_", " ").title()


class AuthenticationError(SellerDeskError):
    """Missing, malformed, or rejected credentials.

    ``code`` distinguishes a missing token (UNAUTHORIZED) from one that
    failed verification (INVALID_TOKEN) or a failed login
    (INVALID_CREDENTIALS). All of them are 401.
    """

    default_code = "UNAUTHORIZED"
    default_message = "No token provided"
    default_status = 401
    default_headers = {"WWW-Authenticate": "Bearer"}


class NotFoundError(SellerDeskError):
    """Resource not found, or not owned by the caller."""

    default_code = "NOT_FOUND"
    default_message = "Resource not found"
    default_status = 404


class ValidationError(SellerDeskError):
    """Input validation error raised outside Pydantic request parsing."""

    default_code = "VALIDATION_ERROR"
    default_message = "Validation failed"
    default_status = 422


class DatabaseError(SellerDeskError):
    default_code = "DATABASE_ERROR"
    default_message = "Database operation failed"


class ConflictError(SellerDeskError):
    """Request clashes with existing state (e.g., duplicate email)."""

    default_code = "CONFLICT"
    default_message = "Resource conflict"
    default_status = 409


class BadRequestError(SellerDeskError):
    """Request is well-formed but cannot be applied."""

    default_code = "BAD_REQUEST"
    default_message = "Bad request"
    default_status = 400


# =============================================================================
# Exception Handlers (RFC 7807)
# =============================================================================


async def sellerdesk_exception_handler(
    request: Request,
    exc: SellerDeskError,
) -> ProblemDetailResponse:
    """Render a SellerDeskError; 5xx are logged at error level with a traceback."""
    server_side = exc.status_code >= 500
    log = logger.error if server_side else logger.warning
    log(
        "app.error_handled",
        error=exc.message,
        error_type=type(exc).__name__,
        error_code=exc.code,
        status_code=exc.status_code,
        path=request.url.path,
        details=exc.details,
        exc_info=server_side,
    )

    return problem_response(
        status=exc.status_code,
        title=exc.title,
        code=exc.code,
        detail=exc.message,
        instance=request.url.path,
        headers=exc.headers,
    )


def _field_errors(exc: RequestValidationError) -> list[dict[str, str]]:
    """Flatten Pydantic errors to ``{field, message, type}``; the body prefix is dropped."""
    return [
        {
            "field": ".".join(str(part) for part in error.get("loc", ()) if part != "body"),
            "message": str(error.get("msg", "Validation failed")),
            "type": str(error.get("type", "unknown")),
        }
        for error in exc.errors()
    ]


async def validation_exception_handler(
    request: Request,
    exc: RequestValidationError,
) -> ProblemDetailResponse:
    """Handle request validation failures.

    Args:
        request: FastAPI request object.
        exc: Pydantic validation error.

    Returns:
        422 problem listing every offending field under ``errors``.
    """
    errors = _field_errors(exc)

    logger.warning(
        "app.validation_error",
        error_count=len(errors),
        path=request.url.path,
        fields=[e["field"] for e in errors],
    )

    return problem_response(
        status=422,
        title="Validation Error",
        code="VALIDATION_ERROR",
        detail=f"Request validation failed with {len(errors)} error(s)",
        instance=request.url.path,
        errors=errors,
    )


async def http_exception_handler(
    request: Request,
    exc: StarletteHTTPException,
) -> ProblemDetailResponse:
    """Render framework-level HTTP errors (unknown route, bad method) as problems."""
    code = "NOT_FOUND" if exc.status_code == 404 else "BAD_REQUEST"
    logger.info("app.http_error", status_code=exc.status_code, path=request.url.path)

    return problem_response(
        status=exc.status_code,
        title=code.replace("_", " ").title(),
        code=code,
        detail=str(exc.detail),
        instance=request.url.path,
        headers=exc.headers,
    )


async def unhandled_exception_handler(
    request: Request,
    exc: Exception,
) -> ProblemDetailResponse:
    """Last resort for anything else; the exception text is logged, never returned."""
    logger.error(
        "app.unhandled_error",
        error=str(exc),
        error_type=type(exc).__name__,
        path=request.url.path,
        exc_info=True,
    )

    return problem_response(
        status=500,
        title="Internal Server Error",
        code="INTERNAL_ERROR",
        detail="Internal server error",
        instance=request.url.path,
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Install the RFC 7807 handlers on ``app``."""
    app.add_exception_handler(SellerDeskError, sellerdesk_exception_handler)  # type: ignore[arg-type]
    app.add_exception_handler(RequestValidationError, validation_exception_handler)  # type: ignore[arg-type]
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)  # type: ignore[arg-type]
    app.add_exception_handler(Exception, unhandled_exception_handler)
