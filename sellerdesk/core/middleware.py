"""Request middleware for correlation and access logging."""

import time
import uuid
from collections.abc import Awaitable, Callable

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

from sellerdesk.core.logging import get_logger, request_id_ctx, seller_id_ctx

logger = get_logger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"

# Health checks are polled constantly; keep them out of the access log.
QUIET_PATHS = frozenset({"/health", "/health/ready"})


class RequestIdMiddleware(BaseHTTPMiddleware):
    """Inject and propagate request IDs, and log each request's outcome."""

    async def dispatch(
        self,
        request: Request,
        call_next: Callable[[Request], Awaitable[Response]],
    ) -> Response:
        """Process request with correlation ID.

        Args:
            request: Incoming HTTP request.
            call_next: Next middleware/handler in chain.

        Returns:
            Response with X-Request-ID header.
        """
        request_id = request.headers.get(REQUEST_ID_HEADER) or str(uuid.uuid4())
        path = str(request.url.path)
        quiet = path in QUIET_PATHS

        request_token = request_id_ctx.set(request_id)
        seller_token = seller_id_ctx.set(None)
        started = time.perf_counter()

        try:
            if not quiet:
                logger.info(
                    "http.request_started",
                    method=request.method,
                    path=path,
                    query=str(request.url.query) if request.url.query else None,
                )

            response = await call_next(request)

            if not quiet:
                logger.info(
                    "http.request_completed",
                    method=request.method,
                    path=path,
                    status_code=response.status_code,
                    duration_ms=round((time.perf_counter() - started) * 1000, 2),
                )

            response.headers[REQUEST_ID_HEADER] = request_id
            return response
        finally:
            seller_id_ctx.reset(seller_token)
            request_id_ctx.reset(request_token)
