"""FastAPI application entry point."""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from sellerdesk import __version__
from sellerdesk.core.config import get_settings
from sellerdesk.core.database import dispose_engine
from sellerdesk.core.exceptions import register_exception_handlers
from sellerdesk.core.health import router as health_router
from sellerdesk.core.logging import configure_logging, get_logger
from sellerdesk.core.middleware import RequestIdMiddleware
from sellerdesk.features.auth.routes import router as auth_router
from sellerdesk.features.content.routes import router as content_router
from sellerdesk.features.dashboard.routes import router as dashboard_router
from sellerdesk.features.orders.routes import router as orders_router
from sellerdesk.features.products.routes import router as products_router
from sellerdesk.features.profile.routes import router as profile_router

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(_app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager for startup/shutdown.

    Args:
        _app: FastAPI application instance (unused, required by lifespan protocol).

    Yields:
        None after startup, disposes the engine on shutdown.
    """
    settings = get_settings()

    # Startup
    configure_logging()
    logger.info(
        "app.startup_started",
        app_name=settings.app_name,
        app_env=settings.app_env,
        debug=settings.debug,
    )

    yield

    # Shutdown
    await dispose_engine()
    logger.info("app.shutdown_completed")


def create_app() -> FastAPI:
    """Create and configure FastAPI application.

    Returns:
        Configured FastAPI application instance.
    """
    settings = get_settings()

    app = FastAPI(
        title=settings.app_name,
        description="Seller dashboard API: catalog, orders, content and sales summary",
        version=__version__,
        lifespan=lifespan,
        docs_url="/docs" if not settings.is_production else None,
        redoc_url="/redoc" if not settings.is_production else None,
    )

    # Middleware (first added = innermost)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["X-Request-ID"],
    )
    app.add_middleware(RequestIdMiddleware)

    # Exception handlers
    register_exception_handlers(app)

    # Routers
    app.include_router(health_router)
    app.include_router(auth_router)
    app.include_router(products_router)
    app.include_router(orders_router)
    app.include_router(content_router)
    app.include_router(profile_router)
    app.include_router(dashboard_router)

    return app


app = create_app()
