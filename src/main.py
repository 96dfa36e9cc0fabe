"""
Main FastAPI application entry point.

Builds the FastAPI application, wires middleware, exception handlers and
routers, and composes the domain event bus once at startup.
"""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from src.core.config import get_settings
from src.core.container import build_event_bus, get_logger
from src.presentation.errors import register_exception_handlers
from src.presentation.middleware import TraceMiddleware
from src.presentation.routers import adobe_sign_router, system_router


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan context manager.

    Handles startup and shutdown events:
    - Startup: Build the event bus and register domain event handlers
    - Shutdown: Drop the bus (in-flight events are not persisted)

    Args:
        app: FastAPI application instance.

    Yields:
        None during application lifetime.
    """
    logger = get_logger()
    app.state.event_bus = build_event_bus(get_settings(), logger)
    logger.info("application_started", environment=get_settings().environment.value)

    yield

    app.state.event_bus = None
    logger.info("application_stopped")


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    settings = get_settings()

    application = FastAPI(
        title=settings.app_name,
        description="Conference platform domain events and contract signature webhooks",
        version=settings.app_version,
        docs_url="/docs" if settings.is_development else None,
        redoc_url=None,
        debug=settings.debug,
        lifespan=lifespan,
    )

    # Wire trace middleware (request correlation)
    application.add_middleware(TraceMiddleware)

    # Register global exception handlers (RFC 9457 error responses)
    register_exception_handlers(application)

    application.include_router(system_router)
    application.include_router(adobe_sign_router)

    return application


app = create_app()
