import os
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

import httpx
import uvicorn
from fastapi import FastAPI
from sqlalchemy.ext.asyncio import AsyncEngine

from src.portfolio.api.middlewares import setup_middlewares
from src.portfolio.api.routes.router import api_router
from src.portfolio.core.ai import create_http_client
from src.portfolio.core.config import Settings, get_settings
from src.portfolio.core.db import dispose_store, init_store, run_migrations_async
from src.portfolio.core.exceptions import setup_exception_handlers
from src.portfolio.core.health import setup_health_endpoint, setup_metrics_endpoint
from src.portfolio.core.logging import get_logger, setup_logging

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None]:
    """Application lifespan - startup and shutdown.

    The store init is fatal: if the database cannot be reached the exception
    propagates and the server refuses to start.
    """
    settings: Settings = app.state.settings
    setup_logging(settings.debug)
    logger.info(f"Starting {settings.app_name}")

    owns_engine = app.state.engine is None
    if owns_engine:
        app.state.engine = await init_store(settings)
        if settings.auto_migrate:
            logger.info("Applying database migrations")
            await run_migrations_async(database_url=settings.database_url)

    owns_http_client = app.state.http_client is None
    if owns_http_client:
        app.state.http_client = create_http_client(settings)

    yield

    logger.info("Closing connections...")
    if owns_http_client:
        await app.state.http_client.aclose()
        app.state.http_client = None
    if owns_engine:
        await dispose_store(app.state.engine)
        app.state.engine = None
    logger.info("Shutdown complete")


OPENAPI_TAGS = [
    {"name": "projects", "description": "Portfolio projects"},
    {"name": "contacts", "description": "Contact form submissions"},
    {"name": "ai", "description": "Portfolio assistant chat"},
    {"name": "health", "description": "Liveness and store health"},
]


def create_app(
    settings: Settings | None = None,
    engine: AsyncEngine | None = None,
    http_client: httpx.AsyncClient | None = None,
) -> FastAPI:
    """Build the application.

    Args:
        settings: Defaults to ``get_settings()``.
        engine: Store handle. When omitted it is created by ``init_store``
            during startup.
        http_client: Client for the chat API. Created during startup when omitted.
    """
    settings = settings or get_settings()

    app = FastAPI(
        title=settings.app_name,
        description="Portfolio projects, contact inbox and assistant chat",
        version="0.1.0",
        openapi_tags=OPENAPI_TAGS,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.engine = engine
    app.state.http_client = http_client

    setup_exception_handlers(app)
    setup_middlewares(app, settings)
    setup_health_endpoint(app)
    app.include_router(api_router)
    setup_metrics_endpoint(app, settings)

    return app


def run() -> None:
    """Console entry point."""
    uvicorn.run(
        "src.portfolio.main:create_app",
        factory=True,
        host="0.0.0.0",
        port=int(os.getenv("PORT", "8000")),
    )
