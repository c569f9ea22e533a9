"""Database engine management.

The engine is the store handle. It is built once by ``init_store`` during
startup and handed to the application explicitly (``app.state.engine``).
"""

from typing import Any

from sqlalchemy import text
from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine

from src.portfolio.core.config import Settings
from src.portfolio.core.exceptions import StoreUnavailableError
from src.portfolio.core.logging import get_logger

logger = get_logger(__name__)


def create_engine(settings: Settings) -> AsyncEngine:
    """Build an async engine for the configured database URL."""
    kwargs: dict[str, Any] = {"echo": settings.database_echo, "pool_pre_ping": True}
    # SQLite uses a pool without size limits
    if not make_url(settings.database_url).get_backend_name().startswith("sqlite"):
        kwargs["pool_size"] = settings.database_pool_size
        kwargs["max_overflow"] = settings.database_max_overflow
    return create_async_engine(settings.database_url, **kwargs)


async def init_store(settings: Settings) -> AsyncEngine:
    """Create the engine and verify the store answers.

    Raises:
        StoreUnavailableError: If the database cannot be reached.
    """
    engine = create_engine(settings)
    try:
        async with engine.connect() as connection:
            await connection.execute(text("SELECT 1"))
    except Exception as e:
        await engine.dispose()
        logger.error("Document store unreachable", error=str(e))
        raise StoreUnavailableError(f"Document store unavailable: {e}") from e

    logger.info("Document store connected", backend=engine.url.get_backend_name())
    return engine


async def dispose_store(engine: AsyncEngine | None) -> None:
    """Dispose the engine. Call during shutdown."""
    if engine is not None:
        await engine.dispose()
