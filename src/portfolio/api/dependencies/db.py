"""Database session dependencies."""

from collections.abc import AsyncGenerator
from typing import Annotated

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from src.portfolio.core.db import get_session
from src.portfolio.core.exceptions import StoreUnavailableError


async def get_db_session(request: Request) -> AsyncGenerator[AsyncSession]:
    """Get a session on the store handle attached to the application."""
    engine = request.app.state.engine
    if engine is None:
        raise StoreUnavailableError()
    async with get_session(engine) as session:
        yield session


DBSession = Annotated[AsyncSession, Depends(get_db_session)]
