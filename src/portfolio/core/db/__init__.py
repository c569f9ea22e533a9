"""Database utilities - engine, session, migrations."""

from src.portfolio.core.db.engine import create_engine, dispose_store, init_store
from src.portfolio.core.db.migrations import run_migrations_async, run_migrations_sync
from src.portfolio.core.db.session import get_session

__all__ = [
    # Engine
    "create_engine",
    "dispose_store",
    "init_store",
    # Session
    "get_session",
    # Migrations
    "run_migrations_async",
    "run_migrations_sync",
]
