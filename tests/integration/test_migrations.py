"""Alembic migrations against a fresh database."""

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import inspect
from sqlalchemy.engine import Connection
from sqlmodel import SQLModel

from src.portfolio.core.config import Settings
from src.portfolio.core.db import create_engine, run_migrations_async
from src.portfolio.main import create_app
from tests.helpers import project_payload

pytestmark = pytest.mark.integration


def _describe_schema(connection: Connection) -> dict[str, dict]:
    inspector = inspect(connection)
    return {
        table: {
            "columns": {c["name"]: c["nullable"] for c in inspector.get_columns(table)},
            "indexes": {i["name"] for i in inspector.get_indexes(table)},
        }
        for table in inspector.get_table_names()
        if table != "alembic_version"
    }


async def test_migrations_match_models(settings: Settings) -> None:
    await run_migrations_async(database_url=settings.database_url)

    engine = create_engine(settings)
    try:
        async with engine.connect() as conn:
            schema = await conn.run_sync(_describe_schema)
    finally:
        await engine.dispose()

    assert set(schema) == set(SQLModel.metadata.tables)
    for name, table in SQLModel.metadata.tables.items():
        expected = {column.name: column.nullable for column in table.columns}
        assert schema[name]["columns"] == expected, name
        assert {index.name for index in table.indexes} <= schema[name]["indexes"]


async def test_migrations_are_idempotent(settings: Settings) -> None:
    await run_migrations_async(database_url=settings.database_url)
    await run_migrations_async(database_url=settings.database_url)

    engine = create_engine(settings)
    try:
        async with engine.connect() as conn:
            schema = await conn.run_sync(_describe_schema)
    finally:
        await engine.dispose()

    assert set(schema) == {"projects", "contacts"}


def test_auto_migrate_prepares_store_on_startup(settings: Settings) -> None:
    app = create_app(settings=settings.model_copy(update={"auto_migrate": True}))

    with TestClient(app) as client:
        created = client.post("/projects", json=project_payload())
        listed = client.get("/projects")

    assert created.status_code == 201
    assert [p["_id"] for p in listed.json()] == [created.json()["_id"]]
