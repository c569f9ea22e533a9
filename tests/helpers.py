"""Test helper functions for common data creation patterns."""

from datetime import timedelta
from typing import Any

from sqlalchemy.ext.asyncio import AsyncSession

from src.portfolio.models import Contact, Project
from tests.factories import ContactFactory, ProjectFactory, utc_now


def project_payload(**overrides: Any) -> dict[str, Any]:
    """A valid project creation body in the wire (camelCase) format."""
    payload: dict[str, Any] = {
        "name": "Portfolio Site",
        "image": "https://example.com/shot.png",
        "categories": ["static", "ai"],
        "stack": "Next.js, FastAPI",
        "description": "Personal portfolio with an assistant",
        "liveLink": "https://example.com",
        "sourceLink": "https://github.com/example/portfolio",
    }
    payload.update(overrides)
    return payload


def contact_payload(**overrides: Any) -> dict[str, Any]:
    payload: dict[str, Any] = {
        "name": "Ada",
        "email": "ada@example.com",
        "message": "Loved the portfolio!",
    }
    payload.update(overrides)
    return payload


async def create_projects(session: AsyncSession, count: int) -> list[Project]:
    """Create projects with strictly increasing created_at, oldest first."""
    base = utc_now() - timedelta(minutes=count)
    projects = [
        ProjectFactory.build(created_at=base + timedelta(minutes=i)) for i in range(count)
    ]
    session.add_all(projects)
    await session.commit()
    return projects


async def create_contacts(session: AsyncSession, count: int) -> list[Contact]:
    """Create contact messages with strictly increasing created_at, oldest first."""
    base = utc_now() - timedelta(minutes=count)
    contacts = [
        ContactFactory.build(created_at=base + timedelta(minutes=i)) for i in range(count)
    ]
    session.add_all(contacts)
    await session.commit()
    return contacts
