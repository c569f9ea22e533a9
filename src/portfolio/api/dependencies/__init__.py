"""FastAPI dependency injection definitions."""

from src.portfolio.api.dependencies.auth import AdminGuard, require_admin
from src.portfolio.api.dependencies.config import AppSettings, get_app_settings
from src.portfolio.api.dependencies.db import DBSession, get_db_session
from src.portfolio.api.dependencies.repositories import (
    ContactRepo,
    ProjectRepo,
    get_contact_repository,
    get_project_repository,
)
from src.portfolio.api.dependencies.services import (
    ChatServiceDep,
    ContactServiceDep,
    ProjectServiceDep,
    get_chat_service,
    get_contact_service,
    get_project_service,
)

__all__ = [
    # Config
    "AppSettings",
    "get_app_settings",
    # Auth
    "AdminGuard",
    "require_admin",
    # Database
    "DBSession",
    "get_db_session",
    # Repositories
    "ContactRepo",
    "ProjectRepo",
    "get_contact_repository",
    "get_project_repository",
    # Services
    "ChatServiceDep",
    "ContactServiceDep",
    "ProjectServiceDep",
    "get_chat_service",
    "get_contact_service",
    "get_project_service",
]
