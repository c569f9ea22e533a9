"""Service layer - business logic."""

from src.portfolio.services.chat_service import ChatService
from src.portfolio.services.contact_service import ContactService
from src.portfolio.services.project_service import ProjectService

__all__ = ["ChatService", "ContactService", "ProjectService"]
