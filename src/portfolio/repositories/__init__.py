"""Repository layer - data access abstraction."""

from src.portfolio.repositories.base import BaseRepository
from src.portfolio.repositories.contact import ContactRepository
from src.portfolio.repositories.project import ProjectRepository

__all__ = [
    "BaseRepository",
    "ContactRepository",
    "ProjectRepository",
]
