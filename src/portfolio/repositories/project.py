"""Repository for Project entity."""

from src.portfolio.models import Project
from src.portfolio.repositories.base import BaseRepository


class ProjectRepository(BaseRepository[Project]):
    model = Project
