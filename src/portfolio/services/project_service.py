"""Project CRUD service."""

from typing import Any

from pydantic import ValidationError
from sqlalchemy.ext.asyncio import AsyncSession

from src.portfolio.core.exceptions import InvalidInputError, NotFoundError
from src.portfolio.core.logging import get_logger
from src.portfolio.core.validators import parse_identifier
from src.portfolio.models import Project
from src.portfolio.models.base import utc_now
from src.portfolio.repositories import ProjectRepository
from src.portfolio.schemas.project import ProjectCreate, ProjectUpdate

logger = get_logger(__name__)

# Fields a client may write; id and timestamps are owned by the store
_WRITABLE_FIELDS = tuple(ProjectCreate.model_fields)


class ProjectService:
    """Portfolio project management - business logic only."""

    def __init__(self, project_repo: ProjectRepository, session: AsyncSession):
        self.project_repo = project_repo
        self.session = session

    async def list_projects(self) -> list[Project]:
        """All projects, most recently created first."""
        return await self.project_repo.list_newest_first()

    async def get_project(self, project_id: str) -> Project:
        """Get a project by ID.

        Raises:
            InvalidIdentifierError: If the ID is malformed.
            NotFoundError: If no project has that ID.
        """
        project = await self.project_repo.get_by_id(parse_identifier(project_id, "project"))
        if project is None:
            raise NotFoundError(f"Project {project_id} not found")
        return project

    async def create_project(self, data: ProjectCreate) -> Project:
        """Persist a validated project and return it with id and timestamps."""
        project = Project(**data.to_record())
        self.project_repo.add(project)
        try:
            await self.session.commit()
            await self.session.refresh(project)
        except Exception:
            await self.session.rollback()
            raise

        logger.info("Project created", project_id=str(project.id))
        return project

    async def update_project(self, project_id: str, data: ProjectUpdate) -> Project:
        """Merge the provided fields onto a project and revalidate the result.

        Nothing is written unless the merged record passes validation.

        Raises:
            InvalidIdentifierError: If the ID is malformed.
            NotFoundError: If no project has that ID.
            InvalidInputError: If the merged record violates the schema.
        """
        project = await self.get_project(project_id)

        merged: dict[str, Any] = {field: getattr(project, field) for field in _WRITABLE_FIELDS}
        merged.update(data.model_dump(exclude_unset=True))
        try:
            validated = ProjectCreate.model_validate(merged)
        except ValidationError as e:
            raise InvalidInputError.from_validation_error(e) from e

        for field, value in validated.to_record().items():
            setattr(project, field, value)
        # SQLModel has no onupdate hook, so stamp it here
        project.updated_at = utc_now()

        try:
            await self.session.commit()
            await self.session.refresh(project)
        except Exception:
            await self.session.rollback()
            raise

        logger.info("Project updated", project_id=str(project.id))
        return project

    async def delete_project(self, project_id: str) -> None:
        """Delete a project.

        Raises:
            InvalidIdentifierError: If the ID is malformed.
            NotFoundError: If no project has that ID.
        """
        project = await self.get_project(project_id)
        await self.project_repo.delete(project)
        try:
            await self.session.commit()
        except Exception:
            await self.session.rollback()
            raise

        logger.info("Project deleted", project_id=project_id)
