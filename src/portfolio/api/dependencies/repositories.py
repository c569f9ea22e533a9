"""Repository factory dependencies."""

from typing import Annotated

from fastapi import Depends

from src.portfolio.api.dependencies.db import DBSession
from src.portfolio.repositories import ContactRepository, ProjectRepository


def get_project_repository(session: DBSession) -> ProjectRepository:
    return ProjectRepository(session)


def get_contact_repository(session: DBSession) -> ContactRepository:
    return ContactRepository(session)


ProjectRepo = Annotated[ProjectRepository, Depends(get_project_repository)]
ContactRepo = Annotated[ContactRepository, Depends(get_contact_repository)]
