"""Service factory dependencies."""

from typing import Annotated

from fastapi import Depends, Request

from src.portfolio.api.dependencies.config import AppSettings
from src.portfolio.api.dependencies.db import DBSession
from src.portfolio.api.dependencies.repositories import ContactRepo, ProjectRepo
from src.portfolio.core.ai import ChatCompletionClient
from src.portfolio.services import ChatService, ContactService, ProjectService


def get_project_service(project_repo: ProjectRepo, session: DBSession) -> ProjectService:
    return ProjectService(project_repo, session)


def get_contact_service(contact_repo: ContactRepo, session: DBSession) -> ContactService:
    return ContactService(contact_repo, session)


def get_chat_service(request: Request, settings: AppSettings) -> ChatService:
    """Chat service on the application's shared HTTP client."""
    client = ChatCompletionClient(request.app.state.http_client, settings)
    return ChatService(client, settings)


ProjectServiceDep = Annotated[ProjectService, Depends(get_project_service)]
ContactServiceDep = Annotated[ContactService, Depends(get_contact_service)]
ChatServiceDep = Annotated[ChatService, Depends(get_chat_service)]
