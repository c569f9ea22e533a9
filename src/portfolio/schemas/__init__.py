"""Schema exports."""

from src.portfolio.schemas.chat import ChatReply, ChatRequest
from src.portfolio.schemas.common import StatusResponse, SuccessResponse
from src.portfolio.schemas.contact import ContactCreate, ContactRead
from src.portfolio.schemas.project import ProjectCreate, ProjectRead, ProjectUpdate

__all__ = [
    "ChatReply",
    "ChatRequest",
    "ContactCreate",
    "ContactRead",
    "ProjectCreate",
    "ProjectRead",
    "ProjectUpdate",
    "StatusResponse",
    "SuccessResponse",
]
