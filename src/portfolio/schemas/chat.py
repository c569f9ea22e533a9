"""Schemas for the AI chat endpoint."""

from pydantic import BaseModel, Field

from src.portfolio.models.enums import ReplyType


class ChatRequest(BaseModel):
    message: str = Field(min_length=1)


class ChatReply(BaseModel):
    """Either a client-side action (URL or mode token) or plain assistant text."""

    type: ReplyType
    value: str
