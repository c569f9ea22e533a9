from enum import StrEnum


class ProjectCategory(StrEnum):
    """Closed set of tags a portfolio project may carry."""

    STATIC = "static"
    FULLSTACK = "fullstack"
    AI = "ai"
    AUTOMATION = "automation"
    HACKING = "hacking"


class ReplyType(StrEnum):
    """Kind of answer returned by the chat endpoint."""

    ACTION = "action"
    TEXT = "text"
