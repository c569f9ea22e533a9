"""Project model - one portfolio entry."""

from datetime import datetime
from uuid import UUID, uuid4

from sqlalchemy import JSON, Column
from sqlmodel import Field, SQLModel

from src.portfolio.models.base import utc_now


class Project(SQLModel, table=True):
    """Portfolio project document.

    ``categories`` is kept as a JSON list so the record is read and written
    as a single document.
    """

    __tablename__ = "projects"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    name: str
    image: str = Field(default="")
    categories: list[str] = Field(default_factory=list, sa_column=Column(JSON, nullable=False))
    stack: str
    description: str
    live_link: str = Field(default="")
    source_link: str = Field(default="")
    created_at: datetime = Field(default_factory=utc_now, index=True)
    updated_at: datetime = Field(default_factory=utc_now)
