"""Project schemas for API request/response.

Bodies use camelCase keys (``liveLink``, ``createdAt``) and the identifier is
exposed as ``_id``. Snake-case field names are accepted on input as well.
"""

from typing import Any
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from src.portfolio.models.enums import ProjectCategory
from src.portfolio.schemas.common import UtcDatetime


def _strip_required(v: str, label: str) -> str:
    v = v.strip()
    if not v:
        raise ValueError(f"{label} cannot be empty or whitespace only")
    return v


class ProjectCreate(BaseModel):
    """Schema for creating a project, and for revalidating a merged update."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    name: str = Field(min_length=1)
    image: str = ""
    categories: list[ProjectCategory] = Field(min_length=1)
    stack: str = Field(min_length=1)
    description: str = Field(min_length=1)
    live_link: str = ""
    source_link: str = ""

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        return _strip_required(v, "Project name")

    @field_validator("stack")
    @classmethod
    def validate_stack(cls, v: str) -> str:
        return _strip_required(v, "Stack")

    @field_validator("description")
    @classmethod
    def validate_description(cls, v: str) -> str:
        return _strip_required(v, "Description")

    @field_validator("image", "live_link", "source_link", mode="before")
    @classmethod
    def default_blank(cls, v: Any) -> Any:
        if v is None:
            return ""
        return v.strip() if isinstance(v, str) else v

    @field_validator("categories")
    @classmethod
    def dedupe_categories(cls, v: list[ProjectCategory]) -> list[ProjectCategory]:
        # Set semantics, first occurrence wins
        return list(dict.fromkeys(v))

    def to_record(self) -> dict[str, Any]:
        """Return column values for the Project table."""
        data = self.model_dump()
        data["categories"] = [c.value for c in self.categories]
        return data


class ProjectUpdate(BaseModel):
    """Schema for updating a project.

    Every field is optional. The service merges the provided fields onto the
    stored record and revalidates the result with ``ProjectCreate``, so an
    explicit ``null`` on a required field is rejected there.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    name: str | None = None
    image: str | None = None
    categories: list[ProjectCategory] | None = None
    stack: str | None = None
    description: str | None = None
    live_link: str | None = None
    source_link: str | None = None


class ProjectRead(BaseModel):
    """Schema for reading a project."""

    model_config = ConfigDict(
        from_attributes=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    id: UUID = Field(alias="_id")
    name: str
    image: str
    categories: list[str]
    stack: str
    description: str
    live_link: str
    source_link: str
    created_at: UtcDatetime
    updated_at: UtcDatetime
