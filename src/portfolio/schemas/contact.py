"""Contact message schemas."""

from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from src.portfolio.schemas.common import UtcDatetime


class ContactCreate(BaseModel):
    """Schema for submitting a contact message."""

    name: str = Field(min_length=1)
    email: str = Field(min_length=1)
    message: str = Field(min_length=1)

    @field_validator("name", "email", "message")
    @classmethod
    def strip_required(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Field cannot be empty or whitespace only")
        return v


class ContactRead(BaseModel):
    model_config = ConfigDict(
        from_attributes=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    id: UUID = Field(alias="_id")
    name: str
    email: str
    message: str
    created_at: UtcDatetime
    updated_at: UtcDatetime
