"""Meeting payload schemas."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field, field_validator


def _blank_to_none(v: str | None) -> str | None:
    if v is not None:
        v = v.strip()
        if not v:
            return None
    return v


class MeetingCreate(BaseModel):
    """Schema for scheduling a meeting."""

    project_id: str = Field(min_length=1)
    faculty_id: str = Field(min_length=1)
    student_id: str = Field(min_length=1)
    scheduled_at: datetime
    title: str = Field(min_length=1, max_length=200)
    description: str = Field(default="", max_length=5000)
    location: str | None = Field(default=None, max_length=200)
    meeting_link: str | None = Field(default=None, max_length=2000)

    @field_validator("title")
    @classmethod
    def validate_title(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Meeting title cannot be empty or whitespace only")
        return v

    @field_validator("location", "meeting_link")
    @classmethod
    def validate_optional_text(cls, v: str | None) -> str | None:
        return _blank_to_none(v)


class MeetingUpdate(BaseModel):
    """Schema for updating meeting details. Unset fields are left unchanged.

    Only location and meeting_link can be cleared with an explicit None.
    """

    scheduled_at: datetime | None = None
    title: str | None = Field(default=None, min_length=1, max_length=200)
    description: str | None = Field(default=None, max_length=5000)
    location: str | None = Field(default=None, max_length=200)
    meeting_link: str | None = Field(default=None, max_length=2000)

    @field_validator("scheduled_at", "title", "description", mode="before")
    @classmethod
    def reject_null(cls, v: Any) -> Any:
        if v is None:
            raise ValueError("Field cannot be cleared")
        return v

    @field_validator("title")
    @classmethod
    def validate_title(cls, v: str | None) -> str | None:
        if v is not None:
            v = v.strip()
            if not v:
                raise ValueError("Meeting title cannot be empty or whitespace only")
        return v

    @field_validator("location", "meeting_link")
    @classmethod
    def validate_optional_text(cls, v: str | None) -> str | None:
        return _blank_to_none(v)
