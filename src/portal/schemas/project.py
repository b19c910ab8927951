"""Project payload schemas."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field, field_validator

from src.portal.models.project import clamp_team_size


def _strip_required(v: str | None, label: str) -> str | None:
    if v is not None:
        v = v.strip()
        if not v:
            raise ValueError(f"{label} cannot be empty or whitespace only")
    return v


class ProjectCreate(BaseModel):
    """Schema for creating a project."""

    title: str = Field(min_length=1, max_length=200)
    description: str = Field(default="", max_length=5000)
    requirements: str = Field(default="", max_length=5000)
    deadline: datetime | None = None
    max_students: int = Field(ge=1)
    min_cgpa: float | None = Field(default=None, ge=0, le=10)

    @field_validator("title")
    @classmethod
    def validate_title(cls, v: str) -> str:
        return _strip_required(v, "Project title")

    @field_validator("description", "requirements")
    @classmethod
    def strip_text(cls, v: str) -> str:
        return v.strip()

    @field_validator("max_students")
    @classmethod
    def cap_max_students(cls, v: int) -> int:
        return clamp_team_size(v)


class ProjectUpdate(BaseModel):
    """Schema for updating a project. Unset fields are left unchanged.

    Only deadline and min_cgpa can be cleared with an explicit None.
    """

    title: str | None = Field(default=None, min_length=1, max_length=200)
    description: str | None = Field(default=None, max_length=5000)
    requirements: str | None = Field(default=None, max_length=5000)
    deadline: datetime | None = None
    max_students: int | None = Field(default=None, ge=1)
    min_cgpa: float | None = Field(default=None, ge=0, le=10)

    @field_validator("title", "description", "requirements", "max_students", mode="before")
    @classmethod
    def reject_null(cls, v: Any) -> Any:
        if v is None:
            raise ValueError("Field cannot be cleared")
        return v

    @field_validator("title")
    @classmethod
    def validate_title(cls, v: str | None) -> str | None:
        return _strip_required(v, "Project title")

    @field_validator("description", "requirements")
    @classmethod
    def strip_text(cls, v: str | None) -> str | None:
        return v.strip() if v is not None else v

    @field_validator("max_students")
    @classmethod
    def cap_max_students(cls, v: int | None) -> int | None:
        return clamp_team_size(v) if v is not None else v
