"""User record."""

from datetime import datetime

from pydantic import Field, field_validator

from src.portal.models.base import RecordModel, utc_now
from src.portal.models.enums import UserRole


class User(RecordModel):
    """A student or faculty member. CGPA is only meaningful for students."""

    name: str
    email: str
    role: UserRole
    created_at: datetime = Field(default_factory=utc_now)
    cgpa: float | None = Field(default=None, ge=0, le=10)

    @field_validator("email")
    @classmethod
    def normalize_email(cls, v: str) -> str:
        return v.strip().lower()

    @property
    def is_student(self) -> bool:
        return self.role == UserRole.STUDENT

    @property
    def is_faculty(self) -> bool:
        return self.role == UserRole.FACULTY
