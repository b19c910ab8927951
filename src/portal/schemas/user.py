from pydantic import BaseModel, EmailStr, Field, field_validator

from src.portal.models.enums import UserRole


class UserCreate(BaseModel):
    """Registration payload.

    The password is accepted for interface compatibility but is never
    stored or verified.
    """

    name: str = Field(min_length=1, max_length=100)
    email: EmailStr
    password: str = Field(default="", max_length=100)
    role: UserRole
    cgpa: float | None = Field(default=None, ge=0, le=10)

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Name cannot be empty or whitespace only")
        return v
