from functools import lru_cache
from typing import Literal

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # App
    app_name: str = "University Project Portal"
    app_env: str = "development"  # development, testing, production
    debug: bool = False

    # Storage
    storage_backend: Literal["memory", "json", "redis"] = "memory"
    storage_path: str = "./data"  # Directory for the json backend
    storage_key_prefix: str = "university_project"

    # Redis (only used when storage_backend == "redis")
    redis_url: str | None = None  # e.g., "redis://localhost:6379/0"
    redis_transaction_retries: int = 5

    # Admission rules
    missing_cgpa_policy: Literal["allow", "treat_as_zero", "reject"] = "allow"
    prevent_duplicate_applications: bool = True
    strict_status_transitions: bool = False  # False keeps direct status overwrite

    # Seeding
    seed_demo_data: bool = False

    @field_validator("storage_key_prefix")
    @classmethod
    def validate_key_prefix(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("STORAGE_KEY_PREFIX cannot be empty")
        return v


@lru_cache
def get_settings() -> Settings:
    return Settings()
