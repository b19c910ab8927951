"""Result type returned by service operations.

Rule failures are values, not exceptions: a rejected Result carries a
reason code so callers can tell "project full" from "not found".
"""

from dataclasses import dataclass
from enum import Enum
from typing import Generic, TypeVar

T = TypeVar("T")


class RejectionReason(str, Enum):
    """Why a service operation had no effect."""

    NOT_FOUND = "not_found"
    INELIGIBLE_CGPA = "ineligible_cgpa"
    CAPACITY_EXCEEDED = "capacity_exceeded"
    DUPLICATE_EMAIL = "duplicate_email"
    DUPLICATE_APPLICATION = "duplicate_application"
    ROLE_MISMATCH = "role_mismatch"
    INVALID_TRANSITION = "invalid_transition"
    APPLICATION_NOT_ACCEPTED = "application_not_accepted"


@dataclass(frozen=True)
class Result(Generic[T]):
    """Either a value or a rejection reason. Falsy when rejected."""

    value: T | None = None
    reason: RejectionReason | None = None
    detail: str = ""

    @classmethod
    def success(cls, value: T) -> "Result[T]":
        return cls(value=value)

    @classmethod
    def rejected(cls, reason: RejectionReason, detail: str = "") -> "Result[T]":
        return cls(reason=reason, detail=detail)

    @property
    def ok(self) -> bool:
        return self.reason is None

    def __bool__(self) -> bool:
        return self.ok

    def unwrap(self) -> T:
        """Return the value, raising ValueError if the result was rejected."""
        if self.reason is not None:
            raise ValueError(f"Operation rejected ({self.reason.value}): {self.detail}")
        return self.value  # type: ignore[return-value]
