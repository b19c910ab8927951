"""Exception types raised by the portal core.

Domain rule failures (CGPA too low, project full, ...) are not exceptions;
they come back as rejected results from the service layer.
CapacityExceededError only carries a full project out of a repository write
so the service can turn it into one.
"""


class PortalError(Exception):
    """Base class for portal errors."""


class StorageError(PortalError):
    """Raised when stored data cannot be read or written."""

    def __init__(self, message: str, key: str | None = None):
        super().__init__(message)
        self.key = key


class ConcurrentUpdateError(StorageError):
    """Raised when an optimistic update keeps losing to concurrent writers."""


class CapacityExceededError(PortalError):
    """Raised inside a write when a project has no free seat left."""

    def __init__(self, project_id: str, accepted: int, max_students: int):
        super().__init__(f"Project already has {accepted} of {max_students} students")
        self.project_id = project_id
        self.accepted = accepted
        self.max_students = max_students
