"""Test factories for generating payloads.

Re-exports all factories for convenient imports:
    from tests.factories import UserCreateFactory, ProjectCreateFactory, ...
"""

from tests.factories.base import BaseFactory, in_days, unique_suffix
from tests.factories.meeting import MeetingCreateFactory
from tests.factories.project import ProjectCreateFactory
from tests.factories.user import UserCreateFactory

__all__ = [
    # Base
    "BaseFactory",
    "in_days",
    "unique_suffix",
    # Payloads
    "MeetingCreateFactory",
    "ProjectCreateFactory",
    "UserCreateFactory",
]
