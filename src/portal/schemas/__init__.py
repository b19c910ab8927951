from src.portal.schemas.meeting import MeetingCreate, MeetingUpdate
from src.portal.schemas.project import ProjectCreate, ProjectUpdate
from src.portal.schemas.user import UserCreate

__all__ = [
    "MeetingCreate",
    "MeetingUpdate",
    "ProjectCreate",
    "ProjectUpdate",
    "UserCreate",
]
