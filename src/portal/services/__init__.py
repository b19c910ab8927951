from src.portal.services.admission_service import AdmissionService
from src.portal.services.auth_service import AuthService
from src.portal.services.meeting_service import MeetingService, split_upcoming
from src.portal.services.results import RejectionReason, Result

__all__ = [
    "AdmissionService",
    "AuthService",
    "MeetingService",
    "RejectionReason",
    "Result",
    "split_upcoming",
]
