"""Repository for Meeting entity."""

from src.portal.models import Meeting
from src.portal.repositories.base import BaseRepository


class MeetingRepository(BaseRepository[Meeting]):
    """Repository for the meetings collection. Meetings carry no created_at."""

    model = Meeting
    collection = "meetings"
    id_prefix = "meeting"
    timestamped = False

    def list_by_project(self, project_id: str) -> list[Meeting]:
        return self.filter_by(project_id=project_id)

    def list_by_faculty(self, faculty_id: str) -> list[Meeting]:
        return self.filter_by(faculty_id=faculty_id)

    def list_by_student(self, student_id: str) -> list[Meeting]:
        return self.filter_by(student_id=student_id)
