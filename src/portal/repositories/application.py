"""Repository for Application entity."""

from src.portal.core.exceptions import CapacityExceededError
from src.portal.core.storage import Record
from src.portal.models import Application, ApplicationStatus
from src.portal.repositories.base import BaseRepository


class ApplicationRepository(BaseRepository[Application]):
    """Repository for the applications collection."""

    model = Application
    collection = "applications"
    id_prefix = "application"

    def list_by_project(self, project_id: str) -> list[Application]:
        return self.filter_by(project_id=project_id)

    def list_by_student(self, student_id: str) -> list[Application]:
        return self.filter_by(student_id=student_id)

    def count_accepted(self, project_id: str) -> int:
        """Number of ACCEPTED applications for a project."""
        return len(self.filter_by(project_id=project_id, status=ApplicationStatus.ACCEPTED))

    def get_for_student(self, project_id: str, student_id: str) -> Application | None:
        """The student's application to a project, in any status."""
        matches = self.filter_by(project_id=project_id, student_id=student_id)
        return matches[0] if matches else None

    def accept(self, id: str, max_students: int) -> Application | None:
        """Mark an application ACCEPTED if its project still has a free seat.

        The seat count is taken from the same snapshot the write is applied
        to, so when a transactional store retries after a concurrent write
        the count is taken again. An already accepted application is
        returned unchanged. Returns None if no record has this id.

        Raises:
            CapacityExceededError: if the project already holds max_students
                accepted applications.
        """

        def apply(records: list[Record]) -> Record | None:
            applications = [self.model.from_record(r) for r in records]
            target = next((a for a in applications if a.id == id), None)
            if target is None:
                return None
            if target.status != ApplicationStatus.ACCEPTED:
                accepted = sum(
                    1
                    for a in applications
                    if a.project_id == target.project_id
                    and a.status == ApplicationStatus.ACCEPTED
                )
                if accepted >= max_students:
                    raise CapacityExceededError(target.project_id, accepted, max_students)
            return self._merge_into(records, id, {"status": ApplicationStatus.ACCEPTED})

        updated = self.store.mutate(self.collection, apply)
        return self.model.from_record(updated) if updated is not None else None
