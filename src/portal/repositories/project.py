"""Repository for Project entity."""

from src.portal.models import Project, ProjectStatus
from src.portal.repositories.base import BaseRepository


class ProjectRepository(BaseRepository[Project]):
    """Repository for the projects collection.

    max_students is capped by the Project model itself, so the cap holds on
    create, on update and on records loaded from older data.
    """

    model = Project
    collection = "projects"
    id_prefix = "project"

    def list_by_faculty(self, faculty_id: str) -> list[Project]:
        """Projects owned by a faculty member."""
        return self.filter_by(faculty_id=faculty_id)

    def list_by_status(self, status: ProjectStatus) -> list[Project]:
        return self.filter_by(status=status)

    def search(
        self,
        term: str | None = None,
        status: ProjectStatus | None = None,
    ) -> list[Project]:
        """Filter projects by a search term and optional status.

        The term matches case-insensitively against title and description.
        """
        needle = (term or "").strip().lower()

        def matches(project: Project) -> bool:
            if status is not None and project.status != status:
                return False
            if not needle:
                return True
            return needle in project.title.lower() or needle in project.description.lower()

        return self.find(matches)
