"""Test helper functions for common data creation patterns."""

from src.portal.models import Application, Project, User, UserRole
from src.portal.repositories import UserRepository
from src.portal.services import AdmissionService
from tests.factories import ProjectCreateFactory, UserCreateFactory


def create_user(user_repo: UserRepository, **kwargs) -> User:
    """Store a user built from UserCreateFactory, bypassing the session slot."""
    data = UserCreateFactory.build(**kwargs)
    return user_repo.create(
        {
            "name": data.name,
            "email": str(data.email),
            "role": data.role,
            "cgpa": data.cgpa,
        }
    )


def create_faculty(user_repo: UserRepository, **kwargs) -> User:
    kwargs.setdefault("name", "Dr. Test Faculty")
    return create_user(user_repo, role=UserRole.FACULTY, cgpa=None, **kwargs)


def create_student(user_repo: UserRepository, cgpa: float | None = 8.0, **kwargs) -> User:
    return create_user(user_repo, role=UserRole.STUDENT, cgpa=cgpa, **kwargs)


def create_project(admissions: AdmissionService, faculty: User, **kwargs) -> Project:
    """Publish a project through the admission service.

    Args:
        admissions: Service to publish through
        faculty: Owning faculty user
        **kwargs: Overrides passed to ProjectCreateFactory

    Returns:
        The stored project
    """
    return admissions.create_project(faculty.id, ProjectCreateFactory.build(**kwargs)).unwrap()


def apply(
    admissions: AdmissionService, project: Project, student: User, note: str = ""
) -> Application:
    """Submit an application that is expected to succeed."""
    return admissions.submit_application(project.id, student, note).unwrap()
