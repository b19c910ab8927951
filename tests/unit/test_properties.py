"""Property-based tests for the admission invariants.

Stores and services are built inside each example so that every
generated case starts from an empty portal.
"""

from itertools import cycle

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from src.portal.core.config import Settings
from src.portal.core.storage import MemoryBlobStore
from src.portal.dependencies import build_portal
from src.portal.models import MAX_TEAM_SIZE, ApplicationStatus, ProjectStatus
from src.portal.repositories import ProjectRepository, UserRepository
from src.portal.schemas import ProjectCreate, ProjectUpdate
from tests.helpers import create_faculty, create_student

pytestmark = pytest.mark.unit

cgpa_values = st.floats(min_value=0, max_value=10, allow_nan=False)


def fresh_portal():
    return build_portal(Settings(_env_file=None, app_env="testing"), MemoryBlobStore())


def users_of(portal) -> UserRepository:
    return UserRepository(portal.store)


@given(min_cgpa=cgpa_values, cgpa=cgpa_values)
@settings(max_examples=50, deadline=None)
def test_cgpa_gate(min_cgpa: float, cgpa: float):
    """Students below the minimum never get an application; others always do."""
    portal = fresh_portal()
    users = users_of(portal)
    faculty = create_faculty(users)
    student = create_student(users, cgpa=cgpa)
    project = portal.admissions.create_project(
        faculty.id, ProjectCreate(title="Gated", max_students=3, min_cgpa=min_cgpa)
    ).unwrap()

    result = portal.admissions.submit_application(project.id, student)

    if cgpa < min_cgpa:
        assert result.value is None
        assert portal.admissions.applications_for_project(project.id) == []
    else:
        assert result.ok


@given(
    max_students=st.integers(min_value=1, max_value=MAX_TEAM_SIZE),
    decisions=st.lists(st.booleans(), min_size=1, max_size=10),
)
@settings(max_examples=40, deadline=None)
def test_accepted_count_never_exceeds_capacity(max_students: int, decisions: list[bool]):
    """However decisions interleave, accepted count stays within max_students."""
    portal = fresh_portal()
    users = users_of(portal)
    faculty = create_faculty(users)
    project = portal.admissions.create_project(
        faculty.id, ProjectCreate(title="Capped", max_students=max_students)
    ).unwrap()
    applications = [
        portal.admissions.submit_application(project.id, create_student(users)).unwrap()
        for _ in range(max_students)
    ]
    # Applications submitted before the project filled up stay pending
    applications += [
        portal.admissions.application_repo.create(
            {
                "project_id": project.id,
                "student_id": "late",
                "student_name": "Late applicant",
                "cgpa": 9.0,
            }
        )
        for _ in range(len(decisions))
    ]

    for application, accept in zip(applications, cycle(decisions), strict=False):
        decision = ApplicationStatus.ACCEPTED if accept else ApplicationStatus.REJECTED
        portal.admissions.decide_application(application.id, decision)

    accepted = portal.admissions.application_repo.count_accepted(project.id)
    assert accepted <= max_students
    if accepted == max_students:
        assert portal.admissions.get_project(project.id).status == ProjectStatus.ASSIGNED


@given(requested=st.integers(min_value=1, max_value=1000))
@settings(deadline=None)
def test_team_size_clamp(requested: int):
    """Created and updated team sizes are min(requested, 7)."""
    portal = fresh_portal()
    faculty = create_faculty(users_of(portal))

    created = portal.admissions.create_project(
        faculty.id, ProjectCreate(title="Sized", max_students=requested)
    ).unwrap()
    updated = portal.admissions.update_project(
        created.id, ProjectUpdate(max_students=requested)
    ).unwrap()

    assert created.max_students == min(requested, MAX_TEAM_SIZE)
    assert updated.max_students == min(requested, MAX_TEAM_SIZE)


@given(
    title=st.text(min_size=1, max_size=50).filter(lambda s: s.strip()),
    description=st.text(max_size=100),
    min_cgpa=st.none() | cgpa_values,
)
@settings(deadline=None)
def test_lookup_returns_created_record(title: str, description: str, min_cgpa: float | None):
    """get_by_id(create(x).id) equals what create returned."""
    repo = ProjectRepository(MemoryBlobStore())
    created = repo.create(
        {
            "title": title,
            "description": description,
            "faculty_id": "faculty1",
            "faculty_name": "Dr. Sarah Johnson",
            "max_students": 2,
            "min_cgpa": min_cgpa,
        }
    )
    assert repo.get_by_id(created.id) == created
