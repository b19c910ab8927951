"""Tests for payload schema validation."""

from datetime import UTC, datetime

import pytest
from pydantic import ValidationError

from src.portal.models import UserRole
from src.portal.schemas import (
    MeetingCreate,
    MeetingUpdate,
    ProjectCreate,
    ProjectUpdate,
    UserCreate,
)

pytestmark = pytest.mark.unit


class TestProjectCreate:
    def test_strips_text(self):
        data = ProjectCreate(title="  Robotics  ", description=" Build a robot ", max_students=2)
        assert data.title == "Robotics"
        assert data.description == "Build a robot"

    def test_blank_title_rejected(self):
        with pytest.raises(ValidationError) as exc_info:
            ProjectCreate(title="   ", max_students=2)
        assert any(error["loc"] == ("title",) for error in exc_info.value.errors())

    def test_team_size_clamped(self):
        assert ProjectCreate(title="Robotics", max_students=20).max_students == 7

    def test_team_size_must_be_positive(self):
        with pytest.raises(ValidationError):
            ProjectCreate(title="Robotics", max_students=0)


class TestProjectUpdate:
    def test_only_set_fields_dumped(self):
        data = ProjectUpdate(max_students=9)
        assert data.model_dump(exclude_unset=True) == {"max_students": 7}

    def test_blank_title_rejected(self):
        with pytest.raises(ValidationError):
            ProjectUpdate(title=" ")

    @pytest.mark.parametrize("field", ["title", "description", "requirements", "max_students"])
    def test_required_field_cannot_be_cleared(self, field):
        with pytest.raises(ValidationError) as exc_info:
            ProjectUpdate(**{field: None})
        assert exc_info.value.errors()[0]["loc"] == (field,)

    def test_optional_fields_can_be_cleared(self):
        data = ProjectUpdate(deadline=None, min_cgpa=None)
        assert data.model_dump(exclude_unset=True) == {"deadline": None, "min_cgpa": None}


class TestUserCreate:
    def test_valid_student(self):
        data = UserCreate(name="Alex", email="alex@university.edu", role=UserRole.STUDENT, cgpa=8.5)
        assert data.cgpa == 8.5
        assert data.password == ""

    def test_invalid_email_rejected(self):
        with pytest.raises(ValidationError):
            UserCreate(name="Alex", email="not-an-email", role=UserRole.STUDENT)

    def test_blank_name_rejected(self):
        with pytest.raises(ValidationError):
            UserCreate(name="  ", email="alex@university.edu", role=UserRole.STUDENT)


class TestMeetingSchemas:
    def test_blank_optional_text_becomes_none(self):
        data = MeetingCreate(
            project_id="p1",
            faculty_id="f1",
            student_id="s1",
            scheduled_at=datetime(2030, 1, 1, tzinfo=UTC),
            title="Review",
            location="   ",
            meeting_link="",
        )
        assert data.location is None
        assert data.meeting_link is None

    def test_blank_title_rejected(self):
        with pytest.raises(ValidationError):
            MeetingUpdate(title="")

    @pytest.mark.parametrize("field", ["scheduled_at", "title", "description"])
    def test_required_field_cannot_be_cleared(self, field):
        with pytest.raises(ValidationError) as exc_info:
            MeetingUpdate(**{field: None})
        assert exc_info.value.errors()[0]["loc"] == (field,)

    def test_optional_fields_can_be_cleared(self):
        data = MeetingUpdate(location=None, meeting_link=None)
        assert data.model_dump(exclude_unset=True) == {"location": None, "meeting_link": None}
