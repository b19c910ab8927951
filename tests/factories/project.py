"""Project payload factory."""

from polyfactory import Use

from src.portal.schemas import ProjectCreate
from tests.factories.base import BaseFactory, in_days, unique_suffix


class ProjectCreateFactory(BaseFactory):
    """Factory for project payloads."""

    __model__ = ProjectCreate

    title = Use(lambda: f"Project {unique_suffix()}")
    description = "A research project."
    requirements = "Python"
    deadline = Use(in_days(30))
    max_students = 3
    min_cgpa = None
