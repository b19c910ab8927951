"""Demo data for a fresh portal.

initialize_database() only fills collections that have never been stored,
so it is safe to call on every start-up.
"""

from datetime import timedelta

from src.portal.core.logging import get_logger
from src.portal.core.storage import BlobStore
from src.portal.models import (
    Application,
    ApplicationStatus,
    Project,
    ProjectStatus,
    RecordModel,
    User,
    UserRole,
    utc_now,
)

logger = get_logger(__name__)


def demo_users() -> list[User]:
    now = utc_now()
    return [
        User(
            id="student1",
            name="Alex Taylor",
            email="alex@university.edu",
            role=UserRole.STUDENT,
            created_at=now,
            cgpa=8.5,
        ),
        User(
            id="faculty1",
            name="Dr. Sarah Johnson",
            email="sarah@university.edu",
            role=UserRole.FACULTY,
            created_at=now,
        ),
        User(
            id="faculty2",
            name="Prof. Michael Chen",
            email="michael@university.edu",
            role=UserRole.FACULTY,
            created_at=now,
        ),
    ]


def demo_projects() -> list[Project]:
    now = utc_now()
    return [
        Project(
            id="1",
            title="AI-Based Image Recognition System",
            description=(
                "Design and implement an AI system for image recognition "
                "using deep learning techniques."
            ),
            requirements=(
                "Knowledge of Python, TensorFlow/PyTorch, and basic understanding "
                "of CNN architectures."
            ),
            faculty_id="faculty1",
            faculty_name="Dr. Sarah Johnson",
            status=ProjectStatus.OPEN,
            created_at=now,
            deadline=now + timedelta(days=30),
            max_students=5,
            min_cgpa=7.0,
        ),
        Project(
            id="2",
            title="Blockchain-based Voting System",
            description=(
                "Develop a secure voting system using blockchain technology "
                "to ensure transparency and security."
            ),
            requirements=(
                "Understanding of blockchain concepts, smart contracts, and web development."
            ),
            faculty_id="faculty1",
            faculty_name="Dr. Sarah Johnson",
            status=ProjectStatus.OPEN,
            created_at=now,
            deadline=now + timedelta(days=45),
            max_students=7,
            min_cgpa=7.5,
        ),
        Project(
            id="3",
            title="Smart Home Automation System",
            description=(
                "Create an IoT-based smart home system that can control various "
                "home appliances and monitor energy usage."
            ),
            requirements=(
                "Experience with IoT platforms, embedded systems, and mobile app development."
            ),
            faculty_id="faculty2",
            faculty_name="Prof. Michael Chen",
            status=ProjectStatus.OPEN,
            created_at=now,
            deadline=now + timedelta(days=60),
            max_students=6,
            min_cgpa=8.0,
        ),
    ]


def demo_applications() -> list[Application]:
    return [
        Application(
            id="app1",
            project_id="1",
            student_id="student1",
            student_name="Alex Taylor",
            status=ApplicationStatus.PENDING,
            created_at=utc_now(),
            note=(
                "I'm very interested in AI and have completed several projects "
                "using TensorFlow."
            ),
            cgpa=8.5,
        )
    ]


def initialize_database(store: BlobStore) -> list[str]:
    """Seed every collection that has never been stored.

    Returns the names of the collections that were seeded.
    """
    seeds: dict[str, list[RecordModel]] = {
        "users": [*demo_users()],
        "projects": [*demo_projects()],
        "applications": [*demo_applications()],
        "meetings": [],
    }

    seeded = []
    for collection, records in seeds.items():
        if store.has(collection):
            continue
        store.store(collection, [record.to_record() for record in records])
        seeded.append(collection)

    if seeded:
        logger.info("Seeded demo data", collections=seeded)
    return seeded
