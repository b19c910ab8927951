"""Repository for User entity."""

from src.portal.models import User
from src.portal.repositories.base import BaseRepository


class UserRepository(BaseRepository[User]):
    """Repository for the users collection."""

    model = User
    collection = "users"
    id_prefix = "user"

    def get_by_email(self, email: str) -> User | None:
        """Get user by email address (case-insensitive)."""
        email = email.strip().lower()
        return next((user for user in self.get_all() if user.email == email), None)

    def exists_by_email(self, email: str) -> bool:
        """Check if a user with the given email exists."""
        return self.get_by_email(email) is not None
