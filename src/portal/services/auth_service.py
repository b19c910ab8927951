"""Registration and session identity.

The session slot is a convenience cache of "who is using the portal", not a
credential: there is no token, no expiry and no password check. Login
succeeds for any registered email.
"""

from src.portal.core.logging import bind_user_context, clear_request_context, get_logger
from src.portal.core.storage import BlobStore
from src.portal.models import User, UserRole
from src.portal.repositories import UserRepository
from src.portal.schemas import UserCreate
from src.portal.services.results import RejectionReason, Result

logger = get_logger(__name__)


class AuthService:
    """Service for registration, login and the current session identity."""

    def __init__(self, user_repo: UserRepository, store: BlobStore):
        self.user_repo = user_repo
        self.store = store

    def register(self, data: UserCreate) -> Result[User]:
        """Create a user and make them the current session identity.

        Rejected with DUPLICATE_EMAIL if the email is taken; the existing
        user is left unchanged.
        """
        email = str(data.email).strip().lower()
        if self.user_repo.exists_by_email(email):
            logger.info("Registration rejected, email already registered")
            return Result.rejected(RejectionReason.DUPLICATE_EMAIL, "Email already registered")

        user = self.user_repo.create(
            {
                "name": data.name,
                "email": email,
                "role": data.role,
                "cgpa": data.cgpa if data.role == UserRole.STUDENT else None,
            }
        )
        self._set_current(user)
        logger.info("User registered", user_id=user.id, role=user.role.value)
        return Result.success(user)

    def login(self, email: str, password: str = "") -> Result[User]:
        """Make the user with this email the current session identity.

        The password is ignored.
        """
        user = self.user_repo.get_by_email(email)
        if user is None:
            logger.info("Login rejected, unknown email")
            return Result.rejected(RejectionReason.NOT_FOUND, "No user with this email")

        self._set_current(user)
        logger.info("User logged in", user_id=user.id)
        return Result.success(user)

    def logout(self) -> None:
        """Clear the current session identity."""
        self.store.store_session(None)
        clear_request_context()
        logger.info("User logged out")

    def current_user(self) -> User | None:
        """The user stored in the session slot, if any."""
        record = self.store.load_session()
        if record is None:
            return None
        return User.from_record(record)

    def _set_current(self, user: User) -> None:
        self.store.store_session(user.to_record())
        bind_user_context(user.id, user.role.value)
