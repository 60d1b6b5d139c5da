"""User service.

Handles registration, credential checks and the default admin account.
"""

import structlog

from autoflow.config import settings
from autoflow.core.security import hash_password, verify_password
from autoflow.models.user import User, UserCreate, UserRole
from autoflow.services.store import InMemoryStore

logger = structlog.get_logger()


class UserServiceError(Exception):
    """Error in user service operations."""

    pass


class UserAlreadyExistsError(UserServiceError):
    """Email is already registered."""

    pass


class InvalidCredentialsError(UserServiceError):
    """Unknown email or wrong password."""

    pass


class UserNotFoundError(UserServiceError):
    """User not found."""

    pass


class UserService:
    """Service for managing user accounts.

    The first account ever registered becomes an admin; every later
    account gets the regular user role.
    """

    def __init__(self, store: InMemoryStore) -> None:
        self._store = store

    def register(self, data: UserCreate) -> User:
        """Register a new user.

        Raises:
            UserAlreadyExistsError: If the email is taken
        """
        if self._store.find_user_by_email(data.email) is not None:
            logger.warning("registration_email_exists", email=data.email)
            raise UserAlreadyExistsError("User already exists")

        user = User(
            email=data.email,
            name=data.name,
            hashed_password=hash_password(data.password),
            role=UserRole.ADMIN if not self._store.users else UserRole.USER,
        )
        self._store.users.append(user)

        logger.info(
            "user_registered",
            user_id=user.id,
            role=user.role.value,
        )
        return user

    def authenticate(self, email: str, password: str) -> User:
        """Check credentials.

        Raises:
            InvalidCredentialsError: If the email is unknown or the password is wrong
        """
        user = self._store.find_user_by_email(email)
        if user is None:
            logger.warning("login_user_not_found", email=email)
            raise InvalidCredentialsError("Invalid credentials")

        if not verify_password(password, user.hashed_password):
            logger.warning("login_invalid_password", user_id=user.id)
            raise InvalidCredentialsError("Invalid credentials")

        logger.info("user_logged_in", user_id=user.id)
        return user

    def get(self, user_id: str) -> User:
        user = self._store.find_user(user_id)
        if user is None:
            raise UserNotFoundError(f"User {user_id} not found")
        return user

    def ensure_default_admin(self) -> User | None:
        """Create the default admin account if no user exists yet.

        Returns:
            The created admin, or None if seeding was skipped
        """
        if not settings.seed_default_admin or self._store.users:
            return None

        admin = User(
            email=settings.default_admin_email,
            name=settings.default_admin_name,
            hashed_password=hash_password(
                settings.default_admin_password.get_secret_value()
            ),
            role=UserRole.ADMIN,
        )
        self._store.users.append(admin)

        logger.info("default_admin_created", email=admin.email)
        return admin
