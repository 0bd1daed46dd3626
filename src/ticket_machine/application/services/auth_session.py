"""Authentication session service."""

import logging

from ticket_machine.domain.errors import (
    BadCredentialsError,
    DuplicateUserError,
    InvalidInputError,
    NoActiveSessionError,
    SessionBusyError,
    UserNotFoundError,
)
from ticket_machine.domain.models.user import User

logger = logging.getLogger(__name__)


class AuthSession:
    """The one login session of the machine.

    At most one user is logged in at a time, whoever they are. Admin-gated
    services share a single instance by reference.
    """

    def __init__(self, users: list[User] | None = None) -> None:
        """Initialize with an optional list of known users, all logged out."""
        self._users: list[User] = list(users or [])
        self._current_user: User | None = None

    @property
    def current_user(self) -> User | None:
        return self._current_user

    def users(self) -> list[User]:
        return list(self._users)

    def login(self, username: str, password: str) -> User:
        """Log a user in.

        Raises:
            SessionBusyError: If anyone is already logged in.
            UserNotFoundError: If the username is unknown.
            BadCredentialsError: If the password does not match.
        """
        if self.is_user_logged_in():
            logger.warning(f"Login for '{username}' refused: session busy")
            raise SessionBusyError()

        user = self._find(username)
        if user is None:
            logger.warning(f"Login failed: user '{username}' not found")
            raise UserNotFoundError(username)
        if not user.verify_password(password):
            logger.warning(f"Login failed for '{user.username}': incorrect password")
            raise BadCredentialsError()

        user.is_logged_in = True
        self._current_user = user
        logger.info(f"User '{user.username}' logged in")
        return user

    def logout(self) -> User:
        """End the session and return the user who was logged in.

        Raises:
            NoActiveSessionError: If nobody is logged in.
        """
        user = self._current_user
        if user is None:
            logger.warning("Logout refused: no user is currently logged in")
            raise NoActiveSessionError()
        user.is_logged_in = False
        self._current_user = None
        logger.info(f"User '{user.username}' logged out")
        return user

    def is_user_logged_in(self) -> bool:
        return self._current_user is not None and self._current_user.is_logged_in

    def is_admin_logged_in(self) -> bool:
        user = self._current_user
        return user is not None and user.is_logged_in and user.is_admin

    def verify_credentials(self, username: str, password: str) -> bool:
        """Check a username and password without touching the session."""
        user = self._find(username)
        return user is not None and user.verify_password(password)

    def add_user(self, username: str, password: str, is_admin: bool = False) -> User:
        """Create a logged-out user.

        Raises:
            DuplicateUserError: If the username exists, ignoring case.
            InvalidInputError: If the username or password is blank.
        """
        if username and self._find(username) is not None:
            logger.warning(f"User '{username}' already exists")
            raise DuplicateUserError(username)
        if not username or not username.strip() or not password or not password.strip():
            logger.warning("Rejected user with empty username or password")
            raise InvalidInputError("Username and password cannot be empty")

        user = User(username=username, password=password, is_admin=is_admin)
        self._users.append(user)
        logger.info(f"User '{username}' added")
        return user

    def _find(self, username: str) -> User | None:
        for user in self._users:
            if user.matches(username):
                return user
        return None
