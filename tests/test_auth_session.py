"""Tests for the authentication session."""

import pytest

from ticket_machine.application.services import AuthSession
from ticket_machine.domain.errors import (
    BadCredentialsError,
    DuplicateUserError,
    InvalidInputError,
    NoActiveSessionError,
    SessionBusyError,
    UserNotFoundError,
)
from ticket_machine.domain.models import User


@pytest.fixture
def session() -> AuthSession:
    """Create a session with one admin and one regular user."""
    return AuthSession(
        [
            User(username="admin", password="admin123", is_admin=True),
            User(username="john", password="john789", is_admin=False),
        ]
    )


def test_nobody_logged_in_initially(session: AuthSession) -> None:
    """Given a fresh session, when checking, then nobody is logged in."""
    assert session.current_user is None
    assert not session.is_user_logged_in()
    assert not session.is_admin_logged_in()


def test_login_admin(session: AuthSession) -> None:
    """Given admin credentials, when logging in, then the admin holds the session."""
    user = session.login("admin", "admin123")

    assert user.is_logged_in
    assert session.current_user is user
    assert session.is_admin_logged_in()


def test_login_username_ignores_case(session: AuthSession) -> None:
    """Given a username in upper case, when logging in, then the user is found."""
    assert session.login("JOHN", "john789").username == "john"
    assert session.is_user_logged_in()
    assert not session.is_admin_logged_in()


def test_login_unknown_user(session: AuthSession) -> None:
    """Given an unknown username, when logging in, then UserNotFoundError is raised."""
    with pytest.raises(UserNotFoundError):
        session.login("mallory", "secret")


def test_login_wrong_password(session: AuthSession) -> None:
    """Given a wrong password, when logging in, then BadCredentialsError is raised."""
    with pytest.raises(BadCredentialsError):
        session.login("admin", "Admin123")

    assert not session.is_user_logged_in()


def test_second_login_is_refused_and_leaves_session_unchanged(session: AuthSession) -> None:
    """Given a logged-in user, when anyone else logs in, then SessionBusyError is raised."""
    john = session.login("john", "john789")

    with pytest.raises(SessionBusyError):
        session.login("admin", "admin123")

    assert session.current_user is john
    assert not session.is_admin_logged_in()


def test_busy_check_comes_before_credentials(session: AuthSession) -> None:
    """Given a busy session, when logging in as an unknown user, then the busy error wins."""
    session.login("john", "john789")

    with pytest.raises(SessionBusyError):
        session.login("nobody", "nothing")


def test_logout(session: AuthSession) -> None:
    """Given a logged-in user, when logging out, then the session is free again."""
    session.login("admin", "admin123")

    user = session.logout()

    assert user.username == "admin"
    assert not user.is_logged_in
    assert session.current_user is None
    assert session.login("john", "john789").username == "john"


def test_logout_without_session(session: AuthSession) -> None:
    """Given nobody logged in, when logging out, then NoActiveSessionError is raised."""
    with pytest.raises(NoActiveSessionError):
        session.logout()


def test_verify_credentials_does_not_log_in(session: AuthSession) -> None:
    """Given credentials, when verifying, then the session is untouched."""
    assert session.verify_credentials("admin", "admin123")
    assert not session.verify_credentials("admin", "wrong")
    assert not session.verify_credentials("ghost", "admin123")
    assert not session.is_user_logged_in()


def test_add_user(session: AuthSession) -> None:
    """Given a new username, when adding, then the user exists logged out."""
    user = session.add_user("alice", "alice321")

    assert not user.is_admin
    assert not user.is_logged_in
    assert [u.username for u in session.users()] == ["admin", "john", "alice"]


def test_add_user_rejects_duplicates_ignoring_case(session: AuthSession) -> None:
    """Given an existing username in another case, when adding, then DuplicateUserError is raised."""
    with pytest.raises(DuplicateUserError):
        session.add_user("ADMIN", "other")


@pytest.mark.parametrize(("username", "password"), [("", "pw"), ("bob", ""), ("  ", "pw")])
def test_add_user_rejects_blank_fields(
    session: AuthSession, username: str, password: str
) -> None:
    """Given a blank username or password, when adding, then InvalidInputError is raised."""
    with pytest.raises(InvalidInputError):
        session.add_user(username, password)
