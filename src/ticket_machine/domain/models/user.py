"""User domain model."""

from dataclasses import dataclass, field


@dataclass
class User:
    """A system user with login credentials and a role."""

    username: str
    password: str = field(repr=False)
    is_admin: bool
    is_logged_in: bool = False

    def matches(self, username: str) -> bool:
        """Check whether this user has the given username, ignoring case."""
        return self.username.casefold() == username.strip().casefold()

    def verify_password(self, password: str) -> bool:
        """Compare the password by exact match."""
        return self.password == password

    def user_info(self) -> str:
        """Describe the user for admin listings."""
        role = "Admin" if self.is_admin else "Regular User"
        status = "Logged In" if self.is_logged_in else "Logged Out"
        return f"Username: {self.username} | Role: {role} | Status: {status}"
