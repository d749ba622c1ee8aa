"""Domain models for login sessions."""

from dataclasses import dataclass

ADMIN_USER_ID = "admin"


@dataclass(frozen=True)
class SessionData:
    """Identity attached to a session."""

    user_id: str | None = None
    is_admin: bool = False


ANONYMOUS = SessionData()
