"""Login shim backed by the session store."""

import logging
import secrets
from dataclasses import dataclass

from flight_tracker.domain.sessions import ADMIN_USER_ID, ANONYMOUS, SessionData
from flight_tracker.errors import AuthError, ValidationError
from flight_tracker.services.session_store import SessionStore

logger = logging.getLogger(__name__)


@dataclass
class AuthService:
    """Validates credentials and manages the caller's session."""

    session_store: SessionStore
    admin_password: str

    def current_session(self, session_id: str | None) -> SessionData:
        """Return the caller's session, or an anonymous one."""
        if not session_id:
            return ANONYMOUS
        return self.session_store.get(session_id) or ANONYMOUS

    def login_as_user(
        self, session_id: str | None, username: str | None
    ) -> tuple[str, SessionData]:
        """Log in under an arbitrary username."""
        cleaned = (username or "").strip()
        if not cleaned:
            raise ValidationError("Username required")
        data = SessionData(user_id=cleaned, is_admin=False)
        resolved_id = self._resolve_session_id(session_id)
        self.session_store.set(resolved_id, data)
        logger.info("User logged in", extra={"user_id": cleaned})
        return resolved_id, data

    def login_as_admin(
        self, session_id: str | None, password: str | None
    ) -> tuple[str, SessionData]:
        """Log in as admin under a fresh session id.

        A wrong password leaves the session untouched.
        """
        if not password or not secrets.compare_digest(
            password.encode(), self.admin_password.encode()
        ):
            logger.warning("Rejected admin login")
            raise AuthError("Invalid password")
        data = SessionData(user_id=ADMIN_USER_ID, is_admin=True)
        if session_id:
            self.session_store.destroy(session_id)
        new_id = secrets.token_urlsafe(32)
        self.session_store.set(new_id, data)
        logger.info("Admin logged in")
        return new_id, data

    def logout(self, session_id: str | None) -> None:
        """Destroy the caller's session, if any."""
        if session_id:
            self.session_store.destroy(session_id)

    def _resolve_session_id(self, session_id: str | None) -> str:
        if session_id and self.session_store.get(session_id) is not None:
            return session_id
        return secrets.token_urlsafe(32)
