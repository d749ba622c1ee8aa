"""Server-side session storage."""

from dataclasses import dataclass
from datetime import UTC, datetime, timedelta
from typing import Protocol

from flight_tracker.domain.sessions import SessionData


class SessionStore(Protocol):
    """Storage interface for session data keyed by session id."""

    def get(self, session_id: str) -> SessionData | None:
        """Return session data if present and not expired."""

    def set(self, session_id: str, data: SessionData) -> None:
        """Store session data, resetting its expiry."""

    def destroy(self, session_id: str) -> None:
        """Remove a session if present."""


@dataclass
class _SessionEntry:
    data: SessionData
    expires_at: datetime


@dataclass
class InMemorySessionStore(SessionStore):
    """Process-local session store with a fixed lifetime per write."""

    ttl_seconds: int
    _entries: dict[str, _SessionEntry]

    def __init__(self, ttl_seconds: int = 24 * 60 * 60) -> None:
        self.ttl_seconds = ttl_seconds
        self._entries = {}

    def get(self, session_id: str) -> SessionData | None:
        """Return session data if it hasn't expired."""
        entry = self._entries.get(session_id)
        if entry is None:
            return None
        if datetime.now(tz=UTC) >= entry.expires_at:
            self._entries.pop(session_id, None)
            return None
        return entry.data

    def set(self, session_id: str, data: SessionData) -> None:
        """Store session data for another full TTL, dropping expired entries."""
        now = datetime.now(tz=UTC)
        self._sweep(now)
        expires_at = now + timedelta(seconds=self.ttl_seconds)
        self._entries[session_id] = _SessionEntry(data=data, expires_at=expires_at)

    def destroy(self, session_id: str) -> None:
        """Forget a session."""
        self._entries.pop(session_id, None)

    def _sweep(self, now: datetime) -> None:
        expired = [
            sid for sid, entry in self._entries.items() if now >= entry.expires_at
        ]
        for session_id in expired:
            del self._entries[session_id]

    def __len__(self) -> int:
        return len(self._entries)
