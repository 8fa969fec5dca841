"""In-memory session store adapter.

Implements SessionStorePort for the auth component. Tokens are opaque;
only their sha256 digest is kept, so a dumped store cannot be replayed.
"""

import hashlib
import secrets
from datetime import UTC, datetime, timedelta
from uuid import UUID

from src.domain.entities import Session


def hash_token(token: str) -> str:
    return hashlib.sha256(token.encode()).hexdigest()


class InMemorySessionStore:
    """In-memory session storage - suitable for single-process deployments."""

    def __init__(self, ttl_minutes: int = 60 * 24 * 30) -> None:
        self.ttl = timedelta(minutes=ttl_minutes)
        self._sessions: dict[str, Session] = {}

    def create(self, user_id: UUID, now_utc: datetime | None = None) -> str:
        """Start a session for a user. Returns the raw token."""
        now = now_utc if now_utc is not None else datetime.now(UTC)
        token = secrets.token_urlsafe(32)
        digest = hash_token(token)
        self._sessions[digest] = Session(
            id=digest,
            user_id=user_id,
            token_hash=digest,
            expires_at=now + self.ttl,
            created_at=now,
        )
        return token

    def get(self, token: str, now_utc: datetime | None = None) -> UUID | None:
        """Resolve a token to its user id; expired sessions are dropped."""
        digest = hash_token(token)
        session = self._sessions.get(digest)
        if session is None:
            return None

        now = now_utc if now_utc is not None else datetime.now(UTC)
        if session.expires_at <= now:
            del self._sessions[digest]
            return None
        return session.user_id

    def delete(self, token: str) -> None:
        """Delete session by token."""
        self._sessions.pop(hash_token(token), None)

    def delete_by_user(self, user_id: UUID) -> int:
        """Delete all sessions for a user. Returns count deleted."""
        digests = [k for k, v in self._sessions.items() if v.user_id == user_id]
        for digest in digests:
            del self._sessions[digest]
        return len(digests)

    def clear(self) -> None:
        """Clear all sessions - useful for testing."""
        self._sessions.clear()
