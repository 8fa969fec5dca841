from typing import Protocol
from uuid import UUID

from src.domain.entities import ResetRequest, User


class UserRepoPort(Protocol):
    def get_by_email(self, email: str) -> User | None: ...
    def get_by_id(self, user_id: UUID) -> User | None: ...
    def save(self, user: User) -> User: ...


class ResetRequestRepoPort(Protocol):
    def save(self, request: ResetRequest) -> ResetRequest: ...
    def get_by_token(self, token: str) -> ResetRequest | None: ...
    def delete(self, request_id: UUID) -> None: ...


class PasswordHasherPort(Protocol):
    def hash_password(self, password: str) -> str: ...
    def verify_password(self, plain: str, hashed: str) -> bool: ...


class SessionStorePort(Protocol):
    """Port for session storage - removes global state from component."""

    def create(self, user_id: UUID) -> str:
        """Start a session. Returns the opaque token."""
        ...

    def get(self, token: str) -> UUID | None:
        """Resolve token to user id, or None if unknown or expired."""
        ...

    def delete(self, token: str) -> None:
        """Delete session by token."""
        ...

    def delete_by_user(self, user_id: UUID) -> int:
        """Sign a user out everywhere. Returns the number of sessions dropped."""
        ...
