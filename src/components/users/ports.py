"""
Users component - Port interfaces.
"""

from __future__ import annotations

from typing import Protocol
from uuid import UUID

from src.domain.entities import User


class UserRepoPort(Protocol):
    def get_by_id(self, user_id: UUID) -> User | None: ...
    def get_by_email(self, email: str) -> User | None: ...
    def list_all(self) -> list[User]: ...
    def save(self, user: User) -> User: ...
    def delete(self, user_id: UUID) -> None: ...


class SessionRevokerPort(Protocol):
    def delete_by_user(self, user_id: UUID) -> int: ...
