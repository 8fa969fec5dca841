"""
UserAdminService - Admin management of accounts, plus dashboard counts.
"""

from __future__ import annotations

import logging
from datetime import datetime
from uuid import UUID

from src.domain.entities import User, UserType

from .models import UserAdminError
from .ports import SessionRevokerPort, UserRepoPort

logger = logging.getLogger(__name__)

USER_NOT_FOUND = UserAdminError("user_not_found", "User not found")


class UserAdminService:
    def __init__(self, repo: UserRepoPort, sessions: SessionRevokerPort) -> None:
        self._repo = repo
        self._sessions = sessions

    def list_users(self) -> list[User]:
        return self._repo.list_all()

    def update_user(
        self,
        user_id: UUID,
        name: str,
        email: str,
        type: UserType,
    ) -> tuple[User | None, list[UserAdminError]]:
        user = self._repo.get_by_id(user_id)
        if not user:
            return None, [USER_NOT_FOUND]

        other = self._repo.get_by_email(email)
        if other and other.id != user.id:
            return None, [UserAdminError("user_exists", "User already exists", "email")]

        user.name = name
        user.email = email
        user.type = type
        user.is_admin = type == "ADMIN"
        user.updated_at = datetime.utcnow()
        self._repo.save(user)
        logger.info("User %s updated (type=%s)", user.id, user.type)
        return user, []

    def delete_user(
        self, actor_id: UUID, user_id: UUID
    ) -> tuple[bool, list[UserAdminError]]:
        if actor_id == user_id:
            return False, [UserAdminError("forbidden", "You cannot delete yourself")]
        if not self._repo.get_by_id(user_id):
            return False, [USER_NOT_FOUND]

        self._repo.delete(user_id)
        self._sessions.delete_by_user(user_id)
        logger.info("User %s deleted by %s", user_id, actor_id)
        return True, []
