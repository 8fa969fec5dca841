"""
AuthService - Accounts, sessions and password resets.
"""

from __future__ import annotations

import logging
import secrets
from datetime import datetime, timedelta
from urllib.parse import urlencode

from src.core.ports.email import MailerPort
from src.domain.entities import ResetRequest, User, UserType

from .models import ADMIN_HOME, BUSINESS_HOME, USER_HOME, AuthError
from .ports import (
    PasswordHasherPort,
    ResetRequestRepoPort,
    SessionStorePort,
    UserRepoPort,
)

logger = logging.getLogger(__name__)


def redirect_for(user: User, skip: str | None = None) -> str | None:
    """
    Landing page for a user's role.

    ``skip`` is the page asking; returns None when the user already belongs
    there, so the page can render instead of redirecting to itself.
    """
    if user.is_admin or user.type == "ADMIN":
        target = ADMIN_HOME
    elif user.type == "BUSINESS":
        target = BUSINESS_HOME
    else:
        target = USER_HOME
    return None if target == skip else target


class AuthService:
    def __init__(
        self,
        users: UserRepoPort,
        reset_requests: ResetRequestRepoPort,
        hasher: PasswordHasherPort,
        sessions: SessionStorePort,
        mailer: MailerPort,
        base_url: str = "",
        reset_ttl_minutes: int = 30,
    ) -> None:
        self._users = users
        self._reset_requests = reset_requests
        self._hasher = hasher
        self._sessions = sessions
        self._mailer = mailer
        self._base_url = base_url.rstrip("/")
        self._reset_ttl = timedelta(minutes=reset_ttl_minutes)

    # --- Accounts ---

    def sign_up(
        self,
        email: str,
        name: str,
        type: UserType,
        password: str,
    ) -> tuple[User | None, list[AuthError]]:
        if self._users.get_by_email(email):
            return None, [AuthError("user_exists", "User already exists", "email")]

        user = User(
            email=email,
            name=name,
            type=type,
            is_admin=type == "ADMIN",
            password_hash=self._hasher.hash_password(password),
        )
        self._users.save(user)
        logger.info("User signed up: %s (%s)", user.id, user.type)

        if user.type == "BUSINESS":
            self._mailer.send_template(
                "sign-up-business",
                {"name": user.name},
                user.email,
                "Welcome! List your business",
            )
        return user, []

    def sign_in(self, email: str, password: str) -> tuple[User | None, list[AuthError]]:
        user = self._users.get_by_email(email)
        if not user:
            return None, [AuthError("user_not_found", "User not found", "email")]
        if not self._hasher.verify_password(password, user.password_hash):
            return None, [AuthError("incorrect_password", "Incorrect password", "password")]
        return user, []

    # --- Sessions ---

    def start_session(self, user: User) -> str:
        return self._sessions.create(user.id)

    def get_user_for_token(self, token: str) -> User | None:
        user_id = self._sessions.get(token)
        if user_id is None:
            return None
        return self._users.get_by_id(user_id)

    def sign_out(self, token: str) -> None:
        self._sessions.delete(token)

    # --- Password reset ---

    def request_password_reset(
        self, email: str
    ) -> tuple[ResetRequest | None, list[AuthError]]:
        user = self._users.get_by_email(email)
        if not user:
            return None, [AuthError("user_not_found", "User not found", "email")]

        request = self._reset_requests.save(
            ResetRequest(email=user.email, token=secrets.token_urlsafe(32))
        )
        reset_url = f"{self._base_url}/reset-password?{urlencode({'token': request.token})}"
        status = self._mailer.send_template(
            "reset-password",
            {
                "name": user.name,
                "reset_url": reset_url,
                "ttl_minutes": int(self._reset_ttl.total_seconds() // 60),
            },
            user.email,
            "Reset your password",
        )
        if status >= 500:
            return None, [AuthError("email_failed", "Failed to send email")]
        return request, []

    def check_reset_token(
        self, token: str | None, now: datetime | None = None
    ) -> tuple[ResetRequest | None, list[AuthError]]:
        if not token:
            return None, [
                AuthError("token_required", "Invalid reset link, Token is required", "token")
            ]

        request = self._reset_requests.get_by_token(token)
        if not request:
            return None, [
                AuthError(
                    "reset_not_found",
                    "Invalid token or the password is already reset",
                    "token",
                )
            ]

        current = now if now is not None else datetime.utcnow()
        if request.created_at + self._reset_ttl < current:
            return None, [AuthError("token_expired", "Token expired", "token")]
        return request, []

    def reset_password(
        self,
        token: str | None,
        password: str,
        now: datetime | None = None,
    ) -> tuple[User | None, list[AuthError]]:
        request, errors = self.check_reset_token(token, now=now)
        if errors or request is None:
            return None, errors

        user = self._users.get_by_email(request.email)
        if not user:
            return None, [AuthError("user_not_found", "User not found", "email")]

        user.password_hash = self._hasher.hash_password(password)
        user.updated_at = datetime.utcnow()
        self._users.save(user)
        self._reset_requests.delete(request.id)
        revoked = self._sessions.delete_by_user(user.id)
        logger.info("Password reset for user %s (%d sessions revoked)", user.id, revoked)
        return user, []
