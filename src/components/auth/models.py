from __future__ import annotations

from dataclasses import dataclass

# Landing page per role after sign in
ADMIN_HOME = "/admin"
BUSINESS_HOME = "/dashboard"
USER_HOME = "/me"


@dataclass(frozen=True)
class AuthError:
    """Auth error."""

    code: str
    message: str
    field: str | None = None
