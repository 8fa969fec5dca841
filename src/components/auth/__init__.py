"""
Auth component - Sign up, sign in, sessions and password resets.
"""

from ._impl import AuthService, redirect_for
from .models import ADMIN_HOME, BUSINESS_HOME, USER_HOME, AuthError
from .ports import (
    PasswordHasherPort,
    ResetRequestRepoPort,
    SessionStorePort,
    UserRepoPort,
)

__all__ = [
    "AuthService",
    "redirect_for",
    "AuthError",
    "ADMIN_HOME",
    "BUSINESS_HOME",
    "USER_HOME",
    # Ports
    "UserRepoPort",
    "ResetRequestRepoPort",
    "PasswordHasherPort",
    "SessionStorePort",
]
