"""
Users component - Admin user management and dashboard stats.
"""

from ._impl import USER_NOT_FOUND, UserAdminService
from .models import DashboardStats, UserAdminError
from .ports import SessionRevokerPort, UserRepoPort

__all__ = [
    "UserAdminService",
    "UserAdminError",
    "USER_NOT_FOUND",
    "DashboardStats",
    "UserRepoPort",
    "SessionRevokerPort",
]
