"""
Users component - Data models.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class UserAdminError:
    """User administration error."""

    code: str
    message: str
    field: str | None = None


@dataclass(frozen=True)
class DashboardStats:
    businesses: int
    verified_businesses: int
    business_types: int
    events: int
    blogs: int
