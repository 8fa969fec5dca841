"""
Business component - Data models.
"""

from __future__ import annotations

from dataclasses import dataclass

# Fields copied from the onboarding/edit forms onto the Business entity
PROFILE_FIELDS = (
    "name",
    "tagline",
    "about",
    "logo",
    "cover_image",
    "location",
    "instagram",
    "whats_app",
    "facebook",
    "linked_in",
    "email",
    "phone",
)


@dataclass(frozen=True)
class BusinessError:
    """Business error."""

    code: str
    message: str
    field: str | None = None


BUSINESS_NOT_FOUND = BusinessError("business_not_found", "Business not found")
