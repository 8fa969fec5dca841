"""
Enquiries component - Data models.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class EnquiryError:
    """Enquiry error."""

    code: str
    message: str
    field: str | None = None


@dataclass(frozen=True)
class EnquiryInput:
    """Contact details and message from the enquiry form."""

    name: str
    email: str
    phone: str
    message: str
