"""
Uploads component - Data models.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class UploadError:
    """Upload validation error."""

    code: str
    message: str
    field: str | None = None


@dataclass(frozen=True)
class UploadRules:
    max_upload_bytes: int
    allowed_mime_types: tuple[str, ...]
    allowed_folders: tuple[str, ...]
