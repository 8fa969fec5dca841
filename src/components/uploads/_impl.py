"""
UploadService - Image uploads into a named folder.

Functional Core - validation is pure; storage goes through UploadStorePort.
"""

from __future__ import annotations

import logging
import mimetypes
from uuid import uuid4

from src.core.ports.storage import UploadStorePort

from .models import UploadError, UploadRules

logger = logging.getLogger(__name__)


def validate_upload(
    rules: UploadRules,
    folder: str | None,
    content_type: str,
    size: int,
) -> list[UploadError]:
    errors: list[UploadError] = []

    if not folder:
        errors.append(UploadError("folder_required", "Folder is required", "folder"))
    elif folder not in rules.allowed_folders:
        errors.append(UploadError("folder_invalid", f"Unknown folder '{folder}'", "folder"))

    if size == 0:
        errors.append(UploadError("file_required", "Failed to fetch image", "file"))
    elif size > rules.max_upload_bytes:
        errors.append(UploadError("file_too_large", "File is too large", "file"))

    if content_type not in rules.allowed_mime_types:
        errors.append(
            UploadError("file_type_not_allowed", f"File type {content_type} is not allowed", "file")
        )

    return errors


# Fixed so keys do not depend on the platform mime table
IMAGE_EXTENSIONS = {
    "image/png": ".png",
    "image/jpeg": ".jpg",
    "image/webp": ".webp",
    "image/gif": ".gif",
}


def object_key(folder: str, content_type: str) -> str:
    """
    Unique key under folder.

    The extension comes from the validated content type, never from the
    client's filename, so a stored file is always served as that type.
    """
    suffix = IMAGE_EXTENSIONS.get(content_type) or mimetypes.guess_extension(content_type) or ""
    return f"{folder}/{uuid4().hex}{suffix}"


class UploadService:
    def __init__(self, store: UploadStorePort, rules: UploadRules) -> None:
        self._store = store
        self._rules = rules

    @property
    def max_upload_bytes(self) -> int:
        return self._rules.max_upload_bytes

    def upload(
        self,
        folder: str | None,
        filename: str,
        content_type: str,
        data: bytes,
    ) -> tuple[str | None, list[UploadError]]:
        """
        Store an uploaded file.

        Returns:
            Tuple of (url, errors). URL is None if validation fails.
        """
        errors = validate_upload(self._rules, folder, content_type, len(data))
        if errors:
            return None, errors

        assert folder is not None
        key = object_key(folder, content_type)
        url = self._store.save(key, data, content_type)
        logger.info("Upload %s stored as %s", filename, key)
        return url, []
