"""
Uploads component - Folder-scoped image uploads.
"""

from ._impl import IMAGE_EXTENSIONS, UploadService, object_key, validate_upload
from .models import UploadError, UploadRules

__all__ = [
    "UploadService",
    "IMAGE_EXTENSIONS",
    "validate_upload",
    "object_key",
    "UploadError",
    "UploadRules",
]
