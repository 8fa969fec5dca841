"""
Upload storage port.

Implementations: local filesystem (dev) and S3.
"""

from __future__ import annotations

from typing import Protocol


class UploadStorePort(Protocol):
    def save(self, key: str, data: bytes, content_type: str) -> str:
        """
        Store bytes under key.

        Returns:
            Public URL of the stored object
        """
        ...
