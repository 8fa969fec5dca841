import logging
import os
from pathlib import Path

logger = logging.getLogger(__name__)


class FileSystemStore:
    """Local upload storage; files are served back under ``public_prefix``."""

    def __init__(self, base_path: str, public_prefix: str = "/uploads"):
        self.base_path = Path(base_path).resolve()
        self.public_prefix = public_prefix.rstrip("/")
        if not self.base_path.exists():
            os.makedirs(self.base_path, exist_ok=True)

    def _safe_path(self, path: str) -> Path:
        # Prevent traversal
        target = (self.base_path / path).resolve()
        if not target.is_relative_to(self.base_path):
            raise ValueError(f"Path traversal attempt detected: {path}")
        return target

    def save(self, key: str, data: bytes, content_type: str) -> str:
        """Save bytes under key and return the public URL."""
        target = self._safe_path(key)
        target.parent.mkdir(parents=True, exist_ok=True)
        with open(target, "wb") as f:
            f.write(data)
        logger.info("Stored upload %s (%d bytes, %s)", key, len(data), content_type)
        return f"{self.public_prefix}/{target.relative_to(self.base_path).as_posix()}"

    def get(self, path: str) -> bytes:
        """Retrieve bytes by path. Raises FileNotFoundError."""
        target = self._safe_path(path)
        if not target.is_file():
            raise FileNotFoundError(f"File not found: {path}")
        with open(target, "rb") as f:
            return f.read()

    def delete(self, path: str) -> None:
        target = self._safe_path(path)
        if target.exists():
            os.remove(target)
