"""
Blog component - Port interfaces.
"""

from __future__ import annotations

from typing import Protocol
from uuid import UUID

from src.domain.entities import Blog


class BlogRepoPort(Protocol):
    def save(self, blog: Blog) -> Blog: ...
    def get_by_id(self, blog_id: UUID) -> Blog | None: ...
    def list_all(self, limit: int | None = None) -> list[Blog]: ...
    def delete(self, blog_id: UUID) -> None: ...
    def count(self) -> int: ...
