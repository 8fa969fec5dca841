"""
BlogService - Chamber news posts.
"""

from __future__ import annotations

from uuid import UUID

from src.domain.entities import Blog

from .models import BLOG_NOT_FOUND, LATEST_BLOGS_LIMIT, BlogError
from .ports import BlogRepoPort


class BlogService:
    def __init__(self, repo: BlogRepoPort) -> None:
        self._repo = repo

    def get(self, blog_id: UUID) -> Blog | None:
        return self._repo.get_by_id(blog_id)

    def list_all(self) -> list[Blog]:
        return self._repo.list_all()

    def latest(self) -> list[Blog]:
        return self._repo.list_all(limit=LATEST_BLOGS_LIMIT)

    def count(self) -> int:
        return self._repo.count()

    def create(self, title: str, description: str, content: str, image: str) -> Blog:
        return self._repo.save(
            Blog(title=title, description=description, content=content, image=image)
        )

    def update(
        self,
        blog_id: UUID,
        title: str,
        description: str,
        content: str,
        image: str,
    ) -> tuple[Blog | None, list[BlogError]]:
        blog = self._repo.get_by_id(blog_id)
        if not blog:
            return None, [BLOG_NOT_FOUND]

        blog.title = title
        blog.description = description
        blog.content = content
        blog.image = image
        return self._repo.save(blog), []

    def delete(self, blog_id: UUID) -> tuple[bool, list[BlogError]]:
        if not self._repo.get_by_id(blog_id):
            return False, [BLOG_NOT_FOUND]
        self._repo.delete(blog_id)
        return True, []
