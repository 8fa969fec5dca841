"""
Blog component - Data models.
"""

from __future__ import annotations

from dataclasses import dataclass

LATEST_BLOGS_LIMIT = 2


@dataclass(frozen=True)
class BlogError:
    """Blog error."""

    code: str
    message: str
    field: str | None = None


BLOG_NOT_FOUND = BlogError("blog_not_found", "Blog not found")
