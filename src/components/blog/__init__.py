"""
Blog component - News posts.
"""

from ._impl import BlogService
from .models import BLOG_NOT_FOUND, LATEST_BLOGS_LIMIT, BlogError
from .ports import BlogRepoPort

__all__ = ["BlogService", "BlogError", "BLOG_NOT_FOUND", "LATEST_BLOGS_LIMIT", "BlogRepoPort"]
