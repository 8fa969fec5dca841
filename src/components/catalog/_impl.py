"""
CatalogService - Business categories and types.

Slugs are derived with ``slugify`` and must be unique per table; the
existence check here gives a friendly error, the UNIQUE column is the
backstop.
"""

from __future__ import annotations

import logging
from uuid import UUID

from src.components.directory import ALL, slugify
from src.domain.entities import BusinessCategory, BusinessType, CategoryWithTypes

from .models import CatalogError
from .ports import CatalogRepoPort

logger = logging.getLogger(__name__)


def check_slug(slug: str) -> list[CatalogError]:
    """Reject empty slugs and ``all``, which the directory uses as its own selector."""
    if not slug:
        return [CatalogError("name_invalid", "Name must contain letters or digits", "name")]
    if slug == ALL:
        return [CatalogError("name_reserved", "This name is reserved", "name")]
    return []


class CatalogService:
    def __init__(self, repo: CatalogRepoPort) -> None:
        self._repo = repo

    # --- Queries ---

    def list_categories(self) -> list[BusinessCategory]:
        return self._repo.list_categories()

    def list_categories_with_types(self) -> list[CategoryWithTypes]:
        return self._repo.list_categories_with_types()

    def get_category_with_types(self, slug: str) -> CategoryWithTypes | None:
        return self._repo.get_category_with_types(slug)

    def get_type_by_slug(self, slug: str) -> BusinessType | None:
        return self._repo.get_type_by_slug(slug)

    def get_type(self, type_id: UUID) -> BusinessType | None:
        return self._repo.get_type_by_id(type_id)

    def count_types(self) -> int:
        return self._repo.count_types()

    # --- Commands ---

    def add_category(self, name: str) -> tuple[BusinessCategory | None, list[CatalogError]]:
        slug = slugify(name)
        if errors := check_slug(slug):
            return None, errors
        if self._repo.get_category_by_slug(slug):
            return None, [
                CatalogError("category_exists", "Business category already exists", "name")
            ]

        category = self._repo.save_category(BusinessCategory(name=name.strip(), slug=slug))
        logger.info("Category added: %s", category.slug)
        return category, []

    def delete_category(self, category_id: UUID) -> tuple[bool, list[CatalogError]]:
        if not self._repo.get_category_by_id(category_id):
            return False, [CatalogError("category_not_found", "Business category not found")]
        self._repo.delete_category(category_id)
        return True, []

    def add_type(
        self, name: str, category_id: UUID
    ) -> tuple[BusinessType | None, list[CatalogError]]:
        if not self._repo.get_category_by_id(category_id):
            return None, [
                CatalogError("category_not_found", "Business category not found", "category_id")
            ]

        slug = slugify(name)
        if errors := check_slug(slug):
            return None, errors
        if self._repo.get_type_by_slug(slug):
            return None, [CatalogError("type_exists", "Business type already exists", "name")]

        business_type = self._repo.save_type(
            BusinessType(name=name.strip(), slug=slug, category_id=category_id)
        )
        logger.info("Type added: %s", business_type.slug)
        return business_type, []

    def delete_type(self, type_id: UUID) -> tuple[bool, list[CatalogError]]:
        if not self._repo.get_type_by_id(type_id):
            return False, [CatalogError("type_not_found", "Business type not found")]
        self._repo.delete_type(type_id)
        return True, []
