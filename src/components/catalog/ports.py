"""
Catalog component - Port interfaces.
"""

from __future__ import annotations

from typing import Protocol
from uuid import UUID

from src.domain.entities import BusinessCategory, BusinessType, CategoryWithTypes


class CatalogRepoPort(Protocol):
    def save_category(self, category: BusinessCategory) -> BusinessCategory: ...
    def save_type(self, business_type: BusinessType) -> BusinessType: ...
    def get_category_by_id(self, category_id: UUID) -> BusinessCategory | None: ...
    def get_category_by_slug(self, slug: str) -> BusinessCategory | None: ...
    def get_category_with_types(self, slug: str) -> CategoryWithTypes | None: ...
    def list_categories(self) -> list[BusinessCategory]: ...
    def list_categories_with_types(self) -> list[CategoryWithTypes]: ...
    def get_type_by_id(self, type_id: UUID) -> BusinessType | None: ...
    def get_type_by_slug(self, slug: str) -> BusinessType | None: ...
    def list_types(self, category_id: UUID | None = None) -> list[BusinessType]: ...
    def delete_category(self, category_id: UUID) -> None: ...
    def delete_type(self, type_id: UUID) -> None: ...
    def count_types(self) -> int: ...
