from uuid import UUID, uuid4

import pytest

from src.components.catalog import CatalogService
from src.domain.entities import BusinessCategory, BusinessType, CategoryWithTypes


class MockCatalogRepo:
    def __init__(self) -> None:
        self.categories: dict[UUID, BusinessCategory] = {}
        self.types: dict[UUID, BusinessType] = {}

    def save_category(self, category: BusinessCategory) -> BusinessCategory:
        self.categories[category.id] = category
        return category

    def save_type(self, business_type: BusinessType) -> BusinessType:
        self.types[business_type.id] = business_type
        return business_type

    def get_category_by_id(self, category_id: UUID) -> BusinessCategory | None:
        return self.categories.get(category_id)

    def get_category_by_slug(self, slug: str) -> BusinessCategory | None:
        return next((c for c in self.categories.values() if c.slug == slug), None)

    def get_category_with_types(self, slug: str) -> CategoryWithTypes | None:
        category = self.get_category_by_slug(slug)
        if category is None:
            return None
        types = [t for t in self.types.values() if t.category_id == category.id]
        return CategoryWithTypes(**category.model_dump(), types=types)

    def list_categories(self) -> list[BusinessCategory]:
        return list(self.categories.values())

    def list_categories_with_types(self) -> list[CategoryWithTypes]:
        return [self.get_category_with_types(c.slug) for c in self.categories.values()]

    def get_type_by_id(self, type_id: UUID) -> BusinessType | None:
        return self.types.get(type_id)

    def get_type_by_slug(self, slug: str) -> BusinessType | None:
        return next((t for t in self.types.values() if t.slug == slug), None)

    def delete_category(self, category_id: UUID) -> None:
        self.categories.pop(category_id)
        self.types = {k: t for k, t in self.types.items() if t.category_id != category_id}

    def delete_type(self, type_id: UUID) -> None:
        self.types.pop(type_id)

    def count_types(self) -> int:
        return len(self.types)


@pytest.fixture
def service():
    return CatalogService(repo=MockCatalogRepo())


def test_add_category_slugifies(service) -> None:
    category, errors = service.add_category("Home Services")
    assert errors == []
    assert category.slug == "home_services"
    assert service.list_categories() == [category]


def test_duplicate_category_slug(service) -> None:
    service.add_category("Retail")
    _, errors = service.add_category("retail")
    assert errors[0].code == "category_exists"
    assert errors[0].message == "Business category already exists"


def test_add_type(service) -> None:
    category, _ = service.add_category("Retail")
    business_type, errors = service.add_type("Grocery", category.id)
    assert errors == []
    assert service.get_type_by_slug("grocery") == business_type
    assert service.get_category_with_types("retail").types == [business_type]
    assert service.count_types() == 1


def test_add_type_unknown_category(service) -> None:
    _, errors = service.add_type("Grocery", uuid4())
    assert errors[0].code == "category_not_found"


def test_type_slugs_unique_across_categories(service) -> None:
    retail, _ = service.add_category("Retail")
    food, _ = service.add_category("Food")
    service.add_type("Grocery", retail.id)
    _, errors = service.add_type("Grocery", food.id)
    assert errors[0].code == "type_exists"


def test_delete_category_and_type(service) -> None:
    category, _ = service.add_category("Retail")
    business_type, _ = service.add_type("Grocery", category.id)

    deleted, errors = service.delete_type(business_type.id)
    assert deleted is True
    assert service.count_types() == 0

    deleted, errors = service.delete_category(category.id)
    assert deleted is True
    assert service.list_categories() == []


def test_delete_unknown(service) -> None:
    _, errors = service.delete_category(uuid4())
    assert errors[0].code == "category_not_found"
    _, errors = service.delete_type(uuid4())
    assert errors[0].code == "type_not_found"


@pytest.mark.parametrize("name", ["All", "all", "ALL"])
def test_all_is_reserved(service, name: str) -> None:
    category, errors = service.add_category(name)
    assert category is None
    assert errors[0].code == "name_reserved"

    retail, _ = service.add_category("Retail")
    business_type, errors = service.add_type(name, retail.id)
    assert business_type is None
    assert errors[0].code == "name_reserved"


def test_name_without_slug_characters(service) -> None:
    _, errors = service.add_category("!!!")
    assert errors[0].code == "name_invalid"
    assert service.list_categories() == []
