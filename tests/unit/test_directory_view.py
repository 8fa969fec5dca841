"""
Directory page state: the "later selection wins" filter policy over a
retained snapshot, and the listing builders fed by persisted records.
"""

from __future__ import annotations

from uuid import uuid4

import pytest

from src.components.directory import (
    ALL,
    ALL_TILE,
    DESKTOP_ROW_SIZES,
    NO_BUSINESSES_MESSAGE,
    DirectoryView,
    FilterState,
    business_tiles,
    run_business_listing,
    run_category_grid,
    run_type_grid,
    type_names_by_id,
)
from src.domain.entities import Business, BusinessCategory, BusinessType, CategoryWithTypes


def make_business(name: str, type_id, verified: bool = True) -> Business:
    return Business(
        name=name,
        slug=name.lower().replace(" ", "_"),
        tagline="Tagline",
        about="About us",
        email="x@example.com",
        phone="9999999999",
        owner_id=uuid4(),
        type_id=type_id,
        is_verified=verified,
    )


@pytest.fixture
def catalog() -> list[CategoryWithTypes]:
    retail_id, services_id = uuid4(), uuid4()
    return [
        CategoryWithTypes(
            id=retail_id,
            name="Retail",
            slug="retail",
            types=[
                BusinessType(name="Grocery", slug="grocery", category_id=retail_id),
                BusinessType(name="Hardware", slug="hardware", category_id=retail_id),
            ],
        ),
        CategoryWithTypes(
            id=services_id,
            name="Services",
            slug="services",
            types=[BusinessType(name="Repair", slug="repair", category_id=services_id)],
        ),
    ]


@pytest.fixture
def businesses(catalog) -> list[Business]:
    grocery, hardware = catalog[0].types
    repair = catalog[1].types[0]
    return [
        make_business("Acme Mart", grocery.id),
        make_business("Bolt Hardware", hardware.id),
        make_business("Acme Repairs", repair.id),
    ]


@pytest.fixture
def view(businesses, catalog) -> DirectoryView:
    return DirectoryView(business_tiles(businesses, catalog))


def names(items) -> list[str]:
    return [i.name for i in items]


class TestEndToEndScenario:
    def test_retail_grocery_then_all(self) -> None:
        t1 = uuid4()
        retail = CategoryWithTypes(
            name="Retail",
            slug="retail",
            types=[BusinessType(id=t1, name="Grocery", slug="grocery", category_id=uuid4())],
        )
        businesses = [make_business("Acme Mart", t1)]
        view = DirectoryView(business_tiles(businesses, [retail]))

        view.set_category("retail")
        assert names(view.set_type("grocery")) == ["Acme Mart"]
        assert names(view.set_category(ALL)) == ["Acme Mart"]


class TestFilterPolicy:
    def test_initial_state_shows_snapshot(self, view) -> None:
        assert len(view.visible) == 3
        assert view.state == FilterState()

    def test_query_narrows_by_name(self, view) -> None:
        assert names(view.set_query("acme")) == ["Acme Mart", "Acme Repairs"]

    def test_category_resets_query(self, view) -> None:
        view.set_query("acme")
        result = view.set_category("retail")
        assert names(result) == ["Acme Mart", "Bolt Hardware"]
        assert view.state.query == ""

    def test_query_resets_category(self, view) -> None:
        view.set_category("services")
        result = view.set_query("bolt")
        assert names(result) == ["Bolt Hardware"]
        assert view.state.category_slug == ALL

    def test_type_narrows_current_category(self, view) -> None:
        view.set_category("retail")
        assert names(view.set_type("hardware")) == ["Bolt Hardware"]
        assert view.state == FilterState(category_slug="retail", type_slug="hardware")

    def test_type_from_other_category_is_empty(self, view) -> None:
        view.set_category("retail")
        assert view.set_type("repair") == []
        assert view.empty_message() == NO_BUSINESSES_MESSAGE

    def test_type_ignored_without_category(self, view) -> None:
        before = view.visible
        assert view.set_type("grocery") == before
        assert view.state.type_slug == ALL

    def test_category_change_resets_type(self, view) -> None:
        view.set_category("retail")
        view.set_type("grocery")
        result = view.set_category("services")
        assert names(result) == ["Acme Repairs"]
        assert view.state.type_slug == ALL

    def test_all_restores_snapshot_after_anything(self, view) -> None:
        view.set_query("zzz")
        view.set_category("retail")
        view.set_type("grocery")
        assert list(view.set_category(ALL)) == list(view.snapshot)

    def test_snapshot_never_changes(self, view) -> None:
        snapshot = view.snapshot
        view.set_query("bolt")
        view.set_category("services")
        assert view.snapshot == snapshot

    def test_empty_message_none_when_visible(self, view) -> None:
        assert view.empty_message() is None


class TestApplyState:
    def test_query_state(self, businesses, catalog) -> None:
        view = run_business_listing(businesses, catalog, FilterState(query="bolt"))
        assert names(view.visible) == ["Bolt Hardware"]

    def test_category_and_type_state(self, businesses, catalog) -> None:
        state = FilterState(category_slug="retail", type_slug="grocery")
        view = run_business_listing(businesses, catalog, state)
        assert names(view.visible) == ["Acme Mart"]

    def test_category_state_ignores_query(self, businesses, catalog) -> None:
        state = FilterState(query="bolt", category_slug="services")
        view = run_business_listing(businesses, catalog, state)
        assert names(view.visible) == ["Acme Repairs"]

    def test_rows_use_visible_items(self, businesses, catalog) -> None:
        view = run_business_listing(businesses, catalog, FilterState())
        rows = view.rows((2, 1))
        assert [len(r) for r in rows] == [2, 1]


class TestProjection:
    def test_business_tiles_link_to_detail(self, businesses, catalog) -> None:
        tiles = business_tiles(businesses, catalog)
        assert tiles[0].href == "/business/acme_mart"
        assert (tiles[0].category_slug, tiles[0].type_slug) == ("retail", "grocery")

    def test_unknown_type_only_visible_under_all(self, catalog) -> None:
        orphan = make_business("Lost Shop", uuid4())
        view = DirectoryView(business_tiles([orphan], catalog))
        assert view.set_category("retail") == []
        assert names(view.set_category(ALL)) == ["Lost Shop"]

    def test_category_grid_leads_with_all(self) -> None:
        categories = [BusinessCategory(name=f"C{i}", slug=f"c{i}") for i in range(6)]
        rows = run_category_grid(categories, DESKTOP_ROW_SIZES)
        assert rows[0][0] == ALL_TILE
        assert [len(r) for r in rows] == [5, 2]
        assert rows[0][1].href == "/members/c0"

    def test_type_grid_links(self, catalog) -> None:
        rows = run_type_grid(catalog[0], DESKTOP_ROW_SIZES)
        assert [t.href for t in rows[0]] == ["/members/retail/grocery", "/members/retail/hardware"]

    def test_type_names_by_id(self, catalog) -> None:
        mapping = type_names_by_id(catalog)
        assert sorted(mapping.values()) == ["Grocery", "Hardware", "Repair"]
