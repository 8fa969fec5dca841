"""
Directory component - Directory page state and record projection.

Shell Layer - turns persisted records into tiles and holds the per-page
filter state over a retained snapshot.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from uuid import UUID

from src.domain.entities import Business, BusinessCategory, BusinessType, CategoryWithTypes

from ._impl import filter_by_name, filter_by_selector, generate_grid
from .models import (
    ALL,
    ALL_TILE,
    NO_BUSINESSES_MESSAGE,
    DirectoryItem,
    FilterState,
    GridRow,
    RowSizes,
)

# --- Projection ---


def category_tile(category: BusinessCategory) -> DirectoryItem:
    return DirectoryItem(
        id=str(category.id),
        name=category.name,
        slug=category.slug,
        href=f"/members/{category.slug}",
    )


def type_tile(category_slug: str, business_type: BusinessType) -> DirectoryItem:
    return DirectoryItem(
        id=str(business_type.id),
        name=business_type.name,
        slug=business_type.slug,
        href=f"/members/{category_slug}/{business_type.slug}",
        category_slug=category_slug,
        type_slug=business_type.slug,
    )


def business_tiles(
    businesses: Iterable[Business],
    categories: Sequence[CategoryWithTypes],
) -> list[DirectoryItem]:
    """
    Project businesses into tiles tagged with their category and type slugs.

    Businesses whose type is not in any category keep ``None`` slugs and are
    only reachable through the "all" selectors.
    """
    slugs_by_type: dict[UUID, tuple[str, str]] = {}
    for category in categories:
        for business_type in category.types:
            slugs_by_type[business_type.id] = (category.slug, business_type.slug)

    tiles = []
    for business in businesses:
        category_slug, type_slug = slugs_by_type.get(business.type_id, (None, None))
        tiles.append(
            DirectoryItem(
                id=str(business.id),
                name=business.name,
                slug=business.slug,
                href=f"/business/{business.slug}",
                category_slug=category_slug,
                type_slug=type_slug,
            )
        )
    return tiles


# --- Page State ---


class DirectoryView:
    """
    Filter state of one directory page over a fixed snapshot.

    Every change re-derives the visible set from the snapshot and the most
    recent selection wins:

    - a new query resets category and type to "all"
    - a new category resets the query and the type
    - a new type narrows the current category and resets the query
    """

    def __init__(self, snapshot: Sequence[DirectoryItem]) -> None:
        self._snapshot: tuple[DirectoryItem, ...] = tuple(snapshot)
        self._state = FilterState()
        self._visible: list[DirectoryItem] = list(self._snapshot)

    @property
    def snapshot(self) -> tuple[DirectoryItem, ...]:
        return self._snapshot

    @property
    def state(self) -> FilterState:
        return self._state

    @property
    def visible(self) -> list[DirectoryItem]:
        return list(self._visible)

    def set_query(self, query: str) -> list[DirectoryItem]:
        self._state = FilterState(query=query)
        self._visible = filter_by_name(self._snapshot, query)
        return self.visible

    def set_category(self, category_slug: str) -> list[DirectoryItem]:
        self._state = FilterState(category_slug=category_slug)
        self._visible = filter_by_selector(self._snapshot, category_slug, "category")
        return self.visible

    def set_type(self, type_slug: str) -> list[DirectoryItem]:
        """Narrow by type. Ignored while no category is selected."""
        category_slug = self._state.category_slug
        if category_slug == ALL:
            return self.visible

        in_category = filter_by_selector(self._snapshot, category_slug, "category")
        self._state = FilterState(category_slug=category_slug, type_slug=type_slug)
        self._visible = filter_by_selector(in_category, type_slug, "type")
        return self.visible

    def apply(self, state: FilterState) -> list[DirectoryItem]:
        """Replay a filter state taken from request parameters."""
        if state.category_slug != ALL:
            self.set_category(state.category_slug)
            if state.type_slug != ALL:
                self.set_type(state.type_slug)
            return self.visible
        return self.set_query(state.query)

    def rows(
        self,
        row_sizes: RowSizes,
        extra: DirectoryItem | None = None,
    ) -> list[GridRow[DirectoryItem]]:
        return generate_grid(self._visible, row_sizes, extra)

    def empty_message(self, message: str = NO_BUSINESSES_MESSAGE) -> str | None:
        """Message to show instead of the grid, if nothing is visible."""
        return None if self._visible else message


# --- Page Builders ---


def run_category_grid(
    categories: Sequence[BusinessCategory],
    row_sizes: RowSizes,
) -> list[GridRow[DirectoryItem]]:
    """Members landing grid: every category behind an "All" tile."""
    return generate_grid([category_tile(c) for c in categories], row_sizes, ALL_TILE)


def run_type_grid(
    category: CategoryWithTypes,
    row_sizes: RowSizes,
) -> list[GridRow[DirectoryItem]]:
    """Grid of the business types in one category."""
    return generate_grid([type_tile(category.slug, t) for t in category.types], row_sizes)


def run_business_listing(
    businesses: Iterable[Business],
    categories: Sequence[CategoryWithTypes],
    state: FilterState,
) -> DirectoryView:
    """Build a business listing view with the request's filters applied."""
    view = DirectoryView(business_tiles(businesses, categories))
    view.apply(state)
    return view


def type_names_by_id(categories: Iterable[CategoryWithTypes]) -> Mapping[UUID, str]:
    return {t.id: t.name for c in categories for t in c.types}
