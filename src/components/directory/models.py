"""
Directory component - Data models.

Tiles, grid rows and the transient filter state of a directory page.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final

ALL: Final = "all"

# One row of tiles in the staggered grid.
GridRow = list

RowSizes = tuple[int, int]

DESKTOP_ROW_SIZES: RowSizes = (5, 4)
MOBILE_ROW_SIZES: RowSizes = (2, 1)

NO_BUSINESSES_MESSAGE = "No businesses found"
NO_IMAGES_MESSAGE = "No images found"


@dataclass(frozen=True)
class DirectoryItem:
    """
    A single directory tile.

    Projected from a category, type or business record. ``category_slug`` and
    ``type_slug`` are only set when the tile takes part in category/type
    filtering (business listings).
    """

    id: str
    name: str
    slug: str
    href: str = ""
    category_slug: str | None = None
    type_slug: str | None = None


@dataclass(frozen=True)
class FilterState:
    """Filter inputs of a directory page."""

    query: str = ""
    category_slug: str = ALL
    type_slug: str = ALL


ALL_TILE = DirectoryItem(id=ALL, name="All", slug=ALL, href=f"/members/{ALL}")
