"""
Directory component - Slugs, staggered tile grid and directory filters.
"""

from ._impl import (
    filter_by_name,
    filter_by_selector,
    generate_grid,
    make_name_displayable,
    slugify,
)
from .component import (
    DirectoryView,
    business_tiles,
    category_tile,
    run_business_listing,
    run_category_grid,
    run_type_grid,
    type_names_by_id,
    type_tile,
)
from .models import (
    ALL,
    ALL_TILE,
    DESKTOP_ROW_SIZES,
    MOBILE_ROW_SIZES,
    NO_BUSINESSES_MESSAGE,
    NO_IMAGES_MESSAGE,
    DirectoryItem,
    FilterState,
    GridRow,
    RowSizes,
)

__all__ = [
    # Functional core
    "slugify",
    "make_name_displayable",
    "generate_grid",
    "filter_by_name",
    "filter_by_selector",
    # Page state
    "DirectoryView",
    "run_category_grid",
    "run_type_grid",
    "run_business_listing",
    "business_tiles",
    "category_tile",
    "type_tile",
    "type_names_by_id",
    # Models
    "ALL",
    "ALL_TILE",
    "DESKTOP_ROW_SIZES",
    "MOBILE_ROW_SIZES",
    "NO_BUSINESSES_MESSAGE",
    "NO_IMAGES_MESSAGE",
    "DirectoryItem",
    "FilterState",
    "GridRow",
    "RowSizes",
]
