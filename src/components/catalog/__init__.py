"""
Catalog component - Business categories and the types within them.
"""

from ._impl import CatalogService
from .models import CatalogError
from .ports import CatalogRepoPort

__all__ = ["CatalogService", "CatalogError", "CatalogRepoPort"]
