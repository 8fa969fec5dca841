"""
Catalog component - Data models.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class CatalogError:
    """Catalog error."""

    code: str
    message: str
    field: str | None = None
