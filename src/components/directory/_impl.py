"""
Directory engine - Functional Core.

Slug derivation, staggered grid layout and the two directory filters.
Everything here is pure; callers own the snapshot.
"""

from __future__ import annotations

import re
from collections.abc import Sequence
from typing import Literal, TypeVar

from .models import ALL, DirectoryItem, GridRow, RowSizes

T = TypeVar("T")

FilterAxis = Literal["category", "type"]

_NON_SLUG_CHARS = re.compile(r"[^\w-]+", re.ASCII)


# --- Slug ---


def slugify(text: str) -> str:
    """
    Derive a routing slug from a display name.

    Lowercase, spaces to underscores, then drop everything that is not a
    word character or hyphen. Persisted slugs depend on this exact transform.
    """
    return _NON_SLUG_CHARS.sub("", text.lower().replace(" ", "_"))


def make_name_displayable(name: str, max_word_length: int = 12) -> str:
    """Insert soft hyphens into long words so tiles wrap cleanly."""
    words = []
    for word in name.split(" "):
        if len(word) > max_word_length:
            word = "\u00ad".join(
                word[i : i + max_word_length] for i in range(0, len(word), max_word_length)
            )
        words.append(word)
    return " ".join(words)


# --- Grid ---


def generate_grid(
    items: Sequence[T],
    row_sizes: RowSizes,
    extra: T | None = None,
) -> list[GridRow[T]]:
    """
    Split items into rows alternating between the two row sizes.

    ``extra`` is placed in front of the items (the synthetic "All" tile).
    The last row may be shorter than its size. Both sizes must be positive.
    """
    remaining: list[T] = list(items)
    if extra is not None:
        remaining.insert(0, extra)

    rows: list[GridRow[T]] = []
    index = 0
    while remaining:
        size = row_sizes[index % 2]
        rows.append(remaining[:size])
        remaining = remaining[size:]
        index += 1
    return rows


# --- Filters ---


def filter_by_name(items: Sequence[DirectoryItem], query: str) -> list[DirectoryItem]:
    """Keep items whose name contains the query, ignoring case."""
    needle = query.lower()
    return [item for item in items if needle in item.name.lower()]


def filter_by_selector(
    snapshot: Sequence[DirectoryItem],
    selector: str,
    axis: FilterAxis = "category",
) -> list[DirectoryItem]:
    """
    Narrow the snapshot to one category or type.

    ``"all"`` restores the full snapshot.
    """
    if selector == ALL:
        return list(snapshot)

    if axis == "category":
        return [item for item in snapshot if item.category_slug == selector]
    return [item for item in snapshot if item.type_slug == selector]
