"""
Tests for the directory functional core: slugs, grid rows and filters.
"""

from __future__ import annotations

import pytest

from src.components.directory import (
    ALL,
    ALL_TILE,
    DESKTOP_ROW_SIZES,
    MOBILE_ROW_SIZES,
    DirectoryItem,
    filter_by_name,
    filter_by_selector,
    generate_grid,
    make_name_displayable,
    slugify,
)


def item(name: str, category: str | None = None, type_slug: str | None = None) -> DirectoryItem:
    return DirectoryItem(
        id=name,
        name=name,
        slug=slugify(name),
        category_slug=category,
        type_slug=type_slug,
    )


# --- slugify ---


class TestSlugify:
    def test_spaces_become_underscores(self) -> None:
        assert slugify("Auto Repair Shop") == "auto_repair_shop"

    def test_empty_string(self) -> None:
        assert slugify("") == ""

    def test_drops_punctuation_keeps_hyphen(self) -> None:
        assert slugify("Tom's Bakery & Co.") == "toms_bakery__co"
        assert slugify("Multi-Brand Store") == "multi-brand_store"

    def test_drops_non_ascii_letters(self) -> None:
        assert slugify("Café Ünique") == "caf_nique"

    def test_keeps_digits(self) -> None:
        assert slugify("24 Hour Pharmacy") == "24_hour_pharmacy"

    @pytest.mark.parametrize("text", ["Retail", "Auto Repair Shop", "a-b c", "X_Y  z!"])
    def test_idempotent(self, text: str) -> None:
        once = slugify(text)
        assert slugify(once) == once

    @pytest.mark.parametrize("text", ["Hello World", "ÀÉ!@# 12-_", "  tabs\tand spaces "])
    def test_output_alphabet(self, text: str) -> None:
        slug = slugify(text)
        assert all(c.islower() or c.isdigit() or c in "_-" for c in slug)


class TestMakeNameDisplayable:
    def test_short_words_untouched(self) -> None:
        assert make_name_displayable("Acme Mart") == "Acme Mart"

    def test_long_word_gets_soft_hyphens(self) -> None:
        result = make_name_displayable("Supercalifragilistic Shop")
        assert "\u00ad" in result
        assert result.replace("\u00ad", "") == "Supercalifragilistic Shop"


# --- generate_grid ---


class TestGenerateGrid:
    def test_alternating_rows(self) -> None:
        items = list("ABCDEFG")
        assert generate_grid(items, (5, 4)) == [["A", "B", "C", "D", "E"], ["F", "G"]]

    def test_three_rows(self) -> None:
        items = list(range(12))
        rows = generate_grid(items, (5, 4))
        assert [len(r) for r in rows] == [5, 4, 3]

    def test_empty(self) -> None:
        assert generate_grid([], (5, 4)) == []

    def test_extra_only(self) -> None:
        assert generate_grid([], (5, 4), extra="X") == [["X"]]

    def test_extra_is_prepended(self) -> None:
        rows = generate_grid(["A", "B"], (2, 1), extra="X")
        assert rows == [["X", "A"], ["B"]]

    def test_concatenation_preserves_order(self) -> None:
        items = [f"i{n}" for n in range(23)]
        rows = generate_grid(items, MOBILE_ROW_SIZES)
        assert [x for row in rows for x in row] == items
        assert all(len(r) == MOBILE_ROW_SIZES[i % 2] for i, r in enumerate(rows[:-1]))

    def test_does_not_mutate_input(self) -> None:
        items = ["A", "B", "C"]
        generate_grid(items, DESKTOP_ROW_SIZES, extra="X")
        assert items == ["A", "B", "C"]

    def test_all_tile(self) -> None:
        rows = generate_grid([item("Retail")], DESKTOP_ROW_SIZES, ALL_TILE)
        assert rows[0][0] is ALL_TILE
        assert ALL_TILE.href == "/members/all"


# --- Filters ---


class TestFilterByName:
    def test_case_insensitive(self) -> None:
        items = [item("ACME Traders"), item("Bolt Hardware")]
        assert [i.name for i in filter_by_name(items, "acme")] == ["ACME Traders"]

    def test_empty_query_matches_all(self) -> None:
        items = [item("A"), item("B")]
        assert filter_by_name(items, "") == items

    def test_subset(self) -> None:
        items = [item("Alpha"), item("Beta"), item("Gamma")]
        result = filter_by_name(items, "a")
        assert set(result) <= set(items)

    def test_no_match(self) -> None:
        assert filter_by_name([item("Alpha")], "zzz") == []


class TestFilterBySelector:
    @pytest.fixture
    def snapshot(self) -> list[DirectoryItem]:
        return [
            item("Acme Mart", "retail", "grocery"),
            item("Bolt Hardware", "retail", "hardware"),
            item("Fix It", "services", "repair"),
        ]

    def test_all_restores_snapshot(self, snapshot) -> None:
        assert filter_by_selector(snapshot, ALL) == snapshot

    def test_category(self, snapshot) -> None:
        result = filter_by_selector(snapshot, "retail")
        assert [i.name for i in result] == ["Acme Mart", "Bolt Hardware"]

    def test_type_axis(self, snapshot) -> None:
        result = filter_by_selector(snapshot, "repair", "type")
        assert [i.name for i in result] == ["Fix It"]

    def test_unknown_slug_is_empty(self, snapshot) -> None:
        assert filter_by_selector(snapshot, "nope") == []
