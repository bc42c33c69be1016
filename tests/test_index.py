"""Tests for categorical indexes."""

from __future__ import annotations

import pytest

from themetokens.core.index import (
    IndexOrder,
    build_index,
    font_family_index,
    font_size_index,
)
from themetokens.errors import ValueNotIndexed


def test_font_sizes_sorted_numerically_and_deduplicated() -> None:
    index = font_size_index([16, 12, 16, 24, 12])
    assert index.values == (12, 16, 24)
    assert index.lookup(16) == 1


def test_font_sizes_sort_numbers_not_strings() -> None:
    assert font_size_index([100, 9, 24.5]).values == (9, 24.5, 100)


def test_font_families_are_case_sensitive_in_ascii_order() -> None:
    index = font_family_index(["Arial", "arial", "Inter"])
    # uppercase letters sort before lowercase by code point
    assert index.values == ("Arial", "Inter", "arial")


def test_lookup_missing_value_raises() -> None:
    index = build_index([1, 2, 3])
    with pytest.raises(ValueNotIndexed):
        index.lookup(4)


def test_same_multiset_gives_same_order() -> None:
    first = build_index(["b", "a", "c", "a"], IndexOrder.ALPHABETICAL)
    second = build_index(["a", "c", "b", "a"], IndexOrder.ALPHABETICAL)
    assert first == second
    assert list(first) == ["a", "b", "c"]
    assert len(first) == 3
    assert "b" in first


def test_empty_index() -> None:
    index = font_size_index([])
    assert len(index) == 0
