"""This module contains unit tests for the CollectionService."""

from collections import UserString, deque
from typing import Any

import pytest
from fest_util.services import CollectionService


class TestFormat:
    """Tests for CollectionService.format."""

    def test_returns_none_if_collection_is_none(self) -> None:
        """Tests that None is returned for a None collection."""
        assert CollectionService.format(None) is None

    def test_returns_empty_brackets_if_collection_is_empty(self) -> None:
        """Tests that an empty collection gives empty brackets."""
        assert CollectionService.format([]) == "[]"

    def test_formats_collection(self) -> None:
        """Tests that text items are quoted and others are not."""
        assert CollectionService.format(["First", 3]) == "['First', 3]"

    @pytest.mark.parametrize(
        "items,expected",
        [
            ((3, "b", "a"), "[3, 'b', 'a']"),
            (deque(["x", None, 2.5]), "['x', None, 2.5]"),
            ([UserString("text"), True], "['text', True]"),
            ([[1, 2], {"k": 1}], "[[1, 2], {'k': 1}]"),
            (iter(["z", "y"]), "['z', 'y']"),
        ],
    )
    def test_preserves_order_and_item_forms(self, items: Any, expected: str) -> None:
        """Tests iteration order and the rendering of each kind of item."""
        assert CollectionService.format(items) == expected


class TestPredicates:
    """Tests for the collection predicates."""

    @pytest.mark.parametrize("items,expected", [(None, True), ([], True), ((), True), ([None], False), (["a"], False)])
    def test_is_null_or_empty(self, items: Any, expected: bool) -> None:
        """Tests detection of None and empty collections."""
        assert CollectionService.is_null_or_empty(items) is expected

    def test_is_null_or_empty_rejects_one_shot_iterators(self) -> None:
        """Tests that an iterator is refused rather than partly consumed."""
        with pytest.raises(TypeError):
            CollectionService.is_null_or_empty(iter(["a"]))

    def test_non_null_elements_in(self) -> None:
        """Tests that None items are dropped and order is kept."""
        assert CollectionService.non_null_elements_in(["a", None, "b", None]) == ["a", "b"]
        assert CollectionService.non_null_elements_in(None) == []

    @pytest.mark.parametrize("items,expected", [([None, None], True), ([None, 1], False), ([], False)])
    def test_has_only_null_elements(self, items: list[Any], expected: bool) -> None:
        """Tests detection of collections holding only None."""
        assert CollectionService.has_only_null_elements(items) is expected

    def test_has_only_null_elements_requires_collection(self) -> None:
        """Tests that a None collection is rejected."""
        with pytest.raises(TypeError):
            CollectionService.has_only_null_elements(None)

    def test_duplicates_from(self) -> None:
        """Tests that repeated items are reported once, in order."""
        items = ["Luke", "Yoda", "Luke", [1], "Yoda", "Luke", [1]]
        assert CollectionService.duplicates_from(items) == ["Luke", "Yoda", [1]]
        assert CollectionService.duplicates_from(["a", "b"]) == []
        assert CollectionService.duplicates_from(None) == []
