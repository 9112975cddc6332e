"""This module provides helpers for inspecting and formatting collections."""

from collections import UserString
from collections.abc import Collection, Iterable
from typing import Any


class CollectionService:
    """Stateless helpers operating on ordered collections of arbitrary values."""

    @staticmethod
    def format(items: Iterable[Any] | None) -> str | None:
        """Returns a human-readable representation of the given collection.

        Items keep their iteration order. Text items are wrapped in single
        quotes; every other item, including None, uses its ``str`` form.

        Args:
            items: The collection to format.

        Returns:
            A string like ``['First', 3]``, ``[]`` for an empty collection,
            or None if the given collection was None.
        """
        if items is None:
            return None
        return "[" + ", ".join(CollectionService._format_item(item) for item in items) + "]"

    @staticmethod
    def _format_item(item: Any) -> str:
        if isinstance(item, (str, UserString)):
            return f"'{item}'"
        return str(item)

    @staticmethod
    def is_null_or_empty(items: Collection[Any] | None) -> bool:
        """Returns True if the given collection is None or has no items.

        The collection is sized, never iterated, so one-shot iterators are
        rejected with a TypeError instead of losing their first item.
        """
        if items is None:
            return True
        return len(items) == 0

    @staticmethod
    def non_null_elements_in(items: Iterable[Any] | None) -> list[Any]:
        """Returns the items that are not None, in order.

        Args:
            items: The collection to filter.

        Returns:
            A new list; empty if the given collection was None.
        """
        if items is None:
            return []
        return [item for item in items if item is not None]

    @staticmethod
    def has_only_null_elements(items: Iterable[Any]) -> bool:
        """Returns True if the collection has items and all of them are None.

        Args:
            items: The collection to inspect. Must not be None.

        Returns:
            False for an empty collection or one holding any non-None item.
        """
        found = False
        for item in items:
            if item is not None:
                return False
            found = True
        return found

    @staticmethod
    def duplicates_from(items: Iterable[Any] | None) -> list[Any]:
        """Returns the items appearing more than once, each reported once.

        Items are compared by equality, so unhashable items are supported.

        Args:
            items: The collection to inspect.

        Returns:
            The duplicated items in order of their second occurrence; empty
            if the given collection was None.
        """
        if items is None:
            return []
        seen: list[Any] = []
        duplicates: list[Any] = []
        for item in items:
            if item in seen:
                if item not in duplicates:
                    duplicates.append(item)
            else:
                seen.append(item)
        return duplicates

