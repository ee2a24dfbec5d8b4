"""Data model and in-memory store for todoq.

The store keeps items in insertion order. That order is the source of truth
for iteration and search output; an index-to-position map sits beside it so
completion marking does not need a scan.
"""

from __future__ import annotations

import copy
import logging
from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from todoq.query import SearchParams


MAX_INDEX = 2**64 - 1


@dataclass(frozen=True, order=True)
class Index:
    """Identifier assigned to a task by the store (unsigned 64-bit)."""

    value: int

    def __post_init__(self) -> None:
        if not 0 <= self.value <= MAX_INDEX:
            raise ValueError(f"Index out of range: {self.value}")

    def next(self) -> Index:
        """Return the index following this one."""
        return Index(self.value + 1)

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class Description:
    """Free-text task label, stored verbatim."""

    value: str

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Tag:
    """Task label, stored without its leading ``#``."""

    value: str

    def matches(self, other: Tag) -> bool:
        """Compare two tags ignoring case."""
        return self.value.lower() == other.value.lower()

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class SearchWord:
    """A word that must appear somewhere in a matching description."""

    value: str

    def found_in(self, text: str) -> bool:
        """Case-insensitive substring test."""
        return self.value.lower() in text.lower()

    def __str__(self) -> str:
        return self.value


@dataclass
class TodoItem:
    """A single task record."""

    index: Index
    description: Description
    tags: list[Tag] = field(default_factory=list)
    done: bool = False

    def matches(self, params: SearchParams) -> bool:
        """Check whether this item satisfies every word and every tag filter."""
        text = self.description.value
        return all(word.found_in(text) for word in params.words) and all(
            any(own.matches(wanted) for own in self.tags) for wanted in params.tags
        )

    def __str__(self) -> str:
        tags = ", ".join(str(tag) for tag in self.tags)
        return f"{self.index}: {self.description} [{tags}]"


class TodoList:
    """Ordered, in-memory collection of tasks plus the index counter.

    Items are never removed or reordered. Every public method hands out
    copies, so callers cannot change stored items behind the store's back.

    Args:
        logger: Logger receiving DEBUG trace records for each mutation and
            search. Defaults to this module's logger, which stays silent
            unless logging is configured to show DEBUG for ``todoq``.
    """

    def __init__(self, logger: logging.Logger | None = None) -> None:
        self.top_index = Index(0)
        self.items: list[TodoItem] = []
        self._positions: dict[Index, int] = {}
        self._log = logger or logging.getLogger(__name__)

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[TodoItem]:
        return (copy.deepcopy(item) for item in self.items)

    def get(self, index: Index) -> TodoItem | None:
        """Get a copy of the item with the given index."""
        position = self._positions.get(index)
        if position is None:
            return None
        return copy.deepcopy(self.items[position])

    def push(self, description: Description, tags: list[Tag]) -> TodoItem:
        """Append a new, not-done item and return a copy of it."""
        self._log.debug("Before push: top_index=%s, items=%d", self.top_index, len(self.items))

        self.top_index = self.top_index.next()
        item = TodoItem(self.top_index, description, list(tags), done=False)
        self._positions[item.index] = len(self.items)
        self.items.append(item)

        self._log.debug("After push: top_index=%s, item=%r", self.top_index, item)
        return copy.deepcopy(item)

    def done_with_index(self, index: Index) -> Index | None:
        """Mark the item with ``index`` done.

        Returns:
            The index when an item was found (already-done items included),
            or None when no item carries that index.
        """
        self._log.debug("Attempting to mark done: index=%s", index)
        position = self._positions.get(index)
        if position is None:
            self._log.debug("Index not found: %s", index)
            return None

        item = self.items[position]
        item.done = True
        self._log.debug("Marked done: %r", item)
        return index

    def search(self, params: SearchParams) -> list[TodoItem]:
        """Return copies of all matching items in insertion order.

        An item matches when every search word is a substring of its
        description and every tag is among its tags, both ignoring case.
        Done items are included.
        """
        self._log.debug("Search params: %r", params)
        results = [copy.deepcopy(item) for item in self.items if item.matches(params)]
        self._log.debug("Search results: %d of %d items", len(results), len(self.items))
        return results
