"""Query and result types for todoq.

A line of input parses into one ``Query`` (``Add``, ``Done`` or ``Search``).
Executing it yields one ``QueryResult`` (``Added``, ``Completed`` or
``Found``) or raises ``QueryError``.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from todoq.models import Description, Index, SearchWord, Tag, TodoItem


class TodoqError(Exception):
    """Base class for todoq errors."""


class QuerySyntaxError(TodoqError, ValueError):
    """Raised when a line does not match the query grammar."""

    def __init__(self, line: str, reason: str = "no matching query") -> None:
        self.line = line
        self.reason = reason
        super().__init__(f"{reason}: {line!r}")


class QueryError(TodoqError):
    """Raised when a well-formed query cannot be applied to the store."""

    def __init__(self, index: Index) -> None:
        self.index = index
        super().__init__(f"No item found with index {index}")


@dataclass(frozen=True)
class SearchParams:
    """Word and tag filters of a search query."""

    words: list[SearchWord] = field(default_factory=list)
    tags: list[Tag] = field(default_factory=list)


@dataclass(frozen=True)
class Add:
    """Create a task."""

    description: Description
    tags: list[Tag] = field(default_factory=list)


@dataclass(frozen=True)
class Done:
    """Mark a task done."""

    index: Index


@dataclass(frozen=True)
class Search:
    """Find tasks matching all filters."""

    params: SearchParams = field(default_factory=SearchParams)


Query = Add | Done | Search


@dataclass
class Added:
    """Result of an ``Add`` query: the created item."""

    item: TodoItem

    def __str__(self) -> str:
        return str(self.item)


@dataclass
class Completed:
    """Result of a successful ``Done`` query."""

    index: Index

    def __str__(self) -> str:
        return f"done {self.index}"


@dataclass
class Found:
    """Result of a ``Search`` query: matching items in insertion order."""

    items: list[TodoItem] = field(default_factory=list)

    def __str__(self) -> str:
        if not self.items:
            return "found 0"
        listing = "; ".join(str(item) for item in self.items)
        return f"found {len(self.items)}: {listing}"


QueryResult = Added | Completed | Found
