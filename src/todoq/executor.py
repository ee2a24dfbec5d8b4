"""Query execution for todoq.

``execute`` applies one parsed query to a ``TodoList``. ``run_line`` is the
per-line glue used by the CLI: parse, execute, and route the outcome to the
output or error channel.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable

import click

from todoq.models import TodoList
from todoq.parser import parse_query
from todoq.query import (
    Add,
    Added,
    Completed,
    Done,
    Found,
    Query,
    QueryError,
    QueryResult,
    QuerySyntaxError,
    Search,
)

logger = logging.getLogger(__name__)

Writer = Callable[[str], None]


def execute(query: Query, todo_list: TodoList) -> QueryResult:
    """Apply a query to the store.

    Each query is a single mutation or a pure read; a failing query leaves
    the store untouched.

    Raises:
        QueryError: If a ``Done`` query names an index that does not exist.
    """
    if isinstance(query, Add):
        return Added(todo_list.push(query.description, query.tags))
    elif isinstance(query, Done):
        if todo_list.done_with_index(query.index) is None:
            raise QueryError(query.index)
        return Completed(query.index)
    elif isinstance(query, Search):
        return Found(todo_list.search(query.params))
    else:
        raise TypeError(f"Unknown query: {query!r}")


def _echo_out(text: str) -> None:
    click.echo(text)


def _echo_err(text: str) -> None:
    click.echo(text, err=True)


def run_line(
    line: str,
    todo_list: TodoList,
    out: Writer | None = None,
    err: Writer | None = None,
) -> QueryResult | None:
    """Parse and execute one line, writing the outcome.

    Lines that do not parse are dropped without any output.

    Args:
        line: Input line without its trailing newline.
        todo_list: Store to apply the query to.
        out: Receives the rendered result (defaults to stdout).
        err: Receives ``Error: ...`` lines (defaults to stderr).

    Returns:
        The result, or None if the line did not parse or the query failed.
    """
    out = out or _echo_out
    err = err or _echo_err

    try:
        query = parse_query(line)
    except QuerySyntaxError as e:
        logger.debug("Dropped line (%s)", e)
        return None

    try:
        result = execute(query, todo_list)
    except QueryError as e:
        err(f"Error: {e}")
        return None

    out(str(result))
    return result


def run_lines(
    lines: Iterable[str],
    todo_list: TodoList,
    out: Writer | None = None,
    err: Writer | None = None,
) -> int:
    """Run every line in order. Returns the number of lines read."""
    count = 0
    for count, raw in enumerate(lines, 1):
        run_line(raw.rstrip("\r\n"), todo_list, out=out, err=err)
    return count
