"""Shared fixtures for todoq tests."""

from __future__ import annotations

import logging
import os
from collections.abc import Generator
from pathlib import Path

import pytest

from todoq.models import Description, Tag, TodoList


@pytest.fixture(autouse=True)
def reset_todoq_logging() -> Generator[None, None, None]:
    """Drop handlers the CLI attaches so they don't outlive a test."""
    yield
    root = logging.getLogger("todoq")
    for h in list(root.handlers):
        root.removeHandler(h)
        h.close()
    root.setLevel(logging.NOTSET)


@pytest.fixture
def temp_project(tmp_path: Path) -> Generator[Path, None, None]:
    """Create a temporary project directory and change to it."""
    original_dir = os.getcwd()
    os.chdir(tmp_path)
    try:
        yield tmp_path
    finally:
        os.chdir(original_dir)


@pytest.fixture
def temp_todoq_dir(temp_project: Path) -> Path:
    """Create a temporary .todoq directory."""
    todoq_dir = temp_project / ".todoq"
    todoq_dir.mkdir()
    return todoq_dir


@pytest.fixture
def todo_list() -> TodoList:
    """An empty task list."""
    return TodoList()


@pytest.fixture
def errands() -> TodoList:
    """A task list with three tasks, the first one done."""
    todo_list = TodoList()
    todo_list.push(Description("buy groceries"), [Tag("shopping"), Tag("food")])
    todo_list.push(Description("go to the mall"), [Tag("leisure"), Tag("shopping")])
    todo_list.push(Description("send message to loved ones"), [Tag("communication")])
    todo_list.done_with_index(todo_list.items[0].index)
    return todo_list
