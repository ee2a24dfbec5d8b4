"""CLI interface for todoq."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import TextIO

import click
from pydantic import ValidationError
from rich.console import Console
from rich.panel import Panel

from todoq import __version__
from todoq.config import CONFIG_FILE, TodoqConfig
from todoq.executor import run_line, run_lines
from todoq.logging_setup import setup_logging
from todoq.models import TodoList

# Banner and prompt go to stderr; stdout carries only query results.
console = Console(stderr=True)

logger = logging.getLogger(__name__)


def _is_interactive(source: TextIO) -> bool:
    """Check whether lines come from a terminal."""
    return source.isatty()


def _load_config(path: Path) -> TodoqConfig:
    try:
        return TodoqConfig.load(path)
    except (ValidationError, json.JSONDecodeError) as e:
        raise click.ClickException(f"Invalid config file {path}: {e}") from e


@click.command()
@click.argument("source", type=click.File("r"), default="-")
@click.option("--trace", "-t", is_flag=True, help="Log every change to the task list on stderr")
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=CONFIG_FILE,
    show_default=True,
    help="Configuration file",
)
@click.version_option(version=__version__, prog_name="todoq")
def main(source: TextIO, trace: bool, config_path: Path) -> None:
    """todoq - a tiny task list driven by one-line queries.

    Reads queries from SOURCE (stdin by default), one per line.

    \b
    Queries:
      add "buy milk" #shopping     # Create a task with tags
      done 1                       # Mark task 1 done
      search milk #shopping        # Tasks matching every word and tag

    Lines that are not valid queries are ignored.
    """
    config = _load_config(config_path)
    if trace:
        config.logging.trace = True

    setup_logging(
        level=config.logging.level,
        trace=config.logging.trace,
        log_file=config.logging.file,
    )

    todo_list = TodoList()

    if _is_interactive(source):
        _run_interactive(todo_list, config)
    else:
        count = run_lines(source, todo_list)
        logger.info("Processed %d lines, %d tasks", count, len(todo_list))


def _run_interactive(todo_list: TodoList, config: TodoqConfig) -> None:
    """Prompt for lines until EOF or Ctrl-C."""
    if config.repl.banner:
        console.print(
            Panel.fit(
                "[bold]todoq[/bold] - type a query, Ctrl-D to quit\n\n"
                '  [cyan]add "buy milk" #shopping[/cyan]\n'
                "  [cyan]done 1[/cyan]\n"
                "  [cyan]search milk #shopping[/cyan]",
                title=f"todoq {__version__}",
            )
        )

    while True:
        try:
            line = console.input(config.repl.prompt, markup=False)
        except EOFError:
            break
        except KeyboardInterrupt:
            console.print()
            break

        run_line(line, todo_list)

    logger.info("Session finished with %d tasks", len(todo_list))


if __name__ == "__main__":
    main()
