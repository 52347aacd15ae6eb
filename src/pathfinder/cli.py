"""Command line interface for PathFinder."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console

from pathfinder.app import run_session
from pathfinder.config import DEFAULT_VISIBLE_COUNT, AppConfig
from pathfinder.ui.presenter import NO_SELECTION
from pathfinder.ui.terminal import TerminalError

HELP_EXIT_CODE = 5
INTERRUPT_EXIT_CODE = 130

err_console = Console(stderr=True)
app = typer.Typer(
    help="PathFinder - fuzzy-pick a path and print it for cd",
    add_completion=False,
)


def _setup_logging(verbose: bool, log_file: Path | None = None) -> None:
    level = logging.DEBUG if verbose else logging.WARNING
    if log_file is not None:
        logging.basicConfig(level=level, format="[%(levelname)s] %(message)s", filename=log_file)
    else:
        logging.basicConfig(level=level, format="[%(levelname)s] %(message)s")


def _fail(message: str) -> typer.Exit:
    err_console.print(message)
    return typer.Exit(code=1)


@app.command(context_settings={"help_option_names": []})
def main(
    args: Optional[List[str]] = typer.Argument(None, help="Root directory to search."),
    start: bool = typer.Option(False, "--start", "-s", help="Search from the home directory"),
    show_help: bool = typer.Option(False, "--help", "-h", help="Exit with status 5"),
    workers: Optional[int] = typer.Option(None, "--workers", min=1, help="Ranking worker count"),
    entries: int = typer.Option(DEFAULT_VISIBLE_COUNT, "--entries", min=0, help="Rows shown at start"),
    exact_merge: bool = typer.Option(
        False, "--exact-merge", help="Keep every match when merging worker results"
    ),
    log_file: Optional[Path] = typer.Option(None, "--log-file", help="Write logs to this file"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose logging"),
) -> None:
    """Pick a path interactively and print its directory."""
    _setup_logging(verbose, log_file)
    positional = list(args or [])

    if len(positional) + int(start) + int(show_help) > 1:
        raise _fail("Incorrect Amount of Arguments Given")
    if show_help:
        raise typer.Exit(code=HELP_EXIT_CODE)

    root = Path(".")
    if start:
        root = Path.home()
    elif positional:
        root = Path(positional[0])
        if not root.exists():
            raise _fail("Unknown argument given -- Try using -h for help")

    config = AppConfig(root=root, workers=workers, visible_count=entries, exact_merge=exact_merge)
    try:
        selected = run_session(config)
    except TerminalError as exc:
        raise _fail(str(exc)) from exc
    except KeyboardInterrupt:
        raise typer.Exit(code=INTERRUPT_EXIT_CODE) from None

    if selected is None:
        typer.echo(NO_SELECTION)
        raise typer.Exit(code=1)
    typer.echo(str(selected))
