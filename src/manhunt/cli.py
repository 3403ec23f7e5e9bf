"""Command line interface for manhunt."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console

from manhunt.config import AppConfig
from manhunt.pipeline.coordinator import run_search
from manhunt.search.walker import DeduplicatingWalker


err_console = Console(stderr=True)
app = typer.Typer(help="manhunt - search the text of every installed manual page")


def _setup_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(level=level, format="[%(levelname)s] %(message)s")


@app.command()
def main(
    term: Optional[str] = typer.Argument(None, help="Literal text to look for"),
    roots: Optional[List[Path]] = typer.Option(
        None, "--root", "-r", help="Manual page root to search (repeatable, defaults to MANPATH)"
    ),
    workers: Optional[int] = typer.Option(None, "--workers", "-w", min=1, help="Search workers"),
    queue_size: Optional[int] = typer.Option(None, "--queue-size", min=1, help="Channel capacity"),
    list_pages: bool = typer.Option(False, "--list", help="List the pages that would be searched"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Print diagnostics to stderr"),
) -> None:
    """Print `command (section)` for every manual page containing TERM."""
    _setup_logging(verbose)
    config = AppConfig(roots=roots or None, workers=workers, queue_size=queue_size)

    if list_pages:
        walker = DeduplicatingWalker()
        for candidate in walker.iter_candidates(config.resolve_roots()):
            typer.echo(str(candidate.path))
        return

    if not term:
        err_console.print("[yellow]Please provide a search term.[/yellow]")
        return

    run_search(config, term, typer.echo)
