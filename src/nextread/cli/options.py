# ABOUTME: Shared Click options and library loading for nextread CLI commands.
# ABOUTME: Every command reads either a CSV path argument or the bundled --sample library.

from collections.abc import Callable
from pathlib import Path
from typing import Any

import click
from rich.console import Console

from nextread.catalog import Book, CatalogReadError, load_library, load_sample_library

csv_argument = click.argument(
    "csv_path",
    required=False,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)

sample_option = click.option(
    "--sample",
    is_flag=True,
    default=False,
    help="Use the bundled sample reading history instead of a CSV file.",
)


def library_source(func: Callable[..., Any]) -> Callable[..., Any]:
    """Decorate a command with the CSV argument and the --sample flag."""
    return csv_argument(sample_option(func))


def load_books(csv_path: Path | None, sample: bool, console: Console) -> list[Book]:
    """Load books from the chosen source, exiting with a message on failure."""
    if sample:
        return load_sample_library()
    if csv_path is None:
        raise click.UsageError("Provide a CSV export path or use --sample.")
    try:
        return load_library(csv_path)
    except CatalogReadError as exc:
        console.print(f"[red]Error:[/red] {exc}")
        raise SystemExit(1) from exc
