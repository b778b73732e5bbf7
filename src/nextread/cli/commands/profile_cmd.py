# ABOUTME: The `nextread profile` command for displaying the behaviour profile.
# ABOUTME: Shows the dominant length, era, favourite authors, and average rating used in scoring.

from pathlib import Path

import click
from rich.console import Console
from rich.table import Table

from nextread.catalog import read_books
from nextread.cli.options import library_source, load_books
from nextread.insights import build_profile

console = Console()


@click.command("profile")
@library_source
def profile(csv_path: Path | None, sample: bool) -> None:
    """Show the reading behaviour profile derived from finished books."""
    books = load_books(csv_path, sample, console)
    finished = read_books(books)
    if not finished:
        console.print("[yellow]No read books to build a profile from.[/yellow]")
        return

    behaviour = build_profile(finished)
    if behaviour.is_empty:
        console.print(
            f"[yellow]Not enough data to build a profile: none of the {len(finished)} "
            "read book(s) has a page count or publication year.[/yellow]"
        )
        return

    table = Table(title="Behaviour Profile", show_header=False, pad_edge=False)
    table.add_column("Field", style="bold", width=16)
    table.add_column("Value")

    table.add_row("Books read", str(len(finished)))
    table.add_row("Usual length", behaviour.dominant_length or "[dim]unknown[/dim]")
    table.add_row("Usual era", behaviour.dominant_era or "[dim]unknown[/dim]")
    table.add_row("Top authors", ", ".join(behaviour.top_authors) or "[dim]none[/dim]")
    avg = f"{behaviour.avg_rating:.2f}" if behaviour.avg_rating else "[dim]none[/dim]"
    table.add_row("Average rating", avg)

    console.print(table)
