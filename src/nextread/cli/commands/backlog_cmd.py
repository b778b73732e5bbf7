# ABOUTME: The `nextread backlog` command for listing want-to-read books.
# ABOUTME: Displays a Rich table of every unread book on a to-read shelf.

from pathlib import Path

import click
from rich.console import Console
from rich.table import Table

from nextread.catalog import want_to_read_books
from nextread.cli.options import library_source, load_books

console = Console()


@click.command("backlog")
@library_source
def backlog(csv_path: Path | None, sample: bool) -> None:
    """List the books on your want-to-read shelf."""
    books = want_to_read_books(load_books(csv_path, sample, console))

    if not books:
        console.print("[yellow]No want-to-read books in the library.[/yellow]")
        return

    table = Table()
    table.add_column("Title", style="bold")
    table.add_column("Author")
    table.add_column("Pages", justify="right")
    table.add_column("Year", justify="right")
    table.add_column("Rating", justify="right")
    table.add_column("Added", style="dim")

    for book in books:
        table.add_row(
            book.display_title,
            book.author or "[dim]unknown[/dim]",
            str(book.pages) if book.pages else "?",
            str(book.publication_year) if book.publication_year else "?",
            f"{book.average_rating:.2f}" if book.average_rating else "-",
            book.date_added or "-",
        )

    console.print(table)
    console.print(f"\n[dim]{len(books)} book(s)[/dim]")
