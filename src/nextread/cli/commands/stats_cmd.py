# ABOUTME: The `nextread stats` command for library-wide reading metrics.
# ABOUTME: Prints overview, taste profile, and backlog insights as Rich tables or JSON.

import json as json_lib
from collections.abc import Mapping
from dataclasses import asdict
from datetime import datetime
from enum import StrEnum
from pathlib import Path

import click
from rich.console import Console
from rich.table import Table

from nextread.catalog import Book
from nextread.cli.options import library_source, load_books
from nextread.insights.buckets import Era, LengthBucket
from nextread.insights.metrics import BucketShare, LibraryMetrics, compute_metrics

console = Console()

_RECENT_YEARS = 5

_LENGTH_LABELS = {
    LengthBucket.SHORT: "Short (<300p)",
    LengthBucket.MEDIUM: "Medium (300-500p)",
    LengthBucket.LONG: "Long (500-800p)",
    LengthBucket.EPIC: "Epic (800p+)",
}
_ERA_LABELS = {
    Era.CLASSIC: "Classic (pre-1950)",
    Era.LATE_20TH: "Late 20th C. (1950-1999)",
    Era.MODERN: "Modern (2000+)",
}


def format_number(value: float | None, decimals: int = 1) -> str:
    """Format a metric for display; zero and missing values read as N/A."""
    if not value:
        return "N/A"
    return f"{value:.{decimals}f}"


def _plural(count: int, word: str = "book") -> str:
    return f"{count} {word}{'' if count == 1 else 's'}"


@click.command("stats")
@library_source
@click.option(
    "--json",
    "json_output",
    is_flag=True,
    default=False,
    help="Output metrics as JSON.",
)
def stats(csv_path: Path | None, sample: bool, json_output: bool) -> None:
    """Show reading statistics, taste profile, and backlog insights."""
    books = load_books(csv_path, sample, console)
    metrics = compute_metrics(books)

    if json_output:
        click.echo(json_lib.dumps(asdict(metrics), indent=2, default=str))
        return

    if metrics.total_books == 0:
        console.print("[yellow]No books found.[/yellow]")
        return

    _print_overview(metrics)
    _print_taste_profile(metrics)
    _print_backlog(metrics)


def _print_overview(metrics: LibraryMetrics) -> None:
    table = Table(title="Library Overview", show_header=False)
    table.add_column("Metric", style="bold")
    table.add_column("Value", justify="right")
    table.add_row("Total books", str(metrics.total_books))
    table.add_row("Books read", str(metrics.books_read))
    table.add_row("Books unread", str(metrics.books_unread))
    table.add_row("Want to read", str(metrics.want_to_read))
    table.add_row("Average pages", format_number(metrics.average_pages))
    table.add_row("Your average rating", format_number(metrics.average_user_rating, 2))
    table.add_row("Median pub year", format_number(metrics.median_publication_year, 0))
    console.print(table)

    if metrics.top_authors:
        console.print("\n[bold]Top Authors[/bold]")
        for author, count in metrics.top_authors:
            console.print(f"  {author}: {_plural(count)} read")

    current_year = datetime.now().year
    recent = sorted(
        (
            (year, count)
            for year, count in metrics.books_per_year.items()
            if year >= current_year - (_RECENT_YEARS - 1)
        ),
        reverse=True,
    )
    console.print("\n[bold]Reading by Year[/bold]")
    if not recent:
        console.print("  [dim]No reading data available[/dim]")
    for year, count in recent:
        suffix = " so far" if year == current_year else ""
        console.print(f"  {year}{suffix}: {_plural(count)}")


def _share_rows(
    table: Table, shares: Mapping[StrEnum, BucketShare], labels: Mapping[StrEnum, str]
) -> None:
    for bucket, share in shares.items():
        table.add_row(labels[bucket], str(share.count), f"{share.percentage:.1f}%")


def _print_taste_profile(metrics: LibraryMetrics) -> None:
    console.print()
    if metrics.books_read == 0:
        console.print("[bold]Taste Profile[/bold]\n  [dim]No read books[/dim]")
        return

    taste = metrics.taste_profile
    table = Table(title="Taste Profile")
    table.add_column("Bucket", style="bold")
    table.add_column("Books", justify="right")
    table.add_column("Share", justify="right")
    _share_rows(table, taste.length_distribution, _LENGTH_LABELS)
    table.add_section()
    _share_rows(table, taste.era_distribution, _ERA_LABELS)
    console.print(table)

    behaviour = taste.rating_behaviour
    common = behaviour.most_common_rating
    console.print(f"  Rated 4+: {behaviour.high_rated_pct:.1f}%")
    console.print(f"  Rated 2 or below: {behaviour.low_rated_pct:.1f}%")
    console.print(f"  Most common rating: {format_number(common, 0)}")
    console.print(f"  Author diversity: {taste.author_diversity:.2f} (unique authors / total)")


def _describe(book: Book | None, detail: str) -> str:
    if book is None:
        return "N/A"
    return f"{book.display_title} by {book.display_author} ({detail})"


def _print_backlog(metrics: LibraryMetrics) -> None:
    backlog = metrics.backlog
    console.print("\n[bold]Backlog Intelligence[/bold]")
    if backlog.total == 0:
        console.print("  [dim]No want-to-read books[/dim]")
        return

    console.print(f"  {_plural(backlog.total)} waiting")
    oldest = backlog.oldest
    console.print(f"  Oldest: {_describe(oldest, f'added {oldest.date_added}' if oldest else '')}")
    age = backlog.average_age_years
    console.print(f"  Average age: {'N/A' if age is None else f'{age:.1f} years'}")
    longest, shortest = backlog.longest, backlog.shortest
    console.print(f"  Longest: {_describe(longest, f'{longest.pages}p' if longest else '')}")
    console.print(f"  Shortest: {_describe(shortest, f'{shortest.pages}p' if shortest else '')}")
    best = backlog.highest_rated
    console.print(
        f"  Highest rated: {_describe(best, f'{best.average_rating:.2f}' if best else '')}"
    )
