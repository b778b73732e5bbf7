# ABOUTME: The `nextread pick` command: runs the decision funnel and shows one recommendation.
# ABOUTME: Steps can be answered with flags or interactively; --enrich adds Open Library genres.

import logging
import random
from pathlib import Path

import click
from rich.console import Console
from rich.table import Table

from nextread.catalog import read_books, want_to_read_books
from nextread.cli.options import library_source, load_books
from nextread.cli.wizard import FunnelWizard
from nextread.decision import (
    BacklogPreference,
    BehaviourPreference,
    DecisionFunnel,
    Recommendation,
    RiskPreference,
    Step,
    TimeInvestment,
)
from nextread.enrichment import (
    NextreadHttpClient,
    OpenLibraryEnricher,
    cover_url,
    enrich_candidates,
)
from nextread.insights import build_profile

logger = logging.getLogger(__name__)

console = Console()


def _choice(options: type) -> click.Choice:
    return click.Choice([member.value for member in options], case_sensitive=False)


def _create_enricher() -> OpenLibraryEnricher:
    """Create the default enricher (Open Library)."""
    return OpenLibraryEnricher(http_client=NextreadHttpClient())


@click.command("pick")
@library_source
@click.option(
    "--time", "time_choice", type=_choice(TimeInvestment), help="Step 1: time investment."
)
@click.option(
    "--style", "style_choice", type=_choice(BehaviourPreference), help="Step 2: behaviour."
)
@click.option(
    "--backlog-age", "backlog_choice", type=_choice(BacklogPreference), help="Step 3: backlog."
)
@click.option("--risk", "risk_choice", type=_choice(RiskPreference), help="Step 4: risk.")
@click.option("--seed", type=int, default=None, help="Seed the near-tie random pick.")
@click.option(
    "--enrich/--no-enrich",
    default=False,
    help="Fetch genres from Open Library for the candidates (needs network).",
)
def pick(
    csv_path: Path | None,
    sample: bool,
    time_choice: str | None,
    style_choice: str | None,
    backlog_choice: str | None,
    risk_choice: str | None,
    seed: int | None,
    enrich: bool,
) -> None:
    """Walk the decision funnel and recommend one book from your backlog."""
    books = load_books(csv_path, sample, console)

    funnel = DecisionFunnel(
        want_to_read_books(books),
        build_profile(read_books(books)),
        rng=random.Random(seed),
    )

    preset = {
        step: value
        for step, value in (
            (Step.TIME_INVESTMENT, time_choice),
            (Step.BEHAVIOUR_PREFERENCE, style_choice),
            (Step.BACKLOG_PREFERENCE, backlog_choice),
            (Step.RISK_PREFERENCE, risk_choice),
        )
        if value is not None
    }
    logger.debug(
        "Running funnel over %d backlog book(s) with %d preset step(s)",
        funnel.candidate_count(),
        len(preset),
    )

    result = FunnelWizard(funnel, console=console, preset=preset).run()
    if result is None:
        console.print("[dim]No pick this time.[/dim]")
        return
    if not isinstance(result, Recommendation):
        console.print("[yellow]No books match your criteria.[/yellow]")
        return

    if enrich:
        others = [b for b in funnel.state.candidates if b is not result.book]
        enrich_candidates([result.book, *others], _create_enricher())

    _print_recommendation(result)


def _print_recommendation(result: Recommendation) -> None:
    book = result.book
    table = Table(title="Recommended Book", show_header=False, pad_edge=False)
    table.add_column("Field", style="bold", width=12)
    table.add_column("Value")

    table.add_row("Title", book.display_title)
    table.add_row("Author", book.display_author)
    if book.publication_year:
        table.add_row("Published", str(book.publication_year))
    if book.pages:
        table.add_row("Pages", str(book.pages))
    if book.average_rating:
        table.add_row("Rating", f"{book.average_rating:.2f}")
    if book.enrichment is not None and book.enrichment.genres:
        table.add_row("Genres", ", ".join(book.enrichment.genres))
    url = cover_url(book)
    if url:
        table.add_row("Cover", url)
    table.add_row("Score", f"{result.score:.2f}")

    console.print(table)
    console.print(f"[dim]Selected from {result.total_candidates} candidate(s)[/dim]")
