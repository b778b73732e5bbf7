# ABOUTME: Unit tests for the interactive funnel wizard.
# ABOUTME: Tests preset answers, numbered choices, back/relax/start-over/quit, and bad input.

import random
from datetime import datetime
from io import StringIO
from unittest.mock import patch

from rich.console import Console

from nextread.catalog import Book
from nextread.cli.wizard import FunnelWizard
from nextread.decision import (
    DecisionFunnel,
    NoMatch,
    Recommendation,
    Step,
    TimeInvestment,
)
from nextread.insights import BehaviourProfile

PROMPT = "nextread.cli.wizard.click.prompt"


def _funnel(*pages: int) -> DecisionFunnel:
    books = [
        Book(
            title=f"Book {p}",
            author="Author",
            pages=p,
            publication_year=2015,
            average_rating=4.0,
            date_added="2024/01/01",
            shelves="to-read",
        )
        for p in pages
    ]
    return DecisionFunnel(
        books,
        BehaviourProfile(),
        rng=random.Random(0),
        clock=lambda: datetime(2026, 1, 1),
    )


def _wizard(
    funnel: DecisionFunnel, preset: dict[Step, str] | None = None
) -> tuple[FunnelWizard, StringIO]:
    buffer = StringIO()
    console = Console(file=buffer, width=120)
    return FunnelWizard(funnel, console=console, preset=preset), buffer


class TestFunnelWizard:
    """Tests for FunnelWizard.run."""

    def test_numbered_choices_reach_result(self) -> None:
        """Entering an option number at each step produces a recommendation."""
        wizard, _ = _wizard(_funnel(200, 400))
        with patch(PROMPT, side_effect=["1", "1", "1", "1"]):
            result = wizard.run()
        assert isinstance(result, Recommendation)
        assert result.book.pages == 200

    def test_option_names_accepted(self) -> None:
        wizard, _ = _wizard(_funnel(200, 400))
        with patch(PROMPT, side_effect=["moderate", "any", "any", "safe"]):
            result = wizard.run()
        assert isinstance(result, Recommendation)
        assert result.book.pages == 400

    def test_preset_steps_skip_prompting(self) -> None:
        preset = {
            Step.TIME_INVESTMENT: "quick",
            Step.BEHAVIOUR_PREFERENCE: "familiar",
            Step.BACKLOG_PREFERENCE: "old",
            Step.RISK_PREFERENCE: "risky",
        }
        wizard, _ = _wizard(_funnel(200, 400), preset=preset)
        with patch(PROMPT) as prompt:
            result = wizard.run()
        prompt.assert_not_called()
        assert isinstance(result, Recommendation)

    def test_partial_preset_prompts_for_the_rest(self) -> None:
        preset = {Step.TIME_INVESTMENT: "any", Step.BEHAVIOUR_PREFERENCE: "any"}
        wizard, _ = _wizard(_funnel(200, 400), preset=preset)
        with patch(PROMPT, side_effect=["3", "1"]) as prompt:
            result = wizard.run()
        assert prompt.call_count == 2
        assert isinstance(result, Recommendation)
        assert result.total_candidates == 2

    def test_quit_returns_none(self) -> None:
        wizard, _ = _wizard(_funnel(200))
        with patch(PROMPT, return_value="q"):
            assert wizard.run() is None

    def test_back_returns_to_previous_step(self) -> None:
        """'b' at step 2 goes back to step 1, which restores the full backlog."""
        funnel = _funnel(200, 400)
        wizard, _ = _wizard(funnel)
        with patch(PROMPT, side_effect=["1", "b", "2", "3", "3", "1"]):
            result = wizard.run()
        assert isinstance(result, Recommendation)
        assert result.book.pages == 400
        assert funnel.selections.time_investment is TimeInvestment.MODERATE

    def test_back_to_numbered_step(self) -> None:
        funnel = _funnel(200, 400)
        wizard, _ = _wizard(funnel)
        with patch(PROMPT, side_effect=["4", "1", "1", "b2", "2", "3", "2"]):
            result = wizard.run()
        assert isinstance(result, Recommendation)
        assert funnel.selections.time_investment is TimeInvestment.ANY

    def test_rejected_length_then_relax(self) -> None:
        """A length with no books is refused; 'r' relaxes and the user picks again."""
        wizard, buffer = _wizard(_funnel(200, 250))
        with patch(PROMPT, side_effect=["3", "r", "4", "3", "3", "1"]):
            result = wizard.run()
        assert isinstance(result, Recommendation)
        assert "No books match that length" in buffer.getvalue()

    def test_start_over(self) -> None:
        funnel = _funnel(200, 400)
        wizard, _ = _wizard(funnel)
        with patch(PROMPT, side_effect=["1", "1", "s", "2", "3", "3", "1"]):
            result = wizard.run()
        assert isinstance(result, Recommendation)
        assert result.book.pages == 400

    def test_invalid_option_reprompts(self) -> None:
        wizard, buffer = _wizard(_funnel(200))
        with patch(PROMPT, side_effect=["9", "1", "3", "3", "1"]):
            result = wizard.run()
        assert isinstance(result, Recommendation)
        assert "not a valid" in buffer.getvalue()

    def test_empty_backlog(self) -> None:
        wizard, buffer = _wizard(_funnel())
        with patch(PROMPT) as prompt:
            result = wizard.run()
        prompt.assert_not_called()
        assert result == NoMatch()
        assert "want-to-read shelf is empty" in buffer.getvalue()

    def test_shows_available_count_and_summary(self) -> None:
        wizard, buffer = _wizard(_funnel(200, 400))
        with patch(PROMPT, side_effect=["1", "1", "1", "1"]):
            wizard.run()
        output = buffer.getvalue()
        assert "2 books available" in output
        assert "Your preferences so far" in output
        assert "Quick read" in output
