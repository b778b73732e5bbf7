# ABOUTME: Interactive walk through the decision funnel for the `nextread pick` command.
# ABOUTME: Prompts for each step's choice and supports back, relax, start over, and quit.

from collections.abc import Mapping
from enum import StrEnum

import click
from rich.console import Console
from rich.table import Table

from nextread.decision import (
    BacklogPreference,
    BehaviourPreference,
    DecisionFunnel,
    InvalidSelectionError,
    NoMatch,
    Recommendation,
    RiskPreference,
    Step,
    TimeInvestment,
)
from nextread.decision.options import STEP_OPTIONS

STEP_TITLES: dict[Step, str] = {
    Step.TIME_INVESTMENT: "How much time do you want to invest?",
    Step.BEHAVIOUR_PREFERENCE: "Stick with what you love, or try something different?",
    Step.BACKLOG_PREFERENCE: "Clear something old, or read something new?",
    Step.RISK_PREFERENCE: "Play it safe, or take a chance?",
}

# Keyed per step; "any" is an option at several steps.
OPTION_LABELS: dict[Step, dict[StrEnum, str]] = {
    Step.TIME_INVESTMENT: {
        TimeInvestment.QUICK: "Quick read (under 300 pages)",
        TimeInvestment.MODERATE: "Moderate (300-500 pages)",
        TimeInvestment.LONG: "Long immersion (over 500 pages)",
        TimeInvestment.ANY: "Any length",
    },
    Step.BEHAVIOUR_PREFERENCE: {
        BehaviourPreference.FAMILIAR: "Stick to what I love",
        BehaviourPreference.DIFFERENT: "Try something different",
        BehaviourPreference.ANY: "No preference",
    },
    Step.BACKLOG_PREFERENCE: {
        BacklogPreference.OLD: "Clear something old",
        BacklogPreference.NEW: "Read something new",
        BacklogPreference.ANY: "No preference",
    },
    Step.RISK_PREFERENCE: {
        RiskPreference.SAFE: "Play it safe",
        RiskPreference.RISKY: "Take a chance",
    },
}


class FunnelWizard:
    """Drives a DecisionFunnel from the terminal.

    Steps given in ``preset`` are answered without prompting; the rest are
    asked interactively. Prompt commands: an option number or name to choose,
    ``b`` / ``b<N>`` to go back, ``r`` to relax the length filter, ``s`` to
    start over, and ``q`` to quit.
    """

    def __init__(
        self,
        funnel: DecisionFunnel,
        *,
        console: Console | None = None,
        preset: Mapping[Step, str] | None = None,
    ) -> None:
        self._funnel = funnel
        self._console = console or Console()
        self._preset = dict(preset or {})

    def run(self) -> Recommendation | NoMatch | None:
        """Walk the funnel to a result.

        Returns:
            The recommendation (or NoMatch), or None if the user quits.
        """
        funnel = self._funnel
        if not funnel.has_viable_candidates:
            self._console.print("[yellow]Your want-to-read shelf is empty.[/yellow]")
            return funnel.run_final_recommendation()

        pending = dict(self._preset)
        stuck = False

        while funnel.current_step is not Step.RESULT:
            step = funnel.current_step
            if step in pending:
                choice = pending.pop(step)
            else:
                self._show_step(step, stuck)
                choice = click.prompt(self._prompt_text(step, stuck), type=str).strip().lower()

            if choice == "q":
                return None
            if choice == "s":
                funnel.reset()
                pending.clear()
                stuck = False
                continue
            if choice == "r" and step is Step.TIME_INVESTMENT:
                funnel.relax_constraint()
                stuck = False
                continue
            if choice.startswith("b"):
                self._go_back(step, choice[1:])
                stuck = False
                continue

            value = self._resolve_option(step, choice)
            try:
                result = funnel.advance(step, value)
            except InvalidSelectionError as exc:
                self._console.print(f"[red]{exc}[/red]")
                continue
            stuck = not result.ok

        recommendation = funnel.state.recommendation
        assert recommendation is not None
        return recommendation

    def _go_back(self, step: Step, raw_target: str) -> None:
        if raw_target:
            try:
                target = Step(int(raw_target))
            except ValueError:
                self._console.print(f"[red]No step {raw_target!r} to go back to.[/red]")
                return
        elif step > Step.TIME_INVESTMENT:
            target = Step(step - 1)
        else:
            return
        self._funnel.go_back(target)

    @staticmethod
    def _resolve_option(step: Step, choice: str) -> str:
        """Turn a 1-based option number into its value; anything else passes through."""
        options = list(STEP_OPTIONS[step])
        if choice.isdigit() and 1 <= int(choice) <= len(options):
            return options[int(choice) - 1].value
        return choice

    def _show_step(self, step: Step, stuck: bool) -> None:
        self._console.print(f"\n[bold]Step {int(step)} of 4:[/bold] {STEP_TITLES[step]}")

        table = Table(show_header=False, box=None, pad_edge=False)
        table.add_column("#", style="bold", width=3)
        table.add_column("Option")
        table.add_column("Key", style="dim")
        for i, option in enumerate(STEP_OPTIONS[step], start=1):
            table.add_row(str(i), OPTION_LABELS[step][option], option.value)
        self._console.print(table)

        if step is Step.TIME_INVESTMENT:
            count = self._funnel.candidate_count()
            self._console.print(f"[dim]{count} book{'' if count == 1 else 's'} available[/dim]")
            if stuck:
                self._console.print("[yellow]No books match that length.[/yellow]")
        else:
            self._show_summary(step)

    def _show_summary(self, step: Step) -> None:
        selections = self._funnel.selections
        lines = []
        for earlier in Step:
            if earlier >= step:
                break
            chosen = selections.get(earlier)
            if chosen is not None:
                lines.append(f"  • {OPTION_LABELS[earlier][chosen]}")
        if lines:
            self._console.print("[green]Your preferences so far:[/green]")
            for line in lines:
                self._console.print(line)

    @staticmethod
    def _prompt_text(step: Step, stuck: bool) -> str:
        parts = "[1-N] Choose"
        if step > Step.TIME_INVESTMENT:
            parts += "  [b] Back"
        if stuck:
            parts += "  [r] Relax previous choice"
        parts += "  [s] Start over  [q] Quit"
        return parts
