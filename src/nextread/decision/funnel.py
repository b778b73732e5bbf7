# ABOUTME: The decision funnel: a four-step state machine narrowing the backlog to one book.
# ABOUTME: Step 1 filters candidates by length; steps 2-4 record preferences for scoring.

import logging
import random
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from datetime import datetime

from nextread.catalog.types import Book
from nextread.decision.options import Selections, Step, TimeInvestment, parse_option
from nextread.decision.scoring import (
    NoMatch,
    Recommendation,
    pick_recommendation,
    rank_candidates,
)
from nextread.insights.buckets import ReadingTime, reading_time
from nextread.insights.profile import BehaviourProfile

logger = logging.getLogger(__name__)

NO_CANDIDATES = "no-candidates"


class InvalidStepError(Exception):
    """Raised when a step is advanced out of order."""


@dataclass(frozen=True)
class AdvanceResult:
    ok: bool
    reason: str | None = None


@dataclass
class DecisionState:
    """Everything one traversal of the funnel knows.

    ``all_books`` never changes; ``candidates`` only shrinks at step 1 and is
    restored from ``all_books`` when the user goes back to step 1.
    """

    all_books: tuple[Book, ...]
    candidates: list[Book]
    current_step: Step = Step.TIME_INVESTMENT
    selections: Selections = field(default_factory=Selections)
    recommendation: Recommendation | NoMatch | None = None

    @classmethod
    def fresh(cls, backlog: Sequence[Book]) -> "DecisionState":
        return cls(all_books=tuple(backlog), candidates=list(backlog))


def apply_time_filter(books: Sequence[Book], selection: TimeInvestment | None) -> list[Book]:
    """Keep books whose length fits the chosen time investment.

    ``any`` (or no choice) returns every book in its original order. Books
    with an unknown page count only survive under ``any``.
    """
    if selection is None or selection is TimeInvestment.ANY:
        return list(books)
    wanted = ReadingTime(selection.value)
    return [book for book in books if reading_time(book.pages) == wanted]


class DecisionFunnel:
    """Session controller that owns the single DecisionState of a traversal.

    The behaviour profile is computed by the caller once per session and is
    kept across back-steps and resets.
    """

    def __init__(
        self,
        backlog: Sequence[Book],
        profile: BehaviourProfile,
        *,
        rng: random.Random | None = None,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        self._backlog = tuple(backlog)
        self._profile = profile
        self._rng = rng or random.Random()
        self._clock = clock
        self._state = DecisionState.fresh(self._backlog)
        if not self._backlog:
            logger.info("Funnel started with an empty backlog; no viable candidates")

    @property
    def state(self) -> DecisionState:
        return self._state

    @property
    def profile(self) -> BehaviourProfile:
        return self._profile

    @property
    def current_step(self) -> Step:
        return self._state.current_step

    @property
    def selections(self) -> Selections:
        return self._state.selections

    @property
    def has_viable_candidates(self) -> bool:
        return bool(self._state.all_books)

    def candidate_count(self) -> int:
        """Size of the live candidate set (only meaningful at step 1)."""
        return len(self._state.candidates)

    def advance(self, step: Step, value: str) -> AdvanceResult:
        """Record the user's choice for the current step and move forward.

        Step 1 is rejected with reason ``no-candidates`` when its filter would
        leave nothing; the state is left untouched so the caller can offer
        relax_constraint(). Step 4 scores the candidates and moves to RESULT.

        Raises:
            InvalidStepError: If `step` is not the current step.
            InvalidSelectionError: If `value` is not an option for `step`.
        """
        state = self._state
        step = Step(step)
        if step != state.current_step:
            raise InvalidStepError(
                f"Cannot advance {step.name} while at {state.current_step.name}"
            )
        choice = parse_option(step, value)

        if step is Step.TIME_INVESTMENT:
            filtered = apply_time_filter(state.candidates, choice)
            if not filtered:
                logger.debug("Time filter %s left no candidates", choice)
                return AdvanceResult(ok=False, reason=NO_CANDIDATES)
            state.candidates = filtered

        state.selections = state.selections.with_choice(step, choice)
        state.current_step = Step(step + 1)
        logger.debug("Advanced past %s with %s", step.name, choice)

        if state.current_step is Step.RESULT:
            self.run_final_recommendation()
        return AdvanceResult(ok=True)

    def relax_constraint(self) -> None:
        """Undo the time filter: restore every backlog book and clear the step-1 choice."""
        state = self._state
        state.candidates = list(state.all_books)
        state.selections = state.selections.with_choice(Step.TIME_INVESTMENT, None)

    def go_back(self, target: Step) -> None:
        """Return to an earlier step, clearing every choice made after it.

        Going back to step 1 also restores the full backlog and clears the
        step-1 choice. A target that is not earlier than the current step is
        ignored.
        """
        state = self._state
        target = Step(target)
        if target >= state.current_step:
            logger.debug("Ignoring go_back to %s from %s", target.name, state.current_step.name)
            return

        state.selections = state.selections.cleared_after(target)
        if target is Step.TIME_INVESTMENT:
            self.relax_constraint()
        state.recommendation = None
        state.current_step = target

    def run_final_recommendation(self) -> Recommendation | NoMatch:
        """Score the current candidates and pick one, or report no match."""
        state = self._state
        ranked = rank_candidates(
            state.candidates, self._profile, state.selections, now=self._clock()
        )
        winner = pick_recommendation(ranked, self._rng)
        result: Recommendation | NoMatch
        if winner is None:
            result = NoMatch()
        else:
            result = Recommendation(
                book=winner.book, score=winner.score, total_candidates=len(ranked)
            )
        state.recommendation = result
        return result

    def reset(self) -> None:
        """Start over with a fresh state; the profile is reused as-is."""
        self._state = DecisionState.fresh(self._backlog)
