# ABOUTME: Unit tests for funnel step options and the Selections value object.
# ABOUTME: Validates option parsing and clearing of later-step choices.

import pytest

from nextread.decision import (
    BacklogPreference,
    BehaviourPreference,
    InvalidSelectionError,
    RiskPreference,
    Selections,
    Step,
    TimeInvestment,
)
from nextread.decision.options import parse_option


class TestParseOption:
    """Tests for parse_option."""

    def test_valid_value(self) -> None:
        assert parse_option(Step.TIME_INVESTMENT, "quick") is TimeInvestment.QUICK

    def test_case_and_whitespace_insensitive(self) -> None:
        assert parse_option(Step.RISK_PREFERENCE, "  SAFE ") is RiskPreference.SAFE

    def test_enum_member_passes_through(self) -> None:
        assert parse_option(Step.BACKLOG_PREFERENCE, BacklogPreference.OLD) is (
            BacklogPreference.OLD
        )

    def test_option_from_another_step_rejected(self) -> None:
        """'familiar' belongs to step 2, not step 1."""
        with pytest.raises(InvalidSelectionError, match="expected one of"):
            parse_option(Step.TIME_INVESTMENT, "familiar")

    def test_result_step_takes_no_selection(self) -> None:
        with pytest.raises(InvalidSelectionError):
            parse_option(Step.RESULT, "any")

    def test_invalid_selection_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            parse_option(Step.RISK_PREFERENCE, "reckless")


class TestSelections:
    """Tests for the Selections value object."""

    def test_starts_empty(self) -> None:
        selections = Selections()
        for step in (
            Step.TIME_INVESTMENT,
            Step.BEHAVIOUR_PREFERENCE,
            Step.BACKLOG_PREFERENCE,
            Step.RISK_PREFERENCE,
        ):
            assert selections.get(step) is None

    def test_with_choice_returns_copy(self) -> None:
        original = Selections()
        updated = original.with_choice(Step.BEHAVIOUR_PREFERENCE, BehaviourPreference.FAMILIAR)
        assert original.behaviour is None
        assert updated.behaviour is BehaviourPreference.FAMILIAR

    def test_cleared_after(self) -> None:
        """Only choices for later steps are cleared."""
        full = Selections(
            time_investment=TimeInvestment.QUICK,
            behaviour=BehaviourPreference.DIFFERENT,
            backlog=BacklogPreference.NEW,
            risk=RiskPreference.RISKY,
        )
        cleared = full.cleared_after(Step.BEHAVIOUR_PREFERENCE)
        assert cleared.time_investment is TimeInvestment.QUICK
        assert cleared.behaviour is BehaviourPreference.DIFFERENT
        assert cleared.backlog is None
        assert cleared.risk is None
