# ABOUTME: Closed option sets for each funnel step and the Selections value object.
# ABOUTME: Raw strings from the CLI are validated into these enums at the funnel boundary.

from dataclasses import dataclass, replace
from enum import IntEnum, StrEnum


class InvalidSelectionError(ValueError):
    """Raised when a value is not one of the options offered at a step."""


class Step(IntEnum):
    TIME_INVESTMENT = 1
    BEHAVIOUR_PREFERENCE = 2
    BACKLOG_PREFERENCE = 3
    RISK_PREFERENCE = 4
    RESULT = 5


class TimeInvestment(StrEnum):
    QUICK = "quick"
    MODERATE = "moderate"
    LONG = "long"
    ANY = "any"


class BehaviourPreference(StrEnum):
    FAMILIAR = "familiar"
    DIFFERENT = "different"
    ANY = "any"


class BacklogPreference(StrEnum):
    OLD = "old"
    NEW = "new"
    ANY = "any"


class RiskPreference(StrEnum):
    SAFE = "safe"
    RISKY = "risky"


STEP_OPTIONS: dict[Step, type[StrEnum]] = {
    Step.TIME_INVESTMENT: TimeInvestment,
    Step.BEHAVIOUR_PREFERENCE: BehaviourPreference,
    Step.BACKLOG_PREFERENCE: BacklogPreference,
    Step.RISK_PREFERENCE: RiskPreference,
}

# Selections attribute that holds each step's choice.
_STEP_FIELDS: dict[Step, str] = {
    Step.TIME_INVESTMENT: "time_investment",
    Step.BEHAVIOUR_PREFERENCE: "behaviour",
    Step.BACKLOG_PREFERENCE: "backlog",
    Step.RISK_PREFERENCE: "risk",
}


def parse_option(step: Step, value: str | StrEnum) -> StrEnum:
    """Validate a raw choice for a step and return its enum member.

    Raises:
        InvalidSelectionError: If the step takes no selection or the value is
            not one of its options.
    """
    options = STEP_OPTIONS.get(step)
    if options is None:
        raise InvalidSelectionError(f"{step.name} does not take a selection")
    try:
        return options(str(value).strip().lower())
    except ValueError as exc:
        allowed = ", ".join(member.value for member in options)
        raise InvalidSelectionError(
            f"{value!r} is not a valid {step.name} option (expected one of: {allowed})"
        ) from exc


@dataclass(frozen=True)
class Selections:
    """The user's choice at each step; None means not chosen yet."""

    time_investment: TimeInvestment | None = None
    behaviour: BehaviourPreference | None = None
    backlog: BacklogPreference | None = None
    risk: RiskPreference | None = None

    def get(self, step: Step) -> StrEnum | None:
        return getattr(self, _STEP_FIELDS[step])

    def with_choice(self, step: Step, choice: StrEnum | None) -> "Selections":
        return replace(self, **{_STEP_FIELDS[step]: choice})

    def cleared_after(self, step: Step) -> "Selections":
        """Copy with every selection belonging to a step later than `step` removed."""
        return replace(
            self, **{name: None for later, name in _STEP_FIELDS.items() if later > step}
        )
