# ABOUTME: Decision package: the four-step preference funnel and its scoring engine.
# ABOUTME: Exports the funnel controller, step options, and recommendation result types.

from nextread.decision.funnel import (
    AdvanceResult,
    DecisionFunnel,
    DecisionState,
    InvalidStepError,
)
from nextread.decision.options import (
    BacklogPreference,
    BehaviourPreference,
    InvalidSelectionError,
    RiskPreference,
    Selections,
    Step,
    TimeInvestment,
)
from nextread.decision.scoring import (
    NoMatch,
    Recommendation,
    ScoredBook,
    pick_recommendation,
    rank_candidates,
    score_book,
)

__all__ = [
    "AdvanceResult",
    "BacklogPreference",
    "BehaviourPreference",
    "DecisionFunnel",
    "DecisionState",
    "InvalidSelectionError",
    "InvalidStepError",
    "NoMatch",
    "Recommendation",
    "RiskPreference",
    "ScoredBook",
    "Selections",
    "Step",
    "TimeInvestment",
    "pick_recommendation",
    "rank_candidates",
    "score_book",
]
