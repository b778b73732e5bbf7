# ABOUTME: Composite scoring of backlog books and final recommendation selection.
# ABOUTME: Base quality plus behaviour, backlog-age, and risk bonuses; near ties are randomized.

import random
from collections.abc import Sequence
from dataclasses import dataclass
from datetime import datetime

from nextread.catalog.dates import parse_date
from nextread.catalog.types import Book
from nextread.decision.options import (
    BacklogPreference,
    BehaviourPreference,
    RiskPreference,
    Selections,
)
from nextread.insights.buckets import era_bucket, reading_time
from nextread.insights.profile import BehaviourProfile

# Behaviour alignment bonuses
_FAMILIAR_LENGTH_BONUS = 1.5
_FAMILIAR_ERA_BONUS = 1.5
_DIFFERENT_LENGTH_BONUS = 1.0
_DIFFERENT_ERA_BONUS = 1.0
_AUTHOR_BONUS = 0.5

# Backlog age thresholds (years) and bonuses
_DAYS_PER_YEAR = 365
_OLD_BACKLOG_YEARS = 3
_RECENT_BACKLOG_YEARS = 1
_STRONG_AGE_BONUS = 2.0
_MILD_AGE_BONUS = 1.0

# Risk preference policy. The risky window constants are fixed; do not tune.
_SAFE_RATING_WEIGHT = 0.5
_RISKY_MIN_RATING = 3.7
_RISKY_MAX_RATING = 4.1
_RISKY_AVG_CEILING = 1.1
_RISKY_BASE_BONUS = 1.5
_RISKY_DISTANCE_PENALTY = 0.3

# Candidates within this many points of the top score share the win.
_NEAR_TIE_MARGIN = 0.5


@dataclass(frozen=True)
class ScoredBook:
    book: Book
    score: float


@dataclass(frozen=True)
class Recommendation:
    """The chosen book, its score, and how many candidates were scored."""

    book: Book
    score: float
    total_candidates: int


@dataclass(frozen=True)
class NoMatch:
    """Sentinel result when there were no candidates to score."""

    no_match: bool = True


def behaviour_bonus(
    book: Book, profile: BehaviourProfile, preference: BehaviourPreference
) -> float:
    """Reward books that match (familiar) or depart from (different) the profile.

    Length and era only count when both the book and the profile know them.
    An empty profile gives no bonus at all.
    """
    if profile.is_empty or preference is BehaviourPreference.ANY:
        return 0.0

    length = reading_time(book.pages)
    era = era_bucket(book.publication_year)
    known_author = book.author in profile.top_authors
    bonus = 0.0

    if preference is BehaviourPreference.FAMILIAR:
        if profile.dominant_length and length is not None and length == profile.dominant_length:
            bonus += _FAMILIAR_LENGTH_BONUS
        if profile.dominant_era and era is not None and era == profile.dominant_era:
            bonus += _FAMILIAR_ERA_BONUS
        if known_author:
            bonus += _AUTHOR_BONUS
    elif preference is BehaviourPreference.DIFFERENT:
        if profile.dominant_length and length is not None and length != profile.dominant_length:
            bonus += _DIFFERENT_LENGTH_BONUS
        if profile.dominant_era and era is not None and era != profile.dominant_era:
            bonus += _DIFFERENT_ERA_BONUS
        if not known_author:
            bonus += _AUTHOR_BONUS

    return bonus


def backlog_bonus(book: Book, preference: BacklogPreference, now: datetime) -> float:
    """Reward books by how long they have sat on the backlog.

    Age uses a 365-day year. A missing or unparseable date_added scores 0.
    """
    if preference is BacklogPreference.ANY:
        return 0.0
    added = parse_date(book.date_added)
    if added is None:
        return 0.0

    years = (now - added).total_seconds() / 86400 / _DAYS_PER_YEAR

    if preference is BacklogPreference.OLD:
        if years >= _OLD_BACKLOG_YEARS:
            return _STRONG_AGE_BONUS
        if years >= _RECENT_BACKLOG_YEARS:
            return _MILD_AGE_BONUS
    elif preference is BacklogPreference.NEW:
        if years < _RECENT_BACKLOG_YEARS:
            return _STRONG_AGE_BONUS
        if years < _OLD_BACKLOG_YEARS:
            return _MILD_AGE_BONUS
    return 0.0


def risk_bonus(book: Book, profile: BehaviourProfile, preference: RiskPreference) -> float:
    """Safe leans on the crowd rating; risky favours books near the reader's own average.

    The risky condition is applied literally: rating below 110% of the profile
    average AND inside [3.7, 4.1].
    """
    rating = book.average_rating or 0.0

    if preference is RiskPreference.SAFE:
        return rating * _SAFE_RATING_WEIGHT

    if preference is RiskPreference.RISKY and profile.avg_rating > 0:
        in_window = _RISKY_MIN_RATING <= rating <= _RISKY_MAX_RATING
        if rating < profile.avg_rating * _RISKY_AVG_CEILING and in_window:
            distance = abs(rating - profile.avg_rating)
            return _RISKY_BASE_BONUS - distance * _RISKY_DISTANCE_PENALTY
    return 0.0


def score_book(
    book: Book,
    profile: BehaviourProfile,
    selections: Selections,
    *,
    now: datetime | None = None,
) -> float:
    """Score a candidate: its average rating plus one bonus per chosen step.

    Args:
        book: The backlog book to score.
        profile: The reader's behaviour profile (may be empty).
        selections: Choices made so far; unset steps contribute nothing.
        now: Reference time for backlog age; defaults to the current time.
    """
    score = book.average_rating or 0.0

    if selections.behaviour is not None:
        score += behaviour_bonus(book, profile, selections.behaviour)
    if selections.backlog is not None:
        score += backlog_bonus(book, selections.backlog, now or datetime.now())
    if selections.risk is not None:
        score += risk_bonus(book, profile, selections.risk)

    return score


def rank_candidates(
    candidates: Sequence[Book],
    profile: BehaviourProfile,
    selections: Selections,
    *,
    now: datetime | None = None,
) -> list[ScoredBook]:
    """Score every candidate and sort by score, highest first (stable)."""
    now = now or datetime.now()
    scored = [
        ScoredBook(book, score_book(book, profile, selections, now=now)) for book in candidates
    ]
    scored.sort(key=lambda s: s.score, reverse=True)
    return scored


def near_tie_pool(ranked: Sequence[ScoredBook]) -> list[ScoredBook]:
    """Every ranked entry scoring within the near-tie margin of the top score."""
    if not ranked:
        return []
    floor = ranked[0].score - _NEAR_TIE_MARGIN
    return [s for s in ranked if s.score >= floor]


def pick_recommendation(
    ranked: Sequence[ScoredBook], rng: random.Random | None = None
) -> ScoredBook | None:
    """Choose the winner from a ranked list.

    When more than one candidate sits within the near-tie margin of the top
    score, one of them is chosen uniformly at random so the same book does
    not win every time; otherwise the top scorer wins outright.
    """
    pool = near_tie_pool(ranked)
    if not pool:
        return None
    if len(pool) == 1:
        return pool[0]
    return (rng or random.Random()).choice(pool)
