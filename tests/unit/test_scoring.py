# ABOUTME: Unit tests for candidate scoring and recommendation selection.
# ABOUTME: Pins each bonus rule, the risky window, ranking order, and near-tie picks.

import random
from datetime import datetime

import pytest

from nextread.catalog import Book
from nextread.decision import (
    BacklogPreference,
    BehaviourPreference,
    RiskPreference,
    ScoredBook,
    Selections,
    pick_recommendation,
    rank_candidates,
    score_book,
)
from nextread.decision.scoring import backlog_bonus, near_tie_pool, risk_bonus
from nextread.insights import BehaviourProfile, Era, ReadingTime

NOW = datetime(2026, 1, 1)

PROFILE = BehaviourProfile(
    dominant_length=ReadingTime.MODERATE,
    dominant_era=Era.MODERN,
    top_authors=("Author A",),
    avg_rating=4.0,
)


def _book(
    *,
    pages: int = 400,
    year: int = 2015,
    author: str = "Author A",
    rating: float = 4.0,
    added: str | None = None,
) -> Book:
    return Book(
        title=f"{author} {pages}",
        author=author,
        pages=pages,
        publication_year=year,
        average_rating=rating,
        date_added=added,
        shelves="to-read",
    )


class TestScoreBook:
    """Tests for score_book with individual preferences."""

    def test_base_score_is_average_rating(self) -> None:
        """No profile and no selections leaves just the average rating."""
        book = _book(rating=4.5)
        assert score_book(book, BehaviourProfile(), Selections(), now=NOW) == 4.5

    def test_missing_rating_scores_zero(self) -> None:
        assert score_book(_book(rating=0.0), PROFILE, Selections(), now=NOW) == 0.0

    def test_familiar_matches_length_era_and_author(self) -> None:
        selections = Selections(behaviour=BehaviourPreference.FAMILIAR)
        score = score_book(_book(), PROFILE, selections, now=NOW)
        assert score == pytest.approx(4.0 + 1.5 + 1.5 + 0.5)

    def test_different_rewards_departures(self) -> None:
        selections = Selections(behaviour=BehaviourPreference.DIFFERENT)
        book = _book(pages=250, year=1960, author="Author B")
        assert score_book(book, PROFILE, selections, now=NOW) == pytest.approx(6.5)

    def test_unknown_length_and_era_get_no_behaviour_bonus(self) -> None:
        selections = Selections(behaviour=BehaviourPreference.DIFFERENT)
        book = _book(pages=0, year=0, author="Author A")
        assert score_book(book, PROFILE, selections, now=NOW) == 4.0

    def test_empty_profile_is_neutral(self) -> None:
        selections = Selections(behaviour=BehaviourPreference.FAMILIAR)
        assert score_book(_book(), BehaviourProfile(), selections, now=NOW) == 4.0

    def test_any_behaviour_adds_nothing(self) -> None:
        selections = Selections(behaviour=BehaviourPreference.ANY)
        assert score_book(_book(), PROFILE, selections, now=NOW) == 4.0


class TestBacklogBonus:
    """Tests for backlog_bonus age thresholds."""

    @pytest.mark.parametrize(
        ("added", "old", "new"),
        [
            ("2021/06/01", 2.0, 0.0),
            ("2024/06/01", 1.0, 1.0),
            ("2025/09/01", 0.0, 2.0),
        ],
    )
    def test_age_bands(self, added: str, old: float, new: float) -> None:
        book = _book(added=added)
        assert backlog_bonus(book, BacklogPreference.OLD, NOW) == old
        assert backlog_bonus(book, BacklogPreference.NEW, NOW) == new

    def test_missing_date_scores_zero(self) -> None:
        assert backlog_bonus(_book(added=None), BacklogPreference.OLD, NOW) == 0.0
        assert backlog_bonus(_book(added="soon"), BacklogPreference.NEW, NOW) == 0.0

    def test_any_scores_zero(self) -> None:
        assert backlog_bonus(_book(added="2010/01/01"), BacklogPreference.ANY, NOW) == 0.0


class TestRiskBonus:
    """Tests for risk_bonus."""

    def test_safe_adds_half_the_rating(self) -> None:
        assert risk_bonus(_book(rating=4.4), PROFILE, RiskPreference.SAFE) == pytest.approx(2.2)

    def test_risky_inside_window(self) -> None:
        """A rating inside [3.7, 4.1] near the reader's average earns the bonus."""
        bonus = risk_bonus(_book(rating=3.9), PROFILE, RiskPreference.RISKY)
        assert bonus == pytest.approx(1.5 - 0.1 * 0.3)

    def test_risky_outside_window(self) -> None:
        assert risk_bonus(_book(rating=4.3), PROFILE, RiskPreference.RISKY) == 0.0
        assert risk_bonus(_book(rating=3.5), PROFILE, RiskPreference.RISKY) == 0.0

    def test_risky_above_profile_ceiling(self) -> None:
        """Ratings at or above 110% of the profile average get nothing."""
        low_profile = BehaviourProfile(
            dominant_length=ReadingTime.QUICK, dominant_era=Era.MODERN, avg_rating=3.5
        )
        assert risk_bonus(_book(rating=4.0), low_profile, RiskPreference.RISKY) == 0.0

    def test_risky_without_profile_average(self) -> None:
        assert risk_bonus(_book(rating=3.9), BehaviourProfile(), RiskPreference.RISKY) == 0.0


class TestRanking:
    """Tests for rank_candidates and pick_recommendation."""

    def test_rank_sorts_descending_and_stable(self) -> None:
        books = [
            _book(rating=3.0, author="X"),
            _book(rating=4.5, author="Y"),
            _book(rating=3.0, author="Z"),
        ]
        ranked = rank_candidates(books, BehaviourProfile(), Selections(), now=NOW)
        assert [s.book.author for s in ranked] == ["Y", "X", "Z"]

    def test_near_tie_pool(self) -> None:
        ranked = [ScoredBook(_book(author=a), s) for a, s in (("A", 5.0), ("B", 4.6), ("C", 3.0))]
        assert [s.book.author for s in near_tie_pool(ranked)] == ["A", "B"]

    def test_pick_never_leaves_near_tie_pool(self) -> None:
        ranked = [ScoredBook(_book(author=a), s) for a, s in (("A", 5.0), ("B", 4.6), ("C", 3.0))]
        picks = set()
        for seed in range(50):
            winner = pick_recommendation(ranked, random.Random(seed))
            assert winner is not None
            picks.add(winner.book.author)
        assert "C" not in picks
        assert picks == {"A", "B"}

    def test_clear_winner_always_wins(self) -> None:
        ranked = [ScoredBook(_book(author="A"), 6.0), ScoredBook(_book(author="B"), 5.0)]
        for seed in range(10):
            assert pick_recommendation(ranked, random.Random(seed)).book.author == "A"

    def test_pick_from_empty_is_none(self) -> None:
        assert pick_recommendation([]) is None

    def test_same_seed_same_pick(self) -> None:
        ranked = [ScoredBook(_book(author=a), 5.0) for a in "ABCD"]
        first = pick_recommendation(ranked, random.Random(7))
        second = pick_recommendation(ranked, random.Random(7))
        assert first is second
