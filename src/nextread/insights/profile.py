# ABOUTME: Behaviour profile builder: dominant length, era, and authors from finished books.
# ABOUTME: The profile is computed once per session and only read by the scoring engine.

from collections.abc import Sequence
from dataclasses import dataclass
from enum import StrEnum
from typing import TypeVar

from nextread.catalog.types import Book
from nextread.insights.buckets import Era, ReadingTime, era_bucket, reading_time
from nextread.insights.stats import average, top_n

_TOP_AUTHOR_LIMIT = 5

B = TypeVar("B", bound=StrEnum)


@dataclass(frozen=True)
class BehaviourProfile:
    """Snapshot of a reader's dominant patterns.

    An empty profile (no read books, or none with a known length or year)
    means no personalization is available; scoring treats it as neutral.
    """

    dominant_length: ReadingTime | None = None
    dominant_era: Era | None = None
    top_authors: tuple[str, ...] = ()
    avg_rating: float = 0.0

    @property
    def is_empty(self) -> bool:
        return self.dominant_length is None and self.dominant_era is None


def _dominant(buckets: Sequence[B | None], order: type[B]) -> B | None:
    """Bucket with the strictly greatest count; ties go to the earlier enum member."""
    counts = {member: 0 for member in order}
    for bucket in buckets:
        if bucket is not None:
            counts[bucket] += 1

    best: B | None = None
    best_count = 0
    for member in order:
        if counts[member] > best_count:
            best, best_count = member, counts[member]
    return best


def build_profile(read_books: Sequence[Book]) -> BehaviourProfile:
    """Derive a BehaviourProfile from the reader's finished books.

    Args:
        read_books: Books with a date_read value. Order matters only for
            breaking ties between equally frequent authors (first seen wins).

    Returns:
        The profile, empty when there is nothing to learn from.
    """
    if not read_books:
        return BehaviourProfile()

    dominant_length = _dominant([reading_time(b.pages) for b in read_books], ReadingTime)
    dominant_era = _dominant([era_bucket(b.publication_year) for b in read_books], Era)

    authors = [b.author for b in read_books if b.author]
    top_authors = tuple(author for author, _ in top_n(authors, _TOP_AUTHOR_LIMIT))

    ratings = [b.average_rating for b in read_books if b.average_rating > 0]

    return BehaviourProfile(
        dominant_length=dominant_length,
        dominant_era=dominant_era,
        top_authors=top_authors,
        avg_rating=float(average(ratings)),
    )
