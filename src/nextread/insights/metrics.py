# ABOUTME: Library-wide descriptive metrics: overview, taste profile, and backlog insights.
# ABOUTME: Feeds the `nextread stats` command; scoring never depends on it.

from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from datetime import datetime
from enum import StrEnum
from typing import TypeVar

from nextread.catalog.dates import extract_year, parse_date
from nextread.catalog.types import Book, read_books, unread_books, want_to_read_books
from nextread.insights.buckets import Era, LengthBucket, era_bucket, length_bucket
from nextread.insights.stats import average, count_by, median, most_frequent, percentage, top_n

_TOP_AUTHOR_LIMIT = 3
_HIGH_RATING = 4
_LOW_RATING = 2
_DAYS_PER_YEAR = 365.25

B = TypeVar("B", bound=StrEnum)


@dataclass
class BucketShare:
    count: int = 0
    percentage: float = 0.0


@dataclass
class RatingBehaviour:
    high_rated_pct: float = 0.0
    low_rated_pct: float = 0.0
    most_common_rating: float | None = None


@dataclass
class TasteProfile:
    length_distribution: dict[LengthBucket, BucketShare] = field(default_factory=dict)
    era_distribution: dict[Era, BucketShare] = field(default_factory=dict)
    rating_behaviour: RatingBehaviour = field(default_factory=RatingBehaviour)
    author_diversity: float = 0.0


@dataclass
class BacklogInsights:
    """Summary of the want-to-read list. Every field is empty for an empty backlog."""

    total: int = 0
    oldest: Book | None = None
    average_age_years: float | None = None
    longest: Book | None = None
    shortest: Book | None = None
    highest_rated: Book | None = None
    era_counts: dict[Era, int] = field(default_factory=dict)
    length_counts: dict[LengthBucket, int] = field(default_factory=dict)


@dataclass
class LibraryMetrics:
    total_books: int
    books_read: int
    books_unread: int
    want_to_read: int
    average_pages: float
    average_user_rating: float
    median_publication_year: float
    top_authors: list[tuple[str, int]]
    books_per_year: dict[int, int]
    taste_profile: TasteProfile
    backlog: BacklogInsights


def _bucket_counts(
    books: Sequence[Book],
    bucket_fn: Callable[[int], B | None],
    value_fn: Callable[[Book], int],
    order: type[B],
) -> dict[B, int]:
    counts = {member: 0 for member in order}
    for book in books:
        bucket = bucket_fn(value_fn(book))
        if bucket is not None:
            counts[bucket] += 1
    return counts


def _distribution(counts: dict[B, int]) -> dict[B, BucketShare]:
    """Attach percentages computed over valid (bucketed) books only."""
    valid = sum(counts.values())
    return {
        bucket: BucketShare(count=count, percentage=percentage(count, valid))
        for bucket, count in counts.items()
    }


def length_counts(books: Sequence[Book]) -> dict[LengthBucket, int]:
    return _bucket_counts(books, length_bucket, lambda b: b.pages, LengthBucket)


def era_counts(books: Sequence[Book]) -> dict[Era, int]:
    return _bucket_counts(books, era_bucket, lambda b: b.publication_year, Era)


def rating_behaviour(books: Sequence[Book]) -> RatingBehaviour:
    ratings = [b.user_rating for b in books if b.user_rating > 0]
    if not ratings:
        return RatingBehaviour()
    return RatingBehaviour(
        high_rated_pct=percentage(sum(1 for r in ratings if r >= _HIGH_RATING), len(ratings)),
        low_rated_pct=percentage(sum(1 for r in ratings if r <= _LOW_RATING), len(ratings)),
        most_common_rating=most_frequent(ratings),
    )


def author_diversity(books: Sequence[Book]) -> float:
    """Unique authors divided by books with an author, rounded to two decimals."""
    authors = [b.author for b in books if b.author is not None]
    if not authors:
        return 0.0
    return round(len(set(authors)) / len(authors), 2)


def taste_profile(books: Sequence[Book]) -> TasteProfile:
    return TasteProfile(
        length_distribution=_distribution(length_counts(books)),
        era_distribution=_distribution(era_counts(books)),
        rating_behaviour=rating_behaviour(books),
        author_diversity=author_diversity(books),
    )


def books_per_year(books: Sequence[Book]) -> dict[int, int]:
    """Count finished books by the year found in their date_read string."""
    years = (extract_year(b.date_read) for b in books)
    return count_by(year for year in years if year is not None)


def backlog_age_years(book: Book, now: datetime) -> float | None:
    added = parse_date(book.date_added)
    if added is None:
        return None
    return (now - added).total_seconds() / 86400 / _DAYS_PER_YEAR


def backlog_insights(backlog: Sequence[Book], now: datetime | None = None) -> BacklogInsights:
    """Summarize the want-to-read list.

    Args:
        backlog: Unread books tagged as want-to-read.
        now: Reference time for backlog ages; defaults to the current time.
    """
    if not backlog:
        return BacklogInsights()

    now = now or datetime.now()

    dated = [(parse_date(b.date_added), b) for b in backlog]
    dated = [(added, b) for added, b in dated if added is not None]
    oldest = min(dated, key=lambda pair: pair[0])[1] if dated else None

    ages = [age for b in backlog if (age := backlog_age_years(b, now)) is not None]
    average_age = round(average(ages), 1) if ages else None

    with_pages = [b for b in backlog if b.pages > 0]
    rated = [b for b in backlog if b.average_rating > 0]

    return BacklogInsights(
        total=len(backlog),
        oldest=oldest,
        average_age_years=average_age,
        longest=max(with_pages, key=lambda b: b.pages) if with_pages else None,
        shortest=min(with_pages, key=lambda b: b.pages) if with_pages else None,
        highest_rated=max(rated, key=lambda b: b.average_rating) if rated else None,
        era_counts=era_counts(backlog),
        length_counts=length_counts(backlog),
    )


def compute_metrics(books: Sequence[Book], now: datetime | None = None) -> LibraryMetrics:
    """Compute every library metric shown by `nextread stats`.

    Read-book statistics ignore zero (unknown) values so a missing page count
    or rating never drags an average down.
    """
    finished = read_books(books)
    backlog = want_to_read_books(books)

    return LibraryMetrics(
        total_books=len(books),
        books_read=len(finished),
        books_unread=len(unread_books(books)),
        want_to_read=len(backlog),
        average_pages=average([b.pages for b in finished if b.pages > 0]),
        average_user_rating=average([b.user_rating for b in finished if b.user_rating > 0]),
        median_publication_year=median(
            [b.publication_year for b in finished if b.publication_year > 0]
        ),
        top_authors=top_n([b.author for b in finished if b.author], _TOP_AUTHOR_LIMIT),
        books_per_year=books_per_year(finished),
        taste_profile=taste_profile(finished),
        backlog=backlog_insights(backlog, now),
    )
