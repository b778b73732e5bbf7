# ABOUTME: Fixed-threshold length and era buckets used by both metrics and scoring.
# ABOUTME: Zero page counts and years mean "unknown" and never land in a bucket.

from enum import StrEnum

_SHORT_MAX = 300  # exclusive
_MEDIUM_MAX = 500  # inclusive
_LONG_MAX = 800  # inclusive
_CLASSIC_BEFORE = 1950
_LATE_20TH_MAX = 1999


class LengthBucket(StrEnum):
    SHORT = "short"
    MEDIUM = "medium"
    LONG = "long"
    EPIC = "epic"


class ReadingTime(StrEnum):
    """Coarser three-way length split used by the funnel and the profile."""

    QUICK = "quick"
    MODERATE = "moderate"
    LONG = "long"


class Era(StrEnum):
    CLASSIC = "classic"
    LATE_20TH = "late20th"
    MODERN = "modern"


def length_bucket(pages: int) -> LengthBucket | None:
    """Bucket a page count: short <300, medium 300-500, long 501-800, epic >800."""
    if pages <= 0:
        return None
    if pages < _SHORT_MAX:
        return LengthBucket.SHORT
    if pages <= _MEDIUM_MAX:
        return LengthBucket.MEDIUM
    if pages <= _LONG_MAX:
        return LengthBucket.LONG
    return LengthBucket.EPIC


def reading_time(pages: int) -> ReadingTime | None:
    """Bucket a page count: quick <300, moderate 300-500, long >500."""
    if pages <= 0:
        return None
    if pages < _SHORT_MAX:
        return ReadingTime.QUICK
    if pages <= _MEDIUM_MAX:
        return ReadingTime.MODERATE
    return ReadingTime.LONG


def era_bucket(year: int) -> Era | None:
    """Bucket a publication year: classic <1950, late20th 1950-1999, modern 2000+."""
    if year <= 0:
        return None
    if year < _CLASSIC_BEFORE:
        return Era.CLASSIC
    if year <= _LATE_20TH_MAX:
        return Era.LATE_20TH
    return Era.MODERN
