# ABOUTME: Small numeric and frequency helpers shared by the metrics and profile builders.
# ABOUTME: Empty input always produces a zero or empty result instead of an error.

from collections.abc import Hashable, Iterable, Sequence
from typing import TypeVar

T = TypeVar("T", bound=Hashable)


def average(values: Sequence[float]) -> float:
    """Arithmetic mean, or 0 for an empty sequence."""
    if not values:
        return 0
    return sum(values) / len(values)


def median(values: Sequence[float]) -> float:
    """Median after an ascending sort, or 0 for an empty sequence.

    Even-length input averages the two middle values.
    """
    if not values:
        return 0
    ordered = sorted(values)
    mid = len(ordered) // 2
    if len(ordered) % 2 == 0:
        return (ordered[mid - 1] + ordered[mid]) / 2
    return ordered[mid]


def count_by(values: Iterable[T]) -> dict[T, int]:
    """Count occurrences, keeping first-seen insertion order."""
    counts: dict[T, int] = {}
    for value in values:
        counts[value] = counts.get(value, 0) + 1
    return counts


def most_frequent(values: Iterable[T]) -> T | None:
    """Value whose running count first reaches the highest total.

    On a tie the value that got there first wins.
    """
    counts: dict[T, int] = {}
    best: T | None = None
    best_count = 0
    for value in values:
        counts[value] = counts.get(value, 0) + 1
        if counts[value] > best_count:
            best_count = counts[value]
            best = value
    return best


def top_n(values: Iterable[T], n: int) -> list[tuple[T, int]]:
    """The n most common values with counts; equal counts keep first-seen order."""
    ranked = sorted(count_by(values).items(), key=lambda item: item[1], reverse=True)
    return ranked[:n]


def percentage(part: int, whole: int) -> float:
    """part/whole as a percentage rounded to one decimal, 0.0 when whole is 0."""
    if whole <= 0:
        return 0.0
    return round(part / whole * 100, 1)
