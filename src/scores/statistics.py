"""
Summary statistics over the scores of a single game.

All results are integers: averages truncate instead of rounding, so they can be transmitted as decimal strings
without ever producing a fractional part.
"""

from collections import Counter
from dataclasses import dataclass, field
from typing import Iterable


@dataclass(frozen=True)
class ScoreStatistics:
    mean: int
    median: int
    mode: list[int] = field(default_factory=list)


# Returned as-is when a game has no scores yet (nothing to divide by)
EMPTY_STATISTICS = ScoreStatistics(mean=0, median=0, mode=[0])


def compute_statistics(values: Iterable[int]) -> ScoreStatistics:
    """Mean, median and mode of a collection of scores, in any order."""
    ordered = sorted(values)
    if not ordered:
        return ScoreStatistics(
            mean=EMPTY_STATISTICS.mean,
            median=EMPTY_STATISTICS.median,
            mode=list(EMPTY_STATISTICS.mode),
        )
    return ScoreStatistics(
        mean=mean(ordered), median=median(ordered), mode=mode(ordered)
    )


def mean(values: list[int]) -> int:
    """Truncated average. Expects a non-empty list."""
    return _truncating_division(sum(values), len(values))


def median(ordered: list[int]) -> int:
    """
    Middle value of an ascending list. Expects a non-empty list.
    ----
    For an even number of values, the truncated average of the two middle values.
    """
    mid = len(ordered) // 2
    if len(ordered) % 2 == 0:
        return _truncating_division(ordered[mid - 1] + ordered[mid], 2)
    return ordered[mid]


def mode(values: list[int]) -> list[int]:
    """
    All values sharing the highest frequency, ascending.

    If no value occurs more than once there is no mode and the list is empty.
    """
    frequency = Counter(values)
    if not frequency:
        return []

    max_frequency = max(frequency.values())
    if max_frequency == 1:
        return []
    return sorted(value for value, count in frequency.items() if count == max_frequency)


def _truncating_division(numerator: int, denominator: int) -> int:
    """Integer division rounding toward zero (Python's // rounds toward minus infinity)."""
    quotient = abs(numerator) // abs(denominator)
    return quotient if (numerator >= 0) == (denominator > 0) else -quotient
