"""Helpers for running many trials and summarizing the results.

These are handy for checking that a table behaves the way you expect, e.g.
comparing how streaky ``WeightTable`` and ``AdaptiveWeightTable`` are on the
same weights.
"""

from collections import Counter
from collections.abc import Hashable, Sequence

from .protocol import K, ProbabilityTable


def run_trials(table: ProbabilityTable[K], trials: int) -> list[K]:
    """Draw from ``table`` ``trials`` times in a row."""
    return [table.draw() for _ in range(trials)]


def frequencies(table: ProbabilityTable[K], trials: int) -> dict[K, float]:
    """Empirical selection frequency of every option over ``trials`` draws.

    Options that were never drawn are reported with frequency ``0.0``.
    """
    if trials <= 0:
        raise ValueError(f"trials must be positive, got {trials}")
    counts: Counter[K] = Counter({key: 0 for key in table.keys()})
    counts.update(run_trials(table, trials))
    return {key: count / trials for key, count in counts.items()}


def longest_streak(results: Sequence[Hashable]) -> int:
    """Length of the longest run of identical consecutive results."""
    best = 0
    current = 0
    previous: object = None
    for i, value in enumerate(results):
        if i > 0 and value == previous:
            current += 1
        else:
            current = 1
        previous = value
        best = max(best, current)
    return best


def longest_gap(results: Sequence[K]) -> dict[K, int]:
    """For each value, the most trials in a row that went by without it.

    Gaps before the first and after the last occurrence count too.
    """
    last_seen: dict[K, int] = {}
    gaps: dict[K, int] = {}
    for i, value in enumerate(results):
        gap = i - last_seen.get(value, -1) - 1
        gaps[value] = max(gaps.get(value, 0), gap)
        last_seen[value] = i
    end = len(results)
    for value, i in last_seen.items():
        gaps[value] = max(gaps[value], end - i - 1)
    return gaps


def repeat_rate(results: Sequence[Hashable]) -> float:
    """Fraction of consecutive pairs where the same result came up twice."""
    if len(results) < 2:
        return 0.0
    repeats = sum(1 for a, b in zip(results, results[1:]) if a == b)
    return repeats / (len(results) - 1)


__all__ = [
    "frequencies",
    "longest_gap",
    "longest_streak",
    "repeat_rate",
    "run_trials",
]
