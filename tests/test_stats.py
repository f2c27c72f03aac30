"""Tests for the trial-running and summary helpers."""

import random

import pytest

# =============================================================================
# Trial Tests
# =============================================================================


def test_run_trials_length() -> None:
    """run_trials draws exactly the requested number of times."""
    from weighted_draw import WeightTable, run_trials

    table = WeightTable.from_mapping({"A": 1.0, "B": 1.0}, random.Random(1))
    results = run_trials(table, 50)
    assert len(results) == 50
    assert set(results) <= {"A", "B"}


def test_run_trials_zero() -> None:
    """No trials means no results."""
    from weighted_draw import WeightTable, run_trials

    table = WeightTable.from_mapping({"A": 1.0})
    assert run_trials(table, 0) == []


def test_run_trials_propagates_exhaustion() -> None:
    """Exhaustion from the table is not swallowed."""
    from weighted_draw import ExhaustionError, WeightTable, run_trials

    table: WeightTable[str] = WeightTable()
    with pytest.raises(ExhaustionError):
        run_trials(table, 3)


def test_frequencies_cover_every_key() -> None:
    """Keys that are never drawn are still reported."""
    from weighted_draw import WeightTable, frequencies

    table = WeightTable.from_mapping({"A": 1.0, "never": 0.0})
    freqs = frequencies(table, 100)
    assert freqs == {"A": 1.0, "never": 0.0}


def test_frequencies_sum_to_one() -> None:
    """Frequencies over a positive table add up to one."""
    from weighted_draw import AdaptiveWeightTable, frequencies

    table = AdaptiveWeightTable.from_mapping(
        {"first": 1.0, "second": 1.0, "third": 1.0}, random.Random(3)
    )
    freqs = frequencies(table, 10000)
    assert abs(sum(freqs.values()) - 1.0) < 1e-9
    for value in freqs.values():
        assert abs(value - 1 / 3) < 0.05


def test_frequencies_rejects_non_positive_trials() -> None:
    """A frequency needs at least one trial."""
    from weighted_draw import WeightTable, frequencies

    table = WeightTable.from_mapping({"A": 1.0})
    with pytest.raises(ValueError):
        frequencies(table, 0)


# =============================================================================
# Sequence Summary Tests
# =============================================================================


def test_longest_streak() -> None:
    """The longest run of identical values is found."""
    from weighted_draw import longest_streak

    assert longest_streak([]) == 0
    assert longest_streak(["A"]) == 1
    assert longest_streak(["A", "B", "B", "B", "A", "A"]) == 3


def test_longest_streak_counts_leading_none() -> None:
    """None is an ordinary value, not a sentinel."""
    from weighted_draw import longest_streak

    assert longest_streak([None, None, "A"]) == 2


def test_longest_gap() -> None:
    """Gaps include the stretch before the first and after the last occurrence."""
    from weighted_draw import longest_gap

    results = ["A", "B", "B", "B", "A", "C"]
    assert longest_gap(results) == {"A": 3, "B": 2, "C": 5}


def test_longest_gap_empty() -> None:
    """An empty sequence has no gaps."""
    from weighted_draw import longest_gap

    assert longest_gap([]) == {}


def test_repeat_rate() -> None:
    """Repeat rate is the share of consecutive pairs that match."""
    from weighted_draw import repeat_rate

    assert repeat_rate([]) == 0.0
    assert repeat_rate(["A"]) == 0.0
    assert repeat_rate(["A", "A", "B", "B", "C"]) == 0.5


def test_adaptive_gaps_shorter_than_memoryless() -> None:
    """History-aware draws keep rare options from disappearing for long."""
    from weighted_draw import AdaptiveWeightTable, WeightTable, longest_gap, run_trials

    weights = {"rare": 1.0, "common": 9.0}
    memoryless = run_trials(WeightTable.from_mapping(weights, random.Random(5)), 5000)
    adaptive = run_trials(
        AdaptiveWeightTable.from_mapping(weights, random.Random(5)), 5000
    )
    assert longest_gap(adaptive)["rare"] < longest_gap(memoryless)["rare"]
