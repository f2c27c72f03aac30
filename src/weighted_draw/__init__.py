"""Weighted random tables.

``WeightTable`` draws options independently in proportion to their weights.
``AdaptiveWeightTable`` draws from the same kind of table but remembers recent
results, so sequences come out more evenly spread than independent trials.
"""

from weighted_draw.adaptive import AdaptiveWeightTable
from weighted_draw.config import AdaptiveTableConfig, RedistributionPolicy, TableConfig
from weighted_draw.errors import ExhaustionError, InvalidWeightError, WeightedDrawError
from weighted_draw.protocol import ProbabilityTable, UniformSource
from weighted_draw.stats import (
    frequencies,
    longest_gap,
    longest_streak,
    repeat_rate,
    run_trials,
)
from weighted_draw.table import WeightTable

__version__ = "0.1.0"
__all__ = [
    "AdaptiveTableConfig",
    "AdaptiveWeightTable",
    "ExhaustionError",
    "InvalidWeightError",
    "ProbabilityTable",
    "RedistributionPolicy",
    "TableConfig",
    "UniformSource",
    "WeightTable",
    "WeightedDrawError",
    "frequencies",
    "longest_gap",
    "longest_streak",
    "repeat_rate",
    "run_trials",
]
