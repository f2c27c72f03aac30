"""Memoryless weighted tables.

Each option carries a relative weight and the odds of drawing it are
``weight / total``. Every trial is independent of every other trial, so an
option with even odds can come up five times in a row and still have even odds
on the sixth.
"""

import logging
import math
import random
from collections.abc import Iterable, Iterator, Mapping
from typing import Generic

from .config import TableConfig
from .errors import ExhaustionError
from .protocol import K, UniformSource

logger = logging.getLogger(__name__)


def sum_weights(weights: Iterable[float]) -> float:
    """Sum weights from scratch so replaced weights leave no rounding residue.

    Infinite and NaN weights propagate the way plain addition does.
    """
    weights = list(weights)
    if not all(math.isfinite(weight) for weight in weights):
        return sum(weights)
    try:
        return math.fsum(weights)
    except OverflowError:
        return sum(weights)


def pick(entries: Mapping[K, float], total: float, u: float) -> tuple[K, float]:
    """Find the entry whose cumulative weight bucket contains ``u * total``.

    Returns the selected identifier together with its weight. Entries are
    walked in mapping order; only the cumulative weights matter, not which
    order the buckets are laid out in.
    """
    # Written as a negation so that a NaN total is also rejected.
    if not total > 0:
        raise ExhaustionError()

    remaining = u * total
    for ident, weight in entries.items():
        if weight > remaining:
            return ident, weight
        remaining -= weight

    raise ExhaustionError()


class WeightTable(Generic[K]):
    """A table of options drawn independently in proportion to their weights.

    Weights are ratios rather than percentages: ``2, 5, 1`` gives odds of
    2/8, 5/8 and 1/8. Zero and negative weights are accepted (unless strict
    validation is configured) but can never be drawn, and negative weights
    still count towards the total.
    """

    def __init__(
        self,
        rng: UniformSource | None = None,
        *,
        config: TableConfig | None = None,
    ) -> None:
        self.rng: UniformSource = rng if rng is not None else random.Random()
        self.config = config or TableConfig()
        self._entries: dict[K, float] = {}
        self._total = 0.0

    @classmethod
    def from_mapping(
        cls,
        mapping: Mapping[K, float],
        rng: UniformSource | None = None,
        *,
        config: TableConfig | None = None,
    ) -> "WeightTable[K]":
        """Build a table holding every entry of ``mapping``."""
        table: WeightTable[K] = cls(rng, config=config)
        for ident, weight in mapping.items():
            table._entries[ident] = table.config.check_weight(ident, weight)
        table._total = sum_weights(table._entries.values())
        return table

    # ------------------------------------------------------------------
    # Selection capability
    # ------------------------------------------------------------------

    def insert(self, ident: K, weight: float) -> "WeightTable[K]":
        """Add ``ident`` with ``weight``, replacing any previous weight.

        Returns the table so that calls can be chained.
        """
        weight = self.config.check_weight(ident, weight)
        previous = self._entries.get(ident)
        if previous is not None:
            logger.debug("Replacing weight for %r: %r -> %r", ident, previous, weight)
        self._entries[ident] = weight
        self._total = sum_weights(self._entries.values())
        return self

    def count(self) -> int:
        """Number of distinct options in the table."""
        return len(self._entries)

    def keys(self) -> list[K]:
        """All options in the table. Order is not guaranteed."""
        return list(self._entries)

    def draw(self) -> K:
        """Select an option, raising ``ExhaustionError`` if none can be selected."""
        return self.select(self.rng.random())

    def select(self, u: float) -> K:
        """Select the option whose bucket contains ``u * total``.

        ``u`` is a uniform variate in [0, 1) supplied by the caller.
        """
        ident, _ = pick(self._entries, self._total, u)
        return ident

    # ------------------------------------------------------------------
    # Inspection
    # ------------------------------------------------------------------

    @property
    def total(self) -> float:
        return self._total

    def weight(self, ident: K) -> float:
        """The weight stored for ``ident``. Raises ``KeyError`` if absent."""
        return self._entries[ident]

    def items(self) -> list[tuple[K, float]]:
        return list(self._entries.items())

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, ident: object) -> bool:
        return ident in self._entries

    def __iter__(self) -> Iterator[K]:
        return iter(list(self._entries))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._entries!r})"


__all__ = ["WeightTable", "pick", "sum_weights"]
