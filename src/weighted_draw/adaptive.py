"""History-aware weighted tables.

People asked to write down a "random" sequence produce something far more even
than a true random source would: they remember what has already come up. Given
an option with 1-in-10 odds, independent trials still leave a 30% chance of not
seeing it within 10 draws, and a 12% chance of missing it for 20.

``AdaptiveWeightTable`` imitates the human version. Whenever an option is drawn
its working weight drops to zero and the freed weight is handed out to the
other options in proportion to their original weights. Every trial an option
sits out makes it a little more likely next time, and options with bigger
original weights recover faster. Repeats are still possible, just rarer, and
rare options turn up at steadier intervals than independent trials allow.
"""

import logging
import random
from collections.abc import Iterator, Mapping
from typing import Generic

from .config import AdaptiveTableConfig, RedistributionPolicy
from .protocol import K, UniformSource
from .table import WeightTable, pick, sum_weights

logger = logging.getLogger(__name__)


class AdaptiveWeightTable(Generic[K]):
    """A weighted table whose odds shift towards options that are "due".

    The table keeps two sets of weights with identical keys: the original
    weights, which only change on ``insert``, and the working weights that
    ``draw`` selects from and mutates.
    """

    def __init__(
        self,
        rng: UniformSource | None = None,
        *,
        config: AdaptiveTableConfig | None = None,
    ) -> None:
        self.rng: UniformSource = rng if rng is not None else random.Random()
        self.config = config or AdaptiveTableConfig()
        self._base: WeightTable[K] = WeightTable(self.rng, config=self.config)
        self._working: dict[K, float] = {}
        self._working_total = 0.0

    @classmethod
    def from_mapping(
        cls,
        mapping: Mapping[K, float],
        rng: UniformSource | None = None,
        *,
        config: AdaptiveTableConfig | None = None,
    ) -> "AdaptiveWeightTable[K]":
        """Build a table holding every entry of ``mapping``."""
        table: AdaptiveWeightTable[K] = cls(rng, config=config)
        table._base = WeightTable.from_mapping(mapping, table.rng, config=table.config)
        table._working = dict(table._base.items())
        table._working_total = table._base.total
        return table

    # ------------------------------------------------------------------
    # Selection capability
    # ------------------------------------------------------------------

    def insert(self, ident: K, weight: float) -> "AdaptiveWeightTable[K]":
        """Add ``ident`` with ``weight`` as both its original and working weight.

        Re-inserting an existing option replaces its original weight and
        resets its working weight to match.
        """
        self._base.insert(ident, weight)
        weight = self._base.weight(ident)
        self._working[ident] = weight
        self._working_total = sum_weights(self._working.values())
        return self

    def count(self) -> int:
        return len(self._working)

    def keys(self) -> list[K]:
        return list(self._working)

    def draw(self) -> K:
        """Select an option from the working weights and update them.

        The selected option's working weight is zeroed and then redistributed
        according to ``config.redistribution``. Raises ``ExhaustionError``
        when no working weight is positive.
        """
        ident, weight = pick(self._working, self._working_total, self.rng.random())
        self._working[ident] = 0.0
        self._redistribute(ident, weight)
        self._working_total = sum_weights(self._working.values())
        return ident

    def pure_draw(self, rng: UniformSource | None = None) -> K:
        """Select an option from the original weights without touching history.

        Uses ``rng`` when given and the process-wide ``random`` module
        otherwise, never the table's own generator.
        """
        source = rng if rng is not None else random
        return self._base.select(source.random())

    def reset(self) -> None:
        """Forget all history, restoring every working weight to its original."""
        logger.debug("Resetting working weights for %d options", len(self._working))
        self._working = dict(self._base.items())
        self._working_total = self._base.total

    # ------------------------------------------------------------------
    # Redistribution
    # ------------------------------------------------------------------

    def _redistribute(self, selected: K, amount: float) -> None:
        # Each option's share is its original weight over the original total;
        # excluding the selected option renormalises over everyone else.
        exclude = self.policy is RedistributionPolicy.EXCLUDE_SELECTED
        if exclude:
            share_total = sum_weights(
                original for ident, original in self._base.items() if ident != selected
            )
        else:
            share_total = self._base.total
        if not share_total > 0:
            logger.debug(
                "No options can receive weight %r freed by %r; dropping it",
                amount,
                selected,
            )
            return
        for ident, original in self._base.items():
            if exclude and ident == selected:
                continue
            self._working[ident] += amount * (original / share_total)

    # ------------------------------------------------------------------
    # Inspection
    # ------------------------------------------------------------------

    @property
    def policy(self) -> RedistributionPolicy:
        return self.config.redistribution

    @property
    def base(self) -> WeightTable[K]:
        """The table of original weights. Treat it as read-only."""
        return self._base

    @property
    def total(self) -> float:
        return self._base.total

    @property
    def working_total(self) -> float:
        return self._working_total

    def weight(self, ident: K) -> float:
        """The original weight for ``ident``. Raises ``KeyError`` if absent."""
        return self._base.weight(ident)

    def working_weight(self, ident: K) -> float:
        """The current weight for ``ident``. Raises ``KeyError`` if absent."""
        return self._working[ident]

    def items(self) -> list[tuple[K, float]]:
        return self._base.items()

    def working_items(self) -> list[tuple[K, float]]:
        return list(self._working.items())

    def __len__(self) -> int:
        return len(self._working)

    def __contains__(self, ident: object) -> bool:
        return ident in self._working

    def __iter__(self) -> Iterator[K]:
        return iter(list(self._working))

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(original={dict(self._base.items())!r}, "
            f"working={self._working!r})"
        )


__all__ = ["AdaptiveWeightTable"]
