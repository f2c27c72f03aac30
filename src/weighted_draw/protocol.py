"""Structural interfaces shared by both table types."""

from collections.abc import Hashable
from typing import Protocol, TypeVar, runtime_checkable

K = TypeVar("K", bound=Hashable)


@runtime_checkable
class UniformSource(Protocol):
    """Anything that hands out uniform floats in [0, 1).

    ``random.Random`` instances and the ``random`` module itself both qualify.
    """

    def random(self) -> float: ...


@runtime_checkable
class ProbabilityTable(Protocol[K]):
    """The selection capability implemented by every table.

    Code written against this protocol works with either ``WeightTable`` or
    ``AdaptiveWeightTable``.
    """

    def insert(self, ident: K, weight: float) -> "ProbabilityTable[K]": ...

    def count(self) -> int: ...

    def keys(self) -> list[K]: ...

    def draw(self) -> K: ...
