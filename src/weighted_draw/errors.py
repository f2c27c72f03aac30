"""Exceptions raised by weighted tables."""


class WeightedDrawError(Exception):
    """Base class for all errors raised by this package."""


class ExhaustionError(WeightedDrawError, LookupError):
    """No option could be selected.

    Raised when the table is empty, when every weight is zero or negative,
    or when an adaptive table's working weights have all collapsed to zero.
    """

    def __init__(self, message: str = "Generated random outside of possible range") -> None:
        super().__init__(message)


class InvalidWeightError(WeightedDrawError, ValueError):
    """A weight was rejected by strict weight validation."""

    def __init__(self, ident: object, weight: float) -> None:
        super().__init__(
            f"Weight for {ident!r} must be finite and non-negative, got {weight!r}"
        )
        self.ident = ident
        self.weight = weight
