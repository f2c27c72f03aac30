"""Configuration models for weighted tables."""

import math
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from .errors import InvalidWeightError


class RedistributionPolicy(str, Enum):
    """Who receives the weight freed up when an adaptive table selects an option."""

    EXCLUDE_SELECTED = "exclude_selected"
    INCLUDE_SELECTED = "include_selected"


class TableConfig(BaseModel):
    """Options shared by every table."""

    model_config = ConfigDict(frozen=True)

    strict_weights: bool = Field(
        default=False,
        description="Reject negative, NaN and infinite weights on insert.",
    )

    def check_weight(self, ident: object, weight: float) -> float:
        """Return ``weight`` as a float, validating it when strict."""

        weight = float(weight)
        if self.strict_weights and (not math.isfinite(weight) or weight < 0):
            raise InvalidWeightError(ident, weight)
        return weight


class AdaptiveTableConfig(TableConfig):
    """Options for history-aware tables."""

    redistribution: RedistributionPolicy = Field(
        default=RedistributionPolicy.INCLUDE_SELECTED,
        description=(
            "Whether the option that was just drawn takes a share of its own "
            "freed weight."
        ),
    )


__all__ = ["AdaptiveTableConfig", "RedistributionPolicy", "TableConfig"]
