"""
Domain models for tidy_agronomy.

Pydantic models for the threshold tables that drive growth-stage
classification. Tables are validated on construction: boundaries must be
strictly increasing, so the stage intervals are contiguous and never
overlap.
"""

from __future__ import annotations

import math
from collections.abc import Mapping
from enum import StrEnum
from itertools import pairwise

from pydantic import BaseModel, ConfigDict, Field, model_validator

from tidy_agronomy.exceptions import ThresholdOrderError


class Crop(StrEnum):
    """Crops with a built-in growth-stage table."""

    CORN = "corn"
    SOYBEAN = "soybean"
    WHEAT = "wheat"
    CANOLA = "canola"
    COTTON = "cotton"


class StageScheme(BaseModel):
    """Ordered cumulative-unit boundaries for one crop.

    ``labels[0]`` applies below the first boundary; ``labels[i]`` applies from
    boundary ``i - 1`` (inclusive) up to boundary ``i``. The last label is the
    terminal stage. When ``zero_label`` is set it applies to values ``<= 0``
    and ``labels[0]`` starts just above zero.
    """

    model_config = ConfigDict(frozen=True)

    crop: str = Field(..., description="Crop name")
    thresholds: dict[str, float] = Field(..., min_length=1, description="Boundary name -> value")
    labels: tuple[str, ...] = Field(..., description="Stage labels in order")
    zero_label: str | None = Field(default=None, description="Label for values <= 0")
    units: str = Field(default="GDU (F)", description="Units of the cumulative values")

    @model_validator(mode="after")
    def _check_order(self) -> StageScheme:
        if len(self.labels) != len(self.thresholds) + 1:
            raise ValueError(
                f"{self.crop}: expected {len(self.thresholds) + 1} labels for "
                f"{len(self.thresholds)} thresholds, got {len(self.labels)}"
            )
        for name, value in self.thresholds.items():
            if not math.isfinite(value):
                raise ValueError(f"{self.crop}: threshold {name}={value} must be finite")
        for (prev_name, prev), (name, value) in pairwise(self.thresholds.items()):
            if value <= prev:
                raise ValueError(
                    f"{self.crop}: threshold {name}={value} must exceed {prev_name}={prev}"
                )
        if self.zero_label is not None and self.bounds[0] <= 0:
            raise ValueError(f"{self.crop}: first threshold must be positive with a zero label")
        return self

    @property
    def bounds(self) -> list[float]:
        return list(self.thresholds.values())

    @property
    def stage_order(self) -> list[str]:
        """Every label this scheme can produce, earliest stage first."""
        if self.zero_label is None:
            return list(self.labels)
        return [self.zero_label, *self.labels]

    def with_overrides(self, overrides: Mapping[str, float] | None) -> StageScheme:
        """Return a copy with some boundaries replaced.

        Raises:
            ThresholdOrderError: On unknown boundary names, non-numeric or
                non-finite values, or if the merged table is not strictly
                increasing.
        """
        if not overrides:
            return self
        unknown = sorted(set(overrides) - set(self.thresholds))
        if unknown:
            raise ThresholdOrderError(
                f"{self.crop}: unknown threshold(s) {unknown}; expected {list(self.thresholds)}"
            )
        try:
            merged = {name: float(overrides.get(name, value)) for name, value in self.thresholds.items()}
            return StageScheme(
                crop=self.crop,
                thresholds=merged,
                labels=self.labels,
                zero_label=self.zero_label,
                units=self.units,
            )
        except (TypeError, ValueError) as exc:
            raise ThresholdOrderError(str(exc)) from exc
