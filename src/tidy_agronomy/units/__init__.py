"""Daily thermal unit calculators.

Public API:
  - models: default base/cutoff temperatures (degrees F)
  - compute: growing_degree_unit, stress_degree_unit, chilling_degree_unit,
             modified_average_gdu, with_degree_units
"""

from tidy_agronomy.units.compute import (
    chilling_degree_unit,
    growing_degree_unit,
    modified_average_gdu,
    stress_degree_unit,
    with_degree_units,
)
from tidy_agronomy.units.models import (
    DEFAULT_CANOLA_BASE_F,
    DEFAULT_CHILL_THRESHOLD_F,
    DEFAULT_CORN_BASE_F,
    DEFAULT_CORN_UPPER_F,
    DEFAULT_WHEAT_BASE_F,
    TemperatureLike,
)

__all__ = [
    "DEFAULT_CANOLA_BASE_F",
    "DEFAULT_CHILL_THRESHOLD_F",
    "DEFAULT_CORN_BASE_F",
    "DEFAULT_CORN_UPPER_F",
    "DEFAULT_WHEAT_BASE_F",
    "TemperatureLike",
    "chilling_degree_unit",
    "growing_degree_unit",
    "modified_average_gdu",
    "stress_degree_unit",
    "with_degree_units",
]
