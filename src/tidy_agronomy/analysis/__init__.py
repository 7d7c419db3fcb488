"""Phenology logic built on cumulative unit tables.

Modules:
  - growth_stage: cumulative units -> crop growth-stage labels
  - phenology: cumulative table + crop -> stage column, stage-reached dates

Dependency rule: analysis/ consumes the outputs of ``units`` and
``accumulators``. It never reads files and never configures logging.

Adding a crop
-------------
1. Add the crop to ``schemas.Crop``.
2. Define its ``StageScheme`` in ``growth_stage.py`` and register it in
   ``DEFAULT_SCHEMES``; add a ``<crop>_growth_stage`` wrapper.
3. Re-export below and add cases to ``tests/test_growth_stage.py``.
"""

from tidy_agronomy.analysis.growth_stage import (
    CANOLA_SCHEME,
    CORN_SCHEME,
    COTTON_SCHEME,
    DEFAULT_SCHEMES,
    SOYBEAN_SCHEME,
    WHEAT_SCHEME,
    canola_growth_stage,
    classify,
    corn_growth_stage,
    cotton_growth_stage,
    growth_stage,
    scheme_for,
    soybean_growth_stage,
    stage_labels,
    wheat_growth_stage,
)
from tidy_agronomy.analysis.phenology import add_growth_stage, stage_dates

__all__ = [
    "CANOLA_SCHEME",
    "CORN_SCHEME",
    "COTTON_SCHEME",
    "DEFAULT_SCHEMES",
    "SOYBEAN_SCHEME",
    "WHEAT_SCHEME",
    "add_growth_stage",
    "canola_growth_stage",
    "classify",
    "corn_growth_stage",
    "cotton_growth_stage",
    "growth_stage",
    "scheme_for",
    "soybean_growth_stage",
    "stage_dates",
    "stage_labels",
    "wheat_growth_stage",
]
