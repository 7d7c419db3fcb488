"""tidy_agronomy - tabular helpers for agronomic time series.

Architecture::

    units/           Daily thermal units (GDU, SDU, CDU) from temperatures
    weather.py       Hourly -> daily resampling per location/season
    accumulators.py  Running totals per group, threshold-crossing dates
    analysis/        Crop growth stages and stage-reached dates
    flows/           Hamilton DAG wiring the steps together
    schemas.py       Pydantic threshold tables
    config.py        Column-name defaults (TIDY_AGRONOMY_* env vars)

Data flow: weather table -> units -> accumulators -> analysis

All functions are pure: they take a table and return a new one. Reading
weather files is left to the caller; any loader that yields a table with a
datetime column and numeric measurement columns will do.
"""

__version__ = "0.1.0"

from tidy_agronomy.accumulators import (
    cumulative_degree_units,
    day_of_year_normals,
    threshold_cross_date,
)
from tidy_agronomy.analysis import (
    add_growth_stage,
    canola_growth_stage,
    corn_growth_stage,
    cotton_growth_stage,
    growth_stage,
    soybean_growth_stage,
    stage_dates,
    wheat_growth_stage,
)
from tidy_agronomy.config import Settings, get_settings
from tidy_agronomy.exceptions import (
    ColumnTypeError,
    MissingColumnError,
    ThresholdOrderError,
    TidyAgronomyError,
)
from tidy_agronomy.schemas import Crop, StageScheme
from tidy_agronomy.units import (
    chilling_degree_unit,
    growing_degree_unit,
    modified_average_gdu,
    stress_degree_unit,
    with_degree_units,
)
from tidy_agronomy.weather import daily_extremes, mean_daily, summarise_daily

__all__ = [
    "ColumnTypeError",
    "Crop",
    "MissingColumnError",
    "Settings",
    "StageScheme",
    "ThresholdOrderError",
    "TidyAgronomyError",
    "__version__",
    "add_growth_stage",
    "canola_growth_stage",
    "chilling_degree_unit",
    "corn_growth_stage",
    "cotton_growth_stage",
    "cumulative_degree_units",
    "daily_extremes",
    "day_of_year_normals",
    "get_settings",
    "growing_degree_unit",
    "growth_stage",
    "mean_daily",
    "modified_average_gdu",
    "soybean_growth_stage",
    "stage_dates",
    "stress_degree_unit",
    "summarise_daily",
    "threshold_cross_date",
    "wheat_growth_stage",
    "with_degree_units",
]
