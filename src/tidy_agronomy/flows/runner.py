"""Driver for the phenology DAG."""

from __future__ import annotations

import logging
import math
from collections.abc import Sequence

import pandas as pd
from hamilton import base, driver

from tidy_agronomy.config import get_settings
from tidy_agronomy.flows import phenology as phenology_dag
from tidy_agronomy.schemas import Crop
from tidy_agronomy.units.models import DEFAULT_CORN_BASE_F, DEFAULT_CORN_UPPER_F

logger = logging.getLogger(__name__)

DEFAULT_OUTPUTS: tuple[str, ...] = ("staged_units", "stage_calendar")


def build_driver() -> driver.Driver:
    """Create a Hamilton driver over the phenology DAG module."""
    return driver.Driver(
        {}, phenology_dag, adapter=base.SimplePythonGraphAdapter(base.DictResult())
    )


def run_phenology(
    hourly_weather: pd.DataFrame,
    crop: Crop | str = Crop.CORN,
    base_temp: float = DEFAULT_CORN_BASE_F,
    upper_cutoff: float | None = DEFAULT_CORN_UPPER_F,
    final_vars: Sequence[str] = DEFAULT_OUTPUTS,
    location_column: str | None = None,
    season_column: str | None = None,
    time_column: str | None = None,
    temp_column: str | None = None,
) -> dict[str, pd.DataFrame]:
    """Run the DAG from hourly weather to the requested outputs.

    Args:
        hourly_weather: Sub-daily observations with location, season, time
            and temperature columns.
        crop: Crop whose stage table to apply.
        base_temp: GDU base temperature.
        upper_cutoff: GDU upper cap; ``None`` disables capping.
        final_vars: Node names to compute (any of ``daily_weather``,
            ``daily_units``, ``cumulative_units``, ``staged_units``,
            ``stage_calendar``).
        location_column, season_column, time_column, temp_column: Column
            names; ``None`` uses the configured defaults.

    Returns:
        Mapping of node name -> DataFrame.
    """
    settings = get_settings()
    inputs = {
        "hourly_weather": hourly_weather,
        "crop": Crop(crop).value,
        "base_temp": float(base_temp),
        "upper_cutoff": math.inf if upper_cutoff is None else float(upper_cutoff),
        "location_column": location_column or settings.location_column,
        "season_column": season_column or settings.season_column,
        "time_column": time_column or settings.date_column,
        "temp_column": temp_column or settings.temp_column,
    }

    dr = build_driver()
    results = dr.execute(list(final_vars), inputs=inputs)
    logger.debug(
        "Phenology DAG for %s: %s",
        inputs["crop"],
        {name: len(frame) for name, frame in results.items()},
    )
    return results
