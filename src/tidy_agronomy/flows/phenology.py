"""
Hamilton DAG: hourly weather -> daily GDU -> cumulative GDU -> phenology.

Every public function here is a DAG node; Hamilton wires them together by
parameter name. Parameters that no function produces are driver inputs:

    hourly_weather, location_column, season_column, time_column,
    temp_column, base_temp, upper_cutoff, crop

Node graph::

    hourly_weather -> daily_weather -> daily_units -> cumulative_units
                                                      |-> staged_units
                                                      |-> stage_calendar

Run it through ``tidy_agronomy.flows.runner.run_phenology``.
"""

from __future__ import annotations

import pandas as pd

from tidy_agronomy import accumulators, units, weather
from tidy_agronomy.analysis import phenology

DAILY_TEMP_COLUMN = "mean_daily_temp"
DAILY_UNIT_COLUMN = "daily_gdu"
CUMULATIVE_UNIT_COLUMN = f"cumulative_{DAILY_UNIT_COLUMN}"


def daily_weather(
    hourly_weather: pd.DataFrame,
    location_column: str,
    season_column: str,
    time_column: str,
    temp_column: str,
) -> pd.DataFrame:
    """Mean daily temperature per location and season."""
    return weather.mean_daily(
        hourly_weather, location_column, season_column, time_column, temp_column
    )


def daily_units(daily_weather: pd.DataFrame, base_temp: float, upper_cutoff: float) -> pd.DataFrame:
    """Daily GDU from the mean daily temperature."""
    return units.with_degree_units(
        daily_weather,
        DAILY_TEMP_COLUMN,
        DAILY_UNIT_COLUMN,
        units.growing_degree_unit,
        baseline=base_temp,
        upper_bound=upper_cutoff,
    )


def cumulative_units(
    daily_units: pd.DataFrame,
    location_column: str,
    season_column: str,
) -> pd.DataFrame:
    """Running GDU total per location and season.

    ``daily_weather`` is already sorted by day within each group.
    """
    return accumulators.cumulative_degree_units(
        daily_units, DAILY_UNIT_COLUMN, [location_column, season_column]
    )


def staged_units(cumulative_units: pd.DataFrame, crop: str) -> pd.DataFrame:
    """Cumulative table tagged with the crop's growth stage."""
    return phenology.add_growth_stage(cumulative_units, CUMULATIVE_UNIT_COLUMN, crop)


def stage_calendar(
    cumulative_units: pd.DataFrame,
    crop: str,
    location_column: str,
    season_column: str,
    time_column: str,
) -> pd.DataFrame:
    """Date each location/season first reached each growth stage."""
    return phenology.stage_dates(
        cumulative_units,
        CUMULATIVE_UNIT_COLUMN,
        crop,
        date_col=time_column,
        group_vars=[location_column, season_column],
    )
