"""Reduce sub-daily (hourly) weather to daily values.

Rows are grouped by location and season, then bucketed by the calendar day
of their timestamp. Timestamps keep their time zone, so a day runs midnight
to midnight in whatever zone the loader produced. Days without observations
produce no row; nothing is filled or interpolated.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Literal

import pandas as pd

from tidy_agronomy.frames import require_columns, require_datetime, require_numeric

if TYPE_CHECKING:
    from pandas.core.groupby import SeriesGroupBy

logger = logging.getLogger(__name__)

DailyStat = Literal["mean", "min", "max", "median", "sum"]
DAILY_STATS: tuple[str, ...] = ("mean", "min", "max", "median", "sum")


def _daily_groups(
    data: pd.DataFrame,
    location_id_column: str,
    season_column: str,
    time_column: str,
    temp_column: str,
) -> SeriesGroupBy:
    require_columns(data, [location_id_column, season_column, time_column, temp_column])
    require_datetime(data, time_column)
    require_numeric(data, temp_column)

    day = data[time_column].dt.normalize()
    return data.groupby(
        [data[location_id_column], data[season_column], day.rename(time_column)],
        sort=True,
        dropna=False,
    )[temp_column]


def summarise_daily(
    data: pd.DataFrame,
    location_id_column: str,
    season_column: str,
    time_column: str,
    temp_column: str,
    how: DailyStat = "mean",
    out_col: str | None = None,
) -> pd.DataFrame:
    """Aggregate ``temp_column`` to one value per location, season and day.

    Args:
        data: Sub-daily observations.
        location_id_column: Location identifier column.
        season_column: Season (year) column.
        time_column: Datetime column; must be datetime-typed.
        temp_column: Numeric column to aggregate.
        how: One of ``mean``, ``min``, ``max``, ``median``, ``sum``.
        out_col: Output column name. Defaults to ``"{how}_daily_temp"``.

    Returns:
        Columns location, season, ``time_column`` (midnight of the day) and
        ``out_col``, sorted by those keys.
    """
    if how not in DAILY_STATS:
        raise ValueError(f"Unknown daily aggregation {how!r}; expected one of {DAILY_STATS}")
    if out_col is None:
        out_col = f"{how}_daily_temp"

    grouped = _daily_groups(data, location_id_column, season_column, time_column, temp_column)
    daily = grouped.agg(how).rename(out_col).reset_index()
    logger.debug("Resampled %d rows to %d daily rows (%s)", len(data), len(daily), how)
    return daily


def mean_daily(
    data: pd.DataFrame,
    location_id_column: str,
    season_column: str,
    time_column: str,
    temp_column: str,
) -> pd.DataFrame:
    """Mean temperature per location, season and calendar day.

    The output temperature column is ``mean_daily_temp``.
    """
    return summarise_daily(
        data,
        location_id_column,
        season_column,
        time_column,
        temp_column,
        how="mean",
        out_col="mean_daily_temp",
    )


def daily_extremes(
    data: pd.DataFrame,
    location_id_column: str,
    season_column: str,
    time_column: str,
    temp_column: str,
) -> pd.DataFrame:
    """Daily minimum and maximum temperature (``tmin``/``tmax`` columns).

    Feed the result to ``modified_average_gdu(tmax, tmin, ...)``.
    """
    grouped = _daily_groups(data, location_id_column, season_column, time_column, temp_column)
    return grouped.agg(tmin="min", tmax="max").reset_index()
