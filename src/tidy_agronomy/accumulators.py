"""Running totals of daily thermal units and threshold-crossing dates.

Both operations work per group (location x season by default) and never let
one group's rows influence another's. The caller is responsible for sorting
rows by time within each group before accumulating; the aggregator keeps
the existing row order.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

import numpy as np
import pandas as pd

from tidy_agronomy.frames import (
    datetime_key,
    require_columns,
    require_numeric,
    resolve_date_col,
    resolve_group_vars,
)

logger = logging.getLogger(__name__)


def cumulative_degree_units(
    data: pd.DataFrame,
    unit_col: str,
    group_vars: Sequence[str] | None = None,
    cum_col: str | None = None,
) -> pd.DataFrame:
    """Append the running sum of ``unit_col`` within each group.

    A missing unit value makes the running total missing from that row to
    the end of its group; it is not treated as zero.

    Args:
        data: Table of daily unit values, sorted by time within each group.
        unit_col: Numeric column to accumulate (e.g. ``"daily_gdu"``).
        group_vars: Grouping columns. Defaults to the configured
            location/season keys.
        cum_col: Output column name. Defaults to ``"cumulative_" + unit_col``.

    Returns:
        A new DataFrame with the same rows, order and index plus ``cum_col``.

    Raises:
        MissingColumnError: If ``unit_col`` or a grouping column is absent.
        ColumnTypeError: If ``unit_col`` is not numeric.
    """
    keys = resolve_group_vars(group_vars)
    require_columns(data, [unit_col, *keys])
    require_numeric(data, unit_col)
    if cum_col is None:
        cum_col = f"cumulative_{unit_col}"

    by = [data[key] for key in keys]
    running = data[unit_col].groupby(by, sort=False, dropna=False).cumsum()
    gaps = data[unit_col].isna().astype(int).groupby(by, sort=False, dropna=False).cumsum()
    if (gaps > 0).any():
        running = running.mask(gaps.to_numpy() > 0)
    return data.assign(**{cum_col: running.to_numpy()})


def threshold_cross_date(
    data: pd.DataFrame,
    cumulative_col: str,
    threshold: float,
    date_col: str | None = None,
    group_vars: Sequence[str] | None = None,
) -> pd.DataFrame:
    """Find, per group, the first row whose cumulative value reaches ``threshold``.

    Rows with ``cumulative_col >= threshold`` qualify; of those, the row with
    the earliest ``date_col`` is kept. Date ties keep the row that comes first
    in the input. Groups that never reach the threshold are left out.

    Args:
        data: Table with a cumulative column and a date column.
        cumulative_col: Column of running totals (e.g. ``"cumulative_daily_gdu"``).
        threshold: Value to meet or exceed.
        date_col: Date/datetime column. Defaults to the configured ``time``.
        group_vars: Grouping columns. Defaults to the configured
            location/season keys.

    Returns:
        One full input row per crossing group, sorted by group keys.
    """
    date_col = resolve_date_col(date_col)
    keys = resolve_group_vars(group_vars)
    require_columns(data, [cumulative_col, date_col, *keys])
    require_numeric(data, cumulative_col)
    order = datetime_key(data, date_col)

    qualifies = (data[cumulative_col] >= threshold).to_numpy() & order.notna().to_numpy()
    positions = np.flatnonzero(qualifies)
    candidates = data.iloc[positions]
    by_date = order.iloc[positions].argsort(kind="stable").to_numpy()

    first = candidates.iloc[by_date].groupby(keys, sort=False, dropna=False).head(1)
    result = first.sort_values(keys, kind="stable").reset_index(drop=True)

    if logger.isEnabledFor(logging.DEBUG):
        logger.debug(
            "threshold %s on %r: %d of %d groups crossed",
            threshold,
            cumulative_col,
            len(result),
            data.groupby(keys, dropna=False).ngroups,
        )
    return result


def day_of_year_normals(
    data: pd.DataFrame,
    cumulative_col: str,
    date_col: str | None = None,
) -> pd.DataFrame:
    """Mean and standard deviation of a cumulative column by day-of-year.

    Used to build a multi-season "normal" band to compare one season against.
    Pass the rows of a single location spanning several seasons.

    Returns:
        Columns ``doy``, ``mean_<col>``, ``std_<col>`` (0.0 for a single
        season) and ``n_years``, sorted by ``doy``.
    """
    date_col = resolve_date_col(date_col)
    require_columns(data, [cumulative_col, date_col])
    require_numeric(data, cumulative_col)
    order = datetime_key(data, date_col)

    frame = pd.DataFrame(
        {"doy": order.dt.dayofyear.to_numpy(), "value": data[cumulative_col].to_numpy()}
    ).dropna()
    stats = frame.groupby(frame["doy"].astype(int))["value"].agg(["mean", "std", "count"])

    return pd.DataFrame(
        {
            "doy": stats.index.to_numpy(),
            f"mean_{cumulative_col}": stats["mean"].to_numpy(),
            f"std_{cumulative_col}": stats["std"].fillna(0.0).to_numpy(),
            "n_years": stats["count"].to_numpy(),
        }
    )
