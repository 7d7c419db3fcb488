"""Phenology signals from cumulative unit tables.

Combines the threshold-crossing detector with a crop's stage table to answer
"on what date did each location/season reach each growth stage?", and tags
rows with their current stage.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence

import pandas as pd

from tidy_agronomy.accumulators import threshold_cross_date
from tidy_agronomy.analysis.growth_stage import classify, scheme_for
from tidy_agronomy.frames import require_columns, resolve_date_col, resolve_group_vars
from tidy_agronomy.schemas import Crop


def add_growth_stage(
    data: pd.DataFrame,
    cumulative_col: str,
    crop: Crop | str,
    stage_col: str = "growth_stage",
    thresholds: Mapping[str, float] | None = None,
) -> pd.DataFrame:
    """Return a copy of ``data`` with an ordered categorical stage column."""
    require_columns(data, [cumulative_col])
    stages = classify(data[cumulative_col], scheme_for(crop, thresholds))
    return data.assign(**{stage_col: stages.array})


def stage_dates(
    data: pd.DataFrame,
    cumulative_col: str,
    crop: Crop | str,
    date_col: str | None = None,
    group_vars: Sequence[str] | None = None,
    thresholds: Mapping[str, float] | None = None,
) -> pd.DataFrame:
    """First date each group reached each stage boundary of ``crop``.

    Args:
        data: Table with a cumulative unit column, sorted by time per group.
        cumulative_col: Running-total column to test against the boundaries.
        crop: Crop whose stage table to use.
        date_col: Date column. Defaults to the configured ``time``.
        group_vars: Grouping columns. Defaults to location/season.
        thresholds: Optional boundary overrides for the crop table.

    Returns:
        Columns: group keys, ``stage`` (ordered categorical), ``date_col`` and
        ``cumulative_col``. Stages a group never reached are absent. A
        ``zero_label`` stage (canola's ``Planting``) and the first label after
        it (``Seedling``, which starts just above zero) have no boundary, so
        they never appear; the first reported canola stage is the one starting
        at the first boundary.
    """
    scheme = scheme_for(crop, thresholds)
    keys = resolve_group_vars(group_vars)
    date_col = resolve_date_col(date_col)
    require_columns(data, [cumulative_col, date_col, *keys])
    columns = [*keys, date_col, cumulative_col]

    reached = [
        threshold_cross_date(data, cumulative_col, bound, date_col, keys)[columns].assign(stage=label)
        for bound, label in zip(scheme.bounds, scheme.labels[1:], strict=True)
    ]
    result = pd.concat(reached, ignore_index=True)
    result["stage"] = pd.Categorical(result["stage"], categories=scheme.stage_order, ordered=True)
    result = result.sort_values([*keys, "stage"], kind="stable").reset_index(drop=True)
    return result[[*keys, "stage", date_col, cumulative_col]]
