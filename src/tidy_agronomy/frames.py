"""Column checks shared by the tabular operations.

Every public function that takes a DataFrame validates its column arguments
here first, so the error taxonomy (missing column vs. wrong type) is the
same everywhere.
"""

from __future__ import annotations

from collections.abc import Sequence

import pandas as pd
from pandas.api import types as ptypes

from tidy_agronomy.config import get_settings
from tidy_agronomy.exceptions import ColumnTypeError, MissingColumnError


def resolve_group_vars(group_vars: str | Sequence[str] | None) -> list[str]:
    """Normalize a grouping argument to a non-empty list of column names.

    ``None`` falls back to the configured location/season keys. A bare string
    is treated as a single key.
    """
    if group_vars is None:
        return get_settings().group_vars
    if isinstance(group_vars, str):
        return [group_vars]
    keys = list(group_vars)
    if not keys:
        raise ValueError("group_vars must name at least one column")
    return keys


def resolve_date_col(date_col: str | None) -> str:
    return date_col if date_col is not None else get_settings().date_column


def require_columns(data: pd.DataFrame, columns: Sequence[str]) -> None:
    """Raise MissingColumnError listing every absent column."""
    missing = [col for col in columns if col not in data.columns]
    if missing:
        raise MissingColumnError(missing, available=[str(c) for c in data.columns])


def require_numeric(data: pd.DataFrame, column: str) -> None:
    series = data[column]
    if ptypes.is_bool_dtype(series) or not ptypes.is_numeric_dtype(series):
        raise ColumnTypeError(f"Column {column!r} must be numeric, got dtype {series.dtype}")


def require_datetime(data: pd.DataFrame, column: str) -> None:
    series = data[column]
    if not ptypes.is_datetime64_any_dtype(series):
        raise ColumnTypeError(
            f"Column {column!r} must be datetime-typed, got dtype {series.dtype}"
        )


def datetime_key(data: pd.DataFrame, column: str) -> pd.Series:
    """Return ``data[column]`` as datetime64 values for ordering.

    Accepts datetime64 columns as-is and object columns of ``date``/``datetime``
    values or ISO strings. The input column itself is never modified.
    """
    series = data[column]
    if ptypes.is_datetime64_any_dtype(series):
        return series
    if ptypes.is_numeric_dtype(series) or ptypes.is_bool_dtype(series):
        raise ColumnTypeError(f"Column {column!r} must hold dates, got dtype {series.dtype}")
    try:
        return pd.to_datetime(series)
    except (TypeError, ValueError) as exc:
        raise ColumnTypeError(f"Column {column!r} could not be read as dates: {exc}") from exc
