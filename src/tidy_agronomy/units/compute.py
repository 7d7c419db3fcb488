"""Daily thermal unit calculators (pure, vectorized, no I/O).

Formulas:

    GDU = max(min(T, upper_bound) - baseline, 0)
    SDU = lower_opt - T   if T < lower_opt
          T - upper_opt   if T > upper_opt
          0               otherwise
    CDU = max(threshold - T, 0)

Each calculator takes a scalar, a sequence, an ndarray or a Series and
returns the same shape back: ``float`` for a scalar, a Series (same index
and name) for a Series, an ndarray for anything else. Missing temperatures
stay missing (NaN).
"""

from __future__ import annotations

import numbers
from collections.abc import Callable
from typing import Any

import numpy as np
import pandas as pd
from pandas.api import types as ptypes

from tidy_agronomy.exceptions import ColumnTypeError, ThresholdOrderError
from tidy_agronomy.frames import require_columns
from tidy_agronomy.units.models import TemperatureLike


def _as_float_array(values: TemperatureLike, name: str = "temp") -> np.ndarray:
    """Convert calculator input to a float ndarray, rejecting non-numeric data."""
    if isinstance(values, pd.Series):
        if ptypes.is_numeric_dtype(values) and not ptypes.is_bool_dtype(values):
            return values.to_numpy(dtype=float, na_value=np.nan)
        raw = values.to_numpy()
    else:
        raw = np.asarray(values)

    if raw.dtype.kind in "iuf":
        return raw.astype(float)
    if raw.dtype.kind == "O" and not any(
        isinstance(v, (str, bytes, bool, np.bool_)) for v in raw.ravel()
    ):
        try:
            return raw.astype(float)
        except (TypeError, ValueError) as exc:
            raise ColumnTypeError(f"{name} must be numeric: {exc}") from exc
    raise ColumnTypeError(f"{name} must be numeric, got dtype {raw.dtype}")


def _as_bound(value: Any, name: str) -> float:
    if isinstance(value, (bool, np.bool_)) or not isinstance(value, numbers.Real):
        raise ColumnTypeError(f"{name} must be a real number, got {value!r}")
    return float(value)


def _wrap(result: np.ndarray, template: TemperatureLike) -> Any:
    """Return ``result`` in the same container shape as ``template``."""
    if isinstance(template, pd.Series):
        return pd.Series(result, index=template.index, name=template.name)
    if result.ndim == 0:
        return float(result)
    return result


def growing_degree_unit(
    temp: TemperatureLike,
    baseline: float,
    upper_bound: float | None = None,
) -> Any:
    """Compute growing degree units above ``baseline``.

    Temperatures above ``upper_bound`` are capped (horizontal cutoff), not
    zeroed. With no ``upper_bound`` the effective temperature is unbounded.

    Args:
        temp: Temperature(s), same units as the bounds.
        baseline: Base development temperature.
        upper_bound: Optional upper temperature cap.

    Returns:
        GDU (>= 0), shaped like ``temp``.
    """
    arr = _as_float_array(temp)
    base = _as_bound(baseline, "baseline")
    if upper_bound is not None:
        arr = np.minimum(arr, _as_bound(upper_bound, "upper_bound"))
    return _wrap(np.maximum(arr - base, 0.0), temp)


def stress_degree_unit(
    temp: TemperatureLike,
    upper_opt: float,
    lower_opt: float | None = None,
) -> Any:
    """Compute stress degree units outside the optimum range.

    Heat stress is the excess over ``upper_opt``. Cold stress (the deficit
    under ``lower_opt``) only counts when ``lower_opt`` is given. At most one
    branch contributes per value.

    Raises:
        ThresholdOrderError: If ``lower_opt`` is above ``upper_opt``.
    """
    arr = _as_float_array(temp)
    upper = _as_bound(upper_opt, "upper_opt")

    if lower_opt is None:
        result = np.where(arr > upper, arr - upper, 0.0)
    else:
        lower = _as_bound(lower_opt, "lower_opt")
        if lower > upper:
            raise ThresholdOrderError(
                f"lower_opt ({lower}) must not exceed upper_opt ({upper})"
            )
        result = np.select([arr < lower, arr > upper], [lower - arr, arr - upper], default=0.0)

    return _wrap(np.where(np.isnan(arr), np.nan, result), temp)


def chilling_degree_unit(temp: TemperatureLike, chilling_threshold: float) -> Any:
    """Compute chilling degree units: the deficit below ``chilling_threshold``."""
    arr = _as_float_array(temp)
    threshold = _as_bound(chilling_threshold, "chilling_threshold")
    result = np.where(arr < threshold, threshold - arr, 0.0)
    return _wrap(np.where(np.isnan(arr), np.nan, result), temp)


def modified_average_gdu(
    tmax: TemperatureLike,
    tmin: TemperatureLike,
    baseline: float,
    upper_bound: float | None = None,
) -> Any:
    """Compute daily GDU from min/max temperatures (modified average method).

        T_max_adj = min(T_max, upper_bound)
        T_min_adj = max(T_min, baseline)
        GDU       = max(0, (T_max_adj + T_min_adj) / 2 - baseline)

    ``tmax`` and ``tmin`` must broadcast against each other. The result is
    shaped like ``tmax``.
    """
    hi = _as_float_array(tmax, "tmax")
    lo = _as_float_array(tmin, "tmin")
    base = _as_bound(baseline, "baseline")
    if upper_bound is not None:
        hi = np.minimum(hi, _as_bound(upper_bound, "upper_bound"))
    lo = np.maximum(lo, base)
    return _wrap(np.maximum((hi + lo) / 2 - base, 0.0), tmax)


def with_degree_units(
    data: pd.DataFrame,
    temp_col: str,
    unit_col: str,
    calculator: Callable[..., Any],
    **params: Any,
) -> pd.DataFrame:
    """Return a copy of ``data`` with a daily unit column appended.

    Example::

        with_degree_units(daily, "mean_daily_temp", "daily_gdu",
                          growing_degree_unit, baseline=50, upper_bound=86)
    """
    require_columns(data, [temp_col])
    return data.assign(**{unit_col: calculator(data[temp_col], **params)})
