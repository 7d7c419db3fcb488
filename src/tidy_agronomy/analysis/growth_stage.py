"""Crop growth stage from cumulative thermal units.

Each crop has an ordered threshold table (see ``schemas.StageScheme``). A
value is assigned the stage whose interval contains it; each boundary is
inclusive for the stage it starts, so ``corn_growth_stage(2000)`` is ``R6``.
Values that cannot be compared (``None``, ``NaN``, strings) get a missing
label instead of raising.

Default tables:

    Corn     Pre-VE <100, VE <300, V6 <900, VT <1000, R1 <2000, R6
    Soybean  Pre-Emergence <50, VE <200, V3 <500, R1 <700, R5 <900, R7
    Wheat    Haun scale, Pre-Emergence <180 ... 11.6 <1825, 12.0
    Canola   Planting <=0, Seedling <142 ... Late Ripening <1041, Ripe
    Cotton   Germination <100, Seedling <250, Squaring <500,
             Flowering <800, Boll Formation <1200, Maturity

References:
    - McMaster & Wilhelm (1997), Growing degree-days: one equation, two
      interpretations. Agric. For. Meteorol. 87(4), 291-300.
    - Bauer et al. (1984), Use of growing-degree days to determine spring
      wheat growth stages. NDSU Ext. EB-37.
    - NDAWN Wheat / Canola Growing Degree Days help pages.

Soybean and cotton defaults are illustrative; calibrate them locally by
passing ``thresholds=``.
"""

from __future__ import annotations

import numbers
from collections.abc import Mapping
from typing import Any

import numpy as np
import pandas as pd
from pandas.api import types as ptypes

from tidy_agronomy.schemas import Crop, StageScheme

CORN_SCHEME = StageScheme(
    crop="corn",
    thresholds={"VE": 100, "V6": 300, "VT": 900, "R1": 1000, "R6": 2000},
    labels=("Pre-VE", "VE", "V6", "VT", "R1", "R6"),
)

SOYBEAN_SCHEME = StageScheme(
    crop="soybean",
    thresholds={"VE": 50, "V3": 200, "R1": 500, "R5": 700, "R7": 900},
    labels=("Pre-Emergence", "VE", "V3", "R1", "R5", "R7"),
)

WHEAT_SCHEME = StageScheme(
    crop="wheat",
    thresholds={
        "Emergence": 180,
        "Stage1": 252,
        "Stage2": 395,
        "Stage3": 538,
        "Stage4": 681,
        "Stage5": 824,
        "Stage6": 967,
        "Stage7": 1110,
        "Stage7.5": 1181,
        "Stage8": 1255,
        "Stage9": 1396,
        "Stage10": 1539,
        "Stage10.2": 1567,
        "Stage11": 1682,
        "Stage11.4": 1739,
        "Stage11.6": 1768,
        "Stage12": 1825,
    },
    labels=(
        "Pre-Emergence",
        "0.5",
        "1.0",
        "2.0",
        "3.0",
        "4.0",
        "5.0",
        "6.0",
        "7.0",
        "7.5",
        "8.0",
        "9.0",
        "10.0",
        "10.2",
        "11.0",
        "11.4",
        "11.6",
        "12.0",
    ),
    units="GDD (F), Haun stage labels",
)

CANOLA_SCHEME = StageScheme(
    crop="canola",
    thresholds={
        "Seedling": 142,
        "Rosette3": 220,
        "Rosette4": 404,
        "EarlyBud": 460,
        "LateBud": 518,
        "EarlyFlower": 647,
        "LateFlower": 776,
        "EarlyRipening": 908,
        "LateRipening": 1041,
    },
    labels=(
        "Seedling",
        "Rosette - 3rd Leaf",
        "Rosette - 4th Leaf",
        "Early Bud",
        "Late Bud",
        "Early Flower",
        "Late Flower",
        "Early Ripening",
        "Late Ripening",
        "Ripe",
    ),
    zero_label="Planting",
    units="GDD (F)",
)

COTTON_SCHEME = StageScheme(
    crop="cotton",
    thresholds={"Seedling": 100, "Squaring": 250, "Flowering": 500, "Boll": 800, "Maturity": 1200},
    labels=("Germination", "Seedling", "Squaring", "Flowering", "Boll Formation", "Maturity"),
)

DEFAULT_SCHEMES: dict[Crop, StageScheme] = {
    Crop.CORN: CORN_SCHEME,
    Crop.SOYBEAN: SOYBEAN_SCHEME,
    Crop.WHEAT: WHEAT_SCHEME,
    Crop.CANOLA: CANOLA_SCHEME,
    Crop.COTTON: COTTON_SCHEME,
}


def scheme_for(crop: Crop | str, thresholds: Mapping[str, float] | None = None) -> StageScheme:
    """Return the default scheme for ``crop`` with optional boundary overrides."""
    return DEFAULT_SCHEMES[Crop(crop)].with_overrides(thresholds)


def stage_labels(crop: Crop | str) -> list[str]:
    """All stage labels for ``crop``, earliest first."""
    return DEFAULT_SCHEMES[Crop(crop)].stage_order


def _comparable(values: Any) -> np.ndarray:
    """Float array of ``values`` with anything non-numeric replaced by NaN."""
    if isinstance(values, pd.Series):
        if ptypes.is_numeric_dtype(values) and not ptypes.is_bool_dtype(values):
            return values.to_numpy(dtype=float, na_value=np.nan)
        raw = values.to_numpy(dtype=object)
    else:
        raw = np.asarray(values, dtype=object).ravel()
    return np.array(
        [
            float(v) if isinstance(v, numbers.Real) and not isinstance(v, (bool, np.bool_)) else np.nan
            for v in raw
        ],
        dtype=float,
    )


def classify(values: Any, scheme: StageScheme) -> Any:
    """Map cumulative values onto the stages of ``scheme``.

    Args:
        values: A scalar, sequence, ndarray or Series of cumulative units.
        scheme: The threshold table to apply.

    Returns:
        For a scalar, the stage label or ``None``. Otherwise a Series of
        ordered categoricals (categories in stage order, missing as NaN);
        a Series input keeps its index.
    """
    is_scalar = not isinstance(values, pd.Series) and np.ndim(values) == 0
    arr = _comparable(values)

    codes = np.searchsorted(np.asarray(scheme.bounds, dtype=float), arr, side="right")
    if scheme.zero_label is not None:
        codes = np.where(arr <= 0, 0, codes + 1)
    codes = np.where(np.isnan(arr), -1, codes)

    stages = scheme.stage_order
    if is_scalar:
        return stages[codes[0]] if codes[0] >= 0 else None

    index = values.index if isinstance(values, pd.Series) else None
    return pd.Series(
        pd.Categorical.from_codes(codes, categories=stages, ordered=True),
        index=index,
        name="growth_stage",
    )


def corn_growth_stage(cum_gdu: Any, thresholds: Mapping[str, float] | None = None) -> Any:
    """Corn stage from cumulative GDU.

    Threshold names: ``VE``, ``V6``, ``VT``, ``R1``, ``R6``.
    """
    return classify(cum_gdu, CORN_SCHEME.with_overrides(thresholds))


def soybean_growth_stage(cum_gdu: Any, thresholds: Mapping[str, float] | None = None) -> Any:
    """Soybean stage from cumulative GDU.

    Threshold names: ``VE``, ``V3``, ``R1``, ``R5``, ``R7``.
    """
    return classify(cum_gdu, SOYBEAN_SCHEME.with_overrides(thresholds))


def wheat_growth_stage(cum_gdd: Any, thresholds: Mapping[str, float] | None = None) -> Any:
    """Wheat Haun stage from cumulative GDD (F).

    NDAWN computes wheat GDD with a 32 F base and a daily maximum capped at
    70 F before Haun stage 2.0 and 95 F after. Threshold names run
    ``Emergence``, ``Stage1`` ... ``Stage12`` (with ``Stage7.5``,
    ``Stage10.2``, ``Stage11.4`` and ``Stage11.6``).
    """
    return classify(cum_gdd, WHEAT_SCHEME.with_overrides(thresholds))


def canola_growth_stage(cum_gdd: Any, thresholds: Mapping[str, float] | None = None) -> Any:
    """Canola stage from cumulative GDD (F, 41 F base, no upper limit).

    Values ``<= 0`` are ``Planting``. Threshold names are the stage each
    boundary ends: ``Seedling``, ``Rosette3``, ``Rosette4``, ``EarlyBud``,
    ``LateBud``, ``EarlyFlower``, ``LateFlower``, ``EarlyRipening``,
    ``LateRipening``.
    """
    return classify(cum_gdd, CANOLA_SCHEME.with_overrides(thresholds))


def cotton_growth_stage(cum_gdu: Any, thresholds: Mapping[str, float] | None = None) -> Any:
    """Cotton stage from cumulative GDU.

    Threshold names: ``Seedling``, ``Squaring``, ``Flowering``, ``Boll``,
    ``Maturity``.
    """
    return classify(cum_gdu, COTTON_SCHEME.with_overrides(thresholds))


def growth_stage(
    cum_values: Any,
    crop: Crop | str,
    thresholds: Mapping[str, float] | None = None,
) -> Any:
    """Classify ``cum_values`` with the named crop's table.

    Raises:
        ValueError: If ``crop`` is not a known crop.
    """
    return classify(cum_values, scheme_for(crop, thresholds))
