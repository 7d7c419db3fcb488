"""Default temperature parameters for the unit calculators (degrees F)."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TypeAlias

import numpy as np
import pandas as pd

# Corn GDU: 50 F base, 86 F horizontal cutoff (NC State / McMaster & Wilhelm)
DEFAULT_CORN_BASE_F = 50.0
DEFAULT_CORN_UPPER_F = 86.0

# NDAWN spring wheat: 32 F base
DEFAULT_WHEAT_BASE_F = 32.0

# NDAWN canola: 41 F base, no upper limit
DEFAULT_CANOLA_BASE_F = 41.0

# Common chill-unit threshold for fruit crops
DEFAULT_CHILL_THRESHOLD_F = 45.0

# Anything a calculator accepts as a temperature input
TemperatureLike: TypeAlias = float | int | Sequence[float] | np.ndarray | pd.Series
