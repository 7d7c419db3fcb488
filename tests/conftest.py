"""Shared test fixtures."""

from __future__ import annotations

import pandas as pd
import pytest

from tidy_agronomy.config import get_settings


@pytest.fixture(autouse=True)
def fresh_settings(monkeypatch):
    """Isolate tests from TIDY_AGRONOMY_* variables and the settings cache."""
    for name in ("LOCATION_COLUMN", "SEASON_COLUMN", "DATE_COLUMN", "TEMP_COLUMN"):
        monkeypatch.delenv(f"TIDY_AGRONOMY_{name}", raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def daily_gdu_frame() -> pd.DataFrame:
    """One location/season of daily GDU (example from the package docs)."""
    return pd.DataFrame(
        {
            "locationID": ["A"] * 5,
            "Year": [2025] * 5,
            "time": pd.date_range("2025-04-01", periods=5, freq="D"),
            "daily_gdu": [0.0, 2.0, 5.0, 3.0, 4.0],
        }
    )


@pytest.fixture
def two_site_frame() -> pd.DataFrame:
    """Interleaved rows for two locations across two seasons."""
    return pd.DataFrame(
        {
            "locationID": ["A", "B", "A", "B", "A", "B", "A"],
            "Year": [2024, 2024, 2024, 2024, 2025, 2024, 2025],
            "time": pd.to_datetime(
                [
                    "2024-05-01",
                    "2024-05-01",
                    "2024-05-02",
                    "2024-05-02",
                    "2025-05-01",
                    "2024-05-03",
                    "2025-05-02",
                ]
            ),
            "daily_gdu": [1.0, 10.0, 2.0, 20.0, 5.0, 30.0, 6.0],
        }
    )
