"""Tests for settings and their use as column defaults."""

from __future__ import annotations

import pandas as pd

from tidy_agronomy.accumulators import cumulative_degree_units, threshold_cross_date
from tidy_agronomy.config import Settings, get_settings


class TestSettings:
    """Tests for Settings defaults and environment overrides."""

    def test_defaults(self):
        settings = Settings()
        assert settings.location_column == "locationID"
        assert settings.season_column == "Year"
        assert settings.date_column == "time"
        assert settings.group_vars == ["locationID", "Year"]

    def test_env_override(self, monkeypatch):
        monkeypatch.setenv("TIDY_AGRONOMY_LOCATION_COLUMN", "station")
        assert Settings().group_vars == ["station", "Year"]

    def test_get_settings_is_cached(self):
        assert get_settings() is get_settings()


class TestSettingsAsDefaults:
    """Functions fall back to settings when columns are not given."""

    def test_group_vars_from_env(self, monkeypatch):
        monkeypatch.setenv("TIDY_AGRONOMY_LOCATION_COLUMN", "station")
        monkeypatch.setenv("TIDY_AGRONOMY_SEASON_COLUMN", "season")
        monkeypatch.setenv("TIDY_AGRONOMY_DATE_COLUMN", "day")
        get_settings.cache_clear()

        df = pd.DataFrame(
            {
                "station": ["s1", "s1", "s2"],
                "season": [1, 1, 1],
                "day": pd.to_datetime(["2024-01-01", "2024-01-02", "2024-01-01"]),
                "u": [3.0, 4.0, 10.0],
            }
        )
        cum = cumulative_degree_units(df, "u")
        assert cum["cumulative_u"].tolist() == [3.0, 7.0, 10.0]

        crossed = threshold_cross_date(cum, "cumulative_u", 5)
        assert crossed["day"].tolist() == [pd.Timestamp("2024-01-02"), pd.Timestamp("2024-01-01")]
