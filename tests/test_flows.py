"""Tests for the Hamilton phenology DAG."""

from __future__ import annotations

import pandas as pd
import pytest

from tidy_agronomy.flows import build_driver, run_phenology


def _hourly_weather() -> pd.DataFrame:
    """Three days at two sites; constant temps make daily means obvious."""
    frames = []
    for site, temps in (("north", [60.0, 70.0, 100.0]), ("south", [40.0, 55.0, 65.0])):
        for day, temp in enumerate(temps, start=1):
            frames.append(
                pd.DataFrame(
                    {
                        "locationID": site,
                        "Year": 2025,
                        "time": pd.date_range(f"2025-05-0{day}", periods=24, freq="h"),
                        "temp": temp,
                    }
                )
            )
    return pd.concat(frames, ignore_index=True)


class TestBuildDriver:
    """Tests for DAG construction."""

    def test_lists_all_nodes(self):
        dr = build_driver()
        names = {var.name for var in dr.list_available_variables()}
        assert {
            "daily_weather",
            "daily_units",
            "cumulative_units",
            "staged_units",
            "stage_calendar",
        } <= names


class TestRunPhenology:
    """Tests for run_phenology end to end."""

    def test_default_outputs(self):
        results = run_phenology(_hourly_weather(), crop="corn")
        assert set(results) == {"staged_units", "stage_calendar"}

    def test_daily_units_and_accumulation(self):
        results = run_phenology(
            _hourly_weather(), crop="corn", final_vars=["cumulative_units"]
        )
        cum = results["cumulative_units"]
        north = cum[cum["locationID"] == "north"]
        # GDU: 60 -> 10, 70 -> 20, 100 capped at 86 -> 36
        assert north["daily_gdu"].tolist() == pytest.approx([10.0, 20.0, 36.0])
        assert north["cumulative_daily_gdu"].tolist() == pytest.approx([10.0, 30.0, 66.0])
        south = cum[cum["locationID"] == "south"]
        assert south["cumulative_daily_gdu"].tolist() == pytest.approx([0.0, 5.0, 20.0])

    def test_no_upper_cutoff(self):
        results = run_phenology(
            _hourly_weather(), upper_cutoff=None, final_vars=["daily_units"]
        )
        north = results["daily_units"].query("locationID == 'north'")
        assert north["daily_gdu"].iloc[-1] == pytest.approx(50.0)

    def test_stage_calendar_for_low_base(self):
        # base 0 F: north accumulates 60, 130, 216 (capped at 86)
        results = run_phenology(_hourly_weather(), crop="cotton", base_temp=0.0)
        calendar = results["stage_calendar"]
        north = calendar[calendar["locationID"] == "north"]
        assert north["stage"].tolist() == ["Seedling"]
        assert north["time"].tolist() == [pd.Timestamp("2025-05-02")]

    def test_staged_units_column(self):
        results = run_phenology(_hourly_weather(), crop="soybean", final_vars=["staged_units"])
        staged = results["staged_units"]
        assert "growth_stage" in staged.columns
        assert staged.query("locationID == 'north'")["growth_stage"].tolist() == [
            "Pre-Emergence",
            "Pre-Emergence",
            "VE",
        ]

    def test_custom_column_names(self):
        hourly = _hourly_weather().rename(columns={"locationID": "site", "temp": "t2m"})
        results = run_phenology(
            hourly,
            final_vars=["daily_weather"],
            location_column="site",
            temp_column="t2m",
        )
        assert "site" in results["daily_weather"].columns
        assert len(results["daily_weather"]) == 6

    def test_unknown_crop(self):
        with pytest.raises(ValueError):
            run_phenology(_hourly_weather(), crop="rice")
