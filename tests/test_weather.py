"""Tests for hourly -> daily weather resampling."""

from __future__ import annotations

import numpy as np
import pandas as pd
import pytest

from tidy_agronomy.exceptions import ColumnTypeError, MissingColumnError
from tidy_agronomy.weather import daily_extremes, mean_daily, summarise_daily

COLUMNS = ("locationID", "Year", "time", "temp")


def _hourly(start: str, temps: list[float], location: str = "A", year: int = 2025) -> pd.DataFrame:
    return pd.DataFrame(
        {
            "locationID": location,
            "Year": year,
            "time": pd.date_range(start, periods=len(temps), freq="h"),
            "temp": temps,
        }
    )


class TestMeanDaily:
    """Tests for mean_daily."""

    def test_single_day_alternating_readings(self):
        """24 hourly readings alternating 10/20 give one row with mean 15."""
        hourly = _hourly("2025-06-01 00:00", [10.0, 20.0] * 12)
        result = mean_daily(hourly, *COLUMNS)
        assert len(result) == 1
        assert result.loc[0, "mean_daily_temp"] == pytest.approx(15.0)
        assert result.loc[0, "time"] == pd.Timestamp("2025-06-01")

    def test_output_columns(self):
        result = mean_daily(_hourly("2025-06-01", [1.0, 2.0]), *COLUMNS)
        assert list(result.columns) == ["locationID", "Year", "time", "mean_daily_temp"]

    def test_splits_on_calendar_day(self):
        # 22:00, 23:00 on day 1; 00:00, 01:00 on day 2
        hourly = _hourly("2025-06-01 22:00", [10.0, 20.0, 30.0, 50.0])
        result = mean_daily(hourly, *COLUMNS)
        assert list(result["time"]) == [pd.Timestamp("2025-06-01"), pd.Timestamp("2025-06-02")]
        assert list(result["mean_daily_temp"]) == [15.0, 40.0]

    def test_gap_days_produce_no_rows(self):
        hourly = pd.concat(
            [_hourly("2025-06-01", [10.0, 12.0]), _hourly("2025-06-04", [20.0, 22.0])],
            ignore_index=True,
        )
        result = mean_daily(hourly, *COLUMNS)
        assert list(result["time"].dt.day) == [1, 4]

    def test_groups_by_location_and_season(self):
        hourly = pd.concat(
            [
                _hourly("2025-06-01", [10.0, 20.0], location="B"),
                _hourly("2025-06-01", [0.0, 2.0], location="A"),
                _hourly("2024-06-01", [5.0, 7.0], location="A", year=2024),
            ],
            ignore_index=True,
        )
        result = mean_daily(hourly, *COLUMNS)
        assert list(zip(result["locationID"], result["Year"], strict=True)) == [
            ("A", 2024),
            ("A", 2025),
            ("B", 2025),
        ]
        assert list(result["mean_daily_temp"]) == [6.0, 1.0, 15.0]

    def test_timezone_kept(self):
        """Day boundaries follow the timestamp's own zone."""
        hourly = pd.DataFrame(
            {
                "locationID": "A",
                "Year": 2025,
                "time": pd.date_range("2025-06-01 23:00", periods=2, freq="h", tz="America/Chicago"),
                "temp": [10.0, 30.0],
            }
        )
        result = mean_daily(hourly, *COLUMNS)
        assert len(result) == 2
        assert result.loc[0, "time"] == pd.Timestamp("2025-06-01", tz="America/Chicago")

    def test_missing_readings_skipped_in_mean(self):
        result = mean_daily(_hourly("2025-06-01", [10.0, np.nan, 20.0]), *COLUMNS)
        assert result.loc[0, "mean_daily_temp"] == pytest.approx(15.0)

    def test_missing_location_kept_as_own_group(self):
        hourly = pd.concat(
            [
                _hourly("2025-06-01", [10.0], location="A"),
                _hourly("2025-06-01", [20.0, 40.0], location=None),
            ],
            ignore_index=True,
        )
        result = mean_daily(hourly, *COLUMNS)
        assert len(result) == 2
        assert result["locationID"].iloc[0] == "A"
        assert pd.isna(result["locationID"].iloc[1])
        assert list(result["mean_daily_temp"]) == [10.0, 30.0]

    def test_missing_column(self):
        with pytest.raises(MissingColumnError):
            mean_daily(_hourly("2025-06-01", [1.0]), "locationID", "Season", "time", "temp")

    def test_string_times_rejected(self):
        hourly = _hourly("2025-06-01", [1.0, 2.0]).assign(time=["2025-06-01", "2025-06-01"])
        with pytest.raises(ColumnTypeError):
            mean_daily(hourly, *COLUMNS)

    def test_non_numeric_temperature_rejected(self):
        hourly = _hourly("2025-06-01", [1.0, 2.0]).assign(temp=["warm", "cold"])
        with pytest.raises(ColumnTypeError):
            mean_daily(hourly, *COLUMNS)


class TestSummariseDaily:
    """Tests for summarise_daily and daily_extremes."""

    @pytest.mark.parametrize(
        ("how", "expected"),
        [("mean", 15.0), ("min", 5.0), ("max", 30.0), ("median", 12.5), ("sum", 60.0)],
    )
    def test_aggregations(self, how, expected):
        result = summarise_daily(_hourly("2025-06-01", [5.0, 10.0, 15.0, 30.0]), *COLUMNS, how=how)
        assert result.loc[0, f"{how}_daily_temp"] == pytest.approx(expected)

    def test_unknown_aggregation(self):
        with pytest.raises(ValueError, match="Unknown daily aggregation"):
            summarise_daily(_hourly("2025-06-01", [1.0]), *COLUMNS, how="mode")

    def test_custom_out_col(self):
        result = summarise_daily(_hourly("2025-06-01", [1.0, 3.0]), *COLUMNS, out_col="t")
        assert result.loc[0, "t"] == 2.0

    def test_daily_extremes(self):
        result = daily_extremes(_hourly("2025-06-01", [55.0, 80.0, 62.0]), *COLUMNS)
        assert list(result.columns) == ["locationID", "Year", "time", "tmin", "tmax"]
        assert result.loc[0, "tmin"] == 55.0
        assert result.loc[0, "tmax"] == 80.0
