"""Package settings.

Column-name defaults used when a caller leaves ``group_vars``, ``date_col``
and friends as ``None``. Override with ``TIDY_AGRONOMY_*`` environment
variables or a ``.env`` file in the working directory.
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="TIDY_AGRONOMY_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Location identifier column (one accumulation series per location/season)
    location_column: str = Field(default="locationID", min_length=1)
    # Season column, usually the calendar year of the growing season
    season_column: str = Field(default="Year", min_length=1)
    # Timestamp column produced by the weather loader
    date_column: str = Field(default="time", min_length=1)
    # Air temperature column in hourly weather tables
    temp_column: str = Field(default="temp", min_length=1)

    @property
    def group_vars(self) -> list[str]:
        """Default grouping keys: location then season."""
        return [self.location_column, self.season_column]


@lru_cache
def get_settings() -> Settings:
    """Return the cached settings instance."""
    return Settings()
