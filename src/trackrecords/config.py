"""Settings for the record source, presentation defaults and logging.

Usage:
    from trackrecords.config import get_settings

    settings = get_settings()
    print(settings.data_file)
    print(settings.default_pace_unit)

Settings are read from environment variables and an optional .env file in the
working directory, e.g.:

    DATA_FILE=data/track_field_records.csv
    CSV_DELIMITER=,
    DEFAULT_PACE_UNIT=min/mile
"""

from enum import StrEnum
from functools import lru_cache
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from trackrecords.models.record import PaceUnit


class Environment(StrEnum):
    """Deployment environment."""

    LOCAL = "local"
    DEVELOPMENT = "development"
    PRODUCTION = "production"


class LogFormat(StrEnum):
    """Renderer used for log entries."""

    CONSOLE = "console"
    JSON = "json"


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Environment
    environment: Environment = Environment.LOCAL

    # Record source
    data_file: Path = Field(
        default=Path("data/track_field_records.csv"),
        description="Delimited file holding one world record per row",
    )
    csv_delimiter: str = Field(default=",", description="Single-character field delimiter")

    # Presentation
    default_pace_unit: PaceUnit = Field(
        default=PaceUnit.PER_KM, description="Pace unit used when none is requested"
    )

    # Logging
    log_level: str = Field(default="INFO", description="Log level")
    log_format: LogFormat | None = Field(
        default=None, description="Log output format, json in production when unset"
    )

    @field_validator("csv_delimiter")
    @classmethod
    def validate_delimiter(cls, v: str) -> str:
        if len(v) != 1:
            raise ValueError("CSV delimiter must be a single character")
        return v

    @property
    def is_production(self) -> bool:
        """Production hides the API docs and logs JSON by default."""
        return self.environment == Environment.PRODUCTION


@lru_cache
def get_settings() -> Settings:
    """Settings are read once per process. Tests reset them with get_settings.cache_clear()."""
    return Settings()
