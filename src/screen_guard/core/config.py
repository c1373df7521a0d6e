"""Application configuration via Pydantic Settings."""

from functools import lru_cache

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class CalibrationSettings(BaseSettings):
    """Baseline calibration settings."""

    model_config = SettingsConfigDict(env_prefix="CALIBRATION_")

    sample_count: int = Field(default=30, gt=0)


class EstimatorSettings(BaseSettings):
    """Face-width to distance conversion parameters."""

    model_config = SettingsConfigDict(env_prefix="ESTIMATOR_")

    reference_distance_cm: float = Field(default=60.0, gt=0)
    max_distance_cm: float = Field(default=1000.0, gt=0)


class FilterSettings(BaseSettings):
    """Moving average smoothing parameters."""

    model_config = SettingsConfigDict(env_prefix="")

    smoothing_window_size: int = Field(default=5, gt=0)


class AlertSettings(BaseSettings):
    """Proximity alert thresholds.

    ``release_distance_cm`` enables the two-threshold variant: once too close,
    the smoothed distance must reach this value before the alert clears.
    Leaving it unset keeps a single cutoff for both directions.
    """

    model_config = SettingsConfigDict(env_prefix="ALERT_")

    min_safe_distance_cm: float = Field(default=50.0, gt=0)
    release_distance_cm: float | None = None
    announce_initial_too_close: bool = True

    @model_validator(mode="after")
    def _check_release(self) -> "AlertSettings":
        if (
            self.release_distance_cm is not None
            and self.release_distance_cm < self.min_safe_distance_cm
        ):
            raise ValueError("release_distance_cm must be >= min_safe_distance_cm")
        return self


class LoggingSettings(BaseSettings):
    """Logging configuration."""

    model_config = SettingsConfigDict(env_prefix="LOG_")

    level: str = "INFO"
    file: str | None = None


class Settings(BaseSettings):
    """Root settings aggregating all configuration sections."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    calibration: CalibrationSettings = Field(default_factory=CalibrationSettings)
    estimator: EstimatorSettings = Field(default_factory=EstimatorSettings)
    filter: FilterSettings = Field(default_factory=FilterSettings)
    alert: AlertSettings = Field(default_factory=AlertSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)


@lru_cache
def get_settings() -> Settings:
    """Get cached application settings instance."""
    return Settings()
