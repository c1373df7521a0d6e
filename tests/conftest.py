"""Pytest fixtures for Screen Guard tests."""

from __future__ import annotations

import pytest

from screen_guard.core.config import (
    AlertSettings,
    CalibrationSettings,
    EstimatorSettings,
    FilterSettings,
    Settings,
)
from screen_guard.pipeline.processor import ProximityPipeline

BASELINE_WIDTH = 0.20


@pytest.fixture
def calibration_settings() -> CalibrationSettings:
    """Create calibration settings for testing."""
    return CalibrationSettings()


@pytest.fixture
def estimator_settings() -> EstimatorSettings:
    """Create estimator settings for testing."""
    return EstimatorSettings()


@pytest.fixture
def filter_settings() -> FilterSettings:
    """Create filter settings for testing."""
    return FilterSettings()


@pytest.fixture
def alert_settings() -> AlertSettings:
    """Create alert settings for testing."""
    return AlertSettings()


@pytest.fixture
def settings() -> Settings:
    """Create default pipeline settings."""
    return Settings()


@pytest.fixture
def quick_settings() -> Settings:
    """Settings with a three-sample calibration run."""
    return Settings(calibration=CalibrationSettings(sample_count=3))


@pytest.fixture
def calibration_run() -> list[float]:
    """Thirty identical calibration samples."""
    return [BASELINE_WIDTH] * 30


@pytest.fixture
def calibrated_pipeline(settings: Settings, calibration_run: list[float]) -> ProximityPipeline:
    """Pipeline that has finished calibrating at the baseline width."""
    pipeline = ProximityPipeline(settings)
    for raw in calibration_run:
        pipeline.process(raw)
    return pipeline
