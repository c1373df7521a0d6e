"""Core infrastructure: config, types, exceptions, and logging."""

from screen_guard.core.config import Settings, get_settings
from screen_guard.core.exceptions import (
    CalibrationError,
    DegenerateBaselineError,
    InvalidObservationError,
    ScreenGuardError,
)
from screen_guard.core.logging import get_logger, setup_logging
from screen_guard.core.types import (
    BecameSafe,
    BecameTooClose,
    CalibrationComplete,
    CalibrationProgress,
    CalibrationResult,
    CalibrationStatus,
    DistanceUpdated,
    ObservationResult,
    ProximityEvent,
    ProximityState,
    SessionStats,
)

__all__ = [
    # Config
    "Settings",
    "get_settings",
    # Types
    "ProximityState",
    "CalibrationStatus",
    "CalibrationResult",
    "CalibrationProgress",
    "CalibrationComplete",
    "DistanceUpdated",
    "BecameTooClose",
    "BecameSafe",
    "ProximityEvent",
    "ObservationResult",
    "SessionStats",
    # Exceptions
    "ScreenGuardError",
    "InvalidObservationError",
    "CalibrationError",
    "DegenerateBaselineError",
    # Logging
    "setup_logging",
    "get_logger",
]
