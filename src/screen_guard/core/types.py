"""Core data types and structures."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto

from screen_guard.core.exceptions import InvalidObservationError


class ProximityState(Enum):
    """Binary classification of the smoothed distance."""

    SAFE = auto()
    TOO_CLOSE = auto()


class CalibrationStatus(Enum):
    """States of a single calibration run."""

    CALIBRATING = auto()
    COMPLETE = auto()


@dataclass(frozen=True, slots=True)
class CalibrationResult:
    """Outcome of feeding one sample to the calibrator.

    Attributes:
        status: CALIBRATING until the run completes, then COMPLETE
        samples_collected: Samples accumulated so far, including this one
        samples_needed: Samples required to finish the run
        baseline: Mean face-width fraction, only set when COMPLETE
    """

    status: CalibrationStatus
    samples_collected: int
    samples_needed: int
    baseline: float | None = None

    @property
    def is_complete(self) -> bool:
        """Whether this sample completed the run."""
        return self.status is CalibrationStatus.COMPLETE


@dataclass(frozen=True, slots=True)
class CalibrationProgress:
    """A calibration sample was accepted."""

    samples_collected: int
    samples_needed: int

    @property
    def fraction(self) -> float:
        """Progress in [0, 1]."""
        return self.samples_collected / self.samples_needed


@dataclass(frozen=True, slots=True)
class CalibrationComplete:
    """Calibration finished and the baseline face width is fixed."""

    baseline: float


@dataclass(frozen=True, slots=True)
class DistanceUpdated:
    """New smoothed distance, emitted for every post-calibration observation."""

    distance_cm: float


@dataclass(frozen=True, slots=True)
class BecameTooClose:
    """Smoothed distance dropped below the safe threshold."""

    distance_cm: float


@dataclass(frozen=True, slots=True)
class BecameSafe:
    """Smoothed distance recovered to a safe value."""

    distance_cm: float


ProximityEvent = (
    CalibrationProgress | CalibrationComplete | DistanceUpdated | BecameTooClose | BecameSafe
)


@dataclass(slots=True)
class ObservationResult:
    """Result of handing one observation to the pipeline.

    Attributes:
        events: Events emitted for the observation, in order
        error: Rejection reason if the observation was invalid
    """

    events: list[ProximityEvent] = field(default_factory=list)
    error: InvalidObservationError | None = None

    @property
    def accepted(self) -> bool:
        """Whether the observation was processed."""
        return self.error is None


@dataclass(slots=True)
class SessionStats:
    """Running counters for a monitoring session.

    Attributes:
        observations: Valid observations processed
        rejected: Observations rejected as invalid
        no_face_frames: Frames reported without a face
        distances: Smoothed distances seen after calibration
        too_close_updates: Distance updates made while too close
        too_close_alerts: Safe -> too close transitions
        safe_recoveries: Too close -> safe transitions
        baseline: Calibrated baseline face width
    """

    observations: int = 0
    rejected: int = 0
    no_face_frames: int = 0
    distances: list[float] = field(default_factory=list)
    too_close_updates: int = 0
    too_close_alerts: int = 0
    safe_recoveries: int = 0
    baseline: float | None = None

    @property
    def update_count(self) -> int:
        """Number of smoothed distance updates."""
        return len(self.distances)

    @property
    def last_distance(self) -> float | None:
        """Most recent smoothed distance."""
        return self.distances[-1] if self.distances else None

    @property
    def closest_distance(self) -> float | None:
        """Smallest smoothed distance seen."""
        if not self.distances:
            return None
        return min(self.distances)

    @property
    def farthest_distance(self) -> float | None:
        """Largest smoothed distance seen."""
        if not self.distances:
            return None
        return max(self.distances)

    def reset(self) -> None:
        """Clear all counters."""
        self.observations = 0
        self.rejected = 0
        self.no_face_frames = 0
        self.distances.clear()
        self.too_close_updates = 0
        self.too_close_alerts = 0
        self.safe_recoveries = 0
        self.baseline = None
