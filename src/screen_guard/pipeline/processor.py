"""Observation processing pipeline orchestration."""

from __future__ import annotations

import math
import numbers
from collections.abc import Callable, Iterable

from screen_guard.analysis.alert import AlertStateMachine
from screen_guard.analysis.estimator import DistanceEstimator
from screen_guard.analysis.metrics import MetricsTracker
from screen_guard.core.config import Settings, get_settings
from screen_guard.core.exceptions import CalibrationError, InvalidObservationError
from screen_guard.core.logging import get_logger
from screen_guard.core.types import (
    BecameSafe,
    CalibrationComplete,
    CalibrationProgress,
    ObservationResult,
    ProximityEvent,
    ProximityState,
    SessionStats,
)
from screen_guard.vision.calibration import Calibrator
from screen_guard.vision.filters import SmoothingFilter

logger = get_logger(__name__)

EventListener = Callable[[ProximityEvent], None]


class ProximityPipeline:
    """Orchestrates the full observation processing pipeline.

    Coordinates:
    - Baseline calibration
    - Distance estimation
    - Moving average smoothing
    - Proximity alerting

    Observations must arrive in temporal order from a single thread.
    Listeners are called synchronously on that thread; consumers marshal
    onto their own execution context.
    """

    def __init__(self, settings: Settings | None = None) -> None:
        """Initialize pipeline with settings.

        Args:
            settings: Application settings (uses defaults if None)
        """
        self.settings = settings or get_settings()

        # Components
        self._calibrator = Calibrator(self.settings.calibration)
        self._estimator = DistanceEstimator(self.settings.estimator)
        self._smoother = SmoothingFilter.from_settings(self.settings.filter)
        self._alert = AlertStateMachine(self.settings.alert)
        self._metrics = MetricsTracker()

        self._listeners: list[EventListener] = []

    @property
    def stats(self) -> SessionStats:
        """Get current session statistics."""
        return self._metrics.stats

    @property
    def metrics(self) -> MetricsTracker:
        """Get session metrics tracker."""
        return self._metrics

    @property
    def is_calibrated(self) -> bool:
        """Check if the baseline is established."""
        return self._calibrator.is_calibrated

    @property
    def baseline(self) -> float | None:
        """Calibrated baseline face width, or None while calibrating."""
        return self._calibrator.baseline

    @property
    def smoothed_distance(self) -> float | None:
        """Latest smoothed distance, or None before the first estimate."""
        return self._smoother.value

    @property
    def state(self) -> ProximityState | None:
        """Current proximity state, or None before the first estimate."""
        return self._alert.state

    def subscribe(self, listener: EventListener) -> None:
        """Register a callback invoked for every emitted event.

        Args:
            listener: Callable taking a single event
        """
        if listener not in self._listeners:
            self._listeners.append(listener)

    def unsubscribe(self, listener: EventListener) -> None:
        """Remove a previously registered callback."""
        if listener in self._listeners:
            self._listeners.remove(listener)

    def process(self, raw: float) -> list[ProximityEvent]:
        """Process a single face-width observation.

        Args:
            raw: Face width as a fraction of frame width

        Returns:
            Events emitted for this observation, in order

        Raises:
            InvalidObservationError: If raw is non-finite or outside (0, 1];
                no state is modified
            CalibrationError: If calibration produced a degenerate baseline
        """
        value = validate_observation(raw)

        if not self._calibrator.is_calibrated:
            events = self._calibrate(value)
        else:
            events = self._track(value)

        self._metrics.record_observation()
        self._metrics.record_events(events, self._alert.state)
        self._dispatch(events)

        return events

    def on_observation(self, raw: float) -> ObservationResult:
        """Detector-facing entry point that reports bad input instead of raising.

        Args:
            raw: Face width as a fraction of frame width

        Returns:
            ObservationResult with the emitted events or the rejection
        """
        try:
            events = self.process(raw)
        except InvalidObservationError as e:
            self._metrics.record_rejected()
            logger.warning("Rejected observation: %s", e.message)
            return ObservationResult(error=e)

        return ObservationResult(events=events)

    def on_no_face(self) -> None:
        """Record a frame without a face; pipeline state does not advance."""
        self._metrics.record_no_face()

    def recalibrate(self) -> list[ProximityEvent]:
        """Discard the baseline and start a new calibration run.

        An active too-close alert is closed with BecameSafe at the last
        known distance, so listeners never hold a stale warning.

        Returns:
            Events emitted while resetting (empty unless an alert was active)
        """
        events: list[ProximityEvent] = []
        last_distance = self._alert.last_distance
        if self._alert.is_too_close and last_distance is not None:
            events.append(BecameSafe(last_distance))

        self._calibrator = Calibrator(self.settings.calibration)
        self._smoother.reset()
        self._alert.reset()
        logger.info("Recalibration started")

        self._metrics.record_events(events, self._alert.state)
        self._dispatch(events)

        return events

    def _calibrate(self, raw: float) -> list[ProximityEvent]:
        """Feed a calibration sample."""
        result = self._calibrator.observe(raw)

        events: list[ProximityEvent] = [
            CalibrationProgress(result.samples_collected, result.samples_needed)
        ]
        if result.is_complete and result.baseline is not None:
            events.append(CalibrationComplete(result.baseline))

        return events

    def _track(self, raw: float) -> list[ProximityEvent]:
        """Estimate, smooth and classify a post-calibration sample."""
        baseline = self._calibrator.baseline
        if baseline is None:
            raise CalibrationError("No baseline available for distance estimation")

        distance = self._estimator.estimate(raw, baseline)
        smoothed = self._smoother.push(distance)

        logger.debug("Face %.4f -> %.1f cm (smoothed %.1f cm)", raw, distance, smoothed)

        return self._alert.update(smoothed)

    def _dispatch(self, events: list[ProximityEvent]) -> None:
        """Deliver events to registered listeners."""
        for event in events:
            for listener in list(self._listeners):
                listener(event)


def validate_observation(raw: float) -> float:
    """Check that a raw observation lies in (0, 1].

    Any real number is accepted, including numpy scalars from detectors.

    Returns:
        The observation as a Python float

    Raises:
        InvalidObservationError: If raw is non-finite or out of range
    """
    if isinstance(raw, bool) or not isinstance(raw, numbers.Real):
        raise InvalidObservationError(
            raw, f"Observation must be a number, got {type(raw).__name__}"
        )

    value = float(raw)
    if not math.isfinite(value) or value <= 0 or value > 1:
        raise InvalidObservationError(raw)

    return value


def process_observations(
    observations: Iterable[float | None],
    settings: Settings | None = None,
) -> list[ProximityEvent]:
    """Run a recorded observation sequence through a fresh pipeline.

    Pure function for batch processing recorded data.

    Args:
        observations: Face widths in frame order; None marks a frame without a face
        settings: Pipeline settings

    Returns:
        All emitted events, in order
    """
    pipeline = ProximityPipeline(settings)
    events: list[ProximityEvent] = []

    for raw in observations:
        if raw is None:
            pipeline.on_no_face()
            continue
        events.extend(pipeline.process(raw))

    return events
