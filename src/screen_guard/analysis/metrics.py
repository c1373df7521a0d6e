"""Session statistics and metrics tracking.

This module is pure logic with NO I/O.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass

import numpy as np

from screen_guard.core.types import (
    BecameSafe,
    BecameTooClose,
    CalibrationComplete,
    DistanceUpdated,
    ProximityEvent,
    ProximityState,
    SessionStats,
)


@dataclass
class SessionSummary:
    """Summary statistics for a monitoring session."""

    observations: int
    rejected: int
    no_face_frames: int
    baseline: float | None
    distance_updates: int
    too_close_alerts: int
    safe_recoveries: int
    too_close_fraction: float | None
    closest_distance_cm: float | None
    farthest_distance_cm: float | None
    mean_distance_cm: float | None
    last_distance_cm: float | None

    def to_dict(self) -> dict[str, float | int | None]:
        """Plain dictionary view for reporting."""
        return asdict(self)


class MetricsTracker:
    """Tracks and computes session metrics from pipeline events.

    Maintains a SessionStats object and provides computed statistics.
    """

    def __init__(self, stats: SessionStats | None = None) -> None:
        """Initialize tracker with optional existing stats.

        Args:
            stats: Existing session stats to continue tracking
        """
        self.stats = stats or SessionStats()
        self._too_close = False

    @property
    def too_close_alerts(self) -> int:
        """Number of times the user became too close."""
        return self.stats.too_close_alerts

    @property
    def last_distance(self) -> float | None:
        """Most recent smoothed distance."""
        return self.stats.last_distance

    def record_observation(self) -> None:
        """Count a valid observation."""
        self.stats.observations += 1

    def record_rejected(self) -> None:
        """Count an invalid observation."""
        self.stats.rejected += 1

    def record_no_face(self) -> None:
        """Count a frame without a face."""
        self.stats.no_face_frames += 1

    def record_events(
        self,
        events: list[ProximityEvent],
        state: ProximityState | None = None,
    ) -> None:
        """Fold the events of one observation into the session stats.

        Args:
            events: Events emitted for a single observation
            state: Proximity state after the observation. When given it
                decides whether the distance update counts as too close,
                which covers a TOO_CLOSE seed that emitted no transition.
        """
        for event in events:
            if isinstance(event, BecameTooClose):
                self._too_close = True
                self.stats.too_close_alerts += 1
            elif isinstance(event, BecameSafe):
                self._too_close = False
                self.stats.safe_recoveries += 1
            elif isinstance(event, CalibrationComplete):
                self.stats.baseline = event.baseline

        if state is not None:
            self._too_close = state is ProximityState.TOO_CLOSE

        # Transitions follow DistanceUpdated, so count the update afterwards
        for event in events:
            if isinstance(event, DistanceUpdated):
                self.stats.distances.append(event.distance_cm)
                if self._too_close:
                    self.stats.too_close_updates += 1

    def get_summary(self) -> SessionSummary:
        """Get session summary statistics.

        Returns:
            SessionSummary with computed statistics
        """
        distances = self.stats.distances
        updates = len(distances)

        return SessionSummary(
            observations=self.stats.observations,
            rejected=self.stats.rejected,
            no_face_frames=self.stats.no_face_frames,
            baseline=self.stats.baseline,
            distance_updates=updates,
            too_close_alerts=self.stats.too_close_alerts,
            safe_recoveries=self.stats.safe_recoveries,
            too_close_fraction=(self.stats.too_close_updates / updates) if updates else None,
            closest_distance_cm=self.stats.closest_distance,
            farthest_distance_cm=self.stats.farthest_distance,
            mean_distance_cm=float(np.mean(distances)) if distances else None,
            last_distance_cm=self.stats.last_distance,
        )

    def reset(self) -> None:
        """Clear all recorded data."""
        self.stats.reset()
        self._too_close = False
