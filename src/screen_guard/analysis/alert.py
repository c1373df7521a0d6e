"""Proximity alert state machine.

This module is pure logic with NO I/O.
"""

from __future__ import annotations

from dataclasses import dataclass

from screen_guard.core.config import AlertSettings
from screen_guard.core.logging import get_logger
from screen_guard.core.types import (
    BecameSafe,
    BecameTooClose,
    DistanceUpdated,
    ProximityEvent,
    ProximityState,
)

logger = get_logger(__name__)


@dataclass
class AlertState:
    """Internal state for proximity alerting."""

    state: ProximityState | None = None
    last_distance: float | None = None


class AlertStateMachine:
    """Tracks SAFE / TOO_CLOSE over the smoothed distance signal.

    Transitions:
        SAFE → TOO_CLOSE: distance < min_safe_distance_cm
        TOO_CLOSE → SAFE: distance >= min_safe_distance_cm, or
            distance >= release_distance_cm when that is configured

    With a single threshold a signal hovering at the cutoff flaps on every
    reading. Setting ``release_distance_cm`` adds a band for leaving
    TOO_CLOSE.

    The state is None until the first reading seeds it. A SAFE seed is
    silent; a TOO_CLOSE seed is announced with BecameTooClose unless
    ``announce_initial_too_close`` is disabled.
    """

    def __init__(self, settings: AlertSettings | None = None) -> None:
        """Initialize state machine with settings.

        Args:
            settings: Alert thresholds (uses defaults if None)
        """
        self.settings = settings or AlertSettings()
        self._state = AlertState()

    @property
    def state(self) -> ProximityState | None:
        """Current proximity state, or None before the first reading."""
        return self._state.state

    @property
    def last_distance(self) -> float | None:
        """Most recent smoothed distance."""
        return self._state.last_distance

    @property
    def is_too_close(self) -> bool:
        """Check if currently in TOO_CLOSE."""
        return self._state.state is ProximityState.TOO_CLOSE

    def reset(self) -> None:
        """Return to the unseeded state."""
        self._state = AlertState()

    def update(self, distance: float) -> list[ProximityEvent]:
        """Process a new smoothed distance.

        Args:
            distance: Smoothed distance in cm

        Returns:
            DistanceUpdated, followed by a transition event if the state changed
        """
        previous = self._state.state
        current = self._classify(previous, distance)

        self._state.state = current
        self._state.last_distance = distance

        events: list[ProximityEvent] = [DistanceUpdated(distance)]

        if previous is None:
            return self._handle_seed(current, distance, events)

        if previous is ProximityState.SAFE and current is ProximityState.TOO_CLOSE:
            logger.info("User too close: %.1f cm", distance)
            events.append(BecameTooClose(distance))
        elif previous is ProximityState.TOO_CLOSE and current is ProximityState.SAFE:
            logger.info("User back at safe distance: %.1f cm", distance)
            events.append(BecameSafe(distance))

        return events

    def _classify(self, previous: ProximityState | None, distance: float) -> ProximityState:
        """Apply the threshold rule given the previous state."""
        release = self.settings.release_distance_cm

        if previous is ProximityState.TOO_CLOSE and release is not None:
            return ProximityState.SAFE if distance >= release else ProximityState.TOO_CLOSE

        if distance < self.settings.min_safe_distance_cm:
            return ProximityState.TOO_CLOSE
        return ProximityState.SAFE

    def _handle_seed(
        self,
        current: ProximityState,
        distance: float,
        events: list[ProximityEvent],
    ) -> list[ProximityEvent]:
        """Handle the first reading."""
        logger.debug("Proximity state seeded as %s (%.1f cm)", current.name, distance)

        if current is ProximityState.TOO_CLOSE and self.settings.announce_initial_too_close:
            logger.info("User too close: %.1f cm", distance)
            events.append(BecameTooClose(distance))

        return events


def classify_distances(
    distances: list[float],
    settings: AlertSettings | None = None,
) -> list[ProximityEvent]:
    """Run a sequence of smoothed distances through a fresh state machine.

    Args:
        distances: Smoothed distances in arrival order
        settings: Alert thresholds

    Returns:
        All emitted events, in order
    """
    machine = AlertStateMachine(settings)
    events: list[ProximityEvent] = []

    for distance in distances:
        events.extend(machine.update(distance))

    return events
