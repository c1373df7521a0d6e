"""Face-width to viewing-distance conversion.

This module is pure logic with NO I/O.
"""

from __future__ import annotations

import math

from screen_guard.core.config import EstimatorSettings


class DistanceEstimator:
    """Inverse-proportion distance model.

    Face width in frame scales roughly as 1/distance for a fixed focal
    length, so ``reference_distance_cm * baseline / raw`` gives the distance
    relative to where calibration was performed.

    Results are capped at ``max_distance_cm``. A zero, negative or
    non-finite observation saturates to the cap instead of producing inf
    or NaN, which would poison the moving average.
    """

    def __init__(self, settings: EstimatorSettings | None = None) -> None:
        """Initialize estimator with settings.

        Args:
            settings: Estimator parameters (uses defaults if None)
        """
        self.settings = settings or EstimatorSettings()

    @property
    def reference_distance_cm(self) -> float:
        """Assumed distance at which calibration was performed."""
        return self.settings.reference_distance_cm

    @property
    def max_distance_cm(self) -> float:
        """Saturation value for degenerate input."""
        return self.settings.max_distance_cm

    def estimate(self, raw: float, baseline: float) -> float:
        """Estimate distance in centimeters.

        Args:
            raw: Current face width fraction
            baseline: Calibrated face width fraction

        Returns:
            Distance in cm, at most ``max_distance_cm``
        """
        if not math.isfinite(raw) or raw <= 0:
            return self.max_distance_cm

        distance = self.reference_distance_cm * (baseline / raw)

        if not math.isfinite(distance):
            return self.max_distance_cm

        return min(distance, self.max_distance_cm)
