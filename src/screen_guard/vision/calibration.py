"""Baseline calibration from an initial run of face-width observations."""

from __future__ import annotations

import math

import numpy as np

from screen_guard.core.config import CalibrationSettings
from screen_guard.core.exceptions import CalibrationError, DegenerateBaselineError
from screen_guard.core.logging import get_logger
from screen_guard.core.types import CalibrationResult, CalibrationStatus

logger = get_logger(__name__)


class Calibrator:
    """Collects raw observations and derives the baseline face width.

    The baseline is the arithmetic mean of exactly ``sample_count``
    consecutive observations, with no outlier rejection. A calibrator
    completes once; re-baselining uses a new instance.
    """

    def __init__(self, settings: CalibrationSettings | None = None) -> None:
        """Initialize calibrator with settings.

        Args:
            settings: Calibration settings (uses defaults if None)
        """
        self.settings = settings or CalibrationSettings()
        self._samples: list[float] = []
        self._baseline: float | None = None
        self._failed = False

    @property
    def samples_needed(self) -> int:
        """Number of samples in a calibration run."""
        return self.settings.sample_count

    @property
    def samples_collected(self) -> int:
        """Number of samples accumulated so far."""
        return len(self._samples)

    @property
    def baseline(self) -> float | None:
        """Baseline face width, or None before calibration completes."""
        return self._baseline

    @property
    def is_calibrated(self) -> bool:
        """Check if a baseline has been established."""
        return self._baseline is not None

    @property
    def is_failed(self) -> bool:
        """Check if the run ended with a degenerate baseline."""
        return self._failed

    def observe(self, raw: float) -> CalibrationResult:
        """Add a raw observation to the calibration run.

        Args:
            raw: Face width as a fraction of frame width

        Returns:
            CALIBRATING result, or COMPLETE with the baseline on the sample
            that finishes the run

        Raises:
            CalibrationError: If the run already finished
            DegenerateBaselineError: If the mean is not a usable baseline
        """
        if self._baseline is not None or self._failed:
            raise CalibrationError("Calibration run already finished")

        self._samples.append(raw)
        collected = len(self._samples)

        if collected < self.samples_needed:
            logger.debug("Calibration sample %d/%d: %.4f", collected, self.samples_needed, raw)
            return CalibrationResult(
                status=CalibrationStatus.CALIBRATING,
                samples_collected=collected,
                samples_needed=self.samples_needed,
            )

        baseline = float(np.mean(self._samples))

        if not math.isfinite(baseline) or baseline <= 0:
            self._failed = True
            logger.error("Calibration failed: degenerate baseline %r", baseline)
            raise DegenerateBaselineError(baseline)

        self._baseline = baseline
        logger.info("Calibration complete. Baseline face size: %.4f", baseline)

        return CalibrationResult(
            status=CalibrationStatus.COMPLETE,
            samples_collected=collected,
            samples_needed=self.samples_needed,
            baseline=baseline,
        )
