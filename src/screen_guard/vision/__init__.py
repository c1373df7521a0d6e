"""Measurement conditioning: baseline calibration and smoothing."""

from screen_guard.vision.calibration import Calibrator
from screen_guard.vision.filters import SmoothingFilter

__all__ = ["Calibrator", "SmoothingFilter"]
