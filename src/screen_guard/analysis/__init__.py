"""Pure analysis logic: distance estimation, alerting, and metrics.

This module contains NO I/O operations.
All functions operate on typed dataclasses and return results.
"""

from screen_guard.analysis.alert import AlertStateMachine
from screen_guard.analysis.estimator import DistanceEstimator
from screen_guard.analysis.metrics import MetricsTracker

__all__ = ["DistanceEstimator", "AlertStateMachine", "MetricsTracker"]
