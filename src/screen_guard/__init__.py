"""Screen Guard: face-size based screen distance monitoring."""

from screen_guard.core.types import ProximityState
from screen_guard.pipeline.processor import ProximityPipeline, process_observations

__version__ = "0.1.0"

__all__ = ["ProximityPipeline", "ProximityState", "process_observations"]
