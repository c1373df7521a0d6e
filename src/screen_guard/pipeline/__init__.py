"""Observation processing pipeline orchestration."""

from screen_guard.pipeline.processor import ProximityPipeline, process_observations

__all__ = ["ProximityPipeline", "process_observations"]
