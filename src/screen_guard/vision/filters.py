"""Signal filtering utilities for distance smoothing."""

from __future__ import annotations

from collections import deque

from screen_guard.core.config import FilterSettings


class SmoothingFilter:
    """Moving average filter for smoothing sequences.

    Uses a sliding window to compute moving average of values. Before the
    window fills, the mean covers whatever is present.
    """

    def __init__(self, window_size: int = 5) -> None:
        """Initialize smoothing filter.

        Args:
            window_size: Number of samples in sliding window
        """
        if window_size <= 0:
            raise ValueError("window_size must be positive")
        self.window_size = window_size
        self._buffer: deque[float] = deque(maxlen=window_size)

    @classmethod
    def from_settings(cls, settings: FilterSettings | None = None) -> SmoothingFilter:
        """Build a filter from filter settings."""
        settings = settings or FilterSettings()
        return cls(window_size=settings.smoothing_window_size)

    def __len__(self) -> int:
        return len(self._buffer)

    @property
    def is_ready(self) -> bool:
        """Check if buffer is full."""
        return len(self._buffer) >= self.window_size

    @property
    def value(self) -> float | None:
        """Current moving average, or None if no samples yet."""
        if not self._buffer:
            return None
        return sum(self._buffer) / len(self._buffer)

    def reset(self) -> None:
        """Clear filter buffer."""
        self._buffer.clear()

    def push(self, value: float) -> float:
        """Add value and return smoothed result.

        Args:
            value: New measurement

        Returns:
            Smoothed value (moving average)
        """
        self._buffer.append(value)
        return sum(self._buffer) / len(self._buffer)
