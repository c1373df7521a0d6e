"""Custom exceptions for Screen Guard."""


class ScreenGuardError(Exception):
    """Base exception for all Screen Guard errors."""

    pass


class InvalidObservationError(ScreenGuardError):
    """Raw face-width observation is non-finite or outside (0, 1]."""

    def __init__(self, value: float, message: str | None = None) -> None:
        self.value = value
        self.message = message or f"Invalid observation: {value!r} (expected 0 < value <= 1)"
        super().__init__(self.message)


class CalibrationError(ScreenGuardError):
    """Calibration process failed or was used out of order."""

    def __init__(self, message: str = "Calibration failed") -> None:
        self.message = message
        super().__init__(self.message)


class DegenerateBaselineError(CalibrationError):
    """Calibration produced a baseline that cannot be used for estimation."""

    def __init__(self, baseline: float) -> None:
        self.baseline = baseline
        super().__init__(f"Degenerate calibration baseline: {baseline!r}")
