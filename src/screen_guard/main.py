"""Main entry point for the Screen Guard replay tool.

Replays a recorded trace of face-width observations through the proximity
pipeline and reports the events and session summary.
"""

from __future__ import annotations

import argparse
import csv
import sys
from pathlib import Path

from screen_guard.analysis.metrics import SessionSummary
from screen_guard.core.config import (
    AlertSettings,
    CalibrationSettings,
    FilterSettings,
    Settings,
    get_settings,
)
from screen_guard.core.exceptions import ScreenGuardError
from screen_guard.core.logging import get_logger, setup_logging
from screen_guard.core.types import (
    BecameSafe,
    BecameTooClose,
    CalibrationComplete,
    ProximityEvent,
)
from screen_guard.pipeline.processor import ProximityPipeline

logger = get_logger(__name__)

TRACE_COLUMN = "face_width"
NO_FACE_MARKERS = {"", "none", "-"}


def load_trace(path: Path) -> list[float | None]:
    """Load a recorded observation trace from CSV.

    Expected format: a ``face_width`` column, or a single headerless column.
    Empty cells and ``none`` mark frames without a face.

    Args:
        path: Path to CSV file

    Returns:
        Observations in frame order, None for frames without a face

    Raises:
        ValueError: If a cell is not a number or no-face marker
    """
    observations: list[float | None] = []

    with open(path, newline="") as f:
        rows = list(csv.reader(f))

    if not rows:
        return observations

    column = 0
    first_row = 1
    header = [cell.strip().lower() for cell in rows[0]]
    if TRACE_COLUMN in header:
        column = header.index(TRACE_COLUMN)
        rows = rows[1:]
        first_row = 2

    for line_no, row in enumerate(rows, start=first_row):
        cell = row[column].strip() if column < len(row) else ""
        if cell.lower() in NO_FACE_MARKERS:
            observations.append(None)
            continue
        try:
            observations.append(float(cell))
        except ValueError as e:
            raise ValueError(f"Row {line_no}: not a face width: {cell!r}") from e

    logger.info("Loaded %d frames from %s", len(observations), path)
    return observations


def build_settings(args: argparse.Namespace, base: Settings | None = None) -> Settings:
    """Apply command line overrides on top of the configured settings."""
    settings = base or get_settings()
    update: dict[str, object] = {}

    if args.sample_count is not None:
        update["calibration"] = CalibrationSettings(sample_count=args.sample_count)

    if args.window is not None:
        update["filter"] = FilterSettings(smoothing_window_size=args.window)

    alert_overrides: dict[str, object] = {}
    if args.min_safe_cm is not None:
        alert_overrides["min_safe_distance_cm"] = args.min_safe_cm
    if args.release_cm is not None:
        alert_overrides["release_distance_cm"] = args.release_cm
    if alert_overrides:
        update["alert"] = AlertSettings(**{**settings.alert.model_dump(), **alert_overrides})

    return settings.model_copy(update=update) if update else settings


def log_event(event: ProximityEvent) -> None:
    """Event listener that writes pipeline events to the log."""
    if isinstance(event, BecameTooClose):
        logger.warning("TOO CLOSE: %.1f cm", event.distance_cm)
    elif isinstance(event, BecameSafe):
        logger.info("Safe again: %.1f cm", event.distance_cm)
    elif isinstance(event, CalibrationComplete):
        logger.info("Baseline set: %.4f", event.baseline)
    else:
        logger.debug("%s", event)


def print_summary(summary: SessionSummary) -> None:
    """Print session summary to console."""

    def fmt(value: float | None, spec: str = ".1f", suffix: str = " cm") -> str:
        return f"{value:{spec}}{suffix}" if value is not None else "N/A"

    print("\n" + "=" * 60)
    print("SESSION SUMMARY")
    print("=" * 60)
    print(f"Observations:        {summary.observations}")
    print(f"Rejected:            {summary.rejected}")
    print(f"No-face frames:      {summary.no_face_frames}")
    print(f"Baseline:            {fmt(summary.baseline, '.4f', '')}")
    print(f"Distance updates:    {summary.distance_updates}")
    print(f"Too-close alerts:    {summary.too_close_alerts}")
    print(f"Safe recoveries:     {summary.safe_recoveries}")

    if summary.too_close_fraction is not None:
        print(f"\nTime too close:      {summary.too_close_fraction * 100:.1f}%")
        print(f"Closest:             {fmt(summary.closest_distance_cm)}")
        print(f"Farthest:            {fmt(summary.farthest_distance_cm)}")
        print(f"Mean:                {fmt(summary.mean_distance_cm)}")
        print(f"Last:                {fmt(summary.last_distance_cm)}")


def run_replay(trace_path: Path, settings: Settings) -> int:
    """Replay a trace file through a fresh pipeline.

    Returns:
        Exit code (0 for success, non-zero for error)
    """
    try:
        observations = load_trace(trace_path)
    except (OSError, ValueError) as e:
        logger.error("Could not read trace %s: %s", trace_path, e)
        return 1

    pipeline = ProximityPipeline(settings)
    pipeline.subscribe(log_event)

    try:
        for raw in observations:
            if raw is None:
                pipeline.on_no_face()
            else:
                pipeline.on_observation(raw)
    except ScreenGuardError as e:
        logger.error("Pipeline error: %s", e)
        return 2

    if not pipeline.is_calibrated:
        logger.warning(
            "Trace ended during calibration (%d/%d samples)",
            pipeline.stats.observations,
            settings.calibration.sample_count,
        )

    print_summary(pipeline.metrics.get_summary())
    return 0


def main(argv: list[str] | None = None) -> int:
    """CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Screen Guard - replay face-width traces through the proximity monitor"
    )
    parser.add_argument(
        "trace",
        type=Path,
        help="CSV trace of face-width fractions (one frame per row)",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )
    parser.add_argument(
        "--sample-count",
        type=int,
        help="Calibration samples (default: 30)",
    )
    parser.add_argument(
        "--window",
        type=int,
        help="Smoothing window size (default: 5)",
    )
    parser.add_argument(
        "--min-safe-cm",
        type=float,
        help="Too-close threshold in cm (default: 50)",
    )
    parser.add_argument(
        "--release-cm",
        type=float,
        help="Distance required to clear an alert (default: same as threshold)",
    )

    args = parser.parse_args(argv)

    base = get_settings()
    level = "DEBUG" if args.debug else base.logging.level

    try:
        setup_logging(level, base.logging.file)
        settings = build_settings(args, base)
    except ValueError as e:
        logger.error("Invalid settings: %s", e)
        return 2

    return run_replay(args.trace, settings)


if __name__ == "__main__":
    sys.exit(main())
