"""Tests for the trace replay CLI."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from pathlib import Path

import pytest

from screen_guard.main import load_trace, main


@pytest.fixture(autouse=True)
def _detach_log_handlers() -> Iterator[None]:
    """setup_logging binds handlers to the captured stdout; drop them afterwards."""
    yield
    logging.getLogger("screen_guard").handlers.clear()


def _write_trace(path: Path, rows: list[str]) -> Path:
    path.write_text("\n".join(rows) + "\n")
    return path


class TestLoadTrace:
    """Tests for reading observation traces."""

    def test_headerless_single_column(self, tmp_path: Path) -> None:
        trace = _write_trace(tmp_path / "trace.csv", ["0.2", "0.25", "0.4"])

        assert load_trace(trace) == [0.2, 0.25, 0.4]

    def test_named_column(self, tmp_path: Path) -> None:
        trace = _write_trace(
            tmp_path / "trace.csv",
            ["frame,face_width", "0,0.2", "1,", "2,0.3"],
        )

        assert load_trace(trace) == [0.2, None, 0.3]

    def test_no_face_markers(self, tmp_path: Path) -> None:
        trace = _write_trace(tmp_path / "trace.csv", ["0.2", "none", "None", "-", "0.3"])

        assert load_trace(trace) == [0.2, None, None, None, 0.3]

    def test_empty_file(self, tmp_path: Path) -> None:
        trace = tmp_path / "empty.csv"
        trace.write_text("")

        assert load_trace(trace) == []

    def test_bad_cell_raises(self, tmp_path: Path) -> None:
        trace = _write_trace(tmp_path / "trace.csv", ["0.2", "wide"])

        with pytest.raises(ValueError, match="Row 2"):
            load_trace(trace)

    def test_bad_cell_row_counts_header(self, tmp_path: Path) -> None:
        """Row numbers refer to file lines, header included."""
        trace = _write_trace(tmp_path / "trace.csv", ["face_width", "0.2", "wide"])

        with pytest.raises(ValueError, match="Row 3"):
            load_trace(trace)


class TestMain:
    """Tests for the CLI entry point."""

    def test_replay_prints_summary(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        rows = ["face_width"] + ["0.2"] * 30 + ["0.4"] * 5 + [""] + ["0.2"] * 10
        trace = _write_trace(tmp_path / "trace.csv", rows)

        assert main([str(trace)]) == 0

        out = capsys.readouterr().out
        assert "SESSION SUMMARY" in out
        assert "Too-close alerts:    1" in out
        assert "Safe recoveries:     1" in out
        assert "No-face frames:      1" in out

    def test_invalid_values_are_counted(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        trace = _write_trace(tmp_path / "trace.csv", ["0.2", "1.5", "0.2", "0"])

        assert main([str(trace), "--sample-count", "2"]) == 0

        out = capsys.readouterr().out
        assert "Rejected:            2" in out
        assert "Observations:        2" in out

    def test_overrides_apply(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        # 0.24 against a 0.2 baseline is 50 cm: safe at 50, too close at 55
        trace = _write_trace(tmp_path / "trace.csv", ["0.2", "0.24"])

        assert main([str(trace), "--sample-count", "1", "--min-safe-cm", "55"]) == 0

        assert "Too-close alerts:    1" in capsys.readouterr().out

    def test_missing_trace_returns_error(self, tmp_path: Path) -> None:
        assert main([str(tmp_path / "missing.csv")]) == 1

    def test_unreadable_trace_returns_error(self, tmp_path: Path) -> None:
        trace = _write_trace(tmp_path / "trace.csv", ["abc"])

        assert main([str(trace)]) == 1

    def test_invalid_settings_return_error(self, tmp_path: Path) -> None:
        trace = _write_trace(tmp_path / "trace.csv", ["0.2"])

        assert main([str(trace), "--window", "0"]) == 2
        assert main([str(trace), "--min-safe-cm", "50", "--release-cm", "40"]) == 2
