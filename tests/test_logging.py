"""Tests for logging setup."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from pathlib import Path

import pytest

from screen_guard.core.logging import get_logger, setup_logging


@pytest.fixture(autouse=True)
def _restore_package_logger() -> Iterator[None]:
    yield
    package_logger = logging.getLogger("screen_guard")
    for handler in package_logger.handlers:
        handler.close()
    package_logger.handlers.clear()
    package_logger.setLevel(logging.NOTSET)


class TestGetLogger:
    """Tests for namespaced loggers."""

    def test_prefixes_foreign_names(self) -> None:
        assert get_logger("tools.replay").name == "screen_guard.tools.replay"

    def test_keeps_package_names(self) -> None:
        assert get_logger("screen_guard.pipeline").name == "screen_guard.pipeline"
        assert get_logger("screen_guard").name == "screen_guard"

    def test_does_not_match_lookalike_prefix(self) -> None:
        assert get_logger("screen_guardian").name == "screen_guard.screen_guardian"


class TestSetupLogging:
    """Tests for setup_logging."""

    def test_sets_level(self) -> None:
        package_logger = setup_logging("debug")

        assert package_logger.level == logging.DEBUG
        assert len(package_logger.handlers) == 1

    def test_accepts_numeric_level(self) -> None:
        assert setup_logging(logging.WARNING).level == logging.WARNING

    def test_unknown_level_raises(self) -> None:
        with pytest.raises(ValueError):
            setup_logging("LOUD")

    def test_repeated_setup_replaces_handlers(self) -> None:
        setup_logging("INFO")
        package_logger = setup_logging("INFO")

        assert len(package_logger.handlers) == 1

    def test_writes_log_file(self, tmp_path: Path) -> None:
        log_file = tmp_path / "logs" / "session.log"
        package_logger = setup_logging("INFO", str(log_file))

        get_logger("screen_guard.test").info("baseline ready")
        for handler in package_logger.handlers:
            handler.flush()

        assert "baseline ready" in log_file.read_text()
