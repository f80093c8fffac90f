"""Tests for logging utilities."""

import logging
from pathlib import Path
from unittest.mock import MagicMock

import pytest

from glyphlayout.utils import (
    LayoutLogger,
    LayoutStats,
    configure_logging,
    remove_logging_handlers,
)


@pytest.fixture
def restore_root_logger():
    """Detach handlers added by configure_logging."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    for handler in root.handlers[:]:
        if handler not in handlers:
            handler.close()
            root.removeHandler(handler)
    root.setLevel(level)


class TestLayoutStats:
    """Tests for LayoutStats."""

    def test_no_runs(self):
        assert LayoutStats().avg_run_time_ms is None

    def test_average(self):
        stats = LayoutStats(runs=2, total_run_time_ms=4.0)
        assert stats.avg_run_time_ms == 2.0


class TestLayoutLogger:
    """Tests for LayoutLogger."""

    def test_run_complete_updates_stats(self):
        logger = MagicMock()
        layout_logger = LayoutLogger(logger)

        layout_logger.log_run_complete(glyph_count=4, filler_count=1, duration_ms=0.5)
        layout_logger.log_run_complete(glyph_count=2, filler_count=0, duration_ms=1.5)

        stats = layout_logger.stats
        assert stats.runs == 2
        assert stats.glyph_count == 6
        assert stats.filler_count == 1
        assert stats.avg_run_time_ms == 1.0
        assert logger.debug.call_count == 2

    def test_run_failed(self):
        logger = MagicMock()
        layout_logger = LayoutLogger(logger)

        layout_logger.log_run_failed("illegal argument", offset=5)

        logger.warning.assert_called_once_with(
            "Layout failed", reason="illegal argument", offset=5
        )
        assert layout_logger.stats.failure_count == 1
        assert layout_logger.stats.last_failure == "illegal argument"

    def test_stats_hold_running_totals(self):
        """Many calls on one logger fold into totals, not per-call lists."""
        layout_logger = LayoutLogger(MagicMock())

        for _ in range(1000):
            layout_logger.log_run_complete(glyph_count=1, filler_count=0, duration_ms=2.0)
        layout_logger.log_run_failed("illegal argument")
        layout_logger.log_run_failed("shaper allocation failed")

        stats = layout_logger.stats
        assert stats.runs == 1000
        assert stats.total_run_time_ms == 2000.0
        assert stats.avg_run_time_ms == 2.0
        assert stats.failure_count == 2
        assert stats.last_failure == "shaper allocation failed"
        assert not any(isinstance(value, list) for value in vars(stats).values())

    def test_run_start_and_shaped(self):
        logger = MagicMock()
        layout_logger = LayoutLogger(logger)

        layout_logger.log_run_start(0, 3, 3, False)
        layout_logger.log_shaped(3, "Latn", None)

        assert logger.debug.call_count == 2
        assert layout_logger.stats.runs == 0


class TestConfigureLogging:
    """Tests for configure_logging."""

    @staticmethod
    def _added_handlers(before: list[logging.Handler]) -> list[logging.Handler]:
        return [h for h in logging.getLogger().handlers if h not in before]

    @pytest.mark.usefixtures("restore_root_logger")
    def test_writes_log_file(self, tmp_path: Path):
        log_file = tmp_path / "layout.log"
        before = list(logging.getLogger().handlers)

        logger = configure_logging(log_file=log_file, console_level="ERROR")
        logger.info("hello", run=1)
        for handler in self._added_handlers(before):
            handler.flush()

        assert log_file.exists()
        assert "hello" in log_file.read_text(encoding="utf-8")

    @pytest.mark.usefixtures("restore_root_logger")
    def test_no_file_without_path(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.chdir(tmp_path)
        before = list(logging.getLogger().handlers)

        configure_logging(quiet=True)

        added = self._added_handlers(before)
        assert list(tmp_path.iterdir()) == []
        assert len(added) == 1
        assert not isinstance(added[0], logging.FileHandler)
        assert added[0].level == logging.ERROR

    @pytest.mark.usefixtures("restore_root_logger")
    def test_repeated_calls_replace_handlers(self, tmp_path: Path):
        before = list(logging.getLogger().handlers)

        configure_logging(log_file=tmp_path / "first.log", quiet=True)
        configure_logging(quiet=True)

        added = self._added_handlers(before)
        assert len(added) == 1
        assert not isinstance(added[0], logging.FileHandler)

    @pytest.mark.usefixtures("restore_root_logger")
    def test_remove_logging_handlers(self):
        before = list(logging.getLogger().handlers)
        configure_logging(quiet=True)

        remove_logging_handlers()

        assert self._added_handlers(before) == []
