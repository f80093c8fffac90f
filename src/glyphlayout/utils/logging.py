"""Logging utilities for Glyphlayout."""

import logging
from dataclasses import dataclass
from pathlib import Path

import structlog


@dataclass
class LayoutStats:
    """Statistics accumulated over the runs laid out by one session.

    Only running totals are kept, so a long-lived session stays constant
    in size.
    """

    runs: int = 0
    glyph_count: int = 0
    filler_count: int = 0
    failure_count: int = 0
    last_failure: str | None = None
    total_run_time_ms: float = 0.0

    @property
    def avg_run_time_ms(self) -> float | None:
        """Average layout time per run."""
        if self.runs == 0:
            return None
        return self.total_run_time_ms / self.runs


# Marks root handlers installed by configure_logging
_HANDLER_TAG = "_glyphlayout_handler"


def remove_logging_handlers() -> None:
    """Detach and close the root handlers installed by ``configure_logging``."""
    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        if getattr(handler, _HANDLER_TAG, False):
            root_logger.removeHandler(handler)
            handler.close()


def configure_logging(
    log_file: Path | None = None,
    console_level: str = "WARNING",
    file_level: str = "DEBUG",
    quiet: bool = False,
) -> structlog.stdlib.BoundLogger:
    """Configure dual-output structured logging.

    Handlers installed by an earlier call are replaced, not duplicated.

    Args:
        log_file: Path to log file (no file output if None)
        console_level: Logging level for console output
        file_level: Logging level for file output
        quiet: If True, suppress console output except errors

    Returns:
        Configured structlog logger
    """
    remove_logging_handlers()
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(getattr(logging, file_level.upper()))
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s | %(message)s")
        )
        setattr(file_handler, _HANDLER_TAG, True)
        root_logger.addHandler(file_handler)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(logging.ERROR if quiet else getattr(logging, console_level.upper()))
    console_handler.setFormatter(logging.Formatter("%(message)s"))
    setattr(console_handler, _HANDLER_TAG, True)
    root_logger.addHandler(console_handler)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logger = structlog.get_logger("glyphlayout")
    logger.info(
        "Logging initialized",
        log_file=str(log_file) if log_file else None,
        level=file_level,
    )

    return logger


class LayoutLogger:
    """Logger for tracking layout calls and statistics."""

    def __init__(self, logger: structlog.stdlib.BoundLogger) -> None:
        self._logger = logger
        self._stats = LayoutStats()

    def log_run_start(self, offset: int, count: int, limit: int, right_to_left: bool) -> None:
        """Log start of a layout call."""
        self._logger.debug(
            "Laying out run",
            offset=offset,
            count=count,
            limit=limit,
            rtl=right_to_left,
        )

    def log_shaped(self, shaped_count: int, script: str | None, language: str | None) -> None:
        """Log the shaper's raw output size."""
        self._logger.debug(
            "Run shaped",
            shaped=shaped_count,
            script=script,
            language=language,
        )

    def log_run_complete(
        self,
        glyph_count: int,
        filler_count: int,
        duration_ms: float,
    ) -> None:
        """Log a successful layout call."""
        self._logger.debug(
            "Run laid out",
            glyphs=glyph_count,
            fillers=filler_count,
            duration_ms=round(duration_ms, 2),
        )
        self._stats.runs += 1
        self._stats.glyph_count += glyph_count
        self._stats.filler_count += filler_count
        self._stats.total_run_time_ms += duration_ms

    def log_run_failed(self, reason: str, **details: object) -> None:
        """Log a failed layout call."""
        self._logger.warning("Layout failed", reason=reason, **details)
        self._stats.failure_count += 1
        self._stats.last_failure = reason

    @property
    def stats(self) -> LayoutStats:
        """Get current layout statistics."""
        return self._stats
