"""Logging utilities for Bidiwrap."""

import logging
import time
from dataclasses import dataclass
from pathlib import Path

import structlog

from bidiwrap.domain import WrapDecision


@dataclass
class WrapStats:
    """Statistics from a formatting run."""

    item_count: int = 0
    wrapped_count: int = 0
    leading_marks: int = 0
    trailing_marks: int = 0
    start_time: float | None = None
    end_time: float | None = None

    @property
    def duration_seconds(self) -> float:
        """Calculate run duration."""
        if self.start_time and self.end_time:
            return self.end_time - self.start_time
        return 0.0

    @property
    def unchanged_count(self) -> int:
        """Items that did not need an embedding."""
        return self.item_count - self.wrapped_count


def configure_logging(
    log_file: Path | None = None,
    console_level: str = "WARNING",
    file_level: str = "DEBUG",
    quiet: bool = False,
) -> structlog.stdlib.BoundLogger:
    """Configure structured logging to stderr and, optionally, a file.

    Args:
        log_file: Path to log file (no file output if None)
        console_level: Logging level for console output
        file_level: Logging level for file output
        quiet: If True, suppress console output

    Returns:
        Configured structlog logger
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)
    for handler in list(root_logger.handlers):
        if getattr(handler, "_bidiwrap", False):
            root_logger.removeHandler(handler)
            handler.close()

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(getattr(logging, file_level.upper()))
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s | %(message)s")
        )
        file_handler._bidiwrap = True  # type: ignore[attr-defined]
        root_logger.addHandler(file_handler)

    if not quiet:
        console_handler = logging.StreamHandler()
        console_handler.setLevel(getattr(logging, console_level.upper()))
        console_handler.setFormatter(logging.Formatter("%(message)s"))
        console_handler._bidiwrap = True  # type: ignore[attr-defined]
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
            structlog.processors.JSONRenderer(ensure_ascii=True),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logger = structlog.get_logger("bidiwrap")
    logger.debug(
        "Logging initialized",
        log_file=str(log_file) if log_file else None,
        level=console_level,
    )

    return logger


class WrapLogger:
    """Logger for tracking formatting decisions and statistics."""

    def __init__(self, logger: structlog.stdlib.BoundLogger) -> None:
        self._logger = logger
        self._stats = WrapStats()

    def start(self) -> None:
        """Mark the start of a run."""
        self._stats.start_time = time.perf_counter()

    def finish(self) -> None:
        """Mark the end of a run and log the summary."""
        self._stats.end_time = time.perf_counter()
        self._logger.info(
            "Run complete",
            items=self._stats.item_count,
            wrapped=self._stats.wrapped_count,
            leading_marks=self._stats.leading_marks,
            trailing_marks=self._stats.trailing_marks,
            duration_ms=round(self._stats.duration_seconds * 1000, 2),
        )

    def log_decision(self, index: int, decision: WrapDecision) -> None:
        """Log the decision taken for one item."""
        self._logger.debug("Item formatted", item=index, **decision.to_dict())
        self._stats.item_count += 1
        if decision.needs_wrap:
            self._stats.wrapped_count += 1
        if decision.leading_mark:
            self._stats.leading_marks += 1
        if decision.trailing_mark:
            self._stats.trailing_marks += 1

    def log_error(self, index: int, error: Exception) -> None:
        """Log an item that could not be formatted."""
        self._logger.error(
            "Item failed",
            item=index,
            error=str(error),
            error_type=type(error).__name__,
        )

    @property
    def stats(self) -> WrapStats:
        """Get current run statistics."""
        return self._stats
