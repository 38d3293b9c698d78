"""Timing collaborators notified after each comparison."""

from __future__ import annotations

import logging
from typing import Optional, Protocol

from .utils import format_elapsed


class PerformanceLogger(Protocol):
    """Receives a label and the elapsed time of a top-level comparison."""

    def log(self, label: str, elapsed_seconds: float) -> None:
        ...


class NullPerformanceLogger:
    """Discards timings. Used unless diagnostics are enabled."""

    def log(self, label: str, elapsed_seconds: float) -> None:
        pass


class LoggingPerformanceLogger:
    """Writes timings to a stdlib logger, e.g. ``Execution Time 0s 1.204ms``."""

    def __init__(self, logger: Optional[logging.Logger] = None, level: int = logging.DEBUG):
        self.logger = logger or logging.getLogger(__name__)
        self.level = level

    def log(self, label: str, elapsed_seconds: float) -> None:
        self.logger.log(self.level, "%s %s", label, format_elapsed(elapsed_seconds))


def get_performance_logger(diagnostics: bool) -> PerformanceLogger:
    """Pick the default timing collaborator for the diagnostics flag."""
    if diagnostics:
        return LoggingPerformanceLogger()
    return NullPerformanceLogger()
