"""
Structured logging for the scoring engine.

Console output with optional key/value context, plus counters for how
often rounds are recomputed and how many entries are rejected.
"""

import json
import logging
import sys
from pathlib import Path
from typing import Optional


class StructuredLogger:
    """
    Wraps a stdlib logger, appending keyword context as JSON.
    Tracks engine counters alongside the log output.
    """

    def __init__(
        self,
        name: str = "voor",
        level: str = "INFO",
        log_file: Optional[Path] = None,
        enable_console: bool = True,
    ):
        """
        Args:
            name: Logger name
            level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
            log_file: Also write everything (DEBUG and up) to this file
            enable_console: Output logs to stdout
        """
        self.logger = logging.getLogger(name)
        self.logger.setLevel(logging.DEBUG if log_file else getattr(logging, level.upper()))
        self.logger.handlers.clear()
        self.logger.propagate = False

        self.metrics = {
            "rounds_created": 0,
            "setups_rejected": 0,
            "scores_entered": 0,
            "entries_rejected": 0,
            "recomputations": 0,
        }

        if enable_console:
            console_handler = logging.StreamHandler(sys.stdout)
            console_handler.setLevel(getattr(logging, level.upper()))
            console_handler.setFormatter(logging.Formatter(
                fmt='%(asctime)s | %(levelname)-8s | %(name)s | %(message)s',
                datefmt='%Y-%m-%d %H:%M:%S'
            ))
            self.logger.addHandler(console_handler)

        if log_file is not None:
            log_file.parent.mkdir(parents=True, exist_ok=True)
            file_handler = logging.FileHandler(log_file, encoding='utf-8')
            file_handler.setLevel(logging.DEBUG)
            file_handler.setFormatter(logging.Formatter(
                fmt='%(asctime)s | %(levelname)-8s | %(name)s:%(lineno)d | %(message)s',
                datefmt='%Y-%m-%d %H:%M:%S'
            ))
            self.logger.addHandler(file_handler)

    def debug(self, message: str, **kwargs):
        self._log(logging.DEBUG, message, kwargs)

    def info(self, message: str, **kwargs):
        self._log(logging.INFO, message, kwargs)

    def warning(self, message: str, **kwargs):
        self._log(logging.WARNING, message, kwargs)

    def error(self, message: str, **kwargs):
        self._log(logging.ERROR, message, kwargs)

    def _log(self, level: int, message: str, context: dict):
        if context:
            message = f"{message} | Context: {json.dumps(context, default=str, sort_keys=True)}"
        self.logger.log(level, message)

    def record(self, counter: str, amount: int = 1):
        """Increment an engine counter."""
        self.metrics[counter] = self.metrics.get(counter, 0) + amount

    def get_metrics(self) -> dict:
        return dict(self.metrics)


_global_logger: Optional[StructuredLogger] = None


def get_logger(name: str = "voor", level: str = "INFO", **kwargs) -> StructuredLogger:
    """Get or create the shared logger instance.

    name, level and kwargs only apply when the instance is created; later
    calls return it unchanged until reset_logger().
    """
    global _global_logger

    if _global_logger is None:
        _global_logger = StructuredLogger(name=name, level=level, **kwargs)

    return _global_logger


def reset_logger():
    """Reset the shared logger (useful for testing)."""
    global _global_logger
    _global_logger = None
