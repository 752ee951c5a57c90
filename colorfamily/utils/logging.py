"""
Color Family Engine Structured Logging

The engine only emits through loguru's shared logger; sinks belong to the
application. Entry points that want the engine's stdout format call
configure_logging() once at startup.
"""
import sys
from typing import Any, Dict, Optional, TextIO

from loguru import logger

from colorfamily.config import config


LOG_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level} | {message} | {extra}"


def configure_logging(level: Optional[str] = None, sink: TextIO = sys.stdout) -> int:
    """
    Replace loguru's sinks with the engine's structured format.

    Only application entry points should call this; it removes every sink
    added before it.

    Returns:
        Handler id of the new sink
    """
    logger.remove()
    return logger.add(
        sink,
        format=LOG_FORMAT,
        level=level or config.LOG_LEVEL,
        serialize=False  # Set to True for JSON output
    )


class StructuredLogger:
    """Emits engine events with their data bound as loguru extras."""

    def __init__(self, component: str = "colorfamily"):
        self.component = component

    def _bound(self, extra: Optional[Dict[str, Any]]):
        return logger.bind(component=self.component, **(extra or {}))

    def info(self, message: str, extra: Optional[Dict[str, Any]] = None):
        """Log info message with optional extra data."""
        self._bound(extra).info(message)

    def warning(self, message: str, extra: Optional[Dict[str, Any]] = None):
        """Log warning message with optional extra data."""
        self._bound(extra).warning(message)

    def debug(self, message: str, extra: Optional[Dict[str, Any]] = None):
        """Log debug message with optional extra data."""
        self._bound(extra).debug(message)


# Global logger instance
_logger: Optional[StructuredLogger] = None


def get_logger() -> StructuredLogger:
    """Get or create global logger instance."""
    global _logger
    if _logger is None:
        _logger = StructuredLogger()
    return _logger
