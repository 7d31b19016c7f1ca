"""
Compact formatter for minimal output

Produces concise single-line events
"""

from logbridge.core.log_event import LogEvent
from logbridge.formatters.base_formatter import BaseFormatter

_LEVEL_ABBREV = {
    "TRACE": "TRC",
    "DEBUG": "DBG",
    "INFO": "INF",
    "WARN": "WRN",
    "ERROR": "ERR",
    "FATAL": "FTL",
}


class CompactFormatter(BaseFormatter):
    """
    Format log events in a compact single-line format.

    Optimized for production environments with high log volume.
    """

    def __init__(self, include_logger: bool = True):
        """
        Initialize compact formatter.

        Args:
            include_logger: Include logger name in output

        Example:
            # "INF [c.e.s.UserManager] message"
            formatter = CompactFormatter()

            # "INF message"
            formatter = CompactFormatter(include_logger=False)
        """
        self.include_logger = include_logger

    def format(self, event: LogEvent) -> str:
        parts = [_LEVEL_ABBREV.get(event.level.name, event.level.name[:3])]

        if self.include_logger and event.logger_name:
            parts.append(f"[{event.logger_name}]")

        parts.append(event.message)

        return " ".join(parts)

    def __repr__(self) -> str:
        """String representation."""
        return f"CompactFormatter(logger={self.include_logger})"
