"""
JSON formatter for structured output

Formats log events as JSON objects
"""

import json
from logbridge.core.log_event import LogEvent
from logbridge.formatters.base_formatter import BaseFormatter


class JSONFormatter(BaseFormatter):
    """
    Format log events as JSON objects.

    Produces structured output suitable for log aggregation systems.
    """

    def __init__(self, indent: int = None, ensure_ascii: bool = False):
        """
        Initialize JSON formatter.

        Args:
            indent: JSON indentation (None for compact, 2 for readable)
            ensure_ascii: Escape non-ASCII characters
        """
        self.indent = indent
        self.ensure_ascii = ensure_ascii

    def format(self, event: LogEvent) -> str:
        """
        Format log event as JSON.

        Args:
            event: Log event to format

        Returns:
            JSON string
        """
        log_dict = {
            "level": event.level.name,
            "logger": event.logger_name,
            "message": event.message,
        }

        return json.dumps(
            log_dict,
            indent=self.indent,
            ensure_ascii=self.ensure_ascii
        )

    def __repr__(self) -> str:
        """String representation."""
        return f"JSONFormatter(indent={self.indent})"
