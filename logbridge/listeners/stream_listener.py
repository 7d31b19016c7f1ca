"""Stream listener writing formatted events"""

import sys
from logbridge.core.log_event import LogEvent
from logbridge.formatters.base_formatter import BaseFormatter
from logbridge.formatters.text_formatter import TextFormatter
from logbridge.listeners.base_listener import BaseListener


class StreamListener(BaseListener):
    """Write events to a text stream through a formatter."""

    def __init__(self, stream=None, formatter: BaseFormatter = None):
        """
        Initialize stream listener.

        Args:
            stream: Output stream (default: sys.stderr)
            formatter: Event formatter (default: TextFormatter)
        """
        self.stream = stream or sys.stderr
        self.formatter = formatter or TextFormatter()

    def accept(self, event: LogEvent) -> None:
        """Write log event to the stream."""
        self.stream.write(self.formatter.format(event) + "\n")
        self.stream.flush()

    def flush(self):
        """Flush stream."""
        self.stream.flush()

    def __repr__(self) -> str:
        return f"StreamListener(formatter={self.formatter!r})"
