"""
Level-based listener filter

Passes events to a delegate listener only within a level range
"""

from typing import Callable, Optional
from logbridge.core.log_event import LogEvent
from logbridge.core.log_level import Level
from logbridge.listeners.base_listener import BaseListener


class LevelFilterListener(BaseListener):
    """
    Filter events by level before handing them on.

    Allows filtering by minimum and/or maximum log level.
    """

    def __init__(
        self,
        delegate: Callable[[LogEvent], None],
        min_level: Optional[Level] = None,
        max_level: Optional[Level] = None
    ):
        """
        Initialize level filter.

        Args:
            delegate: Listener receiving the events that pass
            min_level: Minimum log level (inclusive). If None, no minimum.
            max_level: Maximum log level (inclusive). If None, no maximum.

        Example:
            # Only report WARN and above
            listener = LevelFilterListener(alerts, min_level=Level.WARN)

            # Only report DEBUG to INFO
            listener = LevelFilterListener(sink, Level.DEBUG, Level.INFO)
        """
        if delegate is None:
            raise ValueError("delegate must not be None")
        if not callable(delegate):
            raise TypeError("delegate must be callable")

        self.delegate = delegate
        self.min_level = min_level
        self.max_level = max_level

    def should_accept(self, event: LogEvent) -> bool:
        """
        Check if event's level is within the specified range.

        Args:
            event: Log event to check

        Returns:
            True if event level is within range, False otherwise
        """
        if self.min_level is not None and event.level < self.min_level:
            return False

        if self.max_level is not None and event.level > self.max_level:
            return False

        return True

    def accept(self, event: LogEvent) -> None:
        if self.should_accept(event):
            self.delegate(event)

    def __repr__(self) -> str:
        """String representation."""
        return f"LevelFilterListener(min={self.min_level}, max={self.max_level})"
