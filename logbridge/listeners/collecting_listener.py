"""In-memory listener"""

import threading
from typing import List

from logbridge.core.log_event import LogEvent
from logbridge.core.log_level import Level
from logbridge.listeners.base_listener import BaseListener


class CollectingListener(BaseListener):
    """Keep every received event in memory."""

    def __init__(self):
        self._events: List[LogEvent] = []
        self._lock = threading.Lock()

    def accept(self, event: LogEvent) -> None:
        with self._lock:
            self._events.append(event)

    @property
    def events(self) -> List[LogEvent]:
        """Copy of the received events, oldest first."""
        with self._lock:
            return list(self._events)

    def messages(self, level: Level = None) -> List[str]:
        """
        Messages of the received events.

        Args:
            level: Only include events at exactly this level

        Returns:
            List of messages in arrival order
        """
        return [
            e.message for e in self.events
            if level is None or e.level == level
        ]

    def clear(self) -> None:
        with self._lock:
            self._events.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._events)
