"""
Callback-based listener

Adapts a plain function to the listener interface
"""

from typing import Callable
from logbridge.core.log_event import LogEvent
from logbridge.listeners.base_listener import BaseListener


class CallbackListener(BaseListener):
    """Forward events to a custom callback function."""

    def __init__(self, callback: Callable[[LogEvent], None]):
        """
        Initialize callback listener.

        Args:
            callback: Function that takes a LogEvent.

        Example:
            errors = []
            listener = CallbackListener(
                lambda event: errors.append(event) if event.level >= Level.ERROR else None
            )
        """
        if not callable(callback):
            raise TypeError("callback must be callable")

        self.callback = callback

    def accept(self, event: LogEvent) -> None:
        """
        Hand the event to the callback.

        Raises:
            Exception: If callback raises an exception, it's propagated
        """
        self.callback(event)

    def __repr__(self) -> str:
        """String representation."""
        callback_name = getattr(self.callback, '__name__', repr(self.callback))
        return f"CallbackListener(callback={callback_name})"
