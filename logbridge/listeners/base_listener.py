"""
Base listener interface
"""

from abc import ABC, abstractmethod
from logbridge.core.log_event import LogEvent


class BaseListener(ABC):
    """
    Abstract base class for event listeners.

    Loggers call every registered listener with each emitted LogEvent.
    Any callable taking a single event is accepted as a listener; this
    base class only gives subclasses a named ``accept`` hook.
    """

    @abstractmethod
    def accept(self, event: LogEvent) -> None:
        """
        Receive one emitted event.

        Args:
            event: The emitted log event
        """
        pass

    def __call__(self, event: LogEvent) -> None:
        """Allow listeners to be callable."""
        self.accept(event)
