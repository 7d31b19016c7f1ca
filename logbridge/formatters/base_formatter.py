"""
Base formatter interface
"""

from abc import ABC, abstractmethod
from logbridge.core.log_event import LogEvent


class BaseFormatter(ABC):
    """
    Abstract base class for event formatters.

    Formatters convert LogEvent objects into strings. Loggers only carry a
    formatter reference; rendering of backend records is left to the
    backend, and formatters are applied by formatting listeners.
    """

    @abstractmethod
    def format(self, event: LogEvent) -> str:
        """
        Format a log event into a string.

        Args:
            event: The log event to format

        Returns:
            Formatted string representation of the event
        """
        pass

    def __call__(self, event: LogEvent) -> str:
        """Allow formatters to be callable."""
        return self.format(event)
