"""
Log event data structure

The notification payload delivered to listeners once a message has passed
its logger's threshold.
"""

from dataclasses import dataclass
from typing import Any, Dict

from logbridge.core.log_level import Level


@dataclass(frozen=True)
class LogEvent:
    """
    Immutable record of one emitted message.

    Events are built at emission time and handed to listeners; they are
    never stored by the logger itself.
    """

    level: Level
    logger_name: str
    message: str

    def __post_init__(self):
        """Validate log event after initialization."""
        if not isinstance(self.level, Level):
            raise TypeError("level must be Level enum")
        if self.logger_name is None:
            raise ValueError("logger_name must not be None")
        if self.message is None:
            raise ValueError("message must not be None")

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert log event to dictionary.

        Returns:
            Dictionary representation
        """
        return {
            "level": self.level.name,
            "logger_name": self.logger_name,
            "message": self.message,
        }

    def __str__(self) -> str:
        return f"{{level={self.level.name}, name='{self.logger_name}', message='{self.message}'}}"
