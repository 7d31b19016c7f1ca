"""
Log level enumeration

Severity levels of the logging facade and their stdlib counterparts.
"""

import logging
from enum import IntEnum
from typing import Dict


# stdlib logging has no TRACE, register one below DEBUG
TRACE_LEVEL_NUM = 5
logging.addLevelName(TRACE_LEVEL_NUM, "TRACE")


class Level(IntEnum):
    """
    Facade log level.

    Values are compatible with Python's logging module so that a level can
    be passed straight to a stdlib handler or logger when needed.
    """

    TRACE = TRACE_LEVEL_NUM   # Most verbose, detailed tracing
    DEBUG = 10                # Debug information
    INFO = 20                 # Informational messages
    WARN = 30                 # Warning messages
    ERROR = 40                # Error messages
    FATAL = 50                # Unrecoverable errors

    def __str__(self) -> str:
        """String representation of log level."""
        return self.name

    def is_equal_or_higher_than(self, other: "Level") -> bool:
        """True if this level is at least as severe as ``other``."""
        return self >= other

    @classmethod
    def default_level(cls) -> "Level":
        """Threshold used when nothing else is configured."""
        return cls.INFO

    @classmethod
    def from_string(cls, level_str: str) -> "Level":
        """
        Convert string to Level.

        Args:
            level_str: Level name (case-insensitive). WARNING and CRITICAL
                are accepted as the stdlib spellings of WARN and FATAL.

        Returns:
            Level enum value

        Raises:
            ValueError: If level_str is not valid
        """
        key = level_str.upper()
        key = _ALIASES.get(key, key)
        if key in cls.__members__:
            return cls[key]
        raise ValueError(f"Invalid log level: {level_str}")


_ALIASES: Dict[str, str] = {
    "WARNING": "WARN",
    "CRITICAL": "FATAL",
}
