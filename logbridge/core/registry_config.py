"""
Registry configuration management
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Type, Union

from logbridge.core.log_level import Level
from logbridge.formatters.base_formatter import BaseFormatter
from logbridge.formatters.compact_formatter import CompactFormatter
from logbridge.formatters.json_formatter import JSONFormatter
from logbridge.formatters.text_formatter import TextFormatter

FORMATTERS: Dict[str, Type[BaseFormatter]] = {
    "text": TextFormatter,
    "json": JSONFormatter,
    "compact": CompactFormatter,
}


@dataclass
class RegistryConfig:
    """
    Defaults applied to loggers created by a LoggerRegistry.
    """

    default_level: Level = Level.INFO
    formatter: BaseFormatter = field(default_factory=TextFormatter)

    def __post_init__(self):
        """Validate configuration after initialization."""
        if isinstance(self.default_level, str):
            self.default_level = Level.from_string(self.default_level)
        if self.default_level is None:
            raise ValueError("default_level must not be None")
        if not isinstance(self.default_level, Level):
            raise TypeError("default_level must be Level enum")

        if self.formatter is None:
            raise ValueError("formatter must not be None")
        if not isinstance(self.formatter, BaseFormatter):
            raise TypeError("formatter must be a BaseFormatter")

    @classmethod
    def default(cls) -> "RegistryConfig":
        """Create default configuration."""
        return cls()

    @classmethod
    def debug_config(cls) -> "RegistryConfig":
        """Create configuration for debugging."""
        return cls(default_level=Level.TRACE)

    @classmethod
    def production_config(cls) -> "RegistryConfig":
        """Create configuration for production."""
        return cls(
            default_level=Level.WARN,
            formatter=CompactFormatter(),
        )

    @classmethod
    def from_mapping(cls, settings: Mapping[str, Any]) -> "RegistryConfig":
        """
        Create configuration from plain settings.

        Args:
            settings: Mapping with optional keys ``level`` (level name or
                Level) and ``formatter`` (one of ``text``, ``json``,
                ``compact``)

        Raises:
            ValueError: On an unknown level or formatter name
        """
        kwargs: Dict[str, Union[Level, BaseFormatter]] = {}

        level = settings.get("level")
        if level is not None:
            kwargs["default_level"] = (
                level if isinstance(level, Level) else Level.from_string(str(level))
            )

        formatter = settings.get("formatter")
        if formatter is not None:
            try:
                kwargs["formatter"] = FORMATTERS[str(formatter).lower()]()
            except KeyError:
                raise ValueError(f"Invalid formatter: {formatter}") from None

        return cls(**kwargs)
