"""Registry builder pattern"""

import dataclasses
from typing import List

from logbridge.core.log_level import Level
from logbridge.core.logger import (
    Listener,
    require_formatter,
    require_level,
    require_listener,
)
from logbridge.core.logger_registry import LoggerRegistry
from logbridge.core.registry_config import RegistryConfig
from logbridge.formatters.base_formatter import BaseFormatter


class RegistryBuilder:
    """Builder pattern for registry construction."""

    def __init__(self):
        self._config = RegistryConfig()
        self._listeners: List[Listener] = []

    def with_config(self, config: RegistryConfig) -> "RegistryBuilder":
        """Start from a copy of an existing configuration."""
        if config is None:
            raise ValueError("config must not be None")
        self._config = dataclasses.replace(config)
        return self

    def with_level(self, level: Level) -> "RegistryBuilder":
        """Set default level for new loggers."""
        self._config.default_level = require_level(level)
        return self

    def with_formatter(self, formatter: BaseFormatter) -> "RegistryBuilder":
        """Set default formatter for new loggers."""
        self._config.formatter = require_formatter(formatter)
        return self

    def with_listener(self, listener: Listener) -> "RegistryBuilder":
        """
        Add a registry-wide listener.

        Args:
            listener: Callable receiving every LogEvent

        Returns:
            Self for method chaining

        Example:
            from logbridge.listeners import StreamListener

            registry = (RegistryBuilder()
                .with_level(Level.DEBUG)
                .with_listener(StreamListener())
                .build())
        """
        self._listeners.append(require_listener(listener))
        return self

    def build(self) -> LoggerRegistry:
        """Build and return configured registry."""
        registry = LoggerRegistry(
            level=self._config.default_level,
            formatter=self._config.formatter,
        )

        for listener in self._listeners:
            registry.add_listener(listener)

        return registry
