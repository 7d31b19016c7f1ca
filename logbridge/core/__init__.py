"""
Core module for the logging bridge

This module contains the fundamental classes:
- BridgeLogger: Facade logger delegating to a stdlib channel
- LoggerRegistry: Factory and registry of loggers
- RegistryBuilder: Builder pattern for registry construction
- LogEvent: Event delivered to listeners
- Level: Log level enumeration
- RegistryConfig: Configuration management
"""

from logbridge.core.log_level import Level, TRACE_LEVEL_NUM
from logbridge.core.log_event import LogEvent
from logbridge.core.message import BraceMessage, format_message
from logbridge.core.logger import BridgeLogger, UnsupportedLevelError
from logbridge.core.logger_registry import LoggerRegistry, make_name_from, name_for
from logbridge.core.registry_config import RegistryConfig
from logbridge.core.registry_builder import RegistryBuilder

__all__ = [
    "Level",
    "TRACE_LEVEL_NUM",
    "LogEvent",
    "BraceMessage",
    "format_message",
    "BridgeLogger",
    "UnsupportedLevelError",
    "LoggerRegistry",
    "make_name_from",
    "name_for",
    "RegistryConfig",
    "RegistryBuilder",
]
