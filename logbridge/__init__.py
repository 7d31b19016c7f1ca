"""
BSD 3-Clause License

Copyright (c) 2021, 🍀☀🌕🌥 🌊
All rights reserved.

Python Logger Bridge - A vendor-neutral logging facade backed by the
standard library logging package
"""

__version__ = "1.0.0"
__author__ = "kcenon"
__email__ = "kcenon@naver.com"

from logbridge.core.logger import BridgeLogger, UnsupportedLevelError
from logbridge.core.logger_registry import LoggerRegistry
from logbridge.core.registry_builder import RegistryBuilder
from logbridge.core.log_event import LogEvent
from logbridge.core.log_level import Level
from logbridge.core.registry_config import RegistryConfig

# Import submodules (not all classes by default)
from logbridge import formatters
from logbridge import listeners

__all__ = [
    "BridgeLogger",
    "UnsupportedLevelError",
    "LoggerRegistry",
    "RegistryBuilder",
    "LogEvent",
    "Level",
    "RegistryConfig",
    "formatters",
    "listeners",
]
