"""
Event formatters module

Provides formatter implementations for rendering log events.
"""

from logbridge.formatters.base_formatter import BaseFormatter
from logbridge.formatters.text_formatter import TextFormatter
from logbridge.formatters.json_formatter import JSONFormatter
from logbridge.formatters.compact_formatter import CompactFormatter

__all__ = [
    "BaseFormatter",
    "TextFormatter",
    "JSONFormatter",
    "CompactFormatter",
]
