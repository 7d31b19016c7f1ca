"""
Text formatter with customizable template

Formats log events using a template string with placeholders
"""

from logbridge.core.log_event import LogEvent
from logbridge.formatters.base_formatter import BaseFormatter


class TextFormatter(BaseFormatter):
    """
    Format log events using a customizable template.

    Supports placeholders for all LogEvent fields.
    """

    DEFAULT_TEMPLATE = "[{level:5}] {logger}: {message}"

    def __init__(self, template: str = None):
        """
        Initialize text formatter.

        Args:
            template: Format template with placeholders.
                     Available placeholders:
                     - {level}: Log level name
                     - {level:5}: Log level with padding
                     - {logger}: Logger name
                     - {message}: Log message

        Example:
            # Default format
            formatter = TextFormatter()

            # Custom format
            formatter = TextFormatter("{level} - {message}")
        """
        self.template = template or self.DEFAULT_TEMPLATE

    def format(self, event: LogEvent) -> str:
        """
        Format log event using the template.

        Args:
            event: Log event to format

        Returns:
            Formatted string
        """
        format_dict = {
            "level": event.level.name,
            "logger": event.logger_name,
            "message": event.message,
        }

        try:
            return self.template.format(**format_dict)
        except KeyError as e:
            # Fallback if template has unknown placeholder
            return f"[FORMAT ERROR: {e}] {event.message}"

    def __repr__(self) -> str:
        """String representation."""
        return f"TextFormatter(template='{self.template}')"
