"""
Facade logger bound to a stdlib logging channel

Every accepted call is forwarded to the backend ``logging.Logger`` and
mirrored to the logger's listeners as a LogEvent.
"""

from __future__ import annotations
from typing import Any, Callable, Iterator, Tuple
import logging
import threading

from logbridge.core.log_level import Level, TRACE_LEVEL_NUM
from logbridge.core.log_event import LogEvent
from logbridge.core.message import BraceMessage, format_message
from logbridge.formatters.base_formatter import BaseFormatter

Listener = Callable[[LogEvent], Any]

# Frames between the backend call and the user's call site:
# caller -> info()/log() -> _dispatch() -> _forward() -> backend
_STACKLEVEL = 4


class UnsupportedLevelError(ValueError):
    """Raised when a level has no backend channel."""


def require_level(level: Level) -> Level:
    if level is None:
        raise ValueError("level must not be None")
    if not isinstance(level, Level):
        raise TypeError("level must be Level enum")
    return level


def require_formatter(formatter: BaseFormatter) -> BaseFormatter:
    if formatter is None:
        raise ValueError("formatter must not be None")
    if not isinstance(formatter, BaseFormatter):
        raise TypeError("formatter must be a BaseFormatter")
    return formatter


def require_listener(listener: Listener) -> Listener:
    if listener is None:
        raise ValueError("listener must not be None")
    if not callable(listener):
        raise TypeError("listener must be callable")
    return listener


def exception_message(throwable: BaseException) -> str:
    """Message text of an exception, without KeyError's repr quoting."""
    if isinstance(throwable, KeyError) and len(throwable.args) == 1:
        return str(throwable.args[0])
    return str(throwable)


class BridgeLogger:
    """
    Logger that delegates to a stdlib logging channel.

    Each level method accepts the following argument shapes::

        log.info("plain message")
        log.info("user {} logged in from {}", user, host)
        log.info(exc)
        log.info(exc, "request failed")
        log.info(exc, "request {} failed", request_id)

    Calls below the logger's threshold return immediately without touching
    the backend, the listeners or the arguments.

    Thread Safety:
        Logging and listener add/remove may run concurrently. Listeners are
        kept in an immutable tuple that is replaced under a lock, so emission
        always iterates a consistent snapshot.
    """

    def __init__(
        self,
        inner: logging.Logger,
        formatter: BaseFormatter,
        level: Level
    ):
        """
        Initialize logger.

        Args:
            inner: Backend channel all calls are delegated to
            formatter: Formatter reference (kept, not applied to backend records)
            level: Initial threshold
        """
        if inner is None:
            raise ValueError("inner must not be None")
        if inner.name is None:
            raise ValueError("inner logger has no name")

        self._inner = inner
        self._name: str = inner.name
        self._formatter = require_formatter(formatter)
        self._level = require_level(level)
        self._listeners: Tuple[Listener, ...] = ()
        self._lock = threading.Lock()

    @property
    def name(self) -> str:
        """Canonical name, identical to the backend channel name."""
        return self._name

    def get_level(self) -> Level:
        return self._level

    def set_level(self, level: Level) -> None:
        self._level = require_level(level)

    def get_formatter(self) -> BaseFormatter:
        return self._formatter

    def set_formatter(self, formatter: BaseFormatter) -> None:
        self._formatter = require_formatter(formatter)

    def add_listener(self, listener: Listener) -> bool:
        """
        Register a listener.

        Membership is by identity; adding the same object twice is a no-op.

        Returns:
            True if the listener was added, False if already present
        """
        require_listener(listener)
        with self._lock:
            if any(existing is listener for existing in self._listeners):
                return False
            self._listeners = self._listeners + (listener,)
            return True

    def remove_listener(self, listener: Listener) -> bool:
        """
        Unregister a listener.

        Returns:
            True if the listener was removed, False if it was not registered
        """
        require_listener(listener)
        with self._lock:
            remaining = tuple(
                existing for existing in self._listeners if existing is not listener
            )
            if len(remaining) == len(self._listeners):
                return False
            self._listeners = remaining
            return True

    def listeners(self) -> Iterator[Listener]:
        """Iterate over a snapshot of the registered listeners."""
        return iter(self._listeners)

    def is_enabled(self, level: Level) -> bool:
        """True if a message at ``level`` passes the current threshold."""
        return require_level(level).is_equal_or_higher_than(self._level)

    def log(self, level: Level, message: Any, *args: Any) -> None:
        """
        Log at an explicit level.

        Args:
            level: Message level
            message: Message template, or an exception followed by an
                optional template in ``args``
            *args: Positional arguments for ``{}`` placeholders
        """
        self._dispatch(require_level(level), message, args)

    def trace(self, message: Any, *args: Any) -> None:
        """Log trace message."""
        self._dispatch(Level.TRACE, message, args)

    def debug(self, message: Any, *args: Any) -> None:
        """Log debug message."""
        self._dispatch(Level.DEBUG, message, args)

    def info(self, message: Any, *args: Any) -> None:
        """Log info message."""
        self._dispatch(Level.INFO, message, args)

    def warn(self, message: Any, *args: Any) -> None:
        """Log warning message."""
        self._dispatch(Level.WARN, message, args)

    def error(self, message: Any, *args: Any) -> None:
        """Log error message."""
        self._dispatch(Level.ERROR, message, args)

    def fatal(self, message: Any, *args: Any) -> None:
        """Log fatal message. The backend receives it on its error channel."""
        self._dispatch(Level.FATAL, message, args)

    # stdlib spellings
    warning = warn
    critical = fatal

    def _dispatch(self, level: Level, message: Any, args: Tuple[Any, ...]) -> None:
        if message is None:
            raise ValueError("message must not be None")
        throwable = message if isinstance(message, BaseException) else None
        if throwable is None:
            if not isinstance(message, str):
                raise TypeError("message must be a string or an exception")
        elif args and not isinstance(args[0], str):
            raise TypeError("message must be a string")

        if not level.is_equal_or_higher_than(self._level):
            return

        if throwable is not None:
            kind = type(throwable).__name__
            if args:
                text = format_message(args[0], args[1:])
                self._forward(level, text, (), throwable)
                self._notify(level, f"{kind}: {text}")
            else:
                self._forward(level, "", (), throwable)
                self._notify(level, f"{kind}: {exception_message(throwable)}")
            return

        self._forward(level, message, args, None)
        self._notify(level, format_message(message, args))

    def _forward(
        self,
        level: Level,
        template: str,
        args: Tuple[Any, ...],
        throwable: BaseException = None
    ) -> None:
        """Hand the call to the backend channel for ``level``."""
        msg = BraceMessage(template, args) if args else template
        kwargs = {"stacklevel": _STACKLEVEL}
        if throwable is not None:
            kwargs["exc_info"] = throwable

        if level is Level.TRACE:
            self._inner.log(TRACE_LEVEL_NUM, msg, **kwargs)
        elif level is Level.DEBUG:
            self._inner.debug(msg, **kwargs)
        elif level is Level.INFO:
            self._inner.info(msg, **kwargs)
        elif level is Level.WARN:
            self._inner.warning(msg, **kwargs)
        elif level is Level.ERROR or level is Level.FATAL:
            self._inner.error(msg, **kwargs)
        else:
            raise UnsupportedLevelError(f"No backend channel for level: {level}")

    def _notify(self, level: Level, message: str) -> None:
        event = LogEvent(level, self._name, message)
        for listener in self._listeners:
            listener(event)

    def __repr__(self) -> str:
        return f"BridgeLogger(name={self._name!r}, level={self._level})"
