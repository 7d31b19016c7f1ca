"""
Logger registry

Creates BridgeLogger instances bound to stdlib channels, keeps them by
canonical name and propagates registry-wide listeners to all of them.
"""

from __future__ import annotations
from typing import Dict, Iterator, Optional, Tuple, Type, Union
import logging
import threading

from logbridge.core.log_level import Level
from logbridge.core.logger import (
    BridgeLogger,
    Listener,
    require_formatter,
    require_level,
    require_listener,
)
from logbridge.formatters.base_formatter import BaseFormatter
from logbridge.formatters.text_formatter import TextFormatter

_log = logging.getLogger(__name__)

Binding = Union[str, type]


def make_name_from(qualified_name: str) -> str:
    """
    Abbreviate a dotted qualified name.

    Every segment except the last is shortened to its first character:
    ``com.example.service.UserManager`` becomes ``c.e.s.UserManager``.
    """
    if qualified_name is None:
        raise ValueError("qualified_name must not be None")
    tokens = qualified_name.split(".")
    return ".".join([t[:1] for t in tokens[:-1]] + [tokens[-1]])


def name_for(cls: type) -> str:
    """
    Canonical logger name for a class.

    Nested classes keep their enclosing classes joined by ``$``, so
    ``pkg.mod.Outer.Config`` becomes ``p.m.Outer$Config``.
    """
    if cls is None:
        raise ValueError("binding must not be None")
    if not isinstance(cls, type):
        raise TypeError("binding must be a class")
    return make_name_from(f"{cls.__module__}.{cls.__qualname__.replace('.', '$')}")


class LoggerRegistry:
    """
    Factory and registry of facade loggers.

    Loggers are created with the registry's current default level and
    formatter. Changing the defaults later does not touch loggers that
    already exist. Listeners added to the registry are attached to every
    logger it holds, present and future.

    Thread Safety:
        All methods are thread-safe. Structural changes happen under a
        lock; ``loggers()`` and ``listeners()`` iterate snapshots.

    Example:
        registry = LoggerRegistry()
        registry.add_listener(alerts)

        log = registry.create(UserManager)      # "m.s.UserManager"
        log.info("user {} created", user_id)

        registry.set_level("m.", Level.DEBUG)
    """

    def __init__(
        self,
        level: Optional[Level] = None,
        formatter: Optional[BaseFormatter] = None
    ):
        """
        Initialize registry.

        Args:
            level: Default threshold for new loggers (default: Level.default_level())
            formatter: Default formatter for new loggers (default: TextFormatter)
        """
        self._level = require_level(level) if level is not None else Level.default_level()
        self._formatter = (
            require_formatter(formatter) if formatter is not None else TextFormatter()
        )
        self._loggers: Dict[str, BridgeLogger] = {}
        self._listeners: Tuple[Listener, ...] = ()
        self._lock = threading.RLock()

    def create(self, binding: Binding) -> BridgeLogger:
        """
        Create a logger for a literal name or a class.

        A new logger is built on every call and replaces any logger stored
        under the same canonical name. Use ``acquire`` to reuse an existing
        one.

        Args:
            binding: Logger name, used as is, or a class whose canonical
                name is derived with ``name_for``

        Returns:
            The new logger
        """
        name = self._canonical_name(binding)
        inner = logging.getLogger(name)

        with self._lock:
            log = BridgeLogger(inner, self._formatter, self._level)
            for listener in self._listeners:
                log.add_listener(listener)
            # keyed by channel name: "" resolves to the root logger
            name = log.name
            replaced = self._loggers.get(name)
            self._loggers[name] = log

        if replaced is not None:
            _log.debug("Replaced logger %r", name)
        else:
            _log.debug("Created logger %r at %s", name, log.get_level())
        return log

    def acquire(self, binding: Binding) -> BridgeLogger:
        """
        Return the logger stored for ``binding``, creating it if needed.

        Args:
            binding: Logger name or class, as for ``create``
        """
        name = logging.getLogger(self._canonical_name(binding)).name
        with self._lock:
            log = self._loggers.get(name)
            if log is None:
                log = self.create(name)
            return log

    def get(self, name: str) -> Optional[BridgeLogger]:
        """
        Get a registered logger by canonical name.

        Returns:
            Logger instance or None if not found
        """
        with self._lock:
            return self._loggers.get(name)

    @staticmethod
    def logger_class() -> Type[BridgeLogger]:
        """Type of the loggers this registry creates."""
        return BridgeLogger

    def get_level(self) -> Level:
        """Default threshold for loggers created from now on."""
        return self._level

    def set_default_level(self, level: Level) -> None:
        self._level = require_level(level)

    def get_formatter(self) -> BaseFormatter:
        """Default formatter for loggers created from now on."""
        return self._formatter

    def set_formatter(self, formatter: BaseFormatter) -> None:
        self._formatter = require_formatter(formatter)

    def add_listener(self, listener: Listener) -> bool:
        """
        Register a listener on the registry and on every stored logger.

        Returns:
            True if the listener was added, False if already registered
        """
        require_listener(listener)
        with self._lock:
            if any(existing is listener for existing in self._listeners):
                return False
            self._listeners = self._listeners + (listener,)
            for log in self._loggers.values():
                log.add_listener(listener)
            return True

    def remove_listener(self, listener: Listener) -> bool:
        """
        Unregister a listener from the registry and every stored logger.

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
            for log in self._loggers.values():
                log.remove_listener(listener)
            return True

    def loggers(self) -> Iterator[Tuple[str, BridgeLogger]]:
        """Iterate over ``(name, logger)`` pairs as registered right now."""
        with self._lock:
            snapshot = list(self._loggers.items())
        return iter(snapshot)

    def listeners(self) -> Iterator[Listener]:
        """Iterate over a snapshot of the registry listeners."""
        return iter(self._listeners)

    def set_level(self, path: Binding, level: Level) -> int:
        """
        Set the threshold of every logger whose name starts with ``path``.

        Matching is a plain string prefix test. A class is first converted
        to its canonical name.

        Args:
            path: Name prefix or class
            level: New threshold

        Returns:
            Number of loggers updated
        """
        if path is None:
            raise ValueError("path must not be None")
        require_level(level)
        prefix = path if isinstance(path, str) else name_for(path)

        count = 0
        for name, log in self.loggers():
            if name.startswith(prefix):
                log.set_level(level)
                count += 1

        _log.debug("Set %s on %d logger(s) under %r", level, count, prefix)
        return count

    def _canonical_name(self, binding: Binding) -> str:
        if binding is None:
            raise ValueError("binding must not be None")
        if isinstance(binding, str):
            return binding
        if isinstance(binding, type):
            return name_for(binding)
        raise TypeError("binding must be a logger name or a class")

    def __len__(self) -> int:
        with self._lock:
            return len(self._loggers)

    def __repr__(self) -> str:
        return f"LoggerRegistry(loggers={len(self)}, level={self._level})"
