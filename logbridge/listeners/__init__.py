"""
Event listeners module

Provides listener implementations that observe emitted log events.
"""

from logbridge.listeners.base_listener import BaseListener
from logbridge.listeners.callback_listener import CallbackListener
from logbridge.listeners.level_filter_listener import LevelFilterListener
from logbridge.listeners.stream_listener import StreamListener
from logbridge.listeners.collecting_listener import CollectingListener

__all__ = [
    "BaseListener",
    "CallbackListener",
    "LevelFilterListener",
    "StreamListener",
    "CollectingListener",
]
