"""
Typed publish-subscribe helper.

Components that need to tell others about state changes own an
EventEmitter and call ``emit``; interested code registers listeners with
``on``. Listeners run synchronously in registration order, and an exception
raised by a listener propagates to the code that called ``emit``.
"""

import threading
from collections import defaultdict
from typing import Any, Callable, Generic, Hashable, Optional, TypeVar

from ..config import SdkConfig

E = TypeVar("E", bound=Hashable)

Listener = Callable[[Any], None]


class EventEmitter(Generic[E]):
    """Maps event names to listener lists."""

    def __init__(self, enable_debug_logging: bool = False):
        """Initialize the emitter.

        Args:
            enable_debug_logging: Whether to report subscriptions and emits
                to the debug callback
        """
        self.enable_debug_logging = enable_debug_logging
        self._listeners: dict[E, list[Listener]] = defaultdict(list)
        self._lock = threading.RLock()
        self._debug_callback: Optional[Callable[[str], None]] = None

    @classmethod
    def from_config(cls, config: SdkConfig) -> "EventEmitter[E]":
        return cls(enable_debug_logging=config.debug_events)

    def set_debug_callback(self, callback: Optional[Callable[[str], None]]) -> None:
        """Set a callback function for debug logging."""
        self._debug_callback = callback

    def _debug_log(self, message: str) -> None:
        if self.enable_debug_logging and self._debug_callback:
            self._debug_callback(f"[EVENT] {message}")

    def on(self, event: E, listener: Listener) -> None:
        """Register ``listener`` for ``event``. Duplicates are called twice."""
        with self._lock:
            self._listeners[event].append(listener)
        self._debug_log(
            f"Subscribed {getattr(listener, '__name__', 'anonymous')} to {event!r}"
        )

    def off(self, event: E, listener: Listener) -> bool:
        """Remove every registration of ``listener`` for ``event``.

        Returns:
            True if the listener was registered
        """
        with self._lock:
            listeners = self._listeners.get(event)
            if not listeners or listener not in listeners:
                return False
            self._listeners[event] = [registered for registered in listeners if registered != listener]
        self._debug_log(f"Unsubscribed from {event!r}")
        return True

    def emit(self, event: E, arg: Any = None) -> int:
        """Call every listener of ``event`` with ``arg``.

        Returns:
            Number of listeners called
        """
        with self._lock:
            # Copy so listeners may subscribe or unsubscribe while running
            listeners = list(self._listeners.get(event, ()))
        self._debug_log(f"Emitting {event!r} to {len(listeners)} listener(s)")
        for listener in listeners:
            listener(arg)
        return len(listeners)

    def listener_count(self, event: E) -> int:
        with self._lock:
            return len(self._listeners.get(event, ()))
