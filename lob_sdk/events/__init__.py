"""Event helpers."""

from .event_emitter import EventEmitter, Listener

__all__ = ["EventEmitter", "Listener"]
