"""eventdispatch public API."""

from .config import DispatcherConfig
from .dispatcher import EventDispatcher
from .events import Event, EventName, Listener, StoppableEvent
from .exceptions import DispatcherError, InvalidRegistration

__all__ = [
    "DispatcherConfig",
    "DispatcherError",
    "Event",
    "EventDispatcher",
    "EventName",
    "InvalidRegistration",
    "Listener",
    "StoppableEvent",
]
