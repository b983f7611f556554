"""Testing utilities for eventdispatch."""

from .factory import EventNameFactory, ListenerFactory
from .fixtures import dispatcher, dispatcher_fixture
from .recorder import DispatchCall, DispatchRecorder

__all__ = [
    "DispatchCall",
    "DispatchRecorder",
    "EventNameFactory",
    "ListenerFactory",
    "dispatcher",
    "dispatcher_fixture",
]
