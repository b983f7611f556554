"""Synchronous, priority-ordered event dispatch."""

from __future__ import annotations

import contextlib
import logging
from threading import RLock
from typing import Any, Callable, ContextManager

from .config import DispatcherConfig
from .events import EventName, Listener, is_stoppable
from .exceptions import InvalidRegistration
from .matching import get_matcher
from .registry import ListenerRegistry

logger = logging.getLogger(__name__)

_ALL = object()


class EventDispatcher:
    """Registry of listeners invoked in ascending priority order.

    Listeners run on the calling thread, one after the other. Within a
    priority they run in registration order. Exceptions raised by a listener
    propagate out of :meth:`dispatch` and abort the rest of the pass.

    When a dispatch starts the priority sequence of the name is copied, and
    each priority's listener list is copied when traversal reaches it. A
    listener registered mid-dispatch therefore only runs in that pass if it
    joins an existing priority that has not been reached yet.
    """

    def __init__(self, config: DispatcherConfig | None = None) -> None:
        self.config = config or DispatcherConfig()
        self._registry = ListenerRegistry()
        self._matcher = get_matcher(self.config.matching)
        self._lock: ContextManager[Any] = (
            RLock() if self.config.thread_safe else contextlib.nullcontext()
        )

    def __len__(self) -> int:
        with self._lock:
            return len(self._registry)

    def add_listener(self, name: EventName, listener: Listener, priority: int = 0) -> bool:
        """Register ``listener`` for ``name`` at ``priority``.

        Lower priorities run first. Registering the same listener twice
        yields two entries that both fire. Always returns True.
        """
        _check_listener(listener)
        _check_priority(priority)
        with self._lock:
            new_priority = self._registry.add(name, listener, priority)
        logger.debug(
            "Added listener %r to '%s' at priority %d%s",
            listener,
            name,
            priority,
            " (new priority)" if new_priority else "",
        )
        return True

    def on(self, name: EventName, priority: int = 0) -> Callable[[Listener], Listener]:
        """Decorator registering the wrapped callable as a listener."""

        def decorator(listener: Listener) -> Listener:
            self.add_listener(name, listener, priority)
            return listener

        return decorator

    def has_listener(self, name: EventName) -> bool:
        with self._lock:
            return name in self._registry

    def remove_listener(self, name: EventName, listener: Listener, priority: int = 0) -> bool:
        """Remove every entry matching ``listener`` at exactly ``priority``.

        Returns False when nothing matched, including when no listener was
        ever registered for that name and priority.
        """
        _check_priority(priority)
        with self._lock:
            removed = self._registry.remove(
                name,
                listener,
                priority,
                self._matcher,
                prune=self.config.prune_empty,
            )
        if removed <= 0:
            logger.debug("No listener %r at priority %d for '%s'", listener, priority, name)
            return False
        logger.debug(
            "Removed %d entr%s of %r from '%s' at priority %d",
            removed,
            "y" if removed == 1 else "ies",
            listener,
            name,
            priority,
        )
        return True

    def dispatch(self, event: Any, name: EventName) -> None:
        """Invoke the listeners of ``name`` with ``(event, name)``.

        If ``event`` implements :class:`~eventdispatch.events.StoppableEvent`
        it is checked before every listener, and the pass ends as soon as it
        reports propagation stopped.
        """
        with self._lock:
            if name not in self._registry:
                logger.debug("Dispatching '%s' with no listeners", name)
                return
            priorities = self._registry.priorities(name)
            count = sum(len(self._registry.at(name, priority)) for priority in priorities)

        stoppable = is_stoppable(event)
        logger.debug(
            "Dispatching '%s' to %d listeners across %d priorities (stoppable=%s)",
            name,
            count,
            len(priorities),
            stoppable,
        )
        for priority in priorities:
            with self._lock:
                listeners = self._registry.at(name, priority)
            for listener in listeners:
                if stoppable and event.is_propagation_stopped():
                    logger.debug("Propagation of '%s' stopped before %r", name, listener)
                    return
                listener(event, name)

    def listeners(self, name: EventName) -> tuple[tuple[int, Listener], ...]:
        """Return ``(priority, listener)`` pairs in dispatch order."""
        with self._lock:
            return tuple(self._registry.iter_entries(name))

    def priorities(self, name: EventName) -> tuple[int, ...]:
        with self._lock:
            return self._registry.priorities(name)

    def names(self) -> tuple[EventName, ...]:
        with self._lock:
            return self._registry.names()

    def clear(self, name: EventName = _ALL) -> None:
        """Forget the listeners of ``name``, or of every name when omitted."""
        with self._lock:
            if name is _ALL:
                self._registry.clear()
            else:
                self._registry.drop(name)
        logger.debug("Cleared listeners for %s", "all events" if name is _ALL else f"'{name}'")


def _check_listener(listener: object) -> None:
    if not callable(listener):
        raise InvalidRegistration(f"Listener {listener!r} is not callable", value=listener)


def _check_priority(priority: object) -> None:
    if isinstance(priority, bool) or not isinstance(priority, int):
        raise InvalidRegistration(
            f"Priority must be an int, got {type(priority).__name__}", value=priority
        )
