"""Ordered listener storage keyed by event name and priority."""

from __future__ import annotations

import bisect
from typing import Dict, Iterator, List

from .events import EventName, Listener
from .matching import ListenerMatcher


class ListenerRegistry:
    """Map event names to sorted priorities and per-priority listener lists.

    For every name the priority sequence stays sorted ascending without
    duplicates. Each listener list keeps insertion order and may hold the
    same listener several times.
    """

    def __init__(self) -> None:
        self._listeners: Dict[EventName, Dict[int, List[Listener]]] = {}
        self._priorities: Dict[EventName, List[int]] = {}

    def __contains__(self, name: object) -> bool:
        return name in self._listeners

    def __len__(self) -> int:
        return sum(
            len(listeners)
            for by_priority in self._listeners.values()
            for listeners in by_priority.values()
        )

    def add(self, name: EventName, listener: Listener, priority: int) -> bool:
        """Append ``listener`` at ``priority``; return True if the priority is new."""
        if name not in self._listeners:
            self._listeners[name] = {}
            self._priorities[name] = []

        by_priority = self._listeners[name]
        if priority not in by_priority:
            by_priority[priority] = [listener]
            bisect.insort(self._priorities[name], priority)
            return True

        by_priority[priority].append(listener)
        return False

    def remove(
        self,
        name: EventName,
        listener: Listener,
        priority: int,
        matcher: ListenerMatcher,
        *,
        prune: bool = False,
    ) -> int:
        """Remove every match of ``listener`` at ``priority``; return the count.

        Returns -1 when no list exists for the (name, priority) pair.
        """
        by_priority = self._listeners.get(name)
        if by_priority is None or priority not in by_priority:
            return -1

        listeners = by_priority[priority]
        survivors = [candidate for candidate in listeners if not matcher(candidate, listener)]
        removed = len(listeners) - len(survivors)
        listeners[:] = survivors

        if prune and not listeners:
            self.drop_priority(name, priority)
        return removed

    def drop_priority(self, name: EventName, priority: int) -> None:
        """Forget ``priority`` for ``name``, and the name once nothing is left."""
        del self._listeners[name][priority]
        self._priorities[name].remove(priority)
        if not self._priorities[name]:
            self.drop(name)

    def drop(self, name: EventName) -> bool:
        if name not in self._listeners:
            return False
        del self._listeners[name]
        del self._priorities[name]
        return True

    def clear(self) -> None:
        self._listeners.clear()
        self._priorities.clear()

    def names(self) -> tuple[EventName, ...]:
        return tuple(self._listeners)

    def priorities(self, name: EventName) -> tuple[int, ...]:
        return tuple(self._priorities.get(name, ()))

    def at(self, name: EventName, priority: int) -> tuple[Listener, ...]:
        """Snapshot of the listeners at one priority, in insertion order."""
        return tuple(self._listeners.get(name, {}).get(priority, ()))

    def iter_entries(self, name: EventName) -> Iterator[tuple[int, Listener]]:
        by_priority = self._listeners.get(name, {})
        for priority in self._priorities.get(name, ()):
            for listener in by_priority.get(priority, ()):
                yield priority, listener
