"""Event contracts shared by dispatchers and the applications embedding them."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Hashable, Protocol, runtime_checkable


EventName = Hashable

Listener = Callable[[Any, EventName], None]


@runtime_checkable
class StoppableEvent(Protocol):
    """Optional capability letting a listener halt the rest of a dispatch."""

    def is_propagation_stopped(self) -> bool: ...

    def stop_propagation(self) -> None: ...


def is_stoppable(event: object) -> bool:
    return isinstance(event, StoppableEvent)


@dataclass(slots=True)
class Event:
    """Base event type implementing propagation control.

    Applications may subclass it to add fields, or pass any payload through
    ``payload``. Plain objects that do not implement the capability can be
    dispatched too, they just cannot be stopped.
    """

    payload: Any = None
    _stopped: bool = field(default=False, init=False, repr=False)

    def is_propagation_stopped(self) -> bool:
        return self._stopped

    def stop_propagation(self) -> None:
        self._stopped = True
