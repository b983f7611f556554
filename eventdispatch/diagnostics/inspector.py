"""Render a dispatcher's registry as a rich table."""

from __future__ import annotations

import functools

from rich.console import Console
from rich.table import Table

from ..dispatcher import EventDispatcher
from ..events import Listener


def describe_listener(listener: Listener) -> str:
    if isinstance(listener, functools.partial):
        return f"partial({describe_listener(listener.func)})"
    module = getattr(listener, "__module__", None) or ""
    qualname = getattr(listener, "__qualname__", None) or type(listener).__qualname__
    return f"{module}.{qualname}" if module else qualname


def registry_table(dispatcher: EventDispatcher) -> Table:
    table = Table(show_header=True, header_style="bold")
    table.add_column("Event")
    table.add_column("Priority", justify="right")
    table.add_column("#", justify="right")
    table.add_column("Listener")
    for name in dispatcher.names():
        entries = dispatcher.listeners(name)
        for priority in dispatcher.priorities(name):
            at_priority = [listener for prio, listener in entries if prio == priority]
            if not at_priority:
                table.add_row(str(name), str(priority), "-", "[dim]empty[/dim]")
            for position, listener in enumerate(at_priority, start=1):
                table.add_row(str(name), str(priority), str(position), describe_listener(listener))
    return table


def render_registry(dispatcher: EventDispatcher, console: Console | None = None) -> None:
    console = console or Console()
    if not dispatcher.names():
        console.print("No listeners registered.", style="yellow")
        return
    console.print(registry_table(dispatcher))
