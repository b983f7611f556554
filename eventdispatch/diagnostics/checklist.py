"""Automated checks to highlight suspicious registrations."""

from __future__ import annotations

from dataclasses import dataclass

from ..dispatcher import EventDispatcher
from ..events import Listener
from ..matching import get_matcher
from .inspector import describe_listener


@dataclass(slots=True)
class ChecklistIssue:
    severity: str
    message: str


def run_checklist(dispatcher: EventDispatcher) -> list[ChecklistIssue]:
    issues: list[ChecklistIssue] = []
    names = dispatcher.names()
    if not names:
        issues.append(ChecklistIssue("warning", "No event names registered."))

    matcher = get_matcher(dispatcher.config.matching)
    for name in names:
        entries = dispatcher.listeners(name)
        if not entries:
            issues.append(ChecklistIssue("warning", f"Event '{name}' has no listeners left."))

        grouped: dict[int, list[Listener]] = {}
        for priority, listener in entries:
            grouped.setdefault(priority, []).append(listener)

        for priority in dispatcher.priorities(name):
            listeners = grouped.get(priority)
            if not listeners:
                issues.append(
                    ChecklistIssue(
                        "warning",
                        f"Event '{name}' keeps an empty listener list at priority {priority}.",
                    )
                )
                continue
            # Groups of listeners that a single remove_listener call would drop together.
            remaining = list(listeners)
            while remaining:
                head = remaining.pop(0)
                same = [other for other in remaining if matcher(other, head)]
                remaining = [other for other in remaining if not matcher(other, head)]
                if same:
                    issues.append(
                        ChecklistIssue(
                            "warning",
                            f"Listener {describe_listener(head)} is registered {len(same) + 1} times "
                            f"for '{name}' at priority {priority}.",
                        )
                    )

    return issues
