"""Inspection helpers for configured dispatchers."""

from .checklist import ChecklistIssue, run_checklist
from .inspector import describe_listener, registry_table, render_registry

__all__ = [
    "ChecklistIssue",
    "describe_listener",
    "registry_table",
    "render_registry",
    "run_checklist",
]
