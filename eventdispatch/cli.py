"""Command line helpers for eventdispatch."""

from __future__ import annotations

import argparse
import importlib
import sys
from pathlib import Path

from rich.console import Console

from .config import DispatcherConfig
from .diagnostics.checklist import run_checklist as checklist_run
from .diagnostics.inspector import render_registry
from .dispatcher import EventDispatcher


def run_inspect(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Show listeners registered by a module")
    parser.add_argument("module", help="Python module with register(dispatcher) function")
    args = parser.parse_args(argv)

    dispatcher = EventDispatcher(DispatcherConfig.from_env())
    _load_module(args.module, dispatcher)
    render_registry(dispatcher, Console())


def run_checklist(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="eventdispatch sanity checks")
    parser.add_argument("module", help="Python module with register(dispatcher) function")
    args = parser.parse_args(argv)

    dispatcher = EventDispatcher(DispatcherConfig.from_env())
    _load_module(args.module, dispatcher)

    console = Console()
    issues = checklist_run(dispatcher)
    if not issues:
        console.print("No issues found.", style="green")
        return
    for issue in issues:
        console.print(f"[{issue.severity.upper()}] {issue.message}", markup=False)
    sys.exit(1)


def _load_module(path: str, dispatcher: EventDispatcher) -> None:
    cwd = str(Path.cwd())
    if cwd not in sys.path:
        sys.path.insert(0, cwd)
    module = importlib.import_module(path)
    if hasattr(module, "register"):
        module.register(dispatcher)
    else:
        raise RuntimeError(f"Module {path} does not define register(dispatcher).")
