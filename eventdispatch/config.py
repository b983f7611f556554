"""Configuration model for the event dispatcher."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Literal, get_args


MatchPolicy = Literal["function", "identity"]

_TRUTHY = {"1", "true", "yes"}


@dataclass(slots=True)
class DispatcherConfig:
    """Switches controlling removal matching, pruning and locking."""

    matching: MatchPolicy = "function"
    prune_empty: bool = False
    thread_safe: bool = True

    def __post_init__(self) -> None:
        if self.matching not in get_args(MatchPolicy):
            raise ValueError(
                f"Unsupported matching policy '{self.matching}', "
                f"expected one of {', '.join(get_args(MatchPolicy))}"
            )

    @classmethod
    def from_env(cls) -> "DispatcherConfig":
        """Create config from environment variables prefixed with EVENTDISPATCH_."""
        prefix = "EVENTDISPATCH_"
        return cls(
            matching=os.getenv(f"{prefix}MATCHING", "function").strip().lower(),  # type: ignore[arg-type]
            prune_empty=os.getenv(f"{prefix}PRUNE_EMPTY", "false").lower() in _TRUTHY,
            thread_safe=os.getenv(f"{prefix}THREAD_SAFE", "true").lower() in _TRUTHY,
        )
