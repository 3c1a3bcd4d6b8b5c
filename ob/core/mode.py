"""Execution mode for tool builds and runs.

The mode is a plain value passed to every runner call. Nothing in the
orchestrator reads ``TRACE`` or ``OCKAM_TOOL_QUIET`` after startup; a scoped
quiet region (lint) is expressed by passing ``mode.quieted()`` down.
"""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum, auto

__all__ = ["ExecutionMode", "is_truthy"]

_FALSY = frozenset({"0", "false", "no", "off"})


def is_truthy(value: str | None) -> bool:
    """Interpret an environment flag: set, non-empty and not an explicit "off"."""
    if not value:
        return False
    return value.strip().lower() not in _FALSY


class ExecutionMode(Enum):
    """How much of the underlying build/run output reaches the console.

    Precedence on visibility: TRACED > interactive > QUIET.
    """

    NORMAL = auto()
    QUIET = auto()
    TRACED = auto()

    def __str__(self) -> str:
        return self.name.lower()

    @classmethod
    def from_env(cls, environ: Mapping[str, str]) -> ExecutionMode:
        if is_truthy(environ.get("TRACE")):
            return cls.TRACED
        if is_truthy(environ.get("OCKAM_TOOL_QUIET")):
            return cls.QUIET
        return cls.NORMAL

    def quieted(self) -> ExecutionMode:
        """Mode for a quiet region; tracing still wins."""
        if self is ExecutionMode.TRACED:
            return self
        return ExecutionMode.QUIET

    @property
    def is_traced(self) -> bool:
        return self is ExecutionMode.TRACED

    @property
    def streams_build(self) -> bool:
        """Environment builds stream live only when tracing."""
        return self is ExecutionMode.TRACED

    def streams_run(self, interactive: bool) -> bool:
        """Whether a tool run streams live instead of being captured."""
        return self is not ExecutionMode.QUIET or interactive
