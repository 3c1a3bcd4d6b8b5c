"""Tool engine capability.

A tool engine materialises an isolated environment for a named tool and runs
the tool inside it. The orchestrator only ever talks to this protocol; Docker
is one implementation (``ob.tools.docker``).
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Protocol, TypeAlias

from ob.core.mode import ExecutionMode
from ob.core.result import Result

__all__ = [
    "EnvironmentHandle",
    "ExecutionResult",
    "ToolBuildFailed",
    "ToolEngine",
    "ToolInvocation",
    "ToolName",
]

ToolName: TypeAlias = str


def _no_env() -> dict[str, str]:
    return {}


@dataclass(frozen=True, slots=True)
class EnvironmentHandle:
    """A built tool environment; ``tag`` is a pure function of the tool name."""

    tool: ToolName
    tag: str


@dataclass(frozen=True, slots=True)
class ToolInvocation:
    """One run of a tool.

    Attributes:
        tool: Tool (Dockerfile stage) name.
        args: Arguments handed to the tool, in order.
        interactive: Attach a TTY and stream regardless of mode.
        mount_root: Host directory exposed to the tool at the mount point.
        env: Extra variables for the engine process (e.g. the GOOS/GOARCH
            the ``go`` tool picks up through passthrough).
    """

    tool: ToolName
    args: tuple[str, ...] = ()
    interactive: bool = False
    mount_root: Path = field(default_factory=Path.cwd)
    env: Mapping[str, str] = field(default_factory=_no_env)


@dataclass(frozen=True, slots=True)
class ExecutionResult:
    """Exit status of a tool run plus whatever output was captured."""

    exit_code: int
    output: str = ""

    @property
    def ok(self) -> bool:
        return self.exit_code == 0


@dataclass(frozen=True, slots=True)
class ToolBuildFailed:
    """The environment for ``tool`` could not be built."""

    tool: ToolName
    returncode: int
    output: str = ""

    def __str__(self) -> str:
        return f"building tool environment '{self.tool}' failed (exit {self.returncode})"


class ToolEngine(Protocol):
    def ensure_environment(
        self,
        tool: ToolName,
        mode: ExecutionMode,
        *,
        mount_root: Path,
    ) -> Result[EnvironmentHandle, ToolBuildFailed]:
        """Build (or confirm up to date) the environment for ``tool``."""
        ...

    def run(
        self,
        handle: EnvironmentHandle,
        invocation: ToolInvocation,
        mode: ExecutionMode,
        *,
        capture: bool,
        passthrough: tuple[str, ...] = (),
    ) -> ExecutionResult:
        """Run the tool; the sandbox is gone once this returns."""
        ...
