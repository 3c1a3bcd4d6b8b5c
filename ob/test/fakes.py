"""Test doubles for the tool engine and host probe."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from pathlib import Path

from ob.core.mode import ExecutionMode
from ob.core.result import Err, Ok, Result
from ob.tools.docker import image_tag
from ob.tools.engine import EnvironmentHandle, ExecutionResult, ToolBuildFailed, ToolInvocation


@dataclass(frozen=True, slots=True)
class StubHost:
    host_system: str = "Linux"
    host_machine: str = "x86_64"

    def system(self) -> str:
        return self.host_system

    def machine(self) -> str:
        return self.host_machine


@dataclass(frozen=True, slots=True)
class RunCall:
    invocation: ToolInvocation
    mode: ExecutionMode
    capture: bool
    passthrough: tuple[str, ...]


@dataclass
class FakeEngine:
    """In-memory ToolEngine.

    ``exit_codes``/``outputs`` are keyed by tool name; ``exit_code_for`` wins
    when set. ``build_failures`` maps a tool to the exit code of its build.
    """

    exit_codes: dict[str, int] = field(default_factory=lambda: {})
    outputs: dict[str, str] = field(default_factory=lambda: {})
    build_failures: dict[str, int] = field(default_factory=lambda: {})
    exit_code_for: Callable[[ToolInvocation], int] | None = None
    ensured: list[str] = field(default_factory=lambda: [])
    runs: list[RunCall] = field(default_factory=lambda: [])

    def ensure_environment(
        self,
        tool: str,
        mode: ExecutionMode,
        *,
        mount_root: Path,
    ) -> Result[EnvironmentHandle, ToolBuildFailed]:
        self.ensured.append(tool)
        if tool in self.build_failures:
            return Err(
                ToolBuildFailed(
                    tool=tool,
                    returncode=self.build_failures[tool],
                    output=f"{tool}: build log\n",
                )
            )
        return Ok(EnvironmentHandle(tool=tool, tag=image_tag("ockam/tool", tool)))

    def run(
        self,
        handle: EnvironmentHandle,
        invocation: ToolInvocation,
        mode: ExecutionMode,
        *,
        capture: bool,
        passthrough: tuple[str, ...] = (),
    ) -> ExecutionResult:
        self.runs.append(RunCall(invocation, mode, capture, passthrough))
        if self.exit_code_for is not None:
            code = self.exit_code_for(invocation)
        else:
            code = self.exit_codes.get(invocation.tool, 0)
        output = self.outputs.get(invocation.tool, "") if capture else ""
        return ExecutionResult(code, output)

    @property
    def run_args(self) -> list[tuple[str, ...]]:
        return [(call.invocation.tool, *call.invocation.args) for call in self.runs]


def write_project(root: Path, *, version: str = "1.0.0", vendored: bool = True) -> Path:
    """Lay out a minimal ockam tree under ``root``."""
    (root / "ockam.go").write_text(
        "package ockam\n\n"
        "func Version() string {\n"
        f'\tversion := "{version}"\n'
        "\treturn version\n"
        "}\n",
        encoding="utf-8",
    )
    if vendored:
        (root / "vendor").mkdir()
    return root
