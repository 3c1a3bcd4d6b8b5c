"""Run tools inside their environments.

Visibility rules, given an ``ExecutionMode`` and the invocation's
``interactive`` flag:

- Traced, Normal, or interactive: output streams live.
- Quiet: output is captured and dropped on success; on a non-zero exit the
  captured output is replayed to the console, so failures are never silent.

The exit status is handed back untouched; deciding whether it is fatal is the
caller's job.
"""

from __future__ import annotations

from ob.core.mode import ExecutionMode
from ob.core.result import Err, Ok, Result
from ob.output.console import ConsoleProtocol

from .engine import ExecutionResult, ToolBuildFailed, ToolEngine, ToolInvocation, ToolName

__all__ = ["PASSTHROUGH_ENV", "ToolRunner", "passthrough_for"]

# Caller variables forwarded into specific tool environments.
PASSTHROUGH_ENV: dict[ToolName, tuple[str, ...]] = {
    "go": ("GOOS", "GOARCH"),
}


def passthrough_for(tool: ToolName) -> tuple[str, ...]:
    return PASSTHROUGH_ENV.get(tool, ())


class ToolRunner:
    def __init__(self, *, engine: ToolEngine, console: ConsoleProtocol) -> None:
        self._engine = engine
        self._console = console

    def run(
        self,
        invocation: ToolInvocation,
        mode: ExecutionMode,
    ) -> Result[ExecutionResult, ToolBuildFailed]:
        env_result = self._engine.ensure_environment(
            invocation.tool,
            mode,
            mount_root=invocation.mount_root,
        )
        if isinstance(env_result, Err):
            self._console.raw(env_result.error.output)
            return env_result

        capture = not mode.streams_run(invocation.interactive)
        result = self._engine.run(
            env_result.value,
            invocation,
            mode,
            capture=capture,
            passthrough=passthrough_for(invocation.tool),
        )
        if capture and not result.ok:
            self._console.raw(result.output)
        return Ok(result)
