"""Docker-backed tool engine.

Each tool is a stage of the project's multi-stage ``Dockerfile``. The stage is
built into ``{namespace}/{tool}:latest`` and run with the project mounted,
then the container is removed (``--rm``). Staleness is Docker's business:
every ``ensure_environment`` call re-runs ``docker build`` and relies on the
layer cache to make an unchanged rebuild a no-op.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from pathlib import Path

from ob.core.config import DEFAULT_BUILDKIT, DEFAULT_MOUNT_POINT, DEFAULT_TOOL_NAMESPACE
from ob.core.mode import ExecutionMode
from ob.core.result import Err, Ok, Result
from ob.output.console import ConsoleProtocol, Style
from ob.platform import process

from .engine import EnvironmentHandle, ExecutionResult, ToolBuildFailed, ToolInvocation, ToolName

__all__ = ["DockerEngine", "image_tag"]


def image_tag(namespace: str, tool: ToolName) -> str:
    return f"{namespace}/{tool}:latest"


class DockerEngine:
    def __init__(
        self,
        *,
        console: ConsoleProtocol,
        namespace: str = DEFAULT_TOOL_NAMESPACE,
        mount_point: str = DEFAULT_MOUNT_POINT,
        buildkit: str = DEFAULT_BUILDKIT,
        docker: str = "docker",
        base_env: Mapping[str, str] | None = None,
    ) -> None:
        self._console = console
        self._namespace = namespace
        self._mount_point = mount_point
        self._buildkit = buildkit
        self._docker = docker
        self._base_env = base_env

    def _env(self, extra: Mapping[str, str]) -> dict[str, str]:
        env = dict(self._base_env if self._base_env is not None else os.environ)
        env.update(extra)
        return env

    def _trace(self, cmd: list[str]) -> None:
        self._console.print("+ " + " ".join(cmd), Style.DIM)

    def build_command(self, tool: ToolName, mode: ExecutionMode) -> list[str]:
        cmd = [self._docker, "build"]
        if not mode.streams_build:
            cmd.append("--quiet")
        cmd += ["--target", tool, "--tag", image_tag(self._namespace, tool), "."]
        return cmd

    def run_command(
        self,
        handle: EnvironmentHandle,
        invocation: ToolInvocation,
        *,
        passthrough: tuple[str, ...] = (),
    ) -> list[str]:
        cmd = [self._docker, "run"]
        for name in passthrough:
            cmd += ["--env", name]
        if invocation.interactive:
            cmd.append("-it")
        cmd += [
            "--rm",
            "--volume",
            f"{invocation.mount_root}:{self._mount_point}",
            handle.tag,
            *invocation.args,
        ]
        return cmd

    def ensure_environment(
        self,
        tool: ToolName,
        mode: ExecutionMode,
        *,
        mount_root: Path,
    ) -> Result[EnvironmentHandle, ToolBuildFailed]:
        handle = EnvironmentHandle(tool=tool, tag=image_tag(self._namespace, tool))
        cmd = self.build_command(tool, mode)
        env = self._env({"DOCKER_BUILDKIT": self._buildkit})

        if mode.streams_build:
            self._trace(cmd)
            streamed = process.run_attached(cmd, cwd=mount_root, env=env)
            if isinstance(streamed, Err):
                return Err(
                    ToolBuildFailed(
                        tool=tool,
                        returncode=streamed.error.returncode,
                        output=streamed.error.output,
                    )
                )
            return Ok(handle)

        captured = process.run(cmd, cwd=mount_root, env=env)
        if isinstance(captured, Err):
            return Err(
                ToolBuildFailed(
                    tool=tool,
                    returncode=captured.error.returncode,
                    output=captured.error.output,
                )
            )
        return Ok(handle)

    def run(
        self,
        handle: EnvironmentHandle,
        invocation: ToolInvocation,
        mode: ExecutionMode,
        *,
        capture: bool,
        passthrough: tuple[str, ...] = (),
    ) -> ExecutionResult:
        cmd = self.run_command(handle, invocation, passthrough=passthrough)
        env = self._env(invocation.env)
        if mode.is_traced:
            self._trace(cmd)

        if not capture:
            attached = process.run_attached(cmd, cwd=invocation.mount_root, env=env)
            if isinstance(attached, Err):
                return ExecutionResult(attached.error.returncode, attached.error.output)
            return ExecutionResult(0)

        captured = process.run(cmd, cwd=invocation.mount_root, env=env)
        if isinstance(captured, Err):
            return ExecutionResult(captured.error.returncode, captured.error.output)
        return ExecutionResult(0, captured.value)
