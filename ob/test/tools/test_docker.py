"""Tests for ob.tools.docker module."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path

import pytest

from ob.core.mode import ExecutionMode
from ob.core.result import Err, Ok, Result
from ob.output.console import MockConsole, Style
from ob.platform import process
from ob.platform.process import ProcessError
from ob.tools.docker import DockerEngine, image_tag
from ob.tools.engine import EnvironmentHandle, ExecutionResult, ToolInvocation


@dataclass(frozen=True, slots=True)
class Call:
    kind: str
    cmd: list[str]
    cwd: Path
    env: dict[str, str]


@dataclass
class FakeProcess:
    """Stands in for ob.platform.process; fails commands whose argv contains ``fail_on``."""

    fail_on: str | None = None
    returncode: int = 1
    output: str = "captured output\n"
    calls: list[Call] = field(default_factory=lambda: [])

    def _failed(self, cmd: list[str]) -> bool:
        return self.fail_on is not None and self.fail_on in cmd

    def run(
        self, cmd: list[str], cwd: Path, env: Mapping[str, str] | None = None
    ) -> Result[str, ProcessError]:
        self.calls.append(Call("captured", cmd, cwd, dict(env or {})))
        if self._failed(cmd):
            return Err(ProcessError(tuple(cmd), self.returncode, self.output))
        return Ok(self.output)

    def run_attached(
        self, cmd: list[str], cwd: Path, env: Mapping[str, str] | None = None
    ) -> Result[None, ProcessError]:
        self.calls.append(Call("attached", cmd, cwd, dict(env or {})))
        if self._failed(cmd):
            return Err(ProcessError(tuple(cmd), self.returncode, ""))
        return Ok(None)


@pytest.fixture
def fake_process(monkeypatch: pytest.MonkeyPatch) -> FakeProcess:
    fake = FakeProcess()
    monkeypatch.setattr(process, "run", fake.run)
    monkeypatch.setattr(process, "run_attached", fake.run_attached)
    return fake


def _engine(console: MockConsole, *, buildkit: str = "1") -> DockerEngine:
    return DockerEngine(console=console, buildkit=buildkit, base_env={"PATH": "/usr/bin"})


def test_image_tag_is_deterministic() -> None:
    assert image_tag("ockam/tool", "go") == "ockam/tool/go:latest"
    assert image_tag("ockam/tool", "go") == image_tag("ockam/tool", "go")


class TestEnsureEnvironment:
    def test_quiet_build_command(self, tmp_path: Path, fake_process: FakeProcess) -> None:
        engine = _engine(MockConsole())
        result = engine.ensure_environment("go", ExecutionMode.NORMAL, mount_root=tmp_path)

        assert result == Ok(EnvironmentHandle(tool="go", tag="ockam/tool/go:latest"))
        (call,) = fake_process.calls
        assert call.kind == "captured"
        assert call.cmd == [
            "docker",
            "build",
            "--quiet",
            "--target",
            "go",
            "--tag",
            "ockam/tool/go:latest",
            ".",
        ]
        assert call.cwd == tmp_path
        assert call.env["DOCKER_BUILDKIT"] == "1"
        assert call.env["PATH"] == "/usr/bin"

    def test_buildkit_can_be_disabled(self, tmp_path: Path, fake_process: FakeProcess) -> None:
        engine = _engine(MockConsole(), buildkit="0")
        engine.ensure_environment("eclint", ExecutionMode.NORMAL, mount_root=tmp_path)
        assert fake_process.calls[0].env["DOCKER_BUILDKIT"] == "0"

    def test_successful_build_is_silent(self, tmp_path: Path, fake_process: FakeProcess) -> None:
        console = MockConsole()
        _engine(console).ensure_environment("go", ExecutionMode.QUIET, mount_root=tmp_path)
        assert console.outputs == []

    def test_failed_build_carries_diagnostics(
        self, tmp_path: Path, fake_process: FakeProcess
    ) -> None:
        fake_process.fail_on = "build"
        fake_process.returncode = 17
        result = _engine(MockConsole()).ensure_environment(
            "go", ExecutionMode.NORMAL, mount_root=tmp_path
        )

        assert isinstance(result, Err)
        assert result.error.tool == "go"
        assert result.error.returncode == 17
        assert result.error.output == "captured output\n"

    def test_traced_build_streams_and_echoes(
        self, tmp_path: Path, fake_process: FakeProcess
    ) -> None:
        console = MockConsole()
        _engine(console).ensure_environment("go", ExecutionMode.TRACED, mount_root=tmp_path)

        (call,) = fake_process.calls
        assert call.kind == "attached"
        assert "--quiet" not in call.cmd
        assert console.outputs[0].style == Style.DIM
        assert console.outputs[0].message.startswith("+ docker build --target go")

    def test_idempotent(self, tmp_path: Path, fake_process: FakeProcess) -> None:
        engine = _engine(MockConsole())
        first = engine.ensure_environment("go", ExecutionMode.NORMAL, mount_root=tmp_path)
        second = engine.ensure_environment("go", ExecutionMode.NORMAL, mount_root=tmp_path)

        assert isinstance(first, Ok) and isinstance(second, Ok)
        assert first.value.tag == second.value.tag
        # No memoisation: the build engine decides whether anything changed.
        assert len(fake_process.calls) == 2
        assert fake_process.calls[0].cmd == fake_process.calls[1].cmd


class TestRun:
    def _handle(self, tool: str = "go") -> EnvironmentHandle:
        return EnvironmentHandle(tool=tool, tag=image_tag("ockam/tool", tool))

    def test_run_command_layout(self, tmp_path: Path) -> None:
        engine = _engine(MockConsole())
        invocation = ToolInvocation(
            tool="go", args=("version", "-m"), interactive=True, mount_root=tmp_path
        )
        cmd = engine.run_command(self._handle(), invocation, passthrough=("GOOS", "GOARCH"))
        assert cmd == [
            "docker",
            "run",
            "--env",
            "GOOS",
            "--env",
            "GOARCH",
            "-it",
            "--rm",
            "--volume",
            f"{tmp_path}:/project",
            "ockam/tool/go:latest",
            "version",
            "-m",
        ]

    def test_custom_mount_point(self, tmp_path: Path) -> None:
        engine = DockerEngine(console=MockConsole(), mount_point="/src", base_env={})
        cmd = engine.run_command(self._handle("eclint"), ToolInvocation("eclint", mount_root=tmp_path))
        assert f"{tmp_path}:/src" in cmd
        assert "-it" not in cmd

    def test_captured_success(self, tmp_path: Path, fake_process: FakeProcess) -> None:
        result = _engine(MockConsole()).run(
            self._handle(),
            ToolInvocation("go", ("version",), mount_root=tmp_path),
            ExecutionMode.QUIET,
            capture=True,
        )
        assert result == ExecutionResult(0, "captured output\n")
        assert fake_process.calls[0].kind == "captured"

    def test_captured_failure_keeps_status_and_output(
        self, tmp_path: Path, fake_process: FakeProcess
    ) -> None:
        fake_process.fail_on = "run"
        fake_process.returncode = 2
        result = _engine(MockConsole()).run(
            self._handle(),
            ToolInvocation("go", mount_root=tmp_path),
            ExecutionMode.QUIET,
            capture=True,
        )
        assert result == ExecutionResult(2, "captured output\n")

    def test_attached_failure(self, tmp_path: Path, fake_process: FakeProcess) -> None:
        fake_process.fail_on = "run"
        fake_process.returncode = 5
        result = _engine(MockConsole()).run(
            self._handle(),
            ToolInvocation("go", mount_root=tmp_path),
            ExecutionMode.NORMAL,
            capture=False,
        )
        assert result == ExecutionResult(5, "")
        assert fake_process.calls[0].kind == "attached"

    def test_invocation_env_reaches_process(
        self, tmp_path: Path, fake_process: FakeProcess
    ) -> None:
        _engine(MockConsole()).run(
            self._handle(),
            ToolInvocation("go", mount_root=tmp_path, env={"GOOS": "windows", "GOARCH": "amd64"}),
            ExecutionMode.NORMAL,
            capture=False,
            passthrough=("GOOS", "GOARCH"),
        )
        env = fake_process.calls[0].env
        assert env["GOOS"] == "windows"
        assert env["GOARCH"] == "amd64"
        assert "DOCKER_BUILDKIT" not in env

    def test_traced_run_is_echoed(self, tmp_path: Path, fake_process: FakeProcess) -> None:
        console = MockConsole()
        _engine(console).run(
            self._handle(),
            ToolInvocation("go", ("test",), mount_root=tmp_path),
            ExecutionMode.TRACED,
            capture=False,
        )
        assert console.find("+ docker run")
