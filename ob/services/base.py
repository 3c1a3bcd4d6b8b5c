from __future__ import annotations

from pathlib import Path

from ob.core.config import Config
from ob.core.mode import ExecutionMode
from ob.core.result import Err, Ok, Result
from ob.core.version import VersionNotFound, resolve_version
from ob.output.console import ConsoleProtocol
from ob.platform.detection import PlatformGuesser
from ob.tools.engine import ToolInvocation
from ob.tools.runner import ToolRunner

from .artifacts import artifact_path
from .build_errors import BuildError, ToolFailed


class BaseService:
    """State shared by the build and install services."""

    def __init__(
        self,
        *,
        root: Path,
        config: Config,
        guesser: PlatformGuesser,
        runner: ToolRunner,
        console: ConsoleProtocol,
        mode: ExecutionMode = ExecutionMode.NORMAL,
    ) -> None:
        self._root = root
        self._config = config
        self._guesser = guesser
        self._runner = runner
        self._console = console
        self._mode = mode

    @property
    def build_dir(self) -> Path:
        return self._root / self._config.project.build_dir

    def _version(self) -> Result[str, VersionNotFound]:
        return resolve_version(self._root / self._config.project.version_file)

    def _artifact(self, version: str, os: str, arch: str) -> str:
        """Artifact path relative to the project root."""
        project = self._config.project
        return artifact_path(project.name, version, os, arch, project.build_dir)

    def _invoke(
        self,
        invocation: ToolInvocation,
        mode: ExecutionMode | None = None,
    ) -> Result[None, BuildError]:
        """Run a tool and treat a non-zero exit as a failure of this step."""
        result = self._runner.run(invocation, self._mode if mode is None else mode)
        if isinstance(result, Err):
            return result
        if not result.value.ok:
            return Err(
                ToolFailed(
                    tool=invocation.tool,
                    returncode=result.value.exit_code,
                    output=result.value.output,
                )
            )
        return Ok(None)
