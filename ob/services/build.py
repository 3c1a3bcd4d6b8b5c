"""Build service: compile, test, lint and release through tool environments.

All toolchain work happens in tool containers; the host only needs Docker.
Steps run strictly one after another and the first failure ends the flow.
"""

from __future__ import annotations

import shutil
from collections.abc import Sequence

from ob.core.result import Err, Ok, Result
from ob.output.console import Style
from ob.platform.detection import Target
from ob.tools.engine import ExecutionResult, ToolInvocation

from .base import BaseService
from .build_errors import BuildError, FileOperationFailed
from .release import RELEASE_PLATFORMS, ReleaseMatrix

# -mod=vendor builds from vendor/, -s -w strips symbol and debug tables.
_GO_BUILD_FLAGS = ("-mod=vendor", "-ldflags=-s -w")
_GO_TEST_ARGS = ("test", "-v", "-mod=vendor", "-cover", "./...")


class BuildService(BaseService):
    """Build flows for the Go tree."""

    def _compiler(self, *args: str, env: dict[str, str] | None = None) -> ToolInvocation:
        return ToolInvocation(
            tool=self._config.tools.compiler,
            args=args,
            mount_root=self._root,
            env=env or {},
        )

    def ensure_vendored(self) -> Result[None, BuildError]:
        """Vendor Go modules once; later builds use ``-mod=vendor``."""
        if (self._root / "vendor").is_dir():
            return Ok(None)
        self._console.print("vendor/ missing, running go mod vendor", Style.DIM)
        return self._invoke(self._compiler("mod", "vendor"))

    def binary(self, target: Target | None = None) -> Result[str, BuildError]:
        """Build the binary for ``target`` (default: GOOS/GOARCH or the host).

        Returns:
            Ok(path) with the artifact path relative to the project root.
        """
        guesser = self._guesser
        if target is not None:
            guesser = guesser.with_overrides(os=target.os, arch=target.arch)

        resolved = guesser.resolve()
        if isinstance(resolved, Err):
            return resolved
        os_name, arch = resolved.value.os, resolved.value.arch

        vendored = self.ensure_vendored()
        if isinstance(vendored, Err):
            return vendored

        version = self._version()
        if isinstance(version, Err):
            return version

        target_path = self._artifact(version.value, os_name, arch)
        self._console.print(f"Building {target_path} ...")

        try:
            self.build_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            return Err(FileOperationFailed(path=self.build_dir, reason=str(e)))

        compiled = self._invoke(
            self._compiler(
                "build",
                *_GO_BUILD_FLAGS,
                "-o",
                target_path,
                self._config.project.main_package,
                env={"GOOS": os_name, "GOARCH": arch},
            )
        )
        if isinstance(compiled, Err):
            return compiled

        self._console.print("Done.")
        return Ok(target_path)

    def release(self) -> Result[list[str], BuildError]:
        return ReleaseMatrix(RELEASE_PLATFORMS).run(self.binary)

    def test(self) -> Result[None, BuildError]:
        vendored = self.ensure_vendored()
        if isinstance(vendored, Err):
            return vendored
        return self._invoke(self._compiler(*_GO_TEST_ARGS))

    def lint(self, linters: Sequence[str] = ()) -> Result[None, BuildError]:
        """Run ``linters`` (default: the configured set) quietly, in order."""
        vendored = self.ensure_vendored()
        if isinstance(vendored, Err):
            return vendored

        quiet = self._mode.quieted()
        for linter in linters or self._config.tools.linters:
            result = self._invoke(ToolInvocation(tool=linter, mount_root=self._root), quiet)
            if isinstance(result, Err):
                return result
        return Ok(None)

    def clean(self) -> Result[None, BuildError]:
        if not self.build_dir.exists():
            return Ok(None)
        try:
            shutil.rmtree(self.build_dir)
        except OSError as e:
            return Err(FileOperationFailed(path=self.build_dir, reason=str(e)))
        return Ok(None)

    def run_tool(
        self,
        tool: str,
        args: Sequence[str] = (),
        *,
        interactive: bool = False,
    ) -> Result[ExecutionResult, BuildError]:
        """Run any tool; a non-zero exit is reported, not treated as an error."""
        result = self._runner.run(
            ToolInvocation(
                tool=tool,
                args=tuple(args),
                interactive=interactive,
                mount_root=self._root,
            ),
            self._mode,
        )
        if isinstance(result, Err):
            return result
        return Ok(result.value)

    def default_pipeline(self) -> Result[list[str], BuildError]:
        """clean, lint, test, release."""
        for step in (self.clean, self.lint, self.test):
            result = step()
            if isinstance(result, Err):
                return result
        return self.release()
