"""Install the host binary into a bin directory, or remove it."""

from __future__ import annotations

import shutil
from pathlib import Path

from ob.core.result import Err, Ok, Result

from .base import BaseService
from .build_errors import ArtifactMissing, BuildError, FileOperationFailed, InstallDirMissing


class InstallService(BaseService):
    @property
    def install_dir(self) -> Path:
        return Path(self._config.install.dir)

    @property
    def installed_path(self) -> Path:
        return self.install_dir / self._config.project.name

    def install(self) -> Result[Path, BuildError]:
        """Copy the artifact for the host (or GOOS/GOARCH) into the install dir."""
        resolved = self._guesser.resolve()
        if isinstance(resolved, Err):
            return resolved

        version = self._version()
        if isinstance(version, Err):
            return version

        if not self.install_dir.is_dir():
            return Err(InstallDirMissing(path=self.install_dir, command="install"))

        source = self._root / self._artifact(version.value, resolved.value.os, resolved.value.arch)
        if not source.is_file():
            return Err(ArtifactMissing(path=source))

        dest = self.installed_path
        try:
            shutil.copy2(source, dest)
        except OSError as e:
            return Err(FileOperationFailed(path=dest, reason=str(e)))

        self._console.success(f"installed {dest}")
        return Ok(dest)

    def uninstall(self) -> Result[Path, BuildError]:
        if not self.install_dir.is_dir():
            return Err(InstallDirMissing(path=self.install_dir, command="uninstall"))

        dest = self.installed_path
        try:
            dest.unlink(missing_ok=True)
        except OSError as e:
            return Err(FileOperationFailed(path=dest, reason=str(e)))
        return Ok(dest)
