"""Error presentation utilities.

Centralized error formatting and exit code mapping for consistent UX.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from ob.core.config import ConfigInvalid
from ob.core.errors import ErrorCode
from ob.core.version import VersionNotFound
from ob.output.console import Style
from ob.platform.detection import UnknownHostSystem, UnsupportedArchitecture
from ob.services.build_errors import (
    ArtifactMissing,
    BuildError,
    FileOperationFailed,
    InstallDirMissing,
    ToolFailed,
)
from ob.tools.engine import ToolBuildFailed

if TYPE_CHECKING:
    from ob.output.console import ConsoleProtocol

__all__ = ["print_build_error", "build_error_exit_code"]


def print_build_error(error: BuildError, console: ConsoleProtocol) -> None:
    """Print build error to console with appropriate formatting.

    Tool output is not repeated here: the runner already replayed it.
    """
    match error:
        case UnknownHostSystem() | UnsupportedArchitecture():
            console.error(str(error))
        case VersionNotFound():
            console.error(f"cannot determine package version: {error}")
        case ConfigInvalid(message=message):
            console.error(message)
        case ToolBuildFailed(output=output):
            console.error(str(error))
            # A traced build already streamed live and captured nothing.
            if output:
                console.print("hint: re-run with TRACE=1 to stream the image build", Style.DIM)
        case ToolFailed(tool=tool, returncode=rc):
            console.error(f"{tool} failed (exit {rc})")
        case InstallDirMissing(path=path, command=command):
            console.error(f"{command} command is only supported if {path} directory exists.")
        case ArtifactMissing(path=path, hint=hint):
            console.error(f"artifact not found: {path}")
            console.print(f"hint: {hint}", Style.DIM)
        case FileOperationFailed(path=path, reason=reason):
            console.error(f"{path}: {reason}")


def build_error_exit_code(error: BuildError) -> int:
    """Exit code for a build error; a failing tool passes its own status through."""
    match error:
        case InstallDirMissing():
            return int(ErrorCode.PRECONDITION_ERROR)
        case UnknownHostSystem() | UnsupportedArchitecture() | VersionNotFound() | ConfigInvalid():
            return int(ErrorCode.CONFIG_ERROR)
        case ToolBuildFailed():
            return int(ErrorCode.TOOL_BUILD_ERROR)
        case ToolFailed(returncode=rc):
            return rc if rc > 0 else int(ErrorCode.TOOL_ERROR)
        case ArtifactMissing() | FileOperationFailed():
            return int(ErrorCode.IO_ERROR)
    return int(ErrorCode.TOOL_ERROR)
