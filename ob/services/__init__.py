"""Build, release and install services."""

from .artifacts import artifact_name, artifact_path
from .build import BuildService
from .build_errors import (
    ArtifactMissing,
    BuildError,
    FileOperationFailed,
    InstallDirMissing,
    ToolFailed,
)
from .install import InstallService
from .release import RELEASE_PLATFORMS, ReleaseMatrix

__all__ = [
    "ArtifactMissing",
    "BuildError",
    "BuildService",
    "FileOperationFailed",
    "InstallDirMissing",
    "InstallService",
    "RELEASE_PLATFORMS",
    "ReleaseMatrix",
    "ToolFailed",
    "artifact_name",
    "artifact_path",
]
