from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from ob.core.config import ConfigInvalid
from ob.core.version import VersionNotFound
from ob.platform.detection import UnknownHostSystem, UnsupportedArchitecture
from ob.tools.engine import ToolBuildFailed


@dataclass(frozen=True, slots=True)
class ToolFailed:
    tool: str
    returncode: int
    output: str = ""


@dataclass(frozen=True, slots=True)
class InstallDirMissing:
    path: Path
    command: str


@dataclass(frozen=True, slots=True)
class ArtifactMissing:
    path: Path
    hint: str = "Run: ob binary"


@dataclass(frozen=True, slots=True)
class FileOperationFailed:
    path: Path
    reason: str


BuildError = (
    UnknownHostSystem
    | UnsupportedArchitecture
    | VersionNotFound
    | ConfigInvalid
    | ToolBuildFailed
    | ToolFailed
    | InstallDirMissing
    | ArtifactMissing
    | FileOperationFailed
)
