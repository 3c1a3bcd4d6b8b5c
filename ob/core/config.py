"""Typed configuration.

Two sources feed the orchestrator:

- ``EnvSettings``: the recognised environment variables, read once at startup.
- ``Config``: the optional ``ob.toml`` in the project root. Every key has a
  default matching the ockam tree, so the file is only needed to deviate.

Example ``ob.toml``::

    [project]
    name = "ockam"
    version_file = "ockam.go"
    build_dir = ".build"

    [tools]
    linters = ["eclint", "shellcheck"]
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path

from .mode import ExecutionMode
from .result import Err, Ok, Result
from .structured import StrDict, as_str_dict, get_str, get_str_list, get_table

__all__ = [
    "CONFIG_FILE_NAME",
    "Config",
    "ConfigInvalid",
    "EnvSettings",
    "InstallConfig",
    "ProjectConfig",
    "ToolsConfig",
    "load_config",
    "load_config_or_default",
]

CONFIG_FILE_NAME = "ob.toml"

DEFAULT_PACKAGE_NAME = "ockam"
DEFAULT_VERSION_FILE = "ockam.go"
DEFAULT_BUILD_DIR = ".build"
DEFAULT_MAIN_PACKAGE = "./cmd/ockam"

DEFAULT_TOOL_NAMESPACE = "ockam/tool"
DEFAULT_MOUNT_POINT = "/project"
DEFAULT_COMPILER = "go"
DEFAULT_LINTERS = ("eclint", "commitlint", "shellcheck")

DEFAULT_INSTALL_DIR = "/usr/local/bin"

DEFAULT_BUILDKIT = "1"


@dataclass(frozen=True, slots=True)
class ConfigInvalid:
    """ob.toml exists but cannot be used."""

    message: str
    path: Path | None = None


@dataclass(frozen=True, slots=True)
class ProjectConfig:
    name: str = DEFAULT_PACKAGE_NAME
    version_file: str = DEFAULT_VERSION_FILE
    build_dir: str = DEFAULT_BUILD_DIR
    main_package: str = DEFAULT_MAIN_PACKAGE


@dataclass(frozen=True, slots=True)
class ToolsConfig:
    """Tool environments are stages of the project Dockerfile.

    Attributes:
        namespace: Image namespace; the tag is ``{namespace}/{tool}:latest``.
        mount_point: Where the project tree appears inside the container.
        compiler: Stage name of the compiler tool.
        linters: Stages run by ``ob lint`` when no linter is named.
    """

    namespace: str = DEFAULT_TOOL_NAMESPACE
    mount_point: str = DEFAULT_MOUNT_POINT
    compiler: str = DEFAULT_COMPILER
    linters: tuple[str, ...] = DEFAULT_LINTERS


@dataclass(frozen=True, slots=True)
class InstallConfig:
    dir: str = DEFAULT_INSTALL_DIR


@dataclass(frozen=True, slots=True)
class Config:
    """Main configuration container."""

    project: ProjectConfig = field(default_factory=ProjectConfig)
    tools: ToolsConfig = field(default_factory=ToolsConfig)
    install: InstallConfig = field(default_factory=InstallConfig)

    @classmethod
    def from_dict(cls, data: Mapping[str, object]) -> Config:
        """Create Config from parsed TOML; missing or malformed keys fall back to defaults."""
        project: StrDict = get_table(data, "project") or {}
        tools: StrDict = get_table(data, "tools") or {}
        install: StrDict = get_table(data, "install") or {}

        return cls(
            project=ProjectConfig(
                name=get_str(project, "name") or DEFAULT_PACKAGE_NAME,
                version_file=get_str(project, "version_file") or DEFAULT_VERSION_FILE,
                build_dir=get_str(project, "build_dir") or DEFAULT_BUILD_DIR,
                main_package=get_str(project, "main_package") or DEFAULT_MAIN_PACKAGE,
            ),
            tools=ToolsConfig(
                namespace=get_str(tools, "namespace") or DEFAULT_TOOL_NAMESPACE,
                mount_point=get_str(tools, "mount_point") or DEFAULT_MOUNT_POINT,
                compiler=get_str(tools, "compiler") or DEFAULT_COMPILER,
                linters=get_str_list(tools, "linters") or DEFAULT_LINTERS,
            ),
            install=InstallConfig(
                dir=get_str(install, "dir") or DEFAULT_INSTALL_DIR,
            ),
        )


@dataclass(frozen=True, slots=True)
class EnvSettings:
    """Recognised environment variables.

    Attributes:
        goos: ``GOOS`` override, None when unset or empty.
        goarch: ``GOARCH`` override, None when unset or empty.
        buildkit: Value handed to ``docker build`` as ``DOCKER_BUILDKIT``.
        mode: Global execution mode from ``TRACE`` / ``OCKAM_TOOL_QUIET``.
    """

    goos: str | None = None
    goarch: str | None = None
    buildkit: str = DEFAULT_BUILDKIT
    mode: ExecutionMode = ExecutionMode.NORMAL

    @classmethod
    def from_environ(cls, environ: Mapping[str, str]) -> EnvSettings:
        return cls(
            goos=environ.get("GOOS") or None,
            goarch=environ.get("GOARCH") or None,
            buildkit=environ.get("DOCKER_BUILDKIT") or DEFAULT_BUILDKIT,
            mode=ExecutionMode.from_env(environ),
        )


def _parse_toml(path: Path) -> Result[StrDict, ConfigInvalid]:
    import tomllib

    try:
        data_obj: object = tomllib.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError:
        return Err(ConfigInvalid(f"Config file not found: {path}", path=path))
    except PermissionError:
        return Err(ConfigInvalid(f"Permission denied reading: {path}", path=path))
    except tomllib.TOMLDecodeError as e:
        return Err(ConfigInvalid(f"Invalid TOML syntax: {e}", path=path))
    except UnicodeDecodeError as e:
        return Err(ConfigInvalid(f"Error reading config: {e}", path=path))

    data = as_str_dict(data_obj)
    if data is None:
        return Err(ConfigInvalid("Config root must be a TOML table", path=path))
    return Ok(data)


def load_config(path: Path) -> Result[Config, ConfigInvalid]:
    """Load and parse ``path``."""
    result = _parse_toml(path)
    if isinstance(result, Err):
        return result
    return Ok(Config.from_dict(result.value))


def load_config_or_default(root: Path) -> Result[Config, ConfigInvalid]:
    """Load ``root/ob.toml`` if present, defaults otherwise.

    A present but broken file is still an error.
    """
    path = root / CONFIG_FILE_NAME
    if not path.is_file():
        return Ok(Config())
    return load_config(path)
