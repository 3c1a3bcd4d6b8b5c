"""Artifact naming.

Binaries land at ``<build_dir>/<name>_<version>_<os>_<arch>[.exe]``. The path is
built with ``/`` on every host because the compiler sees it from inside the
Linux tool container.
"""

from __future__ import annotations

__all__ = ["artifact_name", "artifact_path"]

# Exact, case-sensitive GOOS value; "Windows" is not a GOOS.
_WINDOWS = "windows"


def artifact_name(package_name: str, version: str, os: str, arch: str) -> str:
    name = f"{package_name}_{version}_{os}_{arch}"
    if os == _WINDOWS:
        name += ".exe"
    return name


def artifact_path(package_name: str, version: str, os: str, arch: str, build_dir: str) -> str:
    return f"{build_dir.rstrip('/')}/{artifact_name(package_name, version, os, arch)}"
