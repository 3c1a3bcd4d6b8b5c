"""Build target detection.

A build targets a ``Target(os, arch)`` in Go's GOOS/GOARCH vocabulary.
Explicit overrides (the ``GOOS``/``GOARCH`` variables) always win; otherwise
the host is inspected the way ``uname -s`` / ``uname -m`` would report it.

Host inspection sits behind ``HostProbe`` so tests can pin the host.
"""

from __future__ import annotations

import platform as _platform
from dataclasses import dataclass
from functools import lru_cache
from typing import Protocol

from ob.core.result import Err, Ok, Result

__all__ = [
    "ARCH_ALIASES",
    "HostProbe",
    "PlatformGuesser",
    "SystemHost",
    "Target",
    "UnknownHostSystem",
    "UnsupportedArchitecture",
]

# uname -m -> GOARCH
ARCH_ALIASES: dict[str, str] = {
    "amd64": "amd64",
    "x86_64": "amd64",
    "i386": "386",
    "i686": "386",
    "arm": "arm",
}


@dataclass(frozen=True, slots=True)
class Target:
    """A GOOS/GOARCH pair."""

    os: str
    arch: str

    def __post_init__(self) -> None:
        if not self.os or not self.arch:
            raise ValueError(f"target needs a non-empty os and arch, got {self.os!r}/{self.arch!r}")


@dataclass(frozen=True, slots=True)
class UnsupportedArchitecture:
    """Host architecture has no GOARCH mapping and none was given."""

    machine: str

    def __str__(self) -> str:
        return f"cannot guess GOARCH from host machine {self.machine!r}; GOARCH must be set"


@dataclass(frozen=True, slots=True)
class UnknownHostSystem:
    """Host reported no kernel name and GOOS was not given."""

    def __str__(self) -> str:
        return "cannot guess GOOS: host reported no system name; GOOS must be set"


class HostProbe(Protocol):
    def system(self) -> str:
        """Kernel name, as ``uname -s`` prints it."""
        ...

    def machine(self) -> str:
        """Machine hardware name, as ``uname -m`` prints it."""
        ...


@lru_cache(maxsize=1)
def _uname() -> _platform.uname_result:
    return _platform.uname()


class SystemHost:
    """HostProbe backed by the running interpreter (cached)."""

    def system(self) -> str:
        return _uname().system

    def machine(self) -> str:
        return _uname().machine


class PlatformGuesser:
    """Resolve the target OS/arch, preferring overrides over the host."""

    def __init__(
        self,
        *,
        os_override: str | None = None,
        arch_override: str | None = None,
        host: HostProbe | None = None,
    ) -> None:
        self._os_override = os_override or None
        self._arch_override = arch_override or None
        self._host: HostProbe = host if host is not None else SystemHost()

    def with_overrides(self, *, os: str, arch: str) -> PlatformGuesser:
        return PlatformGuesser(os_override=os, arch_override=arch, host=self._host)

    def resolve_os(self) -> str:
        # Overrides are taken verbatim; only the host value is normalised.
        if self._os_override is not None:
            return self._os_override
        return self._host.system().lower()

    def resolve_arch(self) -> Result[str, UnsupportedArchitecture]:
        if self._arch_override is not None:
            return Ok(self._arch_override)
        machine = self._host.machine()
        arch = ARCH_ALIASES.get(machine)
        if arch is None:
            return Err(UnsupportedArchitecture(machine=machine))
        return Ok(arch)

    def resolve(self) -> Result[Target, UnknownHostSystem | UnsupportedArchitecture]:
        os_name = self.resolve_os()
        if not os_name:
            return Err(UnknownHostSystem())
        arch = self.resolve_arch()
        if isinstance(arch, Err):
            return arch
        return Ok(Target(os=os_name, arch=arch.value))
