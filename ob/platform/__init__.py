"""Platform abstraction layer."""

from .detection import (
    ARCH_ALIASES,
    HostProbe,
    PlatformGuesser,
    SystemHost,
    Target,
    UnknownHostSystem,
    UnsupportedArchitecture,
)
from .process import (
    LAUNCH_FAILED,
    ProcessError,
    run,
    run_attached,
)

__all__ = [
    # detection
    "ARCH_ALIASES",
    "HostProbe",
    "PlatformGuesser",
    "SystemHost",
    "Target",
    "UnknownHostSystem",
    "UnsupportedArchitecture",
    # process
    "LAUNCH_FAILED",
    "ProcessError",
    "run",
    "run_attached",
]
