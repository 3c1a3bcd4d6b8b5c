"""Error codes for CLI exit status.

Every command maps its failure to one of these codes. A failing tool is the
exception: its own exit status is passed through (see ``ob.output.errors``).
"""

from enum import IntEnum

__all__ = ["ErrorCode"]


class ErrorCode(IntEnum):
    """Exit codes for CLI commands.

    - 0: Success
    - 1: Precondition not met (unknown command, missing install dir)
    - 2: Configuration error (unsupported arch, missing version, bad ob.toml)
    - 3: Tool environment failed to build
    - 4: Tool exited non-zero without a usable status of its own
    - 5: I/O error (artifact missing, copy failed)
    """

    OK = 0
    PRECONDITION_ERROR = 1
    CONFIG_ERROR = 2
    TOOL_BUILD_ERROR = 3
    TOOL_ERROR = 4
    IO_ERROR = 5
