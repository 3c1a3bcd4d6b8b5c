"""Subprocess execution with Result-based error handling.

This is the only module allowed to touch ``subprocess``. Two flavours:

- ``run``: output captured (stderr folded into stdout, like ``2>&1``).
- ``run_attached``: output and stdin inherited from the caller's terminal.

Usage:
    result = run(["docker", "version"], cwd=Path("."))
    match result:
        case Ok(output):
            print(output)
        case Err(error):
            print(error.output)
"""

from __future__ import annotations

import subprocess
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from ob.core.result import Err, Ok, Result

__all__ = ["LAUNCH_FAILED", "ProcessError", "run", "run_attached"]

# Shell convention for "command not found / could not execute".
LAUNCH_FAILED = 127


@dataclass(frozen=True, slots=True)
class ProcessError:
    """A subprocess that exited non-zero or could not be started.

    Attributes:
        command: The command that was executed.
        returncode: Exit code, or LAUNCH_FAILED if it never started.
        output: Combined stdout/stderr when captured, else an error note.
    """

    command: tuple[str, ...]
    returncode: int
    output: str

    def __str__(self) -> str:
        cmd_str = " ".join(self.command[:3])
        if len(self.command) > 3:
            cmd_str += " ..."
        return f"{cmd_str} failed (exit {self.returncode})"


def run(
    cmd: list[str],
    cwd: Path,
    env: Mapping[str, str] | None = None,
) -> Result[str, ProcessError]:
    """Execute ``cmd`` and capture its combined output.

    Args:
        cmd: Command and arguments to execute.
        cwd: Working directory for the command.
        env: Full environment for the child (current env if None).

    Returns:
        Ok(output) on success, Err(ProcessError) carrying the output on failure.
    """
    try:
        proc = subprocess.run(
            cmd,
            cwd=str(cwd),
            env=dict(env) if env is not None else None,
            stdout=subprocess.PIPE,
            stderr=subprocess.STDOUT,
            # Tools may echo arbitrary bytes; diagnostics must survive decoding.
            encoding="utf-8",
            errors="replace",
            check=False,
        )
    except OSError as e:
        return Err(ProcessError(command=tuple(cmd), returncode=LAUNCH_FAILED, output=str(e)))

    if proc.returncode != 0:
        return Err(
            ProcessError(command=tuple(cmd), returncode=proc.returncode, output=proc.stdout or "")
        )
    return Ok(proc.stdout or "")


def run_attached(
    cmd: list[str],
    cwd: Path,
    env: Mapping[str, str] | None = None,
) -> Result[None, ProcessError]:
    """Execute ``cmd`` with the caller's stdio, streaming output live."""
    try:
        proc = subprocess.run(
            cmd,
            cwd=str(cwd),
            env=dict(env) if env is not None else None,
            check=False,
        )
    except OSError as e:
        return Err(ProcessError(command=tuple(cmd), returncode=LAUNCH_FAILED, output=str(e)))

    if proc.returncode != 0:
        return Err(ProcessError(command=tuple(cmd), returncode=proc.returncode, output=""))
    return Ok(None)
