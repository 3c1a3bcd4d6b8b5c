"""Shared helpers for CLI commands."""

from __future__ import annotations

from typing import TYPE_CHECKING, TypeVar

import typer

from ob.core.result import Err, Result
from ob.output.errors import build_error_exit_code, print_build_error
from ob.services.build import BuildService
from ob.services.build_errors import BuildError
from ob.services.install import InstallService

if TYPE_CHECKING:
    from ob.cli.context import CLIContext

T = TypeVar("T")


def build_service(ctx: CLIContext) -> BuildService:
    return BuildService(
        root=ctx.root,
        config=ctx.config,
        guesser=ctx.guesser,
        runner=ctx.runner,
        console=ctx.console,
        mode=ctx.mode,
    )


def install_service(ctx: CLIContext) -> InstallService:
    return InstallService(
        root=ctx.root,
        config=ctx.config,
        guesser=ctx.guesser,
        runner=ctx.runner,
        console=ctx.console,
        mode=ctx.mode,
    )


def exit_on_error(result: Result[T, BuildError], ctx: CLIContext) -> T:
    """Return the Ok value, or report the error and exit with its code."""
    if isinstance(result, Err):
        print_build_error(result.error, ctx.console)
        raise typer.Exit(code=build_error_exit_code(result.error))
    return result.value
