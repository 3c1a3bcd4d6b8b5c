from __future__ import annotations

from collections.abc import Callable
from enum import StrEnum
from typing import Any

import click
import typer
from typer.core import TyperGroup

from ob import __version__
from ob.cli.commands.build_cmd import binary, default_pipeline, lint, release, run_tests
from ob.cli.commands.clean import clean
from ob.cli.commands.help_cmd import help_
from ob.cli.commands.install import install, uninstall
from ob.cli.commands.run_cmd import RUN_CONTEXT_SETTINGS, run
from ob.core.errors import ErrorCode


class Command(StrEnum):
    BINARY = "binary"
    CLEAN = "clean"
    HELP = "help"
    INSTALL = "install"
    LINT = "lint"
    RELEASE = "release"
    RUN = "run"
    TEST = "test"
    UNINSTALL = "uninstall"


HANDLERS: dict[Command, Callable[..., None]] = {
    Command.BINARY: binary,
    Command.CLEAN: clean,
    Command.HELP: help_,
    Command.INSTALL: install,
    Command.LINT: lint,
    Command.RELEASE: release,
    Command.RUN: run,
    Command.TEST: run_tests,
    Command.UNINSTALL: uninstall,
}

_CONTEXT_SETTINGS: dict[Command, dict[str, Any]] = {
    Command.RUN: RUN_CONTEXT_SETTINGS,
}


class DispatchGroup(TyperGroup):
    """Unknown subcommands print the full help and exit 1."""

    def resolve_command(
        self, ctx: click.Context, args: list[str]
    ) -> tuple[str | None, click.Command | None, list[str]]:
        name = args[0] if args else None
        if name is not None and self.get_command(ctx, name) is None:
            typer.echo(ctx.get_help())
            ctx.exit(int(ErrorCode.PRECONDITION_ERROR))
        return super().resolve_command(ctx, args)


app = typer.Typer(
    cls=DispatchGroup,
    add_completion=False,
    invoke_without_command=True,
    rich_markup_mode="rich",
    help="Build, lint, test and release ockam inside tool containers.",
)


def _register(target: typer.Typer) -> None:
    for command in Command:
        # KeyError here means a Command member has no handler.
        handler = HANDLERS[command]
        target.command(command.value, context_settings=_CONTEXT_SETTINGS.get(command))(handler)


_register(app)


@app.callback()
def _main(  # pyright: ignore[reportUnusedFunction]
    ctx: typer.Context,
    version: bool = typer.Option(False, "--version", help="Show version and exit."),
) -> None:
    """Build, lint, test and release ockam inside tool containers.

    With no command: clean, lint, test and release, in that order.
    Set TRACE=1 to echo and stream every docker command.
    """
    if version:
        typer.echo(__version__)
        raise typer.Exit(code=0)
    if ctx.invoked_subcommand is None:
        default_pipeline()


def main() -> None:
    app()
