"""Help command - full help, or help for one command."""

from __future__ import annotations

import click
import typer

from ob.core.errors import ErrorCode


def help_(
    ctx: typer.Context,
    command: str | None = typer.Argument(None, help="Command to describe", show_default=False),
) -> None:
    """Display help for all commands, or just COMMAND.

    Examples: ob help, ob help lint
    """
    root = ctx.find_root()
    group = root.command
    if command is None:
        typer.echo(root.get_help())
        return

    target = group.get_command(root, command) if isinstance(group, click.Group) else None
    if target is None:
        typer.echo(root.get_help())
        raise typer.Exit(code=int(ErrorCode.PRECONDITION_ERROR))

    with click.Context(target, info_name=command, parent=root) as sub:
        typer.echo(target.get_help(sub))
