"""Run command - build and run any tool stage of the Dockerfile."""

from __future__ import annotations

import typer

from ob.cli.commands._helpers import build_service, exit_on_error
from ob.cli.context import build_context

# Everything after TOOL is the tool's, including options.
RUN_CONTEXT_SETTINGS = {
    "allow_interspersed_args": False,
    "ignore_unknown_options": True,
}


def run(
    tool: str = typer.Argument(..., help="Tool (Dockerfile stage) name"),
    args: list[str] | None = typer.Argument(None, help="Arguments for the tool"),
    interactive: bool = typer.Option(
        False,
        "--interactive",
        "-i",
        help="Attach a TTY to the tool container",
    ),
) -> None:
    """Build and run a tool image.

    Example: ob run -i go  (runs image ockam/tool/go:latest with -it)
    """
    ctx = build_context()
    result = exit_on_error(
        build_service(ctx).run_tool(tool, args or (), interactive=interactive),
        ctx,
    )
    if result.exit_code != 0:
        raise typer.Exit(code=result.exit_code)
