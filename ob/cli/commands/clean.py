"""Clean command - remove the build directory."""

from __future__ import annotations

from ob.cli.commands._helpers import build_service, exit_on_error
from ob.cli.context import build_context
from ob.output.console import Style


def clean() -> None:
    """Remove the project build directory."""
    ctx = build_context()
    service = build_service(ctx)
    if not service.build_dir.exists():
        ctx.console.print("Nothing to clean", Style.DIM)
        return
    exit_on_error(service.clean(), ctx)
    ctx.console.success(f"removed {service.build_dir}")
