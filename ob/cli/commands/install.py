"""Install/uninstall commands."""

from __future__ import annotations

from ob.cli.commands._helpers import exit_on_error, install_service
from ob.cli.context import build_context


def install() -> None:
    """Copy the host binary to /usr/local/bin (Linux and macOS)."""
    ctx = build_context()
    exit_on_error(install_service(ctx).install(), ctx)


def uninstall() -> None:
    """Remove the installed binary from /usr/local/bin."""
    ctx = build_context()
    path = exit_on_error(install_service(ctx).uninstall(), ctx)
    ctx.console.success(f"removed {path}")
