"""Build commands - binary, release, test, lint and the default pipeline."""

from __future__ import annotations

import typer

from ob.cli.commands._helpers import build_service, exit_on_error
from ob.cli.context import build_context


def binary() -> None:
    """Build the binary for the current GOOS/GOARCH.

    If GOOS or GOARCH is not set, they are guessed from the host
    (uname-style). Example: GOOS=windows GOARCH=amd64 ob binary
    """
    ctx = build_context()
    exit_on_error(build_service(ctx).binary(), ctx)


def release() -> None:
    """Build release binaries for linux/amd64, linux/arm64, darwin/amd64, windows/amd64."""
    ctx = build_context()
    paths = exit_on_error(build_service(ctx).release(), ctx)
    for path in paths:
        ctx.console.success(path)


def run_tests() -> None:
    """Run the Go test suite."""
    ctx = build_context()
    exit_on_error(build_service(ctx).test(), ctx)


def lint(
    linters: list[str] | None = typer.Argument(
        None,
        help="Linters to run (default: eclint, commitlint, shellcheck)",
        show_default=False,
    ),
) -> None:
    """Run linters quietly; a failing linter's output is always shown."""
    ctx = build_context()
    exit_on_error(build_service(ctx).lint(linters or ()), ctx)


def default_pipeline() -> None:
    """clean, lint, test, release."""
    ctx = build_context()
    exit_on_error(build_service(ctx).default_pipeline(), ctx)
