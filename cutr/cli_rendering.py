"""CLI output and error rendering helpers.

This module centralizes user-facing CLI presentation for command diagnostics
and per-file input errors.
"""

from __future__ import annotations

from typing import NoReturn

import typer

from .errors import CommandStageError


def exit_with_command_error(command_name: str, exc: Exception) -> NoReturn:
    """Print concise diagnostics for command failures and exit with code 1."""

    if isinstance(exc, CommandStageError):
        typer.secho(
            f"{command_name} failed at stage `{exc.stage}`: {exc.detail}",
            fg=typer.colors.RED,
            err=True,
        )
        if exc.hint:
            typer.secho(f"Hint: {exc.hint}", fg=typer.colors.YELLOW, err=True)
    else:
        typer.secho(f"{command_name} failed: {exc}", fg=typer.colors.RED, err=True)
    raise typer.Exit(code=1) from exc


def echo_input_error(name: str, exc: Exception) -> None:
    """Print one `<name>: <reason>` line for an unreadable or malformed input."""

    reason = getattr(exc, "strerror", None) or str(exc)
    typer.secho(f"{name}: {reason}", fg=typer.colors.RED, err=True)
