"""CLI output and error rendering helpers.

This module centralizes user-facing CLI presentation for command diagnostics
and result delivery to stdout or an output file.
"""

from __future__ import annotations

from pathlib import Path
from typing import NoReturn

import typer

from .errors import TextProcessorError
from .io.output import write_output_file


def exit_with_command_error(command_name: str, exc: Exception) -> NoReturn:
    """Print concise diagnostics for command failures and exit with code 1."""

    if isinstance(exc, TextProcessorError):
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


def emit_result(message: str, output: Path | None, encoding: str = "utf-8") -> None:
    """Print `message`, or overwrite `output` with it when a target is given."""

    if output is None:
        typer.echo(message)
        return
    write_output_file(output, message, encoding=encoding)
