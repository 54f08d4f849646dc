"""CLI output and error rendering helpers.

This module centralizes user-facing CLI presentation: ranked sequence reports,
rejected input summaries, warnings, and command diagnostics.
"""

from __future__ import annotations

from typing import NoReturn

import typer

from .errors import PipelineStageError
from .io.sources import VALID_SUFFIX
from .models.datatypes import FileResult

_BANNER = "*******************"
_BANNER_TAIL = "*****************"


def exit_with_command_error(command_name: str, exc: Exception) -> NoReturn:
    """Print concise diagnostics for command failures and exit with code 1."""

    if isinstance(exc, PipelineStageError):
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


def echo_warning(message: str) -> None:
    """Print a one-line non-fatal warning."""

    typer.echo(message)


def echo_invalid_sources(invalid_files: list[str]) -> None:
    """Print the aggregated list of rejected inputs, if any."""

    if not invalid_files:
        return
    typer.echo(
        f"Invalid input: {', '.join(invalid_files)}\n"
        f"This program only accepts {VALID_SUFFIX} files."
    )


def echo_top_sequences(results: list[FileResult], top_n: int = 100) -> None:
    """Print a header and up to `top_n` ranked lines for each unit."""

    for result in results:
        if not result.sequences:
            typer.echo(f"\n{_BANNER} NO SEQUENCES FOUND {_BANNER_TAIL}\n")
            continue

        typer.echo(f"\n{_BANNER} TOP SEQUENCES: {result.label} {_BANNER_TAIL}\n")
        for rank, (sequence, frequency) in enumerate(result.sequences[:top_n], start=1):
            typer.echo(f"{rank}. {sequence} - {frequency}")
