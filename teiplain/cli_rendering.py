"""CLI output and error rendering helpers.

This module centralizes user-facing CLI presentation for command diagnostics
and conversion results.
"""

from __future__ import annotations

from typing import NoReturn

import typer

from .errors import ConversionStageError
from .pipeline import RenderedDocument


def exit_with_command_error(command_name: str, exc: Exception) -> NoReturn:
    """Print concise diagnostics for command failures and exit with code 1."""

    if isinstance(exc, ConversionStageError):
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


def echo_rendered_text(result: RenderedDocument) -> None:
    """Print rendered text exactly as produced, followed by one newline."""

    typer.echo(result.text)


def echo_teaser(result: RenderedDocument) -> None:
    """Print the teaser, or nothing when no teaser was produced."""

    if result.teaser is not None:
        typer.echo(result.teaser)


def echo_write_summary(result: RenderedDocument, output_label: str) -> None:
    """Print a short summary after rendered text was written to a file."""

    typer.echo(f"Wrote: {output_label}")
    typer.echo(f"Nodes: {result.node_count}")
    typer.echo(f"Fragments: {result.fragment_count}")
