"""CLI output and error rendering helpers.

This module centralizes user-facing CLI presentation for command diagnostics
and annotation batch summaries.
"""

from __future__ import annotations

from typing import NoReturn

import typer

from .errors import CommandStageError
from .models.datatypes import AnnotationBatchReport, AnnotationStatus


def exit_with_command_error(command_name: str, exc: Exception, code: int = 1) -> NoReturn:
    """Print concise diagnostics for command failures and exit with `code`."""

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
    raise typer.Exit(code=code) from exc


def echo_batch_summary(report: AnnotationBatchReport) -> None:
    """Print per-status annotation counts."""

    typer.echo(f"Annotations updated: {report.updated_count}")
    typer.echo(f"Annotations unchanged: {report.no_changes_count}")
    typer.echo(f"Annotations skipped: {report.skipped_count}")


def echo_updated_keys(report: AnnotationBatchReport) -> None:
    """Print one `key: text` row per updated annotation."""

    for outcome in report.outcomes:
        if outcome.status is AnnotationStatus.UPDATED:
            typer.echo(f"- {outcome.annotation.key}: {outcome.annotation.text}")
