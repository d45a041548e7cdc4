"""Console output for the chart CLI.

Status lines carry an emoji prefix; chart reports are a cyan heading followed
by indented detail lines. Diagnostics go through logging, not through here.
"""

from __future__ import annotations

import typer

DETAIL_INDENT = "  "


def success(message: str) -> None:
    """Report a finished step, e.g. ``✅ Chart written to charts/departments.png``."""
    typer.secho(f"✅ {message}", fg=typer.colors.GREEN)


def error(message: str, *, err: bool = True) -> None:
    """Report a failure in red.

    Args:
        message: The error message to display
        err: Whether to write to stderr instead of stdout (default: True)
    """
    typer.secho(f"❌ {message}", fg=typer.colors.RED, err=err)


def info(message: str) -> None:
    typer.secho(f"ℹ️  {message}", fg=typer.colors.CYAN)


def warning(message: str) -> None:
    typer.secho(f"⚠️  {message}", fg=typer.colors.YELLOW)


def chart_heading(name: str, kind: str) -> None:
    """Start a chart report: ``📊 departments (pie)``."""
    typer.secho(f"📊 {name} ({kind})", fg=typer.colors.CYAN, bold=True)


def detail(message: str) -> None:
    """Print one indented line of a chart report."""
    typer.echo(f"{DETAIL_INDENT}{message}")


def no_data(reason: str) -> None:
    """Print the report line for a chart that draws its placeholder."""
    typer.secho(f"{DETAIL_INDENT}No data ({reason})", fg=typer.colors.YELLOW)
