"""Shared utilities for CLI commands."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import typer
from rich.console import Console

from baseline_audit.core.probe import HostProbe
from baseline_audit.core.requirements import FileRequirementSource
from baseline_audit.renderers import OutputFormat, RenderContext, get_renderer
from baseline_audit.renderers.terminal import TerminalRenderer
from baseline_audit.utils.config import get_config

# Shared console instance
console = Console()


def requirement_source(path: Path | None) -> FileRequirementSource:
    """Requirement source for an explicit path or the configured one."""
    return FileRequirementSource(path or get_config().requirements.path)


def host_probe(scripts_dir: Path | None = None) -> HostProbe:
    """Host probe built from configuration, with an optional scripts override."""
    probe_config = get_config().probe
    return HostProbe(
        scripts_dir=scripts_dir or probe_config.scripts_dir,
        timeout=probe_config.timeout,
        shell=probe_config.shell,
    )


def resolve_format(format: str | None) -> OutputFormat:
    """Parse an output format, defaulting to the configured one."""
    value = format or get_config().output.default_format
    try:
        return OutputFormat(value.lower())
    except ValueError:
        choices = ", ".join(f.value for f in OutputFormat)
        console.print(f"[red]Error:[/red] Unknown format '{value}' (choose from {choices})")
        raise typer.Exit(2)


def handle_result_errors(result: Any, error_message: str = "Operation failed") -> None:
    """Handle errors in a result object and exit if failed.

    Args:
        result: Result object with success and errors attributes
        error_message: Message to display on error
    """
    if not result.success:
        console.print(f"[red]Error:[/red] {error_message}")
        for error in result.errors:
            console.print(f"  {error}")
        raise typer.Exit(1)


def output_data(data: Any, format: OutputFormat, output: Path | None = None, verbose: bool = False) -> None:
    """Render data to the console or to a file.

    Args:
        data: A report or a mapping of reports
        format: Output format
        output: Optional output file path
        verbose: Include per-system detail where the format supports it
    """
    color = get_config().output.color
    context = RenderContext(format=format, output_path=output, verbose=verbose, color=color)

    if format == OutputFormat.TERMINAL:
        renderer = TerminalRenderer(console if color else Console(no_color=True))
    else:
        renderer = get_renderer(format)

    if output:
        renderer.render_to_file(data, context)
        console.print(f"Report written to {output}")
        return

    if format == OutputFormat.TERMINAL:
        renderer.render(data, context)
    else:
        typer.echo(renderer.render(data, context))


def status_icon(success: bool) -> str:
    """Get a colored status label."""
    return "[green]Compliant ✔[/green]" if success else "[red]Non-Compliant ❌[/red]"
