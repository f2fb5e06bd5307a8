"""Main CLI entry point for baseline-audit."""

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from baseline_audit.cli import check, collector, compare

app = typer.Typer(
    name="baseline-audit",
    help="Check firmware, driver and OS versions against a minimum-requirements baseline.",
    no_args_is_help=True,
    rich_markup_mode="rich",
)

console = Console()

# Register subcommands
app.command(name="check")(check.check_cmd)
app.command(name="compare")(compare.compare_cmd)
app.command(name="submit")(collector.submit_cmd)
app.command(name="reports")(collector.reports_cmd)
app.command(name="serve")(collector.serve_cmd)


@app.callback()
def main(
    ctx: typer.Context,
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable verbose output"),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Suppress non-essential output"),
    structured: bool = typer.Option(False, "--structured-logs", help="Timestamped log lines with context fields"),
    config: Optional[Path] = typer.Option(None, "--config", help="Configuration file (YAML)"),
) -> None:
    """
    baseline-audit: check a machine's firmware/driver/OS stack against a baseline.

    - [bold]check[/bold]: Audit this machine
    - [bold]compare[/bold]: Compare one version against a minimum
    - [bold]submit[/bold]: Send this machine's report to a collector
    - [bold]reports[/bold]: Show all reports held by a collector
    - [bold]serve[/bold]: Run the collector
    """
    from baseline_audit.utils.config import load_config, set_config
    from baseline_audit.utils.logging import configure_logging

    if verbose:
        level = "DEBUG"
    elif quiet:
        level = "WARNING"
    else:
        level = "INFO"
    configure_logging(level=level, structured=structured)
    ctx.obj = {"log_level": level, "structured_logs": structured}

    if config is not None:
        try:
            set_config(load_config(config))
        except (FileNotFoundError, ValueError) as e:
            console.print(f"[red]Error:[/red] {e}")
            raise typer.Exit(2)


@app.command()
def version() -> None:
    """Show the baseline-audit version."""
    from baseline_audit import __version__

    console.print(f"baseline-audit version {__version__}")


if __name__ == "__main__":
    app()
