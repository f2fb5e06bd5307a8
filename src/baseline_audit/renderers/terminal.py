"""Terminal renderer for baseline-audit output."""

from __future__ import annotations

from typing import Mapping

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from baseline_audit.models.compliance import ComplianceReport, ComplianceStatus
from baseline_audit.renderers.base import BaseRenderer, OutputFormat, RenderContext, RenderData


def status_markup(status: ComplianceStatus) -> str:
    if status is ComplianceStatus.COMPLIANT:
        return "[green]Compliant ✔[/green]"
    return "[red]Non-Compliant ❌[/red]"


class TerminalRenderer(BaseRenderer):
    """Renderer for rich terminal output.

    Example:
        renderer = TerminalRenderer()
        renderer.render(report, context)
    """

    format = OutputFormat.TERMINAL

    def __init__(self, console: Console | None = None) -> None:
        """Initialize the terminal renderer.

        Args:
            console: Rich console to use. Creates a new one if None.
        """
        self._console = console or Console()

    def render_to_file(self, data: RenderData, context: RenderContext) -> None:
        """Render data to a file by capturing terminal output."""
        if context.output_path is None:
            raise ValueError("output_path must be set in context for file rendering")

        file_console = Console(record=True, force_terminal=context.color)
        original_console = self._console
        self._console = file_console

        try:
            self.render(data, context)
            output = file_console.export_text(styles=context.color)
            context.output_path.write_text(output, encoding="utf-8")
        finally:
            self._console = original_console

    def render_report(self, report: ComplianceReport, context: RenderContext) -> str:
        """Print a report panel and component table; returns an empty string."""
        self._console.print()

        if report.compliant:
            overall = "[bold green]COMPLIANT[/bold green]"
        else:
            overall = "[bold red]NOT COMPLIANT[/bold red]"

        details = [f"[bold]System:[/bold] {report.system_name}"]
        if report.manufacturer or report.model:
            details.append(
                f"[bold]Hardware:[/bold] {report.manufacturer or 'Unknown'} {report.model or ''}".rstrip()
            )
        if report.cpu:
            details.append(f"[bold]CPU:[/bold] {report.cpu}")
        if report.gpu:
            details.append(f"[bold]GPU:[/bold] {report.gpu}")
        if report.received_at is not None:
            details.append(f"[bold]Received:[/bold] {report.received_at:%Y-%m-%d %H:%M:%S %Z}")
        details.append(f"[bold]Status:[/bold] {overall}")

        self._console.print(Panel("\n".join(details), title="Baseline Compliance"))

        table = Table()
        table.add_column("Component", style="bold")
        table.add_column("Current")
        table.add_column("Minimum")
        table.add_column("Status")

        for record in report.compliance:
            table.add_row(record.component, record.current, record.minimum, status_markup(record.status))

        self._console.print(table)
        return ""

    def render_aggregate(self, reports: Mapping[str, ComplianceReport], context: RenderContext) -> str:
        """Print one summary row per system, then per-system detail when verbose."""
        if not reports:
            self._console.print("[yellow]No systems have reported yet.[/yellow]")
            return ""

        table = Table(title="Reported Systems")
        table.add_column("System", style="bold")
        table.add_column("Model")
        table.add_column("Compliant")
        table.add_column("Failing Components")

        for name in sorted(reports):
            report = reports[name]
            failing = ", ".join(record.component for record in report.non_compliant)
            table.add_row(
                name,
                report.model or "",
                "[green]yes[/green]" if report.compliant else "[red]no[/red]",
                failing or "-",
            )

        self._console.print(table)

        if context.verbose:
            for name in sorted(reports):
                self.render_report(reports[name], context)
        return ""
