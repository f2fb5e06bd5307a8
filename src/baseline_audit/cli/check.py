"""CLI command for checking this machine against the baseline."""

from pathlib import Path
from typing import Optional

import typer

from baseline_audit.cli.utils import (
    console,
    handle_result_errors,
    host_probe,
    output_data,
    requirement_source,
    resolve_format,
)


def check_cmd(
    requirements: Optional[Path] = typer.Option(
        None,
        "--requirements",
        "-r",
        help="Requirements file (JSON or YAML)",
    ),
    scripts_dir: Optional[Path] = typer.Option(
        None,
        "--scripts-dir",
        help="Directory containing probe .ps1 scripts",
    ),
    format: Optional[str] = typer.Option(
        None,
        "--format",
        "-f",
        help="Output format (terminal, json, markdown)",
    ),
    output: Optional[Path] = typer.Option(
        None,
        "--output",
        "-o",
        help="Output file path",
    ),
) -> None:
    """
    Check this machine against the minimum-requirements baseline.

    Probes the OS build, BIOS, GPU driver and NPU driver versions and
    compares each with its minimum. Exits with status 1 when any
    component is non-compliant.

    Example:
        baseline-audit check --requirements minRequirements.json
    """
    from baseline_audit.core.auditor import LocalAuditor

    output_format = resolve_format(format)

    with console.status("Probing system..."):
        auditor = LocalAuditor(host_probe(scripts_dir), requirement_source(requirements))
        result = auditor.audit()

    handle_result_errors(result, "Failed to fetch system information")

    report = result.report
    if report is None:
        console.print("[red]Error:[/red] No report generated")
        raise typer.Exit(1)

    output_data(report, output_format, output)

    if not report.compliant:
        raise typer.Exit(1)
