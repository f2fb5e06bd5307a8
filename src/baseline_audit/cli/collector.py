"""CLI commands for talking to and running a collector."""

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
    status_icon,
)
from baseline_audit.utils.config import get_config


def _client(collector: Optional[str]):
    from baseline_audit.agent.client import CollectorClient

    config = get_config().collector
    return CollectorClient(
        base_url=collector or config.url,
        timeout=config.timeout,
        max_retries=config.max_retries,
    )


def submit_cmd(
    collector: Optional[str] = typer.Option(
        None,
        "--collector",
        "-u",
        help="Collector base URL",
    ),
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
) -> None:
    """
    Audit this machine and send the report to a collector.

    The collector re-evaluates every component against its own baseline;
    the statuses shown are the collector's.

    Example:
        baseline-audit submit --collector http://collector:3000
    """
    from baseline_audit.core.auditor import LocalAuditor
    from baseline_audit.utils.errors import NetworkError

    with console.status("Probing system..."):
        auditor = LocalAuditor(host_probe(scripts_dir), requirement_source(requirements))
        result = auditor.audit()

    handle_result_errors(result, "Failed to fetch system information")
    report = result.report
    if report is None:
        console.print("[red]Error:[/red] No report generated")
        raise typer.Exit(1)

    client = _client(collector)
    try:
        with console.status(f"Sending report to {client.base_url}..."):
            receipt = client.submit(report)
    except NetworkError as e:
        console.print(f"[red]Error:[/red] Failed to send system info: {e.message}")
        raise typer.Exit(1)

    console.print(f"[green]{receipt.message or 'System info sent successfully'}[/green]")
    stored = receipt.received or report
    for record in stored.compliance:
        console.print(f"  {record.component}: {record.current} (min {record.minimum}) {status_icon(record.compliant)}")


def reports_cmd(
    collector: Optional[str] = typer.Option(
        None,
        "--collector",
        "-u",
        help="Collector base URL",
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
    detail: bool = typer.Option(
        False,
        "--detail",
        "-d",
        help="Show every system's component table",
    ),
) -> None:
    """
    Show the latest report of every system known to a collector.

    Example:
        baseline-audit reports --collector http://collector:3000 --format markdown
    """
    from baseline_audit.utils.errors import NetworkError

    output_format = resolve_format(format)
    client = _client(collector)

    try:
        with console.status(f"Fetching reports from {client.base_url}..."):
            reports = client.fetch_reports()
    except NetworkError as e:
        console.print(f"[red]Error:[/red] {e.message}")
        raise typer.Exit(1)

    output_data(reports, output_format, output, verbose=detail)


def serve_cmd(
    ctx: typer.Context,
    host: Optional[str] = typer.Option(None, "--host", help="Bind address"),
    port: Optional[int] = typer.Option(None, "--port", "-p", help="Bind port"),
    requirements: Optional[Path] = typer.Option(
        None,
        "--requirements",
        "-r",
        help="Requirements file (JSON or YAML)",
    ),
) -> None:
    """
    Run the collector service.

    Example:
        baseline-audit serve --port 3000
    """
    import uvicorn

    from baseline_audit.server.app import create_app
    from baseline_audit.utils.logging import uvicorn_log_config

    config = get_config()
    app = create_app(requirement_source=requirement_source(requirements), config=config)

    bind_host = host or config.server.host
    bind_port = port or config.server.port
    console.print(f"Server running at http://{bind_host}:{bind_port}")
    options = ctx.obj or {}
    uvicorn.run(
        app,
        host=bind_host,
        port=bind_port,
        log_config=uvicorn_log_config(
            level=options.get("log_level", "INFO"),
            structured=options.get("structured_logs", False),
        ),
    )
