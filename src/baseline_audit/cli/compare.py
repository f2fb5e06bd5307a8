"""CLI command for comparing a single pair of versions."""

from typing import Optional

import typer

from baseline_audit.cli.utils import console, status_icon
from baseline_audit.models.compliance import ComponentKind


def compare_cmd(
    current: str = typer.Argument(..., help="Installed version"),
    minimum: str = typer.Argument(..., help="Required minimum version"),
    kind: Optional[ComponentKind] = typer.Option(
        None,
        "--kind",
        "-k",
        help="Component kind selecting the comparison dialect",
    ),
    component: Optional[str] = typer.Option(
        None,
        "--component",
        "-c",
        help="Component label, e.g. 'GPU Driver Version'",
    ),
) -> None:
    """
    Compare a version against a minimum.

    Exits with status 1 when CURRENT does not satisfy MINIMUM.

    Example:
        baseline-audit compare 32.0.21025.10016 536.23 --kind gpu_driver
    """
    from baseline_audit.core.evaluator import resolve_component_kind
    from baseline_audit.core.version import compare

    if kind is not None and component is not None:
        console.print("[red]Error:[/red] Use either --kind or --component, not both")
        raise typer.Exit(2)

    if kind is None:
        kind = resolve_component_kind(component) if component else ComponentKind.GENERIC

    result = compare(current, minimum, kind)

    console.print(
        f"{status_icon(result.compliant)}  {current} vs minimum {minimum} "
        f"[dim]({kind.value}, decided by {result.strategy})[/dim]"
    )

    if not result.compliant:
        raise typer.Exit(1)
