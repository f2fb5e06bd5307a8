"""Markdown renderer for baseline-audit output."""

from __future__ import annotations

from typing import Mapping

from baseline_audit.models.compliance import ComplianceReport
from baseline_audit.renderers.base import BaseRenderer, OutputFormat, RenderContext


class MarkdownRenderer(BaseRenderer):
    """Renderer for Markdown output format.

    Example:
        renderer = MarkdownRenderer()
        md_str = renderer.render(report, context)
    """

    format = OutputFormat.MARKDOWN

    def render_report(self, report: ComplianceReport, context: RenderContext, level: int = 1) -> str:
        heading = "#" * level
        status = "Compliant" if report.compliant else "Non-Compliant"
        lines = [
            f"{heading} Baseline Compliance: {report.system_name}",
            "",
            f"- **Status:** {status}",
        ]
        for label, value in (
            ("Manufacturer", report.manufacturer),
            ("Model", report.model),
            ("CPU", report.cpu),
            ("GPU", report.gpu),
        ):
            if value:
                lines.append(f"- **{label}:** {value}")
        if report.received_at is not None:
            lines.append(f"- **Received:** {report.received_at.isoformat()}")

        lines.extend(
            [
                "",
                "| Component | Current | Minimum | Status |",
                "|-----------|---------|---------|--------|",
            ]
        )
        for record in report.compliance:
            lines.append(
                f"| {record.component} | `{record.current}` | `{record.minimum}` | {record.status.value} |"
            )
        lines.append("")
        return "\n".join(lines)

    def render_aggregate(self, reports: Mapping[str, ComplianceReport], context: RenderContext) -> str:
        compliant = sum(1 for report in reports.values() if report.compliant)
        lines = [
            "# Baseline Compliance Overview",
            "",
            f"- Systems: **{len(reports)}**",
            f"- Compliant: {compliant}",
            f"- Non-Compliant: {len(reports) - compliant}",
            "",
        ]
        for name in sorted(reports):
            lines.append(self.render_report(reports[name], context, level=2))
        return "\n".join(lines)
