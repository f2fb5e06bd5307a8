"""In-memory store of the latest report per system."""

from __future__ import annotations

from baseline_audit.models.compliance import ComplianceReport


class ReportStore:
    """Keyed store of the most recent report per system name.

    A new report for a known system replaces the old one wholesale; no
    history is kept. The store is owned by whoever creates it and passed
    to the components that need it.
    """

    def __init__(self) -> None:
        self._reports: dict[str, ComplianceReport] = {}

    def put(self, report: ComplianceReport) -> None:
        """Store ``report``, replacing any earlier report for the same system."""
        self._reports[report.system_name] = report

    def get(self, system_name: str) -> ComplianceReport | None:
        return self._reports.get(system_name)

    def all(self) -> dict[str, ComplianceReport]:
        """Return a copy of the stored reports keyed by system name."""
        return dict(self._reports)

    def clear(self) -> None:
        self._reports.clear()

    def __len__(self) -> int:
        return len(self._reports)

    def __contains__(self, system_name: object) -> bool:
        return system_name in self._reports
