"""LocalAuditor: compliance report for the machine we run on."""

from __future__ import annotations

from baseline_audit.core.evaluator import ComplianceEvaluator
from baseline_audit.core.probe import Probe
from baseline_audit.core.requirements import RequirementSource
from baseline_audit.models.compliance import ComplianceReport
from baseline_audit.models.results import AuditError, AuditResult
from baseline_audit.utils.logging import get_logger

logger = get_logger(__name__)


class LocalAuditor:
    """Auditor combining a host probe, a requirement source and the evaluator.

    Example:
        auditor = LocalAuditor(HostProbe(), FileRequirementSource("minRequirements.json"))
        result = auditor.audit()

        if result.success:
            for record in result.report.compliance:
                print(record.component, record.status.value)
    """

    def __init__(
        self,
        probe: Probe,
        requirement_source: RequirementSource,
        evaluator: ComplianceEvaluator | None = None,
    ) -> None:
        self._probe = probe
        self._requirement_source = requirement_source
        self._evaluator = evaluator or ComplianceEvaluator()

    def audit(self) -> AuditResult:
        """Run one evaluation pass.

        Returns:
            AuditResult with the compliance report or errors
        """
        try:
            requirements = self._requirement_source.load()
            identity = self._probe.identity()
            current_values = self._probe.current_versions()

            records = self._evaluator.build_records(current_values, requirements)
            report = ComplianceReport.for_identity(identity, records)

            logger.info(
                "Audited %s: %d/%d components compliant",
                report.system_name,
                len(records) - len(report.non_compliant),
                len(records),
            )
            return AuditResult.ok(report)

        except Exception as e:
            logger.error("Error fetching system info: %s", e)
            return AuditResult.fail(
                [
                    AuditError(
                        code="AUDIT_ERROR",
                        message=f"Failed to fetch system information: {e}",
                    )
                ]
            )
