"""ReportAggregator: accept reports from remote agents."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Mapping

from pydantic import ValidationError as PydanticValidationError

from baseline_audit.core.evaluator import ComplianceEvaluator
from baseline_audit.core.requirements import RequirementSource
from baseline_audit.core.store import ReportStore
from baseline_audit.models.compliance import ComplianceReport, SystemSubmission
from baseline_audit.models.results import AuditError, SubmissionResult
from baseline_audit.utils.errors import ValidationError, require_system_name
from baseline_audit.utils.logging import get_logger, get_logger_with_context

logger = get_logger(__name__)


class ReportAggregator:
    """Aggregator for reports submitted by remote agents.

    Submitted statuses are never trusted: every entry is re-evaluated
    against the local baseline before the report is stored.

    Example:
        aggregator = ReportAggregator(ReportStore(), FileRequirementSource("minRequirements.json"))
        result = aggregator.ingest({"systemName": "LAB-01", "compliance": [...]})
        if not result.success:
            print(result.errors[0].message)
    """

    def __init__(
        self,
        store: ReportStore,
        requirement_source: RequirementSource,
        evaluator: ComplianceEvaluator | None = None,
    ) -> None:
        self._store = store
        self._requirement_source = requirement_source
        self._evaluator = evaluator or ComplianceEvaluator()

    @property
    def store(self) -> ReportStore:
        return self._store

    def ingest(self, payload: Mapping[str, Any]) -> SubmissionResult:
        """Validate, re-evaluate and store a submission.

        Args:
            payload: Decoded request body

        Returns:
            SubmissionResult with the stored report, or the rejection reason.
            A rejected submission leaves the store untouched.
        """
        try:
            require_system_name(payload)
            submission = SystemSubmission.model_validate(payload)
        except ValidationError as e:
            logger.warning("Rejected submission: %s", e.message)
            return SubmissionResult.fail([e.to_audit_error()])
        except PydanticValidationError as e:
            logger.warning("Rejected submission: %s", e)
            return SubmissionResult.fail(
                [
                    AuditError(
                        code="INVALID_PAYLOAD",
                        message="Invalid system information payload",
                        details={"errors": e.errors(include_url=False, include_context=False)},
                    )
                ]
            )

        requirements = self._requirement_source.load()
        records = [
            self._evaluator.record_for_label(
                entry.component,
                entry.current,
                entry.minimum,
                requirements,
            )
            for entry in submission.compliance or []
        ]

        report = ComplianceReport.for_identity(
            submission.identity,
            records,
            received_at=datetime.now(timezone.utc),
        )
        self._store.put(report)

        get_logger_with_context(__name__, system=report.system_name).info(
            "Received system info from client: %s (%d/%d compliant)",
            report.system_name,
            len(report.compliance) - len(report.non_compliant),
            len(report.compliance),
        )
        return SubmissionResult.ok(report)

    def reports(self) -> dict[str, ComplianceReport]:
        """Get the latest report of every system."""
        return self._store.all()
