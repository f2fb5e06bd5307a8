"""Data models for baseline-audit.

All models are Pydantic BaseModel with frozen=True for immutability.
"""

from baseline_audit.models.compliance import (
    UNKNOWN,
    ComplianceRecord,
    ComplianceReport,
    ComplianceStatus,
    ComponentKind,
    Requirements,
    SubmittedComponent,
    SystemIdentity,
    SystemSubmission,
)
from baseline_audit.models.results import AuditError, AuditResult, SubmissionResult

__all__ = [
    # Compliance
    "UNKNOWN",
    "ComplianceRecord",
    "ComplianceReport",
    "ComplianceStatus",
    "ComponentKind",
    "Requirements",
    "SubmittedComponent",
    "SystemIdentity",
    "SystemSubmission",
    # Results
    "AuditError",
    "AuditResult",
    "SubmissionResult",
]
