"""Result types returned by audits and submissions.

Core operations report failure through these results instead of raising,
so callers (the CLI and the collector service) decide how to surface it.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from baseline_audit.models.compliance import ComplianceReport


class AuditError(BaseModel):
    """A machine-readable failure reason."""

    model_config = {"frozen": True}

    code: str = Field(description="Error code, e.g. MISSING_SYSTEM_NAME")
    message: str = Field(description="Message returned to the caller")
    details: dict[str, Any] = Field(default_factory=dict, description="Additional error context")

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"


class AuditResult(BaseModel):
    """Result of a local compliance audit."""

    model_config = {"frozen": True}

    success: bool = Field(description="Whether the audit succeeded")
    report: ComplianceReport | None = Field(default=None, description="The report if successful")
    errors: list[AuditError] = Field(default_factory=list, description="Errors that occurred")

    @classmethod
    def ok(cls, report: ComplianceReport) -> AuditResult:
        """Create a successful result."""
        return cls(success=True, report=report)

    @classmethod
    def fail(cls, errors: list[AuditError]) -> AuditResult:
        """Create a failed result."""
        return cls(success=False, errors=errors)


class SubmissionResult(BaseModel):
    """Result of ingesting a remote submission.

    A rejected submission carries no report; ``errors[0].message`` is the
    text the collector returns to the agent.
    """

    model_config = {"frozen": True}

    success: bool = Field(description="Whether the submission was accepted")
    report: ComplianceReport | None = Field(default=None, description="The stored report")
    errors: list[AuditError] = Field(default_factory=list, description="Reasons for rejection")

    @classmethod
    def ok(cls, report: ComplianceReport) -> SubmissionResult:
        return cls(success=True, report=report)

    @classmethod
    def fail(cls, errors: list[AuditError]) -> SubmissionResult:
        return cls(success=False, errors=errors)

    @property
    def first_error(self) -> str | None:
        """Message of the first rejection reason, if any."""
        return self.errors[0].message if self.errors else None
