"""baseline-audit: check a machine's firmware/driver/OS stack against a baseline.

Clients probe the local OS build, BIOS, GPU driver and NPU driver
versions, compare each against a configured minimum and report
pass/fail. A collector accepts those reports, re-evaluates them and
serves an aggregate view.

- **Version comparison**: dialect-aware, never raises on vendor strings
- **Compliance evaluation**: one record per monitored component
- **Collector**: FastAPI service with an injectable report store
- **Agent**: submits local reports to a collector

Usage:
    # Library API
    from baseline_audit import ComponentKind, evaluate

    evaluate(ComponentKind.OS_BUILD, "26100.6584", "26100")

    # Local audit
    from baseline_audit import LocalAuditor, HostProbe, FileRequirementSource

    result = LocalAuditor(HostProbe(), FileRequirementSource("minRequirements.json")).audit()
    print(result.report.compliant)

CLI:
    baseline-audit check
    baseline-audit compare 1.6.0 1.5.0 --kind bios
    baseline-audit submit --collector http://collector:3000
    baseline-audit reports --collector http://collector:3000
    baseline-audit serve --port 3000
"""

__version__ = "0.1.0"

# Core
from baseline_audit.core.version import compare, satisfies
from baseline_audit.core.evaluator import ComplianceEvaluator, evaluate, resolve_component_kind
from baseline_audit.core.requirements import (
    FileRequirementSource,
    RequirementSource,
    StaticRequirementSource,
)
from baseline_audit.core.probe import HostProbe, Probe, StaticProbe
from baseline_audit.core.store import ReportStore
from baseline_audit.core.auditor import LocalAuditor
from baseline_audit.core.aggregator import ReportAggregator

# Models
from baseline_audit.models.compliance import (
    UNKNOWN,
    ComplianceRecord,
    ComplianceReport,
    ComplianceStatus,
    ComponentKind,
    Requirements,
    SystemIdentity,
)
from baseline_audit.models.results import AuditResult, SubmissionResult

__all__ = [
    # Version
    "__version__",
    # Core
    "compare",
    "satisfies",
    "ComplianceEvaluator",
    "evaluate",
    "resolve_component_kind",
    "FileRequirementSource",
    "RequirementSource",
    "StaticRequirementSource",
    "HostProbe",
    "Probe",
    "StaticProbe",
    "ReportStore",
    "LocalAuditor",
    "ReportAggregator",
    # Models
    "UNKNOWN",
    "AuditResult",
    "ComplianceRecord",
    "ComplianceReport",
    "ComplianceStatus",
    "ComponentKind",
    "Requirements",
    "SubmissionResult",
    "SystemIdentity",
]
