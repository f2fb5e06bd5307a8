"""Core compliance evaluation and report handling."""

from baseline_audit.core.version import Comparison, SemanticVersion, compare, satisfies
from baseline_audit.core.evaluator import ComplianceEvaluator, evaluate, resolve_component_kind
from baseline_audit.core.requirements import (
    FileRequirementSource,
    RequirementSource,
    StaticRequirementSource,
)
from baseline_audit.core.probe import BaseProbe, HostProbe, Probe, StaticProbe
from baseline_audit.core.store import ReportStore
from baseline_audit.core.auditor import LocalAuditor
from baseline_audit.core.aggregator import ReportAggregator

__all__ = [
    "Comparison",
    "SemanticVersion",
    "compare",
    "satisfies",
    "ComplianceEvaluator",
    "evaluate",
    "resolve_component_kind",
    "FileRequirementSource",
    "RequirementSource",
    "StaticRequirementSource",
    "BaseProbe",
    "HostProbe",
    "Probe",
    "StaticProbe",
    "ReportStore",
    "LocalAuditor",
    "ReportAggregator",
]
