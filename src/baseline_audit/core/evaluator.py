"""ComplianceEvaluator: turn (kind, current, minimum) into compliance records."""

from __future__ import annotations

from typing import Mapping

from baseline_audit.core.version import compare
from baseline_audit.knowledge.components import get_component_catalog, get_component_labels
from baseline_audit.models.compliance import (
    UNKNOWN,
    ComplianceRecord,
    ComplianceStatus,
    ComponentKind,
    Requirements,
)
from baseline_audit.utils.logging import get_logger

logger = get_logger(__name__)


def resolve_component_kind(label: str) -> ComponentKind:
    """Resolve a free-text component label to its kind.

    Matching ignores case and all whitespace, so ``"Windows OS Build"``,
    ``"windowsosbuild"`` and ``"WINDOWS OS BUILD"`` are the same label.
    Unrecognized labels resolve to ``ComponentKind.GENERIC``.
    """
    if not isinstance(label, str):
        return ComponentKind.GENERIC
    key = "".join(label.lower().split())
    return get_component_labels().get(key, ComponentKind.GENERIC)


def evaluate(kind: ComponentKind, current: str, minimum: str) -> ComplianceStatus:
    """Evaluate one component. Pure and deterministic."""
    return ComplianceStatus.from_bool(compare(current, minimum, kind).compliant)


class ComplianceEvaluator:
    """Evaluator for the fixed set of monitored components.

    Example:
        evaluator = ComplianceEvaluator()
        records = evaluator.build_records(
            {ComponentKind.OS_BUILD: "26100.6584"},
            Requirements.defaults(),
        )
        for record in records:
            print(record.component, record.status.value)
    """

    def __init__(self) -> None:
        self._catalog = get_component_catalog()

    @property
    def kinds(self) -> list[ComponentKind]:
        """Component kinds in report order."""
        return list(self._catalog)

    def evaluate(self, kind: ComponentKind, current: str, minimum: str) -> ComplianceStatus:
        """Evaluate one component and log how the verdict was reached."""
        result = compare(current, minimum, kind)
        logger.debug(
            "Compared %s: current=%r minimum=%r strategy=%s compliant=%s",
            kind.value,
            current,
            minimum,
            result.strategy,
            result.compliant,
        )
        return ComplianceStatus.from_bool(result.compliant)

    def build_records(
        self,
        current_values: Mapping[ComponentKind, str],
        requirements: Requirements,
    ) -> list[ComplianceRecord]:
        """Build one record per monitored component, in catalog order.

        Args:
            current_values: Probed version per kind; missing kinds count as Unknown
            requirements: Minimum versions

        Returns:
            List of compliance records
        """
        records = []
        for kind, info in self._catalog.items():
            current = current_values.get(kind) or UNKNOWN
            minimum = requirements.minimum_for(kind)
            records.append(
                ComplianceRecord(
                    component=info["label"],
                    current=current,
                    minimum=minimum,
                    status=self.evaluate(kind, current, minimum),
                )
            )
        return records

    def record_for_label(
        self,
        label: str,
        current: str | None,
        minimum: str | None,
        requirements: Requirements,
    ) -> ComplianceRecord:
        """Build a record when only a free-text label identifies the component.

        A missing minimum is filled in from ``requirements``; the status is
        always recomputed here.
        """
        kind = resolve_component_kind(label)
        current = current or UNKNOWN
        minimum = minimum or requirements.minimum_for(kind)
        return ComplianceRecord(
            component=label,
            current=current,
            minimum=minimum,
            status=self.evaluate(kind, current, minimum),
        )
