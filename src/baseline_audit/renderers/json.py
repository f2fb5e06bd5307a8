"""JSON renderer for baseline-audit output."""

from __future__ import annotations

import json
from typing import Any, Mapping

from pydantic import BaseModel

from baseline_audit.models.compliance import ComplianceReport
from baseline_audit.renderers.base import BaseRenderer, OutputFormat, RenderContext


def to_jsonable(data: Any) -> Any:
    """Convert models (and mappings/lists of models) to wire-format data."""
    if isinstance(data, BaseModel):
        return data.model_dump(mode="json", by_alias=True, exclude_none=True)
    if isinstance(data, Mapping):
        return {key: to_jsonable(value) for key, value in data.items()}
    if isinstance(data, (list, tuple)):
        return [to_jsonable(item) for item in data]
    return data


class JSONRenderer(BaseRenderer):
    """Renderer emitting the same camelCase wire format the collector serves.

    Example:
        renderer = JSONRenderer()
        json_str = renderer.render(report, context)
    """

    format = OutputFormat.JSON

    def render_report(self, report: ComplianceReport, context: RenderContext) -> str:
        return self._dumps(report, context)

    def render_aggregate(self, reports: Mapping[str, ComplianceReport], context: RenderContext) -> str:
        return self._dumps(reports, context)

    @staticmethod
    def _dumps(data: Any, context: RenderContext) -> str:
        return json.dumps(
            to_jsonable(data),
            indent=context.indent if context.indent else None,
            ensure_ascii=False,
        )
