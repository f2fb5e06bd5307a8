"""Renderer protocol and shared dispatch."""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum
from pathlib import Path
from typing import Mapping, Protocol, Union, runtime_checkable

from pydantic import BaseModel, Field

from baseline_audit.models.compliance import ComplianceReport

# A single report, or the aggregate view keyed by system name
RenderData = Union[ComplianceReport, Mapping[str, ComplianceReport]]


class OutputFormat(str, Enum):
    """Supported output formats."""

    JSON = "json"
    MARKDOWN = "markdown"
    TERMINAL = "terminal"


class RenderContext(BaseModel):
    """Options for one rendering call."""

    model_config = {"frozen": True}

    format: OutputFormat = Field(default=OutputFormat.TERMINAL, description="Output format")
    output_path: Path | None = Field(default=None, description="Output file path")
    verbose: bool = Field(default=False, description="Per-system detail in aggregate views")
    color: bool = Field(default=True, description="Enable color output (terminal only)")
    indent: int = Field(default=2, description="JSON indentation")


@runtime_checkable
class Renderer(Protocol):
    """Protocol for output renderers."""

    format: OutputFormat

    def render(self, data: RenderData, context: RenderContext) -> str: ...

    def render_to_file(self, data: RenderData, context: RenderContext) -> None: ...


class BaseRenderer(ABC):
    """Base renderer dispatching on the shape of the data.

    Subclasses set ``format`` and implement ``render_report`` and
    ``render_aggregate``.
    """

    format: OutputFormat

    def render(self, data: RenderData, context: RenderContext) -> str:
        """Render a report or an aggregate mapping of reports.

        Raises:
            TypeError: If data is neither
        """
        if isinstance(data, ComplianceReport):
            return self.render_report(data, context)
        if isinstance(data, Mapping):
            return self.render_aggregate(data, context)
        raise TypeError(f"Cannot render {type(data).__name__}")

    @abstractmethod
    def render_report(self, report: ComplianceReport, context: RenderContext) -> str:
        """Render a single system report."""

    @abstractmethod
    def render_aggregate(self, reports: Mapping[str, ComplianceReport], context: RenderContext) -> str:
        """Render the latest report of every system."""

    def render_to_file(self, data: RenderData, context: RenderContext) -> None:
        """Render data to ``context.output_path``.

        Raises:
            ValueError: If context.output_path is not set
        """
        if context.output_path is None:
            raise ValueError("output_path must be set in context for file rendering")

        context.output_path.write_text(self.render(data, context), encoding="utf-8")
