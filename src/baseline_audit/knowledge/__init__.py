"""Built-in knowledge about the monitored components."""

from baseline_audit.knowledge.components import (
    get_component_catalog,
    get_component_labels,
)

__all__ = [
    "get_component_catalog",
    "get_component_labels",
]
