"""Requirement sources: where the minimum-version baseline comes from."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Protocol, runtime_checkable

import yaml
from pydantic import ValidationError as PydanticValidationError

from baseline_audit.models.compliance import Requirements
from baseline_audit.utils.logging import get_logger

logger = get_logger(__name__)


@runtime_checkable
class RequirementSource(Protocol):
    """Protocol for anything that can supply a Requirements baseline.

    Implementations must not raise: an unusable source yields
    ``Requirements.defaults()``.
    """

    def load(self) -> Requirements:
        """Load the current baseline."""
        ...


class StaticRequirementSource:
    """Requirement source backed by a fixed Requirements instance."""

    def __init__(self, requirements: Requirements | None = None) -> None:
        self._requirements = requirements or Requirements.defaults()

    def load(self) -> Requirements:
        return self._requirements


class FileRequirementSource:
    """Requirement source backed by a JSON or YAML file.

    The file is re-read on every ``load`` so edits take effect on the next
    evaluation pass. Keys follow the ``minRequirements.json`` layout::

        {"osBuild": "26100", "biosVersion": "1.5.0",
         "gpuDriver": "536.23", "npuDriver": "31.0.16000"}

    Example:
        source = FileRequirementSource("minRequirements.json")
        requirements = source.load()
    """

    YAML_SUFFIXES = (".yaml", ".yml")

    def __init__(self, path: Path | str) -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> Requirements:
        """Load requirements, falling back to the built-in defaults on any failure."""
        try:
            text = self._path.read_text(encoding="utf-8")
        except OSError as e:
            logger.warning("Error loading %s: %s; using default requirements", self._path, e)
            return Requirements.defaults()

        try:
            data = self._parse(text)
        except (json.JSONDecodeError, yaml.YAMLError) as e:
            logger.warning("Invalid requirements file %s: %s; using default requirements", self._path, e)
            return Requirements.defaults()

        if not isinstance(data, dict):
            logger.warning(
                "Requirements file %s must contain a mapping; using default requirements",
                self._path,
            )
            return Requirements.defaults()

        try:
            return Requirements.model_validate(data)
        except PydanticValidationError as e:
            logger.warning("Malformed requirements in %s: %s; using default requirements", self._path, e)
            return Requirements.defaults()

    def _parse(self, text: str) -> object:
        if self._path.suffix.lower() in self.YAML_SUFFIXES:
            return yaml.safe_load(text)
        return json.loads(text)
