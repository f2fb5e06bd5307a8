"""Shared test fixtures for baseline-audit tests."""

import json
import logging

import pytest

from baseline_audit.core.probe import StaticProbe
from baseline_audit.core.requirements import StaticRequirementSource
from baseline_audit.core.store import ReportStore
from baseline_audit.models.compliance import ComponentKind, Requirements, SystemIdentity
from baseline_audit.utils.config import set_config


@pytest.fixture
def sample_identity() -> SystemIdentity:
    """Identity of a lab machine."""
    return SystemIdentity(
        system_name="LAB-PC-01",
        manufacturer="Contoso",
        model="Surface Lab 7",
        cpu="AMD Ryzen AI 9 HX 370",
        gpu="AMD Radeon 890M",
    )


@pytest.fixture
def compliant_versions() -> dict[ComponentKind, str]:
    """Versions that meet the default baseline."""
    return {
        ComponentKind.OS_BUILD: "26100.6584",
        ComponentKind.BIOS: "1.6.0",
        ComponentKind.GPU_DRIVER: "551.86",
        ComponentKind.NPU_DRIVER: "32.0.100.3104",
    }


@pytest.fixture
def outdated_versions() -> dict[ComponentKind, str]:
    """Versions where the GPU driver is behind and the NPU is undetectable."""
    return {
        ComponentKind.OS_BUILD: "26100.1742",
        ComponentKind.BIOS: "1.5.0",
        ComponentKind.GPU_DRIVER: "32.0.21025.10016",
        ComponentKind.NPU_DRIVER: "Unknown",
    }


@pytest.fixture
def static_probe(sample_identity, compliant_versions) -> StaticProbe:
    """Probe reporting a fully compliant machine."""
    return StaticProbe(compliant_versions, sample_identity)


@pytest.fixture
def requirement_source() -> StaticRequirementSource:
    """Requirement source holding the default baseline."""
    return StaticRequirementSource(Requirements.defaults())


@pytest.fixture
def store() -> ReportStore:
    """Empty report store."""
    return ReportStore()


@pytest.fixture
def requirements_file(tmp_path) -> str:
    """A minRequirements.json with a stricter baseline than the defaults."""
    path = tmp_path / "minRequirements.json"
    path.write_text(
        json.dumps(
            {
                "osBuild": "26100.2000",
                "biosVersion": "2.0.0",
                "gpuDriver": "560.0",
                "npuDriver": "32.0.100.3000",
            }
        )
    )
    return str(path)


@pytest.fixture
def sample_submission() -> dict:
    """Submission body as posted by an agent."""
    return {
        "systemName": "LAB-PC-02",
        "manufacturer": "Contoso",
        "model": "Surface Lab 7",
        "cpu": "Intel Core Ultra 7 258V",
        "gpu": "Intel Arc 140V",
        "compliance": [
            {
                "component": "Windows OS Build",
                "current": "26100.6584",
                "minimum": "26100",
                "status": "Non-Compliant ❌",
            },
            {
                "component": "System BIOS Version",
                "current": "FP7T107",
                "minimum": "FP7T100",
                "status": "Non-Compliant ❌",
            },
            {
                "component": "GPU Driver Version",
                "current": "32.0.21025.10016",
                "status": "Compliant ✔",
            },
            {
                "component": "NPU Driver Version",
                "current": "Unknown",
                "minimum": "31.0.16000",
                "status": "Compliant ✔",
            },
        ],
    }


@pytest.fixture(autouse=True)
def reset_global_state():
    """Undo logging and configuration changes made by CLI invocations."""
    yield
    logger = logging.getLogger("baseline_audit")
    logger.handlers = []
    logger.propagate = True
    logger.setLevel(logging.NOTSET)
    set_config(None)
