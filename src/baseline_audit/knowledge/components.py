"""Catalog of the components checked against the baseline."""

from typing import Any

from baseline_audit.models.compliance import ComponentKind


def get_component_catalog() -> dict[ComponentKind, dict[str, Any]]:
    """Get the component catalog.

    Order is the order records appear in a report.

    Returns:
        Dictionary mapping component kinds to their label, the
        requirements key and the Windows probe command
    """
    return {
        ComponentKind.OS_BUILD: {
            "label": "Windows OS Build",
            "requirement_key": "osBuild",
            "script": "get-WindowsVersion.ps1",
            "command": (
                "$v = Get-ItemProperty 'HKLM:\\SOFTWARE\\Microsoft\\Windows NT\\CurrentVersion'; "
                "\"$($v.CurrentBuild).$($v.UBR)\""
            ),
        },
        ComponentKind.BIOS: {
            "label": "System BIOS Version",
            "requirement_key": "biosVersion",
            "script": None,
            "command": "(Get-CimInstance -ClassName Win32_BIOS).SMBIOSBIOSVersion",
        },
        ComponentKind.GPU_DRIVER: {
            "label": "GPU Driver Version",
            "requirement_key": "gpuDriver",
            "script": "get-GpuDriverVer.ps1",
            "command": (
                "(Get-CimInstance -ClassName Win32_VideoController | "
                "Select-Object -First 1).DriverVersion"
            ),
        },
        ComponentKind.NPU_DRIVER: {
            "label": "NPU Driver Version",
            "requirement_key": "npuDriver",
            "script": "get-NpuDriverVer.ps1",
            "command": (
                "(Get-CimInstance -ClassName Win32_PnPSignedDriver | "
                "Where-Object { $_.DeviceClass -eq 'ComputeAccelerator' } | "
                "Select-Object -First 1).DriverVersion"
            ),
        },
    }


def get_component_labels() -> dict[str, ComponentKind]:
    """Map normalized labels (lowercase, no whitespace) to component kinds."""
    return {
        "".join(info["label"].lower().split()): kind
        for kind, info in get_component_catalog().items()
    }
