"""Host probes: read installed versions and identity from the local machine."""

from __future__ import annotations

import platform
import socket
import subprocess
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Protocol, runtime_checkable

from baseline_audit.knowledge.components import get_component_catalog
from baseline_audit.models.compliance import UNKNOWN, ComponentKind, SystemIdentity
from baseline_audit.utils.logging import get_logger

logger = get_logger(__name__)

UNKNOWN_GPU = "Unknown GPU"

DMI_ROOT = Path("/sys/class/dmi/id")


@runtime_checkable
class Probe(Protocol):
    """Protocol for host probes.

    Every version query returns a trimmed string or ``"Unknown"``; no
    query raises.
    """

    def os_build(self) -> str: ...

    def bios_version(self) -> str: ...

    def gpu_driver_version(self) -> str: ...

    def npu_driver_version(self) -> str: ...

    def identity(self) -> SystemIdentity: ...

    def current_versions(self) -> dict[ComponentKind, str]: ...


class BaseProbe(ABC):
    """Base implementation mapping the four queries onto component kinds."""

    def current_versions(self) -> dict[ComponentKind, str]:
        """Probe every monitored component."""
        return {
            ComponentKind.OS_BUILD: self.os_build(),
            ComponentKind.BIOS: self.bios_version(),
            ComponentKind.GPU_DRIVER: self.gpu_driver_version(),
            ComponentKind.NPU_DRIVER: self.npu_driver_version(),
        }

    @abstractmethod
    def os_build(self) -> str:
        """OS build and revision, e.g. ``26100.6584``."""

    @abstractmethod
    def bios_version(self) -> str:
        """System firmware version string."""

    @abstractmethod
    def gpu_driver_version(self) -> str:
        ...

    @abstractmethod
    def npu_driver_version(self) -> str:
        ...

    @abstractmethod
    def identity(self) -> SystemIdentity:
        """Return the host identity."""


class StaticProbe(BaseProbe):
    """Probe returning preset values; useful for tests and replaying captures."""

    def __init__(
        self,
        versions: dict[ComponentKind, str] | None = None,
        identity: SystemIdentity | None = None,
    ) -> None:
        self._versions = versions or {}
        self._identity = identity or SystemIdentity(system_name=socket.gethostname() or UNKNOWN)

    def os_build(self) -> str:
        return self._versions.get(ComponentKind.OS_BUILD, UNKNOWN)

    def bios_version(self) -> str:
        return self._versions.get(ComponentKind.BIOS, UNKNOWN)

    def gpu_driver_version(self) -> str:
        return self._versions.get(ComponentKind.GPU_DRIVER, UNKNOWN)

    def npu_driver_version(self) -> str:
        return self._versions.get(ComponentKind.NPU_DRIVER, UNKNOWN)

    def identity(self) -> SystemIdentity:
        return self._identity


class HostProbe(BaseProbe):
    """Probe for the machine this process runs on.

    On Windows each component is read with a PowerShell query. A ``.ps1``
    script with the conventional name in ``scripts_dir`` (for example
    ``get-GpuDriverVer.ps1``) takes precedence over the built-in query.
    Elsewhere DMI data from sysfs and ``nvidia-smi`` are used where they
    make sense.

    Example:
        probe = HostProbe(scripts_dir="scripts", timeout=10)
        print(probe.gpu_driver_version())
    """

    def __init__(
        self,
        scripts_dir: Path | str | None = None,
        timeout: float = 30.0,
        shell: str = "powershell",
    ) -> None:
        self._scripts_dir = Path(scripts_dir) if scripts_dir else None
        self._timeout = timeout
        self._shell = shell
        self._catalog = get_component_catalog()

    @property
    def is_windows(self) -> bool:
        return platform.system() == "Windows"

    def os_build(self) -> str:
        return self._probe_component(ComponentKind.OS_BUILD)

    def bios_version(self) -> str:
        if not self.is_windows and not self._script_for(ComponentKind.BIOS):
            return self._read_dmi("bios_version") or UNKNOWN
        return self._probe_component(ComponentKind.BIOS)

    def gpu_driver_version(self) -> str:
        if not self.is_windows and not self._script_for(ComponentKind.GPU_DRIVER):
            return self._query_nvidia_smi("driver_version") or UNKNOWN
        return self._probe_component(ComponentKind.GPU_DRIVER)

    def npu_driver_version(self) -> str:
        return self._probe_component(ComponentKind.NPU_DRIVER)

    def identity(self) -> SystemIdentity:
        """Collect identity fields; any unobtainable field is left unset."""
        system_name = platform.node() or socket.gethostname() or UNKNOWN

        if self.is_windows:
            manufacturer = self._run_powershell(
                "(Get-CimInstance -ClassName Win32_ComputerSystem).Manufacturer"
            )
            model = self._run_powershell("(Get-CimInstance -ClassName Win32_ComputerSystem).Model")
            cpu = self._run_powershell(
                "(Get-CimInstance -ClassName Win32_Processor | Select-Object -First 1).Name"
            )
            gpu = self._run_powershell(
                "(Get-CimInstance -ClassName Win32_VideoController | Select-Object -First 1).Name"
            )
        else:
            manufacturer = self._read_dmi("sys_vendor")
            model = self._read_dmi("product_name")
            cpu = self._read_cpu_model()
            gpu = self._query_nvidia_smi("name")

        return SystemIdentity(
            system_name=system_name,
            manufacturer=manufacturer,
            model=model,
            cpu=cpu or platform.processor() or None,
            gpu=gpu or UNKNOWN_GPU,
        )

    def _script_for(self, kind: ComponentKind) -> Path | None:
        script = self._catalog[kind].get("script")
        if not script or self._scripts_dir is None:
            return None
        path = self._scripts_dir / script
        return path if path.is_file() else None

    def _probe_component(self, kind: ComponentKind) -> str:
        script = self._script_for(kind)
        if script is not None:
            output = self._run(
                [self._shell, "-NoProfile", "-ExecutionPolicy", "Bypass", "-File", str(script)],
                label=script.name,
            )
        elif self.is_windows:
            output = self._run_powershell(self._catalog[kind]["command"], label=kind.value)
        else:
            logger.debug("No probe available for %s on %s", kind.value, platform.system())
            output = None
        return output or UNKNOWN

    def _run_powershell(self, command: str, label: str | None = None) -> str | None:
        return self._run(
            [self._shell, "-NoProfile", "-ExecutionPolicy", "Bypass", "-Command", command],
            label=label or command,
        )

    def _run(self, args: list[str], label: str) -> str | None:
        """Run a command and return its trimmed stdout, or None on any failure."""
        try:
            result = subprocess.run(
                args,
                capture_output=True,
                text=True,
                timeout=self._timeout,
            )
        except FileNotFoundError:
            logger.warning("Error running %s: %s not found", label, args[0])
            return None
        except subprocess.TimeoutExpired:
            logger.warning("Error running %s: timed out after %ss", label, self._timeout)
            return None
        except (OSError, subprocess.SubprocessError) as e:
            logger.warning("Error running %s: %s", label, e)
            return None

        if result.returncode != 0:
            logger.warning("Error running %s: exit code %d", label, result.returncode)
            return None

        output = result.stdout.strip()
        return output or None

    def _query_nvidia_smi(self, field: str) -> str | None:
        output = self._run(
            ["nvidia-smi", f"--query-gpu={field}", "--format=csv,noheader"],
            label="nvidia-smi",
        )
        if not output:
            return None
        return output.splitlines()[0].strip() or None

    @staticmethod
    def _read_dmi(name: str) -> str | None:
        try:
            value = (DMI_ROOT / name).read_text().strip()
        except OSError:
            return None
        return value or None

    @staticmethod
    def _read_cpu_model() -> str | None:
        try:
            text = Path("/proc/cpuinfo").read_text()
        except OSError:
            return None
        for line in text.splitlines():
            if line.startswith("model name"):
                _, _, value = line.partition(":")
                return value.strip() or None
        return None
