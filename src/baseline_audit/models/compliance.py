"""Compliance data models.

Field aliases follow the camelCase wire format used by deployed agents
(``systemName``, ``compliance``, ``osBuild`` ...). Models accept either the
alias or the Python field name and serialize with aliases.
"""

from __future__ import annotations

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, Field

UNKNOWN = "Unknown"


class ComponentKind(str, Enum):
    """Monitored component kinds; each selects a comparison dialect."""

    OS_BUILD = "os_build"
    BIOS = "bios"
    GPU_DRIVER = "gpu_driver"
    NPU_DRIVER = "npu_driver"
    GENERIC = "generic"


class ComplianceStatus(str, Enum):
    """Outcome of comparing a current version against its minimum."""

    COMPLIANT = "Compliant"
    NON_COMPLIANT = "Non-Compliant"

    @classmethod
    def from_bool(cls, compliant: bool) -> ComplianceStatus:
        return cls.COMPLIANT if compliant else cls.NON_COMPLIANT


class Requirements(BaseModel):
    """Minimum version per component kind.

    A missing entry resolves to the ``Unknown`` sentinel, which never
    satisfies a comparison.
    """

    model_config = {"frozen": True, "populate_by_name": True, "coerce_numbers_to_str": True}

    os_build: str | None = Field(default=None, alias="osBuild", description="Minimum OS build")
    bios_version: str | None = Field(default=None, alias="biosVersion", description="Minimum BIOS version")
    gpu_driver: str | None = Field(default=None, alias="gpuDriver", description="Minimum GPU driver version")
    npu_driver: str | None = Field(default=None, alias="npuDriver", description="Minimum NPU driver version")

    @classmethod
    def defaults(cls) -> Requirements:
        """The built-in baseline used when no requirement source is usable."""
        return cls(
            os_build="26100",
            bios_version="1.5.0",
            gpu_driver="536.23",
            npu_driver="31.0.16000",
        )

    def minimum_for(self, kind: ComponentKind) -> str:
        """Get the minimum version for a component kind."""
        values = {
            ComponentKind.OS_BUILD: self.os_build,
            ComponentKind.BIOS: self.bios_version,
            ComponentKind.GPU_DRIVER: self.gpu_driver,
            ComponentKind.NPU_DRIVER: self.npu_driver,
        }
        return values.get(kind) or UNKNOWN


class ComplianceRecord(BaseModel):
    """Per-component result of one evaluation."""

    model_config = {"frozen": True}

    component: str = Field(description="Human-readable component label")
    current: str = Field(description="Installed version or 'Unknown'")
    minimum: str = Field(description="Required minimum version or 'Unknown'")
    status: ComplianceStatus = Field(description="Compliance outcome")

    @property
    def compliant(self) -> bool:
        return self.status is ComplianceStatus.COMPLIANT


class SystemIdentity(BaseModel):
    """Identity fields describing a host."""

    model_config = {"frozen": True, "populate_by_name": True}

    system_name: str = Field(alias="systemName", min_length=1, description="Host name, used as store key")
    manufacturer: str | None = Field(default=None, description="System manufacturer")
    model: str | None = Field(default=None, description="System model")
    cpu: str | None = Field(default=None, description="CPU brand string")
    gpu: str | None = Field(default=None, description="Primary GPU model")


class ComplianceReport(BaseModel):
    """Identity fields plus the ordered compliance records of one host."""

    model_config = {"frozen": True, "populate_by_name": True}

    system_name: str = Field(alias="systemName", min_length=1, description="Host name, used as store key")
    manufacturer: str | None = Field(default=None, description="System manufacturer")
    model: str | None = Field(default=None, description="System model")
    cpu: str | None = Field(default=None, description="CPU brand string")
    gpu: str | None = Field(default=None, description="Primary GPU model")
    compliance: list[ComplianceRecord] = Field(default_factory=list, description="Per-component results")
    received_at: datetime | None = Field(
        default=None,
        alias="receivedAt",
        description="When the collector accepted the report",
    )

    @classmethod
    def for_identity(
        cls,
        identity: SystemIdentity,
        compliance: list[ComplianceRecord],
        received_at: datetime | None = None,
    ) -> ComplianceReport:
        """Create a report from identity fields and records."""
        return cls(
            system_name=identity.system_name,
            manufacturer=identity.manufacturer,
            model=identity.model,
            cpu=identity.cpu,
            gpu=identity.gpu,
            compliance=compliance,
            received_at=received_at,
        )

    @property
    def compliant(self) -> bool:
        """Whether every component is compliant."""
        return all(record.compliant for record in self.compliance)

    @property
    def non_compliant(self) -> list[ComplianceRecord]:
        """Records that failed their minimum."""
        return [record for record in self.compliance if not record.compliant]

    def to_wire(self) -> dict:
        """Serialize using the camelCase wire format."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class SubmittedComponent(BaseModel):
    """One compliance entry as sent by a remote agent.

    ``status`` is accepted for compatibility and never trusted.
    """

    model_config = {"frozen": True, "coerce_numbers_to_str": True}

    component: str = Field(description="Component label")
    current: str | None = Field(default=None, description="Installed version")
    minimum: str | None = Field(default=None, description="Minimum version, filled in when absent")
    status: str | None = Field(default=None, description="Submitter's verdict (ignored)")


class SystemSubmission(BaseModel):
    """Inbound report payload posted by an agent."""

    model_config = {"frozen": True, "populate_by_name": True}

    system_name: str = Field(alias="systemName", min_length=1, description="Host name")
    manufacturer: str | None = Field(default=None, description="System manufacturer")
    model: str | None = Field(default=None, description="System model")
    cpu: str | None = Field(default=None, description="CPU brand string")
    gpu: str | None = Field(default=None, description="Primary GPU model")
    compliance: list[SubmittedComponent] | None = Field(
        default=None,
        description="Compliance entries to re-evaluate",
    )

    @property
    def identity(self) -> SystemIdentity:
        return SystemIdentity(
            system_name=self.system_name,
            manufacturer=self.manufacturer,
            model=self.model,
            cpu=self.cpu,
            gpu=self.gpu,
        )
