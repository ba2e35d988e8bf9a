from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Any


class AuditSource(StrEnum):
    ADVISOR = "Advisor"
    STUDIO = "Studio"
    SYSTEM = "System"
    ARBITER = "Arbiter"


class AuditStatus(StrEnum):
    VERIFIED = "Verified"
    PENDING = "Pending"
    ERROR = "Error"
    REFINING = "Refining"


@dataclass(slots=True, frozen=True)
class ArbiterMetadata:
    critic_score: float | None = None
    latency_ms: float | None = None
    compliance_check: bool | None = None
    refinement_iterations: int | None = None

    def as_dict(self) -> dict[str, Any]:
        fields = {
            "criticScore": self.critic_score,
            "latencyMs": self.latency_ms,
            "complianceCheck": self.compliance_check,
            "refinementIterations": self.refinement_iterations,
        }
        return {key: value for key, value in fields.items() if value is not None}


@dataclass(slots=True, frozen=True)
class AuditEntry:
    id: str
    timestamp: str
    action: str
    details: str
    source: AuditSource
    status: AuditStatus
    hash: str
    metadata: ArbiterMetadata | None = None

    def as_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "id": self.id,
            "timestamp": self.timestamp,
            "action": self.action,
            "details": self.details,
            "source": self.source.value,
            "status": self.status.value,
            "hash": self.hash,
        }
        if self.metadata is not None:
            data["metadata"] = self.metadata.as_dict()
        return data
