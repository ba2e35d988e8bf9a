from __future__ import annotations

import json
from collections.abc import Mapping
from dataclasses import dataclass, replace
from datetime import UTC, datetime
from typing import Any

from covenant_engine.errors import InvalidArgumentError


def utc_timestamp() -> str:
    return datetime.now(UTC).isoformat(timespec="milliseconds").replace("+00:00", "Z")


@dataclass(slots=True, frozen=True)
class ValidationStep:
    """Immutable outcome of one rule evaluation.

    ``passed`` is the only authoritative signal. ``details`` carries the
    PASS/FAIL rationale and ``evidence_source`` names the statute or the
    deterministic computation the outcome rests on.
    """

    rule_id: str
    passed: bool
    details: str
    evidence_source: str
    timestamp: str
    generated_content: str | None = None

    def with_generated_content(self, content: str) -> ValidationStep:
        if not self.passed:
            raise InvalidArgumentError(
                f"generated content cannot be attached to failed verdict {self.rule_id}"
            )
        return replace(self, generated_content=content)

    def as_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "rule_id": self.rule_id,
            "passed": self.passed,
            "details": self.details,
            "evidence_source": self.evidence_source,
            "timestamp": self.timestamp,
        }
        if self.generated_content is not None:
            data["generated_content"] = self.generated_content
        return data

    def to_json(self) -> str:
        return json.dumps(self.as_dict(), sort_keys=True, separators=(",", ":"))


def create_verdict(
    rule_id: str,
    passed: bool,
    details: str,
    evidence_source: str,
    *,
    generated_content: str | None = None,
    timestamp: str | None = None,
) -> ValidationStep:
    if not rule_id.strip():
        raise InvalidArgumentError("rule_id is required")
    if not details.strip():
        raise InvalidArgumentError(f"details are required for verdict {rule_id}")
    if not evidence_source.strip():
        raise InvalidArgumentError(f"evidence_source is required for verdict {rule_id}")
    if generated_content is not None and not passed:
        raise InvalidArgumentError(
            f"generated content cannot be attached to failed verdict {rule_id}"
        )

    return ValidationStep(
        rule_id=rule_id,
        passed=bool(passed),
        details=details,
        evidence_source=evidence_source,
        timestamp=timestamp or utc_timestamp(),
        generated_content=generated_content,
    )


def parse_verdict(payload: object) -> ValidationStep | None:
    """Rebuild a verdict from a tool-result payload.

    Accepts a verdict, a mapping or a JSON string. Returns ``None`` for
    anything that does not carry a well-formed verdict.
    """
    if isinstance(payload, ValidationStep):
        return payload

    if isinstance(payload, (str, bytes)):
        try:
            payload = json.loads(payload)
        except (TypeError, ValueError, RecursionError):
            return None

    if not isinstance(payload, Mapping):
        return None

    rule_id = payload.get("rule_id")
    passed = payload.get("passed")
    details = payload.get("details")
    evidence_source = payload.get("evidence_source")
    timestamp = payload.get("timestamp")
    generated_content = payload.get("generated_content")

    if not isinstance(rule_id, str) or not rule_id.strip():
        return None
    if not isinstance(passed, bool):
        return None
    if not isinstance(details, str) or not isinstance(evidence_source, str):
        return None
    if not isinstance(timestamp, str):
        return None
    if generated_content is not None and not isinstance(generated_content, str):
        return None

    return ValidationStep(
        rule_id=rule_id,
        passed=passed,
        details=details,
        evidence_source=evidence_source,
        timestamp=timestamp,
        generated_content=generated_content,
    )
