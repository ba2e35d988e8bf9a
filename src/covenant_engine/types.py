from __future__ import annotations

import json
from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any

JsonDict = dict[str, Any]


class CommandStatus(StrEnum):
    PASSED = "passed"
    FAILED = "failed"
    BLOCKED = "blocked"
    ERROR = "error"


class ToolName(StrEnum):
    VERIFY_ORDINARY = "verify_ordinary"
    VERIFY_NECESSARY = "verify_necessary"
    VERIFY_NEGOTIABILITY = "verify_negotiability"
    ANALYZE_CLAUSE_RISKS = "analyze_clause_risks"
    CONSULT_STATUTE = "consult_statute"
    DRAFT_VERIFIED_FORM = "draft_verified_form"


@dataclass(slots=True, frozen=True)
class CommandResult:
    command: str
    status: CommandStatus
    details: JsonDict = field(default_factory=dict)

    def to_dict(self) -> JsonDict:
        return {
            "command": self.command,
            "status": self.status.value,
            "details": self.details,
        }

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), sort_keys=True, separators=(",", ":"))
