from __future__ import annotations

from covenant_engine.domain.verdict import ValidationStep
from covenant_engine.errors import CovenantEngineError
from covenant_engine.types import CommandResult, CommandStatus, JsonDict


def verdict_result(
    command: str,
    verdict: ValidationStep,
    extra: JsonDict | None = None,
) -> CommandResult:
    return CommandResult(
        command=command,
        status=CommandStatus.PASSED if verdict.passed else CommandStatus.FAILED,
        details={"verdict": verdict.as_dict(), **(extra or {})},
    )


def error_result(command: str, error: CovenantEngineError) -> CommandResult:
    return CommandResult(
        command=command,
        status=CommandStatus.ERROR,
        details={
            "error": error.message,
            "error_type": type(error).__name__,
        },
    )
