"""Tool availability derived from a run's verdict history.

Every decision is recomputed from the history passed in. Nothing is cached
between calls, so a retried check changes the answer immediately.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any

from covenant_engine.domain.verdict import ValidationStep, parse_verdict
from covenant_engine.observability.logging import get_logger
from covenant_engine.types import ToolName

FUNCTION_CALL_RESULT = "function_call_result"

ORDINARY_TOOL_NAMES: frozenset[str] = frozenset(
    {
        ToolName.VERIFY_ORDINARY.value,
        "is_ordinary_rule_checker",
    }
)


@dataclass(slots=True, frozen=True)
class ToolCallRecord:
    """One tool result as observed by the orchestrator, in call order."""

    tool_name: str
    output: object

    def as_dict(self) -> dict[str, Any]:
        output = self.output
        if isinstance(output, ValidationStep):
            output = output.to_json()
        return {"type": FUNCTION_CALL_RESULT, "name": self.tool_name, "output": output}


def _as_tool_result(item: object) -> tuple[str, object] | None:
    if isinstance(item, ToolCallRecord):
        return item.tool_name, item.output
    if isinstance(item, Mapping) and item.get("type") == FUNCTION_CALL_RESULT:
        name = item.get("name")
        if isinstance(name, str):
            return name, item.get("output")
    return None


def latest_ordinary_output(history: Sequence[object]) -> tuple[bool, object]:
    for item in reversed(history):
        result = _as_tool_result(item)
        if result is not None and result[0] in ORDINARY_TOOL_NAMES:
            return True, result[1]
    return False, None


def is_necessary_enabled(history: Sequence[object] | None) -> bool:
    logger = get_logger("policy_gate")
    found, output = latest_ordinary_output(history or ())
    if not found:
        logger.info("policy_gate_decision", tool=ToolName.VERIFY_NECESSARY.value, enabled=False)
        return False

    verdict = parse_verdict(output)
    if verdict is None:
        logger.warning(
            "policy_gate_malformed_history",
            tool=ToolName.VERIFY_NECESSARY.value,
            enabled=False,
        )
        return False

    enabled = verdict.passed is True
    logger.info(
        "policy_gate_decision",
        tool=ToolName.VERIFY_NECESSARY.value,
        enabled=enabled,
        ordinary_rule_id=verdict.rule_id,
    )
    return enabled


def is_tool_enabled(tool_name: ToolName | str, history: Sequence[object] | None) -> bool:
    try:
        tool = ToolName(tool_name)
    except ValueError:
        return False
    if tool == ToolName.VERIFY_NECESSARY:
        return is_necessary_enabled(history)
    return True


def offered_tools(history: Sequence[object] | None) -> list[ToolName]:
    return [tool for tool in ToolName if is_tool_enabled(tool, history)]
