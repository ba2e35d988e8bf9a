"""Policy-gated tool execution for one orchestrator run.

The orchestrator (any model provider) calls ``ToolExecutor.invoke`` one tool
at a time and awaits the outcome before asking the gate what to offer next.
"""

from __future__ import annotations

import time
import uuid
from collections.abc import Awaitable, Callable, Mapping
from dataclasses import dataclass, field
from typing import Any

from covenant_engine.checkers.clause_risk import analyze_clause_risks
from covenant_engine.checkers.necessity import verify_necessary
from covenant_engine.checkers.negotiability import verify_negotiability
from covenant_engine.checkers.ordinary import PrecedentTable, verify_ordinary
from covenant_engine.config import get_settings
from covenant_engine.domain.audit_entry import ArbiterMetadata, AuditSource, AuditStatus
from covenant_engine.domain.instrument import InstrumentTerms
from covenant_engine.domain.verdict import ValidationStep
from covenant_engine.errors import (
    InvalidArgumentError,
    ToolExecutionFailure,
    ToolNotEnabledError,
    UnknownToolError,
)
from covenant_engine.forms.synthesizer import synthesize
from covenant_engine.law_library import DEFAULT_LIBRARY, LawLibrary, consult_statute
from covenant_engine.observability.logging import get_logger
from covenant_engine.orchestration.ledger import AuditLedger
from covenant_engine.orchestration.policy_gate import ToolCallRecord, is_tool_enabled
from covenant_engine.types import JsonDict, ToolName


@dataclass(slots=True)
class RunContext:
    """State owned by a single orchestrator run.

    ``history`` is extended in call order only; the ledger may be shared
    between runs.
    """

    ledger: AuditLedger
    library: LawLibrary = DEFAULT_LIBRARY
    precedents: PrecedentTable | None = None
    necessity_threshold: float | None = None
    run_id: str = field(default_factory=lambda: uuid.uuid4().hex)
    history: list[object] = field(default_factory=list)


@dataclass(slots=True, frozen=True)
class ToolOutcome:
    tool_name: ToolName
    ok: bool
    verdict: ValidationStep | None = None
    payload: JsonDict = field(default_factory=dict)
    document_text: str | None = None
    error: str | None = None

    def as_dict(self) -> JsonDict:
        data: JsonDict = {
            "tool_name": self.tool_name.value,
            "ok": self.ok,
            "result": self.payload,
        }
        if self.document_text is not None:
            data["document_text"] = self.document_text
        if self.error is not None:
            data["error"] = self.error
        return data


@dataclass(slots=True, frozen=True)
class _HandlerResult:
    payload: JsonDict
    verdict: ValidationStep | None = None
    document_text: str | None = None


ToolHandler = Callable[[RunContext, Mapping[str, Any]], Awaitable[_HandlerResult]]


def _first(arguments: Mapping[str, Any], *keys: str) -> Any:
    for key in keys:
        if key in arguments:
            return arguments[key]
    return None


def _verdict_result(verdict: ValidationStep) -> _HandlerResult:
    return _HandlerResult(payload=verdict.as_dict(), verdict=verdict)


async def _verify_ordinary(run: RunContext, arguments: Mapping[str, Any]) -> _HandlerResult:
    verdict = verify_ordinary(
        _first(arguments, "industry_code", "naics_code"),
        _first(arguments, "expense_category", "expense_item", "expense_item_category"),
        run.precedents,
    )
    return _verdict_result(verdict)


async def _verify_necessary(run: RunContext, arguments: Mapping[str, Any]) -> _HandlerResult:
    threshold = run.necessity_threshold
    if threshold is None:
        threshold = get_settings().necessity_threshold
    verdict = verify_necessary(
        arguments.get("expense_amount"),  # type: ignore[arg-type]
        arguments.get("business_revenue"),  # type: ignore[arg-type]
        threshold,
    )
    return _verdict_result(verdict)


async def _verify_negotiability(run: RunContext, arguments: Mapping[str, Any]) -> _HandlerResult:
    terms = InstrumentTerms.from_mapping(arguments)
    return _verdict_result(verify_negotiability(terms, run.library))


async def _analyze_clause_risks(run: RunContext, arguments: Mapping[str, Any]) -> _HandlerResult:
    clause_text = arguments.get("clause_text")
    document_type = _first(arguments, "document_type", "doc_type")
    if not isinstance(clause_text, str) or not clause_text.strip():
        raise InvalidArgumentError("clause_text is required")
    if not isinstance(document_type, str):
        raise InvalidArgumentError("document_type is required")
    return _verdict_result(analyze_clause_risks(clause_text, document_type, run.library))


async def _consult_statute(run: RunContext, arguments: Mapping[str, Any]) -> _HandlerResult:
    query = arguments.get("query")
    if not isinstance(query, str) or not query.strip():
        raise InvalidArgumentError("query is required")
    return _HandlerResult(payload=await consult_statute(query, run.library))


async def _draft_verified_form(run: RunContext, arguments: Mapping[str, Any]) -> _HandlerResult:
    form = synthesize(arguments.get("form_type"), arguments, library=run.library)  # type: ignore[arg-type]
    return _HandlerResult(
        payload=form.verdict.as_dict(),
        verdict=form.verdict,
        document_text=form.document_text,
    )


TOOL_HANDLERS: dict[ToolName, ToolHandler] = {
    ToolName.VERIFY_ORDINARY: _verify_ordinary,
    ToolName.VERIFY_NECESSARY: _verify_necessary,
    ToolName.VERIFY_NEGOTIABILITY: _verify_negotiability,
    ToolName.ANALYZE_CLAUSE_RISKS: _analyze_clause_risks,
    ToolName.CONSULT_STATUTE: _consult_statute,
    ToolName.DRAFT_VERIFIED_FORM: _draft_verified_form,
}


def _pending_entry(tool: ToolName, arguments: Mapping[str, Any]) -> tuple[str, str]:
    if tool == ToolName.VERIFY_ORDINARY:
        category = _first(arguments, "expense_category", "expense_item", "expense_item_category")
        code = _first(arguments, "industry_code", "naics_code")
        return "Verification: Ordinary", f"Checking '{category}' against NAICS {code}"
    if tool == ToolName.VERIFY_NECESSARY:
        return (
            "Verification: Necessary",
            f"Analyzing financial ratio for ${arguments.get('expense_amount')} expense",
        )
    if tool == ToolName.VERIFY_NEGOTIABILITY:
        return "UCC 3-104 Check", "Validating negotiable instrument requirements..."
    if tool == ToolName.ANALYZE_CLAUSE_RISKS:
        return "Risk Analysis", "Scanning clause against USC/UCC/Common Law..."
    if tool == ToolName.CONSULT_STATUTE:
        return "Law Library Retrieval", f"Fetching raw text for '{arguments.get('query')}'"
    return "Form Generation", f"Drafting validated {arguments.get('form_type')}..."


def _result_action(tool: ToolName) -> str:
    short = tool.value.replace("verify_", "").replace("analyze_", "")
    return f"Result: {short}"


class ToolExecutor:
    def __init__(self, handlers: Mapping[ToolName, ToolHandler] | None = None) -> None:
        self._handlers = dict(handlers or TOOL_HANDLERS)
        self._logger = get_logger("tool_executor")

    async def invoke(
        self,
        run: RunContext,
        tool_name: ToolName | str,
        arguments: Mapping[str, Any] | None = None,
    ) -> ToolOutcome:
        args: Mapping[str, Any] = arguments or {}
        try:
            tool = ToolName(tool_name)
        except ValueError:
            run.ledger.append(
                "Verification Error",
                f"Unknown tool requested: {tool_name}",
                AuditSource.SYSTEM,
                AuditStatus.ERROR,
            )
            raise UnknownToolError(str(tool_name)) from None

        handler = self._handlers.get(tool)
        if handler is None:
            raise UnknownToolError(tool.value)

        if not is_tool_enabled(tool, run.history):
            run.ledger.append(
                "Policy Gate",
                f"'{tool.value}' is not enabled for the current run history.",
                AuditSource.ARBITER,
                AuditStatus.ERROR,
            )
            self._logger.warning("tool_rejected_by_policy_gate", run_id=run.run_id, tool=tool.value)
            raise ToolNotEnabledError(tool.value)

        action, details = _pending_entry(tool, args)
        run.ledger.append(
            action,
            details,
            AuditSource.SYSTEM if tool == ToolName.CONSULT_STATUTE else AuditSource.ARBITER,
            AuditStatus.PENDING,
        )

        started = time.perf_counter()
        try:
            result = await handler(run, args)
        except Exception as exc:
            failure = ToolExecutionFailure(tool.value, exc)
            run.history.append(ToolCallRecord(tool.value, {"error": str(exc)}))
            run.ledger.append(
                "Verification Error",
                f"Tool execution failed: {exc}",
                AuditSource.SYSTEM,
                AuditStatus.ERROR,
            )
            self._logger.warning(
                "tool_execution_failed",
                run_id=run.run_id,
                tool=tool.value,
                error=str(exc),
                error_type=type(exc).__name__,
            )
            return ToolOutcome(tool_name=tool, ok=False, error=failure.message)

        latency_ms = round((time.perf_counter() - started) * 1000, 3)
        run.history.append(ToolCallRecord(tool.value, result.verdict or result.payload))

        if result.verdict is not None:
            run.ledger.append(
                _result_action(tool),
                result.verdict.details,
                AuditSource.ARBITER,
                AuditStatus.VERIFIED if result.verdict.passed else AuditStatus.ERROR,
                ArbiterMetadata(latency_ms=latency_ms, compliance_check=result.verdict.passed),
            )

        self._logger.info(
            "tool_executed",
            run_id=run.run_id,
            tool=tool.value,
            passed=None if result.verdict is None else result.verdict.passed,
            latency_ms=latency_ms,
        )
        return ToolOutcome(
            tool_name=tool,
            ok=True,
            verdict=result.verdict,
            payload=result.payload,
            document_text=result.document_text,
        )
