from __future__ import annotations

import asyncio
from argparse import Namespace

from covenant_engine.checkers.ordinary import PrecedentTable
from covenant_engine.config import AppSettings
from covenant_engine.orchestration.executor import RunContext, ToolExecutor, ToolOutcome
from covenant_engine.orchestration.ledger import AuditLedger
from covenant_engine.orchestration.policy_gate import is_necessary_enabled
from covenant_engine.types import CommandResult, CommandStatus, JsonDict, ToolName


async def audit_expense(
    run: RunContext,
    industry_code: str,
    expense_category: str,
    expense_amount: float,
    business_revenue: float,
) -> list[ToolOutcome]:
    """Section 162(a) audit: ordinary first, necessity only once the gate opens."""
    executor = ToolExecutor()
    outcomes = [
        await executor.invoke(
            run,
            ToolName.VERIFY_ORDINARY,
            {"industry_code": industry_code, "expense_category": expense_category},
        )
    ]
    if is_necessary_enabled(run.history):
        outcomes.append(
            await executor.invoke(
                run,
                ToolName.VERIFY_NECESSARY,
                {"expense_amount": expense_amount, "business_revenue": business_revenue},
            )
        )
    return outcomes


def _deductible(outcomes: list[ToolOutcome]) -> bool:
    return len(outcomes) == 2 and all(
        outcome.verdict is not None and outcome.verdict.passed for outcome in outcomes
    )


def run_audit_expense(args: Namespace, settings: AppSettings) -> CommandResult:
    run = RunContext(
        ledger=AuditLedger(),
        precedents=PrecedentTable(settings.law_db_endpoint),
        necessity_threshold=settings.necessity_threshold,
    )
    outcomes = asyncio.run(
        audit_expense(
            run,
            str(getattr(args, "industry_code", "")),
            str(getattr(args, "expense_category", "")),
            getattr(args, "expense_amount", 0.0),
            getattr(args, "business_revenue", 0.0),
        )
    )

    deductible = _deductible(outcomes)
    failed_rules = [
        outcome.verdict.rule_id
        for outcome in outcomes
        if outcome.verdict is not None and not outcome.verdict.passed
    ]
    errors = [outcome.error for outcome in outcomes if outcome.error is not None]

    details: JsonDict = {
        "run_id": run.run_id,
        "is_deductible": deductible,
        "failed_rules": failed_rules,
        "steps": [outcome.as_dict() for outcome in outcomes],
        "ledger": [entry.as_dict() for entry in run.ledger.entries()],
    }
    if errors:
        details["errors"] = errors
        status = CommandStatus.ERROR
    else:
        status = CommandStatus.PASSED if deductible else CommandStatus.FAILED

    return CommandResult(command="audit-expense", status=status, details=details)
