from __future__ import annotations

from argparse import Namespace

from covenant_engine.checkers.ordinary import PrecedentTable, verify_ordinary
from covenant_engine.commands.results import error_result, verdict_result
from covenant_engine.config import AppSettings
from covenant_engine.errors import InvalidArgumentError
from covenant_engine.types import CommandResult


def run_verify_ordinary(args: Namespace, settings: AppSettings) -> CommandResult:
    try:
        verdict = verify_ordinary(
            str(getattr(args, "industry_code", "")),
            str(getattr(args, "expense_category", "")),
            PrecedentTable(settings.law_db_endpoint),
        )
    except InvalidArgumentError as exc:
        return error_result("verify-ordinary", exc)
    return verdict_result("verify-ordinary", verdict)
