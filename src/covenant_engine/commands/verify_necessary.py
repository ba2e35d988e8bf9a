from __future__ import annotations

from argparse import Namespace

from covenant_engine.checkers.necessity import verify_necessary
from covenant_engine.commands.results import error_result, verdict_result
from covenant_engine.config import AppSettings
from covenant_engine.errors import InvalidArgumentError
from covenant_engine.types import CommandResult


def run_verify_necessary(args: Namespace, settings: AppSettings) -> CommandResult:
    try:
        verdict = verify_necessary(
            getattr(args, "expense_amount", None),  # type: ignore[arg-type]
            getattr(args, "business_revenue", None),  # type: ignore[arg-type]
            settings.necessity_threshold,
        )
    except InvalidArgumentError as exc:
        return error_result("verify-necessary", exc)
    return verdict_result("verify-necessary", verdict)
