from __future__ import annotations

from argparse import Namespace

from covenant_engine.checkers.negotiability import verify_negotiability
from covenant_engine.commands.results import error_result, verdict_result
from covenant_engine.config import AppSettings
from covenant_engine.domain.instrument import InstrumentTerms
from covenant_engine.errors import InvalidArgumentError
from covenant_engine.types import CommandResult


def run_verify_negotiability(args: Namespace, _: AppSettings) -> CommandResult:
    raw_terms = {
        "promise_type": getattr(args, "promise_type", None),
        "amount_type": getattr(args, "amount_type", None),
        "payable_to": getattr(args, "payable_to", None),
        "timing": getattr(args, "timing", None),
        "other_undertakings": getattr(args, "other_undertakings", None),
        "currency": getattr(args, "currency", "USD"),
    }
    try:
        terms = InstrumentTerms.from_mapping(raw_terms)
    except InvalidArgumentError as exc:
        return error_result("verify-negotiability", exc)
    return verdict_result(
        "verify-negotiability",
        verify_negotiability(terms),
        {"terms": terms.as_dict()},
    )
