from __future__ import annotations

import json
from argparse import ArgumentParser, BooleanOptionalAction, Namespace
from collections.abc import Callable, Sequence

from covenant_engine.commands import (
    run_analyze_clause_risks,
    run_audit_expense,
    run_consult_statute,
    run_draft_verified_form,
    run_verify_necessary,
    run_verify_negotiability,
    run_verify_ordinary,
)
from covenant_engine.config import AppSettings, get_settings
from covenant_engine.domain.instrument import AmountType, PayableTo, PromiseType, Timing
from covenant_engine.forms.data import FormType
from covenant_engine.observability.logging import configure_logging
from covenant_engine.types import CommandResult, CommandStatus

CommandHandler = Callable[[Namespace, AppSettings], CommandResult]

COMMAND_HANDLERS: dict[str, CommandHandler] = {
    "consult-statute": run_consult_statute,
    "verify-ordinary": run_verify_ordinary,
    "verify-necessary": run_verify_necessary,
    "verify-negotiability": run_verify_negotiability,
    "analyze-clause-risks": run_analyze_clause_risks,
    "draft-verified-form": run_draft_verified_form,
    "audit-expense": run_audit_expense,
}


def build_parser() -> ArgumentParser:
    parser = ArgumentParser(prog="covenant-engine", description="Covenant compliance engine CLI")
    parser.add_argument("--json", action="store_true", help="emit machine-readable JSON output")

    subparsers = parser.add_subparsers(dest="command", required=True)

    statute = subparsers.add_parser("consult-statute")
    statute.add_argument("--query", required=True)

    ordinary = subparsers.add_parser("verify-ordinary")
    ordinary.add_argument("--industry-code", required=True)
    ordinary.add_argument("--expense-category", required=True)

    necessary = subparsers.add_parser("verify-necessary")
    necessary.add_argument("--expense-amount", required=True, type=float)
    necessary.add_argument("--business-revenue", required=True, type=float)

    negotiability = subparsers.add_parser("verify-negotiability")
    negotiability.add_argument(
        "--promise-type", required=True, choices=[item.value for item in PromiseType]
    )
    negotiability.add_argument(
        "--amount-type", required=True, choices=[item.value for item in AmountType]
    )
    negotiability.add_argument(
        "--payable-to", required=True, choices=[item.value for item in PayableTo]
    )
    negotiability.add_argument("--timing", required=True, choices=[item.value for item in Timing])
    negotiability.add_argument("--other-undertakings", action=BooleanOptionalAction, default=False)
    negotiability.add_argument("--currency", default="USD")

    risks = subparsers.add_parser("analyze-clause-risks")
    risks.add_argument("--clause-text", required=True)
    risks.add_argument("--document-type", default="")

    form = subparsers.add_parser("draft-verified-form")
    form.add_argument("--form-type", required=True, choices=[item.value for item in FormType])
    form.add_argument("--amount", type=float, default=None)
    for name in (
        "lender",
        "borrower",
        "seller",
        "buyer",
        "client",
        "contractor",
        "debtor",
        "secured-party",
        "obligation",
        "collateral",
        "goods-description",
        "services",
        "date",
        "state",
    ):
        form.add_argument(f"--{name}", default=None)

    audit = subparsers.add_parser("audit-expense")
    audit.add_argument("--industry-code", required=True)
    audit.add_argument("--expense-category", required=True)
    audit.add_argument("--expense-amount", required=True, type=float)
    audit.add_argument("--business-revenue", required=True, type=float)

    return parser


def _emit_result(result: CommandResult, *, as_json: bool) -> None:
    if as_json:
        print(result.to_json())
        return

    print(f"{result.command}: {result.status.value}")
    document_text = result.details.get("document_text")
    if isinstance(document_text, str):
        print(document_text)
    if result.details:
        print(json.dumps(result.details, indent=2, sort_keys=True))


def entrypoint(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(list(argv) if argv is not None else None)
    settings = get_settings()
    configure_logging(settings.log_level)

    handler = COMMAND_HANDLERS[str(args.command)]
    result = handler(args, settings)
    _emit_result(result, as_json=bool(args.json))
    return 0 if result.status == CommandStatus.PASSED else 1


if __name__ == "__main__":
    raise SystemExit(entrypoint())
