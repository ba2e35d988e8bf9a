from __future__ import annotations

from argparse import Namespace

from covenant_engine.commands.results import error_result
from covenant_engine.config import AppSettings
from covenant_engine.errors import InvalidArgumentError
from covenant_engine.forms.data import FormData
from covenant_engine.forms.synthesizer import synthesize
from covenant_engine.types import CommandResult, CommandStatus

FORM_FIELDS: tuple[str, ...] = (
    "amount",
    "lender",
    "borrower",
    "seller",
    "buyer",
    "client",
    "contractor",
    "debtor",
    "secured_party",
    "obligation",
    "collateral",
    "goods_description",
    "services",
    "date",
    "state",
)


def run_draft_verified_form(args: Namespace, _: AppSettings) -> CommandResult:
    raw = {name: getattr(args, name, None) for name in FORM_FIELDS}
    try:
        form = synthesize(str(getattr(args, "form_type", "")), FormData.from_mapping(raw))
    except InvalidArgumentError as exc:
        return error_result("draft-verified-form", exc)

    return CommandResult(
        command="draft-verified-form",
        status=CommandStatus.BLOCKED if form.blocked else CommandStatus.PASSED,
        details=form.as_dict(),
    )
