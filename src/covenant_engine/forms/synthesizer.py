from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from datetime import date
from typing import Any

from covenant_engine.checkers.negotiability import verify_negotiability
from covenant_engine.config import get_settings
from covenant_engine.domain.instrument import (
    AmountType,
    InstrumentTerms,
    PayableTo,
    PromiseType,
    Timing,
)
from covenant_engine.domain.verdict import ValidationStep, create_verdict
from covenant_engine.forms import templates
from covenant_engine.forms.data import FormData, FormType
from covenant_engine.law_library import DEFAULT_LIBRARY, LawLibrary
from covenant_engine.observability.logging import get_logger

# Completeness heuristic only; this does not establish UCC 9-108 sufficiency.
MIN_COLLATERAL_DESCRIPTION_LENGTH = 3
STATUTE_OF_FRAUDS_THRESHOLD = 500.0


@dataclass(slots=True, frozen=True)
class SynthesizedForm:
    document_text: str
    verdict: ValidationStep

    @property
    def blocked(self) -> bool:
        return not self.verdict.passed

    def as_dict(self) -> dict[str, Any]:
        return {
            "document_text": self.document_text,
            "verdict": self.verdict.as_dict(),
        }


@dataclass(slots=True, frozen=True)
class SynthesisContext:
    library: LawLibrary
    state: str
    today: str


def promissory_note_terms(data: FormData) -> InstrumentTerms:
    return InstrumentTerms(
        promise_type=PromiseType.UNCONDITIONAL,
        amount_type=AmountType.FIXED,
        payable_to=PayableTo.ORDER,
        timing=Timing.DEFINITE if data.date else Timing.DEMAND,
        other_undertakings=False,
        currency="USD",
    )


def _promissory_note(data: FormData, ctx: SynthesisContext) -> SynthesizedForm:
    verdict = verify_negotiability(promissory_note_terms(data), ctx.library)
    if not verdict.passed:
        return SynthesizedForm(templates.blocked(verdict.details), verdict)
    return _rendered(templates.promissory_note(data, state=ctx.state), verdict)


def has_collateral_description(data: FormData) -> bool:
    return (
        data.collateral is not None
        and len(data.collateral.strip()) > MIN_COLLATERAL_DESCRIPTION_LENGTH
    )


def _security_agreement(data: FormData, ctx: SynthesisContext) -> SynthesizedForm:
    if not has_collateral_description(data):
        verdict = create_verdict(
            "UCC_9_203",
            False,
            "FAILED: Missing sufficient description of Collateral (UCC 9-108).",
            "UCC Article 9",
        )
        return SynthesizedForm(
            templates.blocked(
                "UCC 9-203 violation. Security Agreement must reasonably identify the collateral."
            ),
            verdict,
        )

    verdict = create_verdict(
        "UCC_9_203",
        True,
        "PASSED: Contains granting clause and collateral description (UCC 9-203).",
        ctx.library.citation_for("UCC 9-203", "UCC Article 9"),
    )
    return _rendered(
        templates.security_agreement(data, state=ctx.state, today=ctx.today),
        verdict,
    )


def missing_sale_terms(data: FormData) -> list[str]:
    missing: list[str] = []
    if not data.seller:
        missing.append("seller")
    if not data.buyer:
        missing.append("buyer")
    if not data.goods_description:
        missing.append("goods_description")
    if data.amount is None:
        missing.append("amount")
    return missing


def _bill_of_sale(data: FormData, ctx: SynthesisContext) -> SynthesizedForm:
    citation = ctx.library.citation_for("UCC 2-201", "UCC Article 2")
    missing = missing_sale_terms(data)
    if missing:
        verdict = create_verdict(
            "UCC_2_201",
            False,
            "FAILED: Writing is not sufficient to indicate a contract for sale "
            f"(UCC 2-201). Missing: {', '.join(missing)}.",
            citation,
        )
        return SynthesizedForm(templates.blocked(verdict.details), verdict)

    if data.amount is not None and data.amount >= STATUTE_OF_FRAUDS_THRESHOLD:
        details = (
            "PASSED: Written memorandum of sale for goods of $500 or more, "
            "identifying the parties and the goods (UCC 2-201)."
        )
    else:
        details = "PASSED: Written memorandum of sale (UCC 2-201)."

    verdict = create_verdict("UCC_2_201", True, details, citation)
    return _rendered(templates.bill_of_sale(data, today=ctx.today), verdict)


def _contractor_agreement(data: FormData, ctx: SynthesisContext) -> SynthesizedForm:
    verdict = create_verdict(
        "COMMON_LAW_AGENCY",
        True,
        "PASSED: Explicitly defines Independent Contractor relationship.",
        "IRS Common Law Rules",
    )
    return _rendered(templates.contractor_agreement(data), verdict)


def _rendered(document_text: str, verdict: ValidationStep) -> SynthesizedForm:
    return SynthesizedForm(document_text, verdict.with_generated_content(document_text))


FormBuilder = Callable[[FormData, SynthesisContext], SynthesizedForm]

FORM_BUILDERS: dict[FormType, FormBuilder] = {
    FormType.PROMISSORY_NOTE: _promissory_note,
    FormType.SECURITY_AGREEMENT: _security_agreement,
    FormType.BILL_OF_SALE: _bill_of_sale,
    FormType.CONTRACTOR_AGREEMENT: _contractor_agreement,
}


def synthesize(
    form_type: FormType | str,
    data: FormData | Mapping[str, Any],
    *,
    library: LawLibrary | None = None,
    today: date | None = None,
) -> SynthesizedForm:
    kind = FormType.parse(form_type)
    form_data = data if isinstance(data, FormData) else FormData.from_mapping(data)
    ctx = SynthesisContext(
        library=library or DEFAULT_LIBRARY,
        state=form_data.state or get_settings().default_governing_state,
        today=(today or date.today()).isoformat(),
    )

    result = FORM_BUILDERS[kind](form_data, ctx)
    get_logger("form_synthesizer").info(
        "form_synthesized",
        form_type=kind.value,
        rule_id=result.verdict.rule_id,
        passed=result.verdict.passed,
    )
    return result
