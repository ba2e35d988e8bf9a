from __future__ import annotations

from covenant_engine.domain.instrument import (
    AmountType,
    InstrumentTerms,
    PayableTo,
    PromiseType,
    Timing,
)
from covenant_engine.domain.verdict import ValidationStep, create_verdict
from covenant_engine.law_library import DEFAULT_LIBRARY, LawLibrary

RULE_ID = "UCC_3_104"
FALLBACK_CITATION = "UCC 3-104"

UCC_3_104_REQUIREMENTS: tuple[str, ...] = (
    "Unconditional promise or order to pay",
    "Fixed amount of money",
    "Payable to bearer or to order",
    "Payable on demand or at a definite time",
    "No other undertaking or instruction",
)


def negotiability_violations(terms: InstrumentTerms) -> list[str]:
    violations: list[str] = []
    if terms.promise_type != PromiseType.UNCONDITIONAL:
        violations.append("Must be an unconditional promise (UCC 3-104(a))")
    if terms.amount_type != AmountType.FIXED:
        violations.append("Must specify a fixed amount of money (UCC 3-104(a))")
    if terms.payable_to == PayableTo.SPECIFIC_PERSON:
        violations.append("Must be payable to bearer or to order (UCC 3-104(a)(1))")
    if terms.timing == Timing.INDEFINITE:
        violations.append("Must be payable on demand or at a definite time (UCC 3-104(a)(2))")
    if terms.other_undertakings:
        violations.append("Must not state any other undertaking (UCC 3-104(a)(3))")
    return violations


def verify_negotiability(
    terms: InstrumentTerms,
    library: LawLibrary | None = None,
) -> ValidationStep:
    citation = (library or DEFAULT_LIBRARY).citation_for("UCC 3-104", FALLBACK_CITATION)
    violations = negotiability_violations(terms)
    passed = not violations

    if passed:
        details = "PASSED: Instrument meets all UCC 3-104 requirements for negotiability."
    else:
        details = f"FAILED: Non-negotiable. Violations: {', '.join(violations)}"

    return create_verdict(RULE_ID, passed, details, citation)
