import pytest

from covenant_engine.checkers.negotiability import (
    UCC_3_104_REQUIREMENTS,
    verify_negotiability,
)
from covenant_engine.domain.instrument import (
    AmountType,
    InstrumentTerms,
    PayableTo,
    PromiseType,
    Timing,
)
from covenant_engine.errors import InvalidArgumentError
from covenant_engine.law_library import LawLibrary


def _terms(**overrides: object) -> InstrumentTerms:
    base: dict[str, object] = {
        "promise_type": PromiseType.UNCONDITIONAL,
        "amount_type": AmountType.FIXED,
        "payable_to": PayableTo.ORDER,
        "timing": Timing.DEMAND,
        "other_undertakings": False,
    }
    base.update(overrides)
    return InstrumentTerms(**base)  # type: ignore[arg-type]


def test_compliant_instrument_passes() -> None:
    verdict = verify_negotiability(_terms())

    assert verdict.rule_id == "UCC_3_104"
    assert verdict.passed is True
    assert verdict.details == (
        "PASSED: Instrument meets all UCC 3-104 requirements for negotiability."
    )
    assert verdict.evidence_source == "Uniform Commercial Code § 3-104"


def test_bearer_paper_with_definite_time_passes() -> None:
    assert verify_negotiability(
        _terms(payable_to=PayableTo.BEARER, timing=Timing.DEFINITE)
    ).passed


def test_all_five_violations_are_collected() -> None:
    verdict = verify_negotiability(
        _terms(
            promise_type=PromiseType.CONDITIONAL,
            amount_type=AmountType.VARIABLE,
            payable_to=PayableTo.SPECIFIC_PERSON,
            timing=Timing.INDEFINITE,
            other_undertakings=True,
        )
    )

    assert verdict.passed is False
    assert verdict.details.startswith("FAILED: Non-negotiable. Violations:")
    assert "unconditional promise" in verdict.details
    assert "fixed amount" in verdict.details
    assert "bearer or to order" in verdict.details
    assert "demand or at a definite time" in verdict.details
    assert "other undertaking" in verdict.details


def test_single_violation_is_reported() -> None:
    verdict = verify_negotiability(_terms(other_undertakings=True))

    assert verdict.passed is False
    assert verdict.details.endswith("Must not state any other undertaking (UCC 3-104(a)(3))")


def test_lookup_miss_uses_default_citation() -> None:
    verdict = verify_negotiability(_terms(), LawLibrary(entries=()))

    assert verdict.passed is True
    assert verdict.evidence_source == "UCC 3-104"


def test_requirements_list_covers_five_conditions() -> None:
    assert len(UCC_3_104_REQUIREMENTS) == 5


def test_terms_from_mapping_normalizes_values() -> None:
    terms = InstrumentTerms.from_mapping(
        {
            "promise_type": " Unconditional ",
            "amount_type": "FIXED",
            "payable_to": "bearer",
            "timing": "demand",
            "other_undertakings": False,
        }
    )

    assert terms.promise_type == PromiseType.UNCONDITIONAL
    assert terms.amount_type == AmountType.FIXED
    assert terms.currency == "USD"


def test_terms_from_mapping_rejects_unknown_values() -> None:
    with pytest.raises(InvalidArgumentError, match="timing must be one of"):
        InstrumentTerms.from_mapping(
            {
                "promise_type": "unconditional",
                "amount_type": "fixed",
                "payable_to": "order",
                "timing": "someday",
                "other_undertakings": False,
            }
        )


def test_terms_from_mapping_requires_boolean_undertakings() -> None:
    with pytest.raises(InvalidArgumentError, match="other_undertakings must be a boolean"):
        InstrumentTerms.from_mapping(
            {
                "promise_type": "unconditional",
                "amount_type": "fixed",
                "payable_to": "order",
                "timing": "demand",
                "other_undertakings": "no",
            }
        )
