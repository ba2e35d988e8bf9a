from covenant_engine.checkers.clause_risk import (
    Severity,
    analyze_clause_risks,
    scan_clause_findings,
)
from covenant_engine.law_library import LawLibrary


def test_clean_clause_passes() -> None:
    verdict = analyze_clause_risks(
        "Payment is due within thirty days of invoice.", "service_contract"
    )

    assert verdict.rule_id == "RISK_SCAN_USC_UCC"
    assert verdict.passed is True
    assert verdict.details.startswith("CLEAN:")
    assert verdict.evidence_source == "USC Title 15, UCC & CFR Title 16"


def test_arbitration_clause_is_critical() -> None:
    findings = scan_clause_findings(
        "All disputes shall be resolved by binding ARBITRATION.", "license"
    )

    assert [finding.severity for finding in findings] == [Severity.CRITICAL]
    assert "Federal Arbitration Act" in findings[0].description


def test_indemnity_requires_gross_negligence_language() -> None:
    assert scan_clause_findings("Vendor shall indemnify Client.", "license") == []

    findings = scan_clause_findings(
        "Client shall hold harmless Vendor, including for gross negligence.", "license"
    )
    assert [finding.severity for finding in findings] == [Severity.HIGH]


def test_perpetuity_flagged_only_for_service_documents() -> None:
    clause = "This agreement continues in perpetuity."

    assert scan_clause_findings(clause, "license") == []
    findings = scan_clause_findings(clause, "Service_Contract")
    assert [finding.severity for finding in findings] == [Severity.MEDIUM]


def test_penalty_qualified_as_liquidated_damages_is_not_flagged() -> None:
    assert scan_clause_findings(
        "A late penalty applies as liquidated damages, a reasonable estimate of loss.", "loan"
    ) == []
    assert len(scan_clause_findings("A penalty of $10,000 applies per day.", "loan")) == 1


def test_confession_of_judgment_cites_law_library() -> None:
    findings = scan_clause_findings("Borrower consents to a cognovit judgment.", "loan")

    assert len(findings) == 1
    assert findings[0].severity == Severity.CRITICAL
    assert findings[0].citation == "16 CFR § 444.2"
    assert "Source: 16 CFR § 444.2" in findings[0].description


def test_confession_of_judgment_falls_back_when_lookup_misses() -> None:
    verdict = analyze_clause_risks(
        "Debtor agrees to a confession of judgment.", "loan", LawLibrary(entries=())
    )

    assert verdict.passed is False
    assert "(16 CFR 444.2)" in verdict.details


def test_all_risks_are_accumulated_in_order() -> None:
    clause = (
        "Customer waives jury trial and agrees to arbitration. Customer shall indemnify "
        "Provider even for gross negligence. Term runs in perpetuity. A penalty applies "
        "on breach. Customer executes a confession of judgment."
    )

    verdict = analyze_clause_risks(clause, "service_agreement")

    assert verdict.passed is False
    assert verdict.details.startswith("RISK ALERT: ")
    parts = verdict.details.removeprefix("RISK ALERT: ").split(" | ")
    assert [part.split(":")[0] for part in parts] == [
        "CRITICAL",
        "HIGH",
        "MEDIUM",
        "HIGH",
        "CRITICAL",
    ]
