from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from enum import StrEnum

from covenant_engine.domain.verdict import ValidationStep, create_verdict
from covenant_engine.errors import InvalidArgumentError
from covenant_engine.law_library import DEFAULT_LIBRARY, LawLibrary

RULE_ID = "RISK_SCAN_USC_UCC"
EVIDENCE_SOURCE = "USC Title 15, UCC & CFR Title 16"
CLEAN_DETAILS = "CLEAN: No critical statutory risks identified in extracted clause."
FINDING_SEPARATOR = " | "
CONFESSION_FALLBACK_CITATION = "16 CFR 444.2"


class Severity(StrEnum):
    CRITICAL = "CRITICAL"
    HIGH = "HIGH"
    MEDIUM = "MEDIUM"


@dataclass(slots=True, frozen=True)
class RiskFinding:
    severity: Severity
    description: str
    citation: str

    def render(self) -> str:
        return f"{self.severity.value}: {self.description}"


@dataclass(slots=True, frozen=True)
class ClauseContext:
    text: str
    document_type: str
    library: LawLibrary


RiskPattern = Callable[[ClauseContext], RiskFinding | None]


def _contains_any(text: str, needles: tuple[str, ...]) -> bool:
    return any(needle in text for needle in needles)


def _arbitration_waiver(ctx: ClauseContext) -> RiskFinding | None:
    if not _contains_any(ctx.text, ("waive all rights", "waive jury trial", "arbitration")):
        return None
    return RiskFinding(
        Severity.CRITICAL,
        "Mandatory arbitration/waiver clauses require scrutiny under Federal Arbitration "
        "Act (9 U.S.C. § 1 et seq).",
        "9 U.S.C. § 1",
    )


def _gross_negligence_indemnity(ctx: ClauseContext) -> RiskFinding | None:
    if not _contains_any(ctx.text, ("indemnify", "hold harmless")):
        return None
    if "gross negligence" not in ctx.text:
        return None
    return RiskFinding(
        Severity.HIGH,
        "Indemnification for gross negligence is often void against public policy per "
        "Restatement (Second) of Contracts.",
        "Restatement (Second) of Contracts § 195",
    )


def _perpetual_service_term(ctx: ClauseContext) -> RiskFinding | None:
    if "perpetuity" not in ctx.text or "service" not in ctx.document_type:
        return None
    return RiskFinding(
        Severity.MEDIUM,
        "Perpetual terms in service contracts are generally disfavored in common law.",
        "Common Law",
    )


def _unqualified_penalty(ctx: ClauseContext) -> RiskFinding | None:
    if "penalty" not in ctx.text or "liquidated damages" in ctx.text:
        return None
    return RiskFinding(
        Severity.HIGH,
        "Punitive penalties are generally unenforceable (UCC § 2-718 requires reasonableness).",
        "UCC § 2-718",
    )


def _confession_of_judgment(ctx: ClauseContext) -> RiskFinding | None:
    if not _contains_any(ctx.text, ("confession of judgment", "cognovit")):
        return None
    entry = ctx.library.lookup("FTC Credit Rule")
    if entry is not None:
        return RiskFinding(
            Severity.CRITICAL,
            f"Prohibited in consumer contracts. Source: {entry.source_citation}",
            entry.source_citation,
        )
    return RiskFinding(
        Severity.CRITICAL,
        "Confession of Judgment clauses are prohibited in consumer contracts "
        f"({CONFESSION_FALLBACK_CITATION}).",
        CONFESSION_FALLBACK_CITATION,
    )


RISK_PATTERNS: tuple[RiskPattern, ...] = (
    _arbitration_waiver,
    _gross_negligence_indemnity,
    _perpetual_service_term,
    _unqualified_penalty,
    _confession_of_judgment,
)


def scan_clause_findings(
    clause_text: str,
    document_type: str,
    library: LawLibrary | None = None,
) -> list[RiskFinding]:
    if not isinstance(clause_text, str):
        raise InvalidArgumentError("clause_text must be a string")
    if not isinstance(document_type, str):
        raise InvalidArgumentError("document_type must be a string")

    ctx = ClauseContext(
        text=clause_text.lower(),
        document_type=document_type.lower(),
        library=library or DEFAULT_LIBRARY,
    )
    findings: list[RiskFinding] = []
    for pattern in RISK_PATTERNS:
        finding = pattern(ctx)
        if finding is not None:
            findings.append(finding)
    return findings


def analyze_clause_risks(
    clause_text: str,
    document_type: str,
    library: LawLibrary | None = None,
) -> ValidationStep:
    findings = scan_clause_findings(clause_text, document_type, library)
    passed = not findings

    if passed:
        details = CLEAN_DETAILS
    else:
        details = "RISK ALERT: " + FINDING_SEPARATOR.join(f.render() for f in findings)

    return create_verdict(RULE_ID, passed, details, EVIDENCE_SOURCE)
