"""Stateless rule checkers. Each returns exactly one verdict."""

from covenant_engine.checkers.clause_risk import (
    RiskFinding,
    Severity,
    analyze_clause_risks,
    scan_clause_findings,
)
from covenant_engine.checkers.necessity import verify_necessary
from covenant_engine.checkers.negotiability import (
    UCC_3_104_REQUIREMENTS,
    negotiability_violations,
    verify_negotiability,
)
from covenant_engine.checkers.ordinary import PrecedentTable, verify_ordinary

__all__ = [
    "PrecedentTable",
    "RiskFinding",
    "Severity",
    "UCC_3_104_REQUIREMENTS",
    "analyze_clause_risks",
    "negotiability_violations",
    "scan_clause_findings",
    "verify_necessary",
    "verify_negotiability",
    "verify_ordinary",
]
