from __future__ import annotations

from argparse import Namespace

from covenant_engine.checkers.clause_risk import analyze_clause_risks, scan_clause_findings
from covenant_engine.commands.results import error_result, verdict_result
from covenant_engine.config import AppSettings
from covenant_engine.errors import InvalidArgumentError
from covenant_engine.types import CommandResult


def run_analyze_clause_risks(args: Namespace, _: AppSettings) -> CommandResult:
    clause_text = str(getattr(args, "clause_text", ""))
    document_type = str(getattr(args, "document_type", ""))
    if not clause_text.strip():
        return error_result(
            "analyze-clause-risks", InvalidArgumentError("clause_text is required")
        )

    findings = scan_clause_findings(clause_text, document_type)
    return verdict_result(
        "analyze-clause-risks",
        analyze_clause_risks(clause_text, document_type),
        {
            "findings": [
                {
                    "severity": finding.severity.value,
                    "description": finding.description,
                    "citation": finding.citation,
                }
                for finding in findings
            ]
        },
    )
