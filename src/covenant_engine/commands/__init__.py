"""Command handlers for the covenant-engine CLI."""

from covenant_engine.commands.analyze_clause_risks import run_analyze_clause_risks
from covenant_engine.commands.audit_expense import run_audit_expense
from covenant_engine.commands.consult_statute import run_consult_statute
from covenant_engine.commands.draft_verified_form import run_draft_verified_form
from covenant_engine.commands.verify_necessary import run_verify_necessary
from covenant_engine.commands.verify_negotiability import run_verify_negotiability
from covenant_engine.commands.verify_ordinary import run_verify_ordinary

__all__ = [
    "run_analyze_clause_risks",
    "run_audit_expense",
    "run_consult_statute",
    "run_draft_verified_form",
    "run_verify_necessary",
    "run_verify_negotiability",
    "run_verify_ordinary",
]
