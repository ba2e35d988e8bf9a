from __future__ import annotations

import math

from covenant_engine.domain.verdict import ValidationStep, create_verdict
from covenant_engine.errors import InvalidArgumentError

RULE_ID = "rule_is_necessary"
EVIDENCE_SOURCE = "Business Logic (Ratio Analysis)"
DEFAULT_THRESHOLD = 0.5


def _positive_amount(value: object, name: str) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InvalidArgumentError(f"{name} must be a number")
    amount = float(value)
    if not math.isfinite(amount):
        raise InvalidArgumentError(f"{name} must be finite")
    if amount <= 0:
        raise InvalidArgumentError(f"{name} must be positive")
    return amount


def verify_necessary(
    expense_amount: float,
    business_revenue: float,
    threshold: float = DEFAULT_THRESHOLD,
) -> ValidationStep:
    expense = _positive_amount(expense_amount, "expense_amount")
    revenue = _positive_amount(business_revenue, "business_revenue")

    ratio = expense / revenue
    passed = ratio <= threshold
    percent = f"{ratio * 100:.1f}%"
    limit = f"{threshold * 100:g}%"

    if passed:
        details = f"PASSED: Expense-to-Revenue ratio is {percent} (within {limit} threshold)."
    else:
        details = f"FAILED: Expense-to-Revenue ratio is {percent} (exceeds {limit} threshold)."

    return create_verdict(RULE_ID, passed, details, EVIDENCE_SOURCE)
