from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass

from covenant_engine.config import get_settings
from covenant_engine.domain.verdict import ValidationStep, create_verdict
from covenant_engine.errors import InvalidArgumentError

RULE_ID = "rule_is_ordinary"

DEFAULT_ORDINARY_EXPENSES: Mapping[str, frozenset[str]] = {
    # Finish carpentry contractors
    "238350": frozenset({"truck", "hammer", "saw", "toolbox", "work_boots"}),
}


@dataclass(slots=True, frozen=True)
class PrecedentAnswer:
    is_ordinary: bool
    source: str


class PrecedentTable:
    """Deterministic IRC 162(a) precedent lookup.

    The table is local; ``endpoint`` only names the rules-as-code service the
    answer is attributed to so every verdict stays traceable to a query.
    """

    def __init__(
        self,
        endpoint: str,
        ordinary_expenses: Mapping[str, Iterable[str]] = DEFAULT_ORDINARY_EXPENSES,
    ) -> None:
        self.endpoint = endpoint.rstrip("/")
        self._table: dict[str, frozenset[str]] = {
            code.strip(): frozenset(_normalize_category(item) for item in categories)
            for code, categories in ordinary_expenses.items()
        }

    def query_source(self, industry_code: str) -> str:
        return f"LIVE_QUERY: {self.endpoint}/section/162a/precedent?naics={industry_code}"

    def query(self, industry_code: str, expense_category: str) -> PrecedentAnswer:
        categories = self._table.get(industry_code, frozenset())
        return PrecedentAnswer(
            is_ordinary=_normalize_category(expense_category) in categories,
            source=self.query_source(industry_code),
        )


def _normalize_category(category: str) -> str:
    return category.strip().lower()


def default_precedent_table() -> PrecedentTable:
    return PrecedentTable(get_settings().law_db_endpoint)


def verify_ordinary(
    industry_code: str,
    expense_category: str,
    table: PrecedentTable | None = None,
) -> ValidationStep:
    if not isinstance(industry_code, str) or not industry_code.strip():
        raise InvalidArgumentError("industry_code is required")
    if not isinstance(expense_category, str) or not expense_category.strip():
        raise InvalidArgumentError("expense_category is required")

    code = industry_code.strip()
    answer = (table or default_precedent_table()).query(code, expense_category)

    if answer.is_ordinary:
        details = (
            f"PASSED: '{expense_category}' is a verifiable \"ordinary\" expense "
            f"under IRC Sec 162(a) for NAICS code {code}."
        )
    else:
        details = (
            f"FAILED: '{expense_category}' is NOT a verifiable \"ordinary\" expense "
            f"under IRC Sec 162(a) for NAICS code {code}."
        )

    return create_verdict(RULE_ID, answer.is_ordinary, details, answer.source)
