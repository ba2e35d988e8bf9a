"""Provider-agnostic declarations of the tool invocation surface.

Each schema is plain JSON Schema so an orchestrator adapter can translate it
to whatever function-calling format its model runtime expects.
"""

from __future__ import annotations

from collections.abc import Sequence

from covenant_engine.forms.data import FormType
from covenant_engine.orchestration.policy_gate import offered_tools
from covenant_engine.types import JsonDict, ToolName

_STRING: JsonDict = {"type": "string"}
_NUMBER: JsonDict = {"type": "number"}

TOOL_SCHEMAS: dict[ToolName, JsonDict] = {
    ToolName.VERIFY_ORDINARY: {
        "name": ToolName.VERIFY_ORDINARY.value,
        "description": 'Checks if an expense is "ordinary" for a given industry (NAICS code) '
        "under IRC 162(a).",
        "parameters": {
            "type": "object",
            "properties": {
                "industry_code": {**_STRING, "description": "The 6-digit NAICS code."},
                "expense_category": {
                    **_STRING,
                    "description": "The item or category being purchased.",
                },
            },
            "required": ["industry_code", "expense_category"],
        },
    },
    ToolName.VERIFY_NECESSARY: {
        "name": ToolName.VERIFY_NECESSARY.value,
        "description": 'Checks if an expense is "necessary" based on the expense-to-revenue '
        "ratio. Offered only after a passing ordinary check.",
        "parameters": {
            "type": "object",
            "properties": {
                "expense_amount": {**_NUMBER, "description": "Cost of the item in USD."},
                "business_revenue": {
                    **_NUMBER,
                    "description": "Total annual gross revenue in USD.",
                },
            },
            "required": ["expense_amount", "business_revenue"],
        },
    },
    ToolName.VERIFY_NEGOTIABILITY: {
        "name": ToolName.VERIFY_NEGOTIABILITY.value,
        "description": "Checks if a set of terms constitutes a Negotiable Instrument under "
        "UCC 3-104.",
        "parameters": {
            "type": "object",
            "properties": {
                "promise_type": {**_STRING, "enum": ["conditional", "unconditional"]},
                "amount_type": {**_STRING, "enum": ["fixed", "variable"]},
                "payable_to": {**_STRING, "enum": ["bearer", "order", "specific_person"]},
                "timing": {**_STRING, "enum": ["demand", "definite", "indefinite"]},
                "other_undertakings": {"type": "boolean"},
            },
            "required": [
                "promise_type",
                "amount_type",
                "payable_to",
                "timing",
                "other_undertakings",
            ],
        },
    },
    ToolName.ANALYZE_CLAUSE_RISKS: {
        "name": ToolName.ANALYZE_CLAUSE_RISKS.value,
        "description": "Analyzes a contract clause for statutory risks (USC/UCC/Common Law).",
        "parameters": {
            "type": "object",
            "properties": {
                "clause_text": {**_STRING, "description": "The exact text of the clause."},
                "document_type": {
                    **_STRING,
                    "description": "Type of document (e.g. service_contract, license, loan).",
                },
            },
            "required": ["clause_text", "document_type"],
        },
    },
    ToolName.CONSULT_STATUTE: {
        "name": ToolName.CONSULT_STATUTE.value,
        "description": "Retrieves raw statutory text from the Law Library.",
        "parameters": {
            "type": "object",
            "properties": {
                "query": {**_STRING, "description": 'Statute name or key, e.g. "UCC 3-104".'},
            },
            "required": ["query"],
        },
    },
    ToolName.DRAFT_VERIFIED_FORM: {
        "name": ToolName.DRAFT_VERIFIED_FORM.value,
        "description": "Generates a validated legal form. Generation is blocked when the "
        "governing rule fails.",
        "parameters": {
            "type": "object",
            "properties": {
                "form_type": {**_STRING, "enum": [form.value for form in FormType]},
                "amount": {**_NUMBER, "description": "Principal amount or consideration."},
                "lender": _STRING,
                "borrower": _STRING,
                "seller": _STRING,
                "buyer": _STRING,
                "client": _STRING,
                "contractor": _STRING,
                "debtor": _STRING,
                "secured_party": _STRING,
                "obligation": _STRING,
                "collateral": {**_STRING, "description": "Description of the collateral."},
                "goods_description": _STRING,
                "services": _STRING,
                "date": {**_STRING, "description": "Date (YYYY-MM-DD)."},
                "state": {**_STRING, "description": "Governing state."},
            },
            "required": ["form_type"],
        },
    },
}


def tool_declarations(history: Sequence[object] | None) -> list[JsonDict]:
    """Schemas the orchestrator may offer at this step of the run."""
    return [TOOL_SCHEMAS[tool] for tool in offered_tools(history)]
