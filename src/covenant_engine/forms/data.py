from __future__ import annotations

import math
from collections.abc import Mapping
from dataclasses import dataclass, fields
from enum import StrEnum
from typing import Any

from covenant_engine.errors import InvalidArgumentError


class FormType(StrEnum):
    PROMISSORY_NOTE = "promissory_note_ucc"
    SECURITY_AGREEMENT = "security_agreement_ucc"
    BILL_OF_SALE = "bill_of_sale_ucc"
    CONTRACTOR_AGREEMENT = "contractor_agreement"

    @classmethod
    def parse(cls, raw: object) -> FormType:
        if isinstance(raw, FormType):
            return raw
        if isinstance(raw, str):
            try:
                return cls(raw.strip().lower())
            except ValueError:
                pass
        allowed = ", ".join(member.value for member in cls)
        raise InvalidArgumentError(f"form_type must be one of: {allowed}")


@dataclass(slots=True, frozen=True)
class FormData:
    amount: float | None = None
    lender: str | None = None
    borrower: str | None = None
    seller: str | None = None
    buyer: str | None = None
    client: str | None = None
    contractor: str | None = None
    debtor: str | None = None
    secured_party: str | None = None
    obligation: str | None = None
    collateral: str | None = None
    goods_description: str | None = None
    services: str | None = None
    date: str | None = None
    state: str | None = None

    @classmethod
    def from_mapping(cls, raw: Mapping[str, Any]) -> FormData:
        values: dict[str, Any] = {}
        for field in fields(cls):
            value = raw.get(field.name)
            if value is None:
                continue
            if field.name == "amount":
                values["amount"] = _coerce_amount(value)
            elif isinstance(value, str):
                values[field.name] = value.strip() or None
            else:
                raise InvalidArgumentError(f"{field.name} must be a string")
        return cls(**values)


def _coerce_amount(value: object) -> float:
    if isinstance(value, bool):
        raise InvalidArgumentError("amount must be a number")
    if isinstance(value, str):
        try:
            value = float(value.replace(",", "").replace("$", "").strip())
        except ValueError:
            raise InvalidArgumentError("amount must be a number") from None
    if not isinstance(value, (int, float)):
        raise InvalidArgumentError("amount must be a number")
    amount = float(value)
    if not math.isfinite(amount) or amount < 0:
        raise InvalidArgumentError("amount must be a non-negative number")
    return amount
