from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import StrEnum
from typing import Any, TypeVar

from covenant_engine.errors import InvalidArgumentError

E = TypeVar("E", bound=StrEnum)


class PromiseType(StrEnum):
    CONDITIONAL = "conditional"
    UNCONDITIONAL = "unconditional"


class AmountType(StrEnum):
    FIXED = "fixed"
    VARIABLE = "variable"


class PayableTo(StrEnum):
    BEARER = "bearer"
    ORDER = "order"
    SPECIFIC_PERSON = "specific_person"


class Timing(StrEnum):
    DEMAND = "demand"
    DEFINITE = "definite"
    INDEFINITE = "indefinite"


@dataclass(slots=True, frozen=True)
class InstrumentTerms:
    promise_type: PromiseType
    amount_type: AmountType
    payable_to: PayableTo
    timing: Timing
    other_undertakings: bool
    currency: str = "USD"

    @classmethod
    def from_mapping(cls, raw: Mapping[str, Any]) -> InstrumentTerms:
        other_undertakings = raw.get("other_undertakings")
        if not isinstance(other_undertakings, bool):
            raise InvalidArgumentError("other_undertakings must be a boolean value")

        currency = raw.get("currency", "USD")
        if not isinstance(currency, str) or not currency.strip():
            raise InvalidArgumentError("currency must be a non-empty string")

        return cls(
            promise_type=_coerce(PromiseType, raw, "promise_type"),
            amount_type=_coerce(AmountType, raw, "amount_type"),
            payable_to=_coerce(PayableTo, raw, "payable_to"),
            timing=_coerce(Timing, raw, "timing"),
            other_undertakings=other_undertakings,
            currency=currency.strip().upper(),
        )

    def as_dict(self) -> dict[str, Any]:
        return {
            "promise_type": self.promise_type.value,
            "amount_type": self.amount_type.value,
            "payable_to": self.payable_to.value,
            "timing": self.timing.value,
            "other_undertakings": self.other_undertakings,
            "currency": self.currency,
        }


def _coerce(enum_type: type[E], raw: Mapping[str, Any], key: str) -> E:
    value = raw.get(key)
    if not isinstance(value, str):
        raise InvalidArgumentError(f"{key} is required")
    try:
        return enum_type(value.strip().lower())
    except ValueError:
        allowed = ", ".join(member.value for member in enum_type)
        raise InvalidArgumentError(f"{key} must be one of: {allowed}") from None
