"""Domain models for deterministic compliance verification."""

from covenant_engine.domain.audit_entry import (
    ArbiterMetadata,
    AuditEntry,
    AuditSource,
    AuditStatus,
)
from covenant_engine.domain.instrument import (
    AmountType,
    InstrumentTerms,
    PayableTo,
    PromiseType,
    Timing,
)
from covenant_engine.domain.statute import StatuteEntry
from covenant_engine.domain.verdict import (
    ValidationStep,
    create_verdict,
    parse_verdict,
    utc_timestamp,
)

__all__ = [
    "AmountType",
    "ArbiterMetadata",
    "AuditEntry",
    "AuditSource",
    "AuditStatus",
    "InstrumentTerms",
    "PayableTo",
    "PromiseType",
    "StatuteEntry",
    "Timing",
    "ValidationStep",
    "create_verdict",
    "parse_verdict",
    "utc_timestamp",
]
