"""Append-only audit ledger, newest entry first."""

from __future__ import annotations

import hashlib
import secrets
import threading
import time

from covenant_engine.domain.audit_entry import (
    ArbiterMetadata,
    AuditEntry,
    AuditSource,
    AuditStatus,
)
from covenant_engine.domain.verdict import utc_timestamp
from covenant_engine.errors import InvalidArgumentError
from covenant_engine.observability.logging import get_logger

GENESIS_ACTION = "ArbiterOS Initialization"
RESET_ACTION = "System Reboot"

_SYSTEM_METADATA = ArbiterMetadata(compliance_check=True, critic_score=1.0)


def pseudo_hash(seed: str) -> str:
    """Visual fingerprint for an entry; not a security control."""
    digest = hashlib.sha256(seed.encode("utf-8")).hexdigest()[:16]
    return f"0x{digest}{secrets.token_hex(4)}"


def _entry_id() -> str:
    return f"{time.time_ns() // 1_000_000}{secrets.token_hex(3)}"


def _coerce_source(source: AuditSource | str) -> AuditSource:
    try:
        return AuditSource(source)
    except ValueError:
        allowed = ", ".join(member.value for member in AuditSource)
        raise InvalidArgumentError(f"source must be one of: {allowed}") from None


def _coerce_status(status: AuditStatus | str) -> AuditStatus:
    try:
        return AuditStatus(status)
    except ValueError:
        allowed = ", ".join(member.value for member in AuditStatus)
        raise InvalidArgumentError(f"status must be one of: {allowed}") from None


class AuditLedger:
    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._logger = get_logger("audit_ledger")
        self._entries: tuple[AuditEntry, ...] = (
            self._system_entry(
                "genesis",
                GENESIS_ACTION,
                "Governance ledger instantiated. Constitution loaded.",
                "genesis-block-governance",
            ),
        )

    def _system_entry(self, entry_id: str, action: str, details: str, seed: str) -> AuditEntry:
        return AuditEntry(
            id=entry_id,
            timestamp=utc_timestamp(),
            action=action,
            details=details,
            source=AuditSource.SYSTEM,
            status=AuditStatus.VERIFIED,
            hash=pseudo_hash(seed),
            metadata=_SYSTEM_METADATA,
        )

    def append(
        self,
        action: str,
        details: str,
        source: AuditSource | str,
        status: AuditStatus | str = AuditStatus.VERIFIED,
        metadata: ArbiterMetadata | None = None,
    ) -> str:
        if not action.strip():
            raise InvalidArgumentError("action is required")

        entry_source = _coerce_source(source)
        entry_status = _coerce_status(status)

        with self._lock:
            timestamp = utc_timestamp()
            entry = AuditEntry(
                id=_entry_id(),
                timestamp=timestamp,
                action=action,
                details=details,
                source=entry_source,
                status=entry_status,
                hash=pseudo_hash(f"{action}{details}{timestamp}"),
                metadata=metadata,
            )
            self._entries = (entry, *self._entries)

        self._logger.info(
            "ledger_entry_appended",
            entry_id=entry.id,
            action=action,
            source=entry_source.value,
            status=entry_status.value,
        )
        return entry.id

    def reset(self) -> None:
        with self._lock:
            stamp = time.time_ns() // 1_000_000
            self._entries = (
                self._system_entry(
                    f"reboot-{stamp}",
                    RESET_ACTION,
                    "Audit Ledger flushed by user command. Clean state initialized.",
                    f"reboot-{stamp}",
                ),
            )
        self._logger.info("ledger_reset")

    def entries(self) -> tuple[AuditEntry, ...]:
        return self._entries

    def __len__(self) -> int:
        return len(self._entries)
