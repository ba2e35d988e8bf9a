import threading

import pytest

from covenant_engine.domain.audit_entry import ArbiterMetadata, AuditSource, AuditStatus
from covenant_engine.errors import InvalidArgumentError
from covenant_engine.orchestration.ledger import (
    GENESIS_ACTION,
    RESET_ACTION,
    AuditLedger,
    pseudo_hash,
)


def test_new_ledger_starts_with_genesis_entry() -> None:
    entries = AuditLedger().entries()

    assert len(entries) == 1
    assert entries[0].action == GENESIS_ACTION
    assert entries[0].source == AuditSource.SYSTEM
    assert entries[0].status == AuditStatus.VERIFIED


def test_entries_are_newest_first() -> None:
    ledger = AuditLedger()

    for action in ("A", "B", "C"):
        ledger.append(action, f"details {action}", AuditSource.ARBITER)

    assert [entry.action for entry in ledger.entries()] == ["C", "B", "A", GENESIS_ACTION]


def test_append_returns_entry_id_and_defaults_to_verified() -> None:
    ledger = AuditLedger()

    entry_id = ledger.append("Legal Inquiry", "Asked about UCC 3-104", "Advisor")

    head = ledger.entries()[0]
    assert head.id == entry_id
    assert head.status == AuditStatus.VERIFIED
    assert head.source == AuditSource.ADVISOR
    assert head.metadata is None


def test_append_keeps_metadata() -> None:
    ledger = AuditLedger()

    ledger.append(
        "Result: ordinary",
        "PASSED",
        AuditSource.ARBITER,
        AuditStatus.VERIFIED,
        ArbiterMetadata(critic_score=0.9, latency_ms=1.5, refinement_iterations=2),
    )

    metadata = ledger.entries()[0].as_dict()["metadata"]
    assert metadata == {"criticScore": 0.9, "latencyMs": 1.5, "refinementIterations": 2}


def test_hash_looks_like_fingerprint() -> None:
    ledger = AuditLedger()
    ledger.append("A", "details", AuditSource.SYSTEM)

    entry_hash = ledger.entries()[0].hash
    assert entry_hash.startswith("0x")
    assert len(entry_hash) == 2 + 16 + 8
    int(entry_hash[2:], 16)


def test_pseudo_hash_prefix_is_deterministic() -> None:
    assert pseudo_hash("seed")[:18] == pseudo_hash("seed")[:18]


def test_reset_leaves_exactly_one_system_entry() -> None:
    ledger = AuditLedger()
    ledger.append("A", "details", AuditSource.ARBITER)
    ledger.append("B", "details", AuditSource.ARBITER, AuditStatus.ERROR)

    ledger.reset()

    entries = ledger.entries()
    assert len(entries) == 1
    assert entries[0].action == RESET_ACTION
    assert entries[0].source == AuditSource.SYSTEM
    assert entries[0].id.startswith("reboot-")


def test_snapshot_is_not_affected_by_later_appends() -> None:
    ledger = AuditLedger()
    snapshot = ledger.entries()

    ledger.append("A", "details", AuditSource.ARBITER)

    assert len(snapshot) == 1
    assert len(ledger.entries()) == 2


@pytest.mark.parametrize(
    ("source", "status"),
    [("Oracle", "Verified"), ("System", "Done")],
)
def test_closed_sets_are_enforced(source: str, status: str) -> None:
    with pytest.raises(InvalidArgumentError):
        AuditLedger().append("A", "details", source, status)


def test_concurrent_appends_are_atomic() -> None:
    ledger = AuditLedger()

    def worker(prefix: str) -> None:
        for index in range(50):
            ledger.append(f"{prefix}-{index}", "details", AuditSource.ARBITER)

    threads = [threading.Thread(target=worker, args=(name,)) for name in ("run-a", "run-b")]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    entries = ledger.entries()
    assert len(entries) == 101
    for prefix in ("run-a", "run-b"):
        own = [entry.action for entry in entries if entry.action.startswith(prefix)]
        assert own == [f"{prefix}-{index}" for index in reversed(range(50))]


def test_entry_id_is_millis_plus_six_hex_digits() -> None:
    ledger = AuditLedger()

    entry_id = ledger.append("A", "details", AuditSource.ARBITER)

    assert len(entry_id) == 19
    assert entry_id[:13].isdigit()
    assert all(char in "0123456789abcdef" for char in entry_id[13:])
