from __future__ import annotations

from fastapi.testclient import TestClient

from covenant_engine.config import AppSettings
from covenant_engine.orchestration.ledger import GENESIS_ACTION, RESET_ACTION, AuditLedger
from covenant_engine.runtime.api import build_engine_app


def _client(ledger: AuditLedger | None = None) -> TestClient:
    return TestClient(build_engine_app(AppSettings(), ledger=ledger))


def test_health_endpoints() -> None:
    client = _client()

    assert client.get("/livez").json()["status"] == "ok"
    ready = client.get("/readyz").json()
    assert ready["status"] == "ready"
    assert "UCC 3-104" in ready["statutes"]


def test_tool_listing_hides_necessity_until_ordinary_passes() -> None:
    client = _client()

    names = {tool["name"] for tool in client.get("/tools").json()}
    assert "verify_necessary" not in names

    response = client.post(
        "/tools/verify_ordinary",
        json={"arguments": {"industry_code": "238350", "expense_category": "truck"}},
    )
    history = response.json()["history"]

    offered = {
        tool["name"] for tool in client.post("/tools/offered", json={"history": history}).json()
    }
    assert "verify_necessary" in offered


def test_gated_tool_returns_conflict() -> None:
    response = _client().post(
        "/tools/verify_necessary",
        json={"arguments": {"expense_amount": 1, "business_revenue": 2}},
    )

    assert response.status_code == 409


def test_unknown_tool_returns_not_found() -> None:
    response = _client().post("/tools/summon_oracle", json={})

    assert response.status_code == 404


def test_necessity_with_passing_history() -> None:
    client = _client()
    first = client.post(
        "/tools/verify_ordinary",
        json={"arguments": {"industry_code": "238350", "expense_category": "truck"}},
    ).json()

    second = client.post(
        "/tools/verify_necessary",
        json={
            "arguments": {"expense_amount": 30000, "business_revenue": 70000},
            "history": first["history"],
        },
    )

    assert second.status_code == 200
    outcome = second.json()["outcome"]
    assert outcome["ok"] is True
    assert outcome["result"]["passed"] is True
    assert len(second.json()["history"]) == 2


def test_ledger_read_and_reset() -> None:
    ledger = AuditLedger()
    client = _client(ledger)
    client.post("/tools/consult_statute", json={"arguments": {"query": "UCC 2-201"}})

    entries = client.get("/ledger").json()
    assert entries[0]["action"] == "Law Library Retrieval"
    assert entries[-1]["action"] == GENESIS_ACTION

    reset = client.delete("/ledger").json()
    assert [entry["action"] for entry in reset] == [RESET_ACTION]
    assert len(ledger) == 1
