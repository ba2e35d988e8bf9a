from __future__ import annotations

import json

import pytest

from covenant_engine.cli import entrypoint


def _run_json(capsys: pytest.CaptureFixture[str], argv: list[str]) -> tuple[int, dict]:
    exit_code = entrypoint(["--json", *argv])
    captured = capsys.readouterr()
    return exit_code, json.loads(captured.out)


def test_verify_ordinary_json_output(capsys: pytest.CaptureFixture[str]) -> None:
    exit_code, payload = _run_json(
        capsys,
        ["verify-ordinary", "--industry-code", "238350", "--expense-category", "truck"],
    )

    assert exit_code == 0
    assert payload["command"] == "verify-ordinary"
    assert payload["status"] == "passed"
    assert payload["details"]["verdict"]["rule_id"] == "rule_is_ordinary"


def test_verify_necessary_failure_exits_non_zero(capsys: pytest.CaptureFixture[str]) -> None:
    exit_code, payload = _run_json(
        capsys,
        ["verify-necessary", "--expense-amount", "40000", "--business-revenue", "70000"],
    )

    assert exit_code == 1
    assert payload["status"] == "failed"
    assert "57.1%" in payload["details"]["verdict"]["details"]


def test_verify_necessary_zero_revenue_is_error(capsys: pytest.CaptureFixture[str]) -> None:
    exit_code, payload = _run_json(
        capsys,
        ["verify-necessary", "--expense-amount", "40000", "--business-revenue", "0"],
    )

    assert exit_code == 1
    assert payload["status"] == "error"
    assert payload["details"]["error_type"] == "InvalidArgumentError"


def test_verify_negotiability_json_output(capsys: pytest.CaptureFixture[str]) -> None:
    exit_code, payload = _run_json(
        capsys,
        [
            "verify-negotiability",
            "--promise-type",
            "conditional",
            "--amount-type",
            "fixed",
            "--payable-to",
            "order",
            "--timing",
            "demand",
        ],
    )

    assert exit_code == 1
    assert payload["details"]["terms"]["other_undertakings"] is False
    assert "unconditional promise" in payload["details"]["verdict"]["details"]


def test_analyze_clause_risks_lists_findings(capsys: pytest.CaptureFixture[str]) -> None:
    exit_code, payload = _run_json(
        capsys,
        [
            "analyze-clause-risks",
            "--clause-text",
            "Disputes go to arbitration; a penalty applies.",
            "--document-type",
            "service_contract",
        ],
    )

    assert exit_code == 1
    severities = [finding["severity"] for finding in payload["details"]["findings"]]
    assert severities == ["CRITICAL", "HIGH"]


def test_consult_statute_miss_is_not_an_error(capsys: pytest.CaptureFixture[str]) -> None:
    exit_code, payload = _run_json(capsys, ["consult-statute", "--query", "Sherman Act"])

    assert exit_code == 1
    assert payload["status"] == "failed"
    assert payload["details"]["found"] is False
    assert "UCC 3-104" in payload["details"]["known_keys"]


def test_draft_security_agreement_blocked(capsys: pytest.CaptureFixture[str]) -> None:
    exit_code, payload = _run_json(
        capsys,
        ["draft-verified-form", "--form-type", "security_agreement_ucc", "--collateral", ""],
    )

    assert exit_code == 1
    assert payload["status"] == "blocked"
    assert "GENERATION BLOCKED" in payload["details"]["document_text"]


def test_draft_promissory_note(capsys: pytest.CaptureFixture[str]) -> None:
    exit_code, payload = _run_json(
        capsys,
        [
            "draft-verified-form",
            "--form-type",
            "promissory_note_ucc",
            "--amount",
            "2500",
            "--lender",
            "Acme Capital",
        ],
    )

    assert exit_code == 0
    assert payload["status"] == "passed"
    assert "[SIGNATURE_FIELD:Lender Signature]" in payload["details"]["document_text"]
