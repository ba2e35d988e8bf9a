"""Tests for redaction of sensitive fields in structured logs."""
from covenant_engine.observability.redaction import redact_sensitive


def test_redact_api_key() -> None:
    data = {"api_key": "sk-api-secret-12345", "endpoint": "https://api.law.gov/rac/irc"}
    result = redact_sensitive(data)
    assert result["api_key"] == "***REDACTED***"
    assert result["endpoint"] == "https://api.law.gov/rac/irc"


def test_redact_taxpayer_identifiers() -> None:
    data = {"ssn": "123-45-6789", "tax_id": "12-3456789", "industry_code": "238350"}
    result = redact_sensitive(data)
    assert result["ssn"] == "***REDACTED***"
    assert result["tax_id"] == "***REDACTED***"
    assert result["industry_code"] == "238350"


def test_redact_account_number() -> None:
    data = {"borrower_account_number": "000123", "borrower": "Jane Roe"}
    result = redact_sensitive(data)
    assert result["borrower_account_number"] == "***REDACTED***"
    assert result["borrower"] == "Jane Roe"


def test_redact_nested_sensitive() -> None:
    data = {"outer": {"inner_api_key": "secret123", "normal": "value"}}
    result = redact_sensitive(data)
    assert result["outer"]["inner_api_key"] == "***REDACTED***"
    assert result["outer"]["normal"] == "value"


def test_redact_list_of_sensitive() -> None:
    data = {"requests": [{"password": "secret1"}, {"password": "secret2"}]}
    result = redact_sensitive(data)
    assert result["requests"][0]["password"] == "***REDACTED***"
    assert result["requests"][1]["password"] == "***REDACTED***"


def test_redact_case_insensitive() -> None:
    data = {"API_KEY": "secret", "Secret": "secret", "TOKEN": "secret"}
    result = redact_sensitive(data)
    assert result["API_KEY"] == "***REDACTED***"
    assert result["Secret"] == "***REDACTED***"
    assert result["TOKEN"] == "***REDACTED***"
