"""Settings: defaults and environment overrides."""

from ledger_gateway.config import Settings


def test_defaults(monkeypatch):
    monkeypatch.delenv("LEDGER_URL", raising=False)
    monkeypatch.delenv("LOG_FORMAT", raising=False)
    settings = Settings(_env_file=None)
    assert settings.ledger_url == "http://localhost:7050"
    assert settings.identity_header == "X-Enrollment-Id"
    assert settings.default_enrollment_id is None
    assert settings.ledger_timeout_seconds == 30.0


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("LEDGER_URL", "http://peer0:7050/")
    monkeypatch.setenv("CHAINCODE_NAME", "brokerage")
    monkeypatch.setenv("DEFAULT_ENROLLMENT_ID", "user_type1_0")
    settings = Settings(_env_file=None)
    assert settings.ledger_url == "http://peer0:7050"
    assert settings.chaincode_name == "brokerage"
    assert settings.default_enrollment_id == "user_type1_0"
