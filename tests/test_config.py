"""Settings from environment variables."""

from pathlib import Path

from contactbook.config import Settings

_VARS = (
    "CONTACTS_FILE",
    "CONTACTS_HOST",
    "CONTACTS_PORT",
    "CONTACTS_CORS_ORIGINS",
    "CONTACTS_SERIALIZE_WRITES",
    "LOG_LEVEL",
    "CONTACTS_API_URL",
    "CONTACTS_API_TIMEOUT",
)


def test_defaults(monkeypatch):
    for name in _VARS:
        monkeypatch.delenv(name, raising=False)
    s = Settings.from_env()
    assert s.contacts_file == Path("contacts.json")
    assert s.port == 5000
    assert s.cors_origins == ["*"]
    assert s.serialize_writes is False
    assert s.api_url == "http://localhost:5000"
    assert s.api_timeout is None


def test_overrides(monkeypatch):
    monkeypatch.setenv("CONTACTS_FILE", "/data/people.json")
    monkeypatch.setenv("CONTACTS_PORT", "8080")
    monkeypatch.setenv("CONTACTS_CORS_ORIGINS", "http://a.test, http://b.test")
    monkeypatch.setenv("CONTACTS_SERIALIZE_WRITES", "yes")
    monkeypatch.setenv("LOG_LEVEL", "debug")
    monkeypatch.setenv("CONTACTS_API_URL", "http://api.test:5000/")
    monkeypatch.setenv("CONTACTS_API_TIMEOUT", "2.5")
    s = Settings.from_env()
    assert s.contacts_file == Path("/data/people.json")
    assert s.port == 8080
    assert s.cors_origins == ["http://a.test", "http://b.test"]
    assert s.serialize_writes is True
    assert s.log_level == "DEBUG"
    assert s.api_url == "http://api.test:5000"
    assert s.api_timeout == 2.5
