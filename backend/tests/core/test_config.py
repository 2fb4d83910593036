"""Settings — verifies env parsing of list and secret values."""

from app.config import Settings


def test_auth_defaults(monkeypatch):
    monkeypatch.delenv("API_KEY", raising=False)
    monkeypatch.delenv("JWT_SECRET", raising=False)
    s = Settings(_env_file=None)
    assert s.api_key == ""
    assert s.jwt_secret == ""
    assert s.jwt_algorithm == "HS256"
    assert s.token_subject == "figma-copy-updater"


def test_cors_origins_from_comma_separated_env(monkeypatch):
    monkeypatch.setenv("CORS_ORIGINS", "http://a.test, http://b.test")
    assert Settings(_env_file=None).cors_origins == ["http://a.test", "http://b.test"]


def test_cors_origins_from_json_env(monkeypatch):
    monkeypatch.setenv("CORS_ORIGINS", '["http://a.test"]')
    assert Settings(_env_file=None).cors_origins == ["http://a.test"]


def test_env_vars_are_case_insensitive(monkeypatch):
    monkeypatch.delenv("API_KEY", raising=False)
    monkeypatch.setenv("api_key", "lower")
    assert Settings(_env_file=None).api_key == "lower"
