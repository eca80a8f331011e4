"""Unit tests for application settings configuration."""

from pathlib import Path

from pet_api.config import Settings


def test_settings_uses_backend_env_file_independent_of_cwd():
    """Settings should always include backend/.env as an env source."""
    env_files = Settings.model_config.get("env_file")
    assert env_files is not None

    normalized = {str(Path(item)) for item in env_files}
    expected_backend_env = str(Path(__file__).resolve().parents[2] / ".env")

    assert expected_backend_env in normalized
    assert str(Path(".env")) in normalized


def test_settings_defaults(monkeypatch):
    """Defaults bind to port 3000 and allow any CORS origin."""
    for name in ("PORT", "HOST", "CORS_ORIGINS", "APP_TITLE"):
        monkeypatch.delenv(name, raising=False)
    settings = Settings(_env_file=None)

    assert settings.app_title == "Pet Management API"
    assert settings.port == 3000
    assert settings.cors_origins == ["*"]


def test_settings_read_from_environment(monkeypatch):
    monkeypatch.setenv("PORT", "8081")
    monkeypatch.setenv("LOG_LEVEL_STORE", "DEBUG")
    settings = Settings(_env_file=None)

    assert settings.port == 8081
    assert settings.log_level_store == "DEBUG"
