"""Unit tests for application settings configuration."""

from pathlib import Path

from app.config import Settings


def test_settings_uses_project_env_file_independent_of_cwd():
    """Settings should always include the project's .env as an env source."""
    env_files = Settings.model_config.get("env_file")
    assert env_files is not None

    normalized = {str(Path(item)) for item in env_files}
    expected_project_env = str(Path(__file__).resolve().parents[2] / ".env")

    assert expected_project_env in normalized
    assert str(Path(".env")) in normalized


def test_database_url_points_at_sqlite_file(monkeypatch):
    monkeypatch.setenv("DATABASE_PATH", "/tmp/furnitrack-test.db")
    settings = Settings()
    assert settings.database_url == "sqlite+aiosqlite:////tmp/furnitrack-test.db"


def test_port_override(monkeypatch):
    monkeypatch.setenv("PORT", "8080")
    assert Settings().port == 8080
