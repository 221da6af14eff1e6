"""Tests for application configuration."""

from gudang_admin.config import Settings


def test_settings_defaults() -> None:
    """Test that settings have expected default values."""
    settings = Settings()
    assert settings.api_port == 8000
    assert settings.debug is False
    assert settings.supervisor_role == "kepala_gudang"
    assert settings.redirect_delay_seconds == 2
    assert settings.show_fetch_errors is False
    assert settings.backend_create_warehouse_path == "/api/gudang/add"


def test_settings_from_environment(monkeypatch) -> None:
    """Test that environment variables override defaults."""
    monkeypatch.setenv("BACKEND_BASE_URL", "https://gudang.example.com")
    monkeypatch.setenv("SHOW_FETCH_ERRORS", "true")
    settings = Settings()
    assert settings.backend_base_url == "https://gudang.example.com"
    assert settings.show_fetch_errors is True
