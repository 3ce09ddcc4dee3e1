"""Tests for configuration management."""
import pytest


def test_settings_has_default_values() -> None:
    """Settings should provide sensible defaults; nothing is required."""
    from silhouette_studio.core.config import Settings
    settings = Settings(_env_file=None)

    assert settings.gemini_api_key == ""
    assert settings.image_model == "gemini-2.5-flash-image"
    assert settings.app_name == "silhouette-studio"
    assert settings.backend_port == 8000
    assert settings.frontend_port == 3000
    assert settings.backend_host == "localhost"


def test_settings_loads_gemini_api_key(monkeypatch: pytest.MonkeyPatch) -> None:
    """GEMINI_API_KEY is the ambient credential."""
    monkeypatch.setenv("GEMINI_API_KEY", "gem-key")

    from silhouette_studio.core.config import Settings
    settings = Settings(_env_file=None)

    assert settings.gemini_api_key == "gem-key"


def test_settings_accepts_api_key_alias(monkeypatch: pytest.MonkeyPatch) -> None:
    """API_KEY is accepted as an alias for the ambient credential."""
    monkeypatch.setenv("API_KEY", "plain-key")

    from silhouette_studio.core.config import Settings
    settings = Settings(_env_file=None)

    assert settings.gemini_api_key == "plain-key"


def test_settings_overrides_model(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("IMAGE_MODEL", "gemini-3-pro-image-preview")

    from silhouette_studio.core.config import Settings
    settings = Settings(_env_file=None)

    assert settings.image_model == "gemini-3-pro-image-preview"


def test_get_settings_is_cached() -> None:
    from silhouette_studio.core.config import get_settings
    assert get_settings() is get_settings()
