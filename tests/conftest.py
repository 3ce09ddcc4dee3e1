"""Shared test fixtures and configuration."""
import pytest

from silhouette_studio.core.config import get_settings


@pytest.fixture(autouse=True)
def clear_ambient_credential(monkeypatch: pytest.MonkeyPatch) -> None:
    """Make sure no ambient API key leaks in from the developer's environment."""
    monkeypatch.delenv("GEMINI_API_KEY", raising=False)
    monkeypatch.delenv("API_KEY", raising=False)
    get_settings.cache_clear()
