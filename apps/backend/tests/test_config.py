import importlib

import pytest

from genai_showcase.core import config


@pytest.fixture
def reload_config(monkeypatch):
    """Re-evaluate the settings module against a patched environment."""
    monkeypatch.setattr("dotenv.load_dotenv", lambda *args, **kwargs: False)

    def _reload(**env):
        for name in (
            "PORT", "ALLOWED_ORIGINS", "ENABLE_PERFORMANCE_TRACKING",
            "GEMINI_API_KEY", "OPENAI_API_KEY", "DEEPSEEK_API_KEY", "DEEPSEEK_BASE_URL",
        ):
            monkeypatch.delenv(name, raising=False)
        for name, value in env.items():
            monkeypatch.setenv(name, value)
        return importlib.reload(config).settings

    yield _reload
    monkeypatch.undo()
    importlib.reload(config)


def test_defaults(reload_config):
    settings = reload_config()

    assert settings.port == 3000
    assert settings.https_port == 443
    assert settings.allowed_origins == ["*"]
    assert settings.enable_performance_tracking is False
    assert settings.gemini_api_key is None
    assert settings.openai_api_key is None
    assert settings.gemini_model == "gemini-2.0-flash"
    assert settings.openai_model == "gpt-4o"
    assert settings.deepseek_model == "deepseek-chat"
    assert settings.deepseek_base_url == "https://api.deepseek.com"


def test_environment_overrides(reload_config):
    settings = reload_config(
        PORT="8080",
        ALLOWED_ORIGINS="https://a.example,https://b.example",
        ENABLE_PERFORMANCE_TRACKING="true",
        GEMINI_API_KEY="g-key",
    )

    assert settings.port == 8080
    assert settings.allowed_origins == ["https://a.example", "https://b.example"]
    assert settings.enable_performance_tracking is True
    assert settings.gemini_api_key == "g-key"


def test_empty_api_key_counts_as_missing(reload_config):
    settings = reload_config(OPENAI_API_KEY="")
    assert settings.openai_api_key is None
