import asyncio
import logging

import pytest

from agent_workspace.core.config import (
    DEFAULT_MAX_TOKENS,
    DEFAULT_TEMPERATURE,
    ProviderConfig,
    Settings,
    get_settings,
    load_provider_config,
)


def _settings(**values) -> Settings:
    return Settings(_env_file=None, **values)


def test_defaults_when_unset():
    settings = _settings()
    assert settings.provider == "openai"
    assert settings.temperature == 0.7
    assert settings.max_tokens == 2048
    assert settings.timeout_seconds == 120.0
    assert settings.api_key is None


@pytest.mark.parametrize("raw", ["abc", "", "nan", "inf", "-1"])
def test_invalid_temperature_falls_back_to_default(monkeypatch, raw):
    monkeypatch.setenv("AI_TEMPERATURE", raw)
    assert _settings().temperature == DEFAULT_TEMPERATURE


def test_valid_temperature_is_parsed(monkeypatch):
    monkeypatch.setenv("AI_TEMPERATURE", "0.2")
    assert _settings().temperature == pytest.approx(0.2)


@pytest.mark.parametrize("raw", ["lots", "", "0", "-5", "12.5"])
def test_invalid_max_tokens_falls_back_to_default(monkeypatch, raw):
    monkeypatch.setenv("AI_MAX_TOKENS", raw)
    assert _settings().max_tokens == DEFAULT_MAX_TOKENS


def test_valid_max_tokens_is_parsed(monkeypatch):
    monkeypatch.setenv("AI_MAX_TOKENS", "512")
    assert _settings().max_tokens == 512


def test_invalid_timeout_falls_back_to_default(monkeypatch):
    monkeypatch.setenv("AI_TIMEOUT_SECONDS", "forever")
    assert _settings().timeout_seconds == 120.0


def test_provider_selector_is_case_insensitive(monkeypatch):
    monkeypatch.setenv("AI_PROVIDER", "  Anthropic ")
    assert _settings().provider == "anthropic"


def test_unknown_provider_falls_back_to_openai(monkeypatch, caplog):
    monkeypatch.setenv("AI_PROVIDER", "watson")
    with caplog.at_level(logging.WARNING, logger="agent_workspace.core.config"):
        settings = _settings()
    assert settings.provider == "openai"
    assert "watson" in caplog.text


def test_load_provider_config_applies_backend_default_model():
    config = load_provider_config(_settings(provider="anthropic", api_key="k"))
    assert config.provider == "anthropic"
    assert config.model == "claude-3-haiku-20240307"
    assert config.api_key == "k"


def test_load_provider_config_keeps_explicit_model_and_base_url(monkeypatch):
    monkeypatch.setenv("AI_PROVIDER", "ollama")
    monkeypatch.setenv("AI_MODEL", "llama3.2:3b")
    monkeypatch.setenv("AI_BASE_URL", "http://gpu-box:11434")
    config = load_provider_config(_settings())
    assert config.model == "llama3.2:3b"
    assert config.base_url == "http://gpu-box:11434"


def test_missing_key_only_warns(caplog):
    with caplog.at_level(logging.WARNING, logger="agent_workspace.core.config"):
        config = load_provider_config(_settings(provider="github"))
    assert config.provider == "github"
    assert config.api_key is None
    assert "AI_API_KEY" in caplog.text


def test_keyless_backend_does_not_warn(caplog):
    with caplog.at_level(logging.WARNING, logger="agent_workspace.core.config"):
        load_provider_config(_settings(provider="ollama"))
    assert "AI_API_KEY" not in caplog.text


def test_provider_config_is_immutable():
    config = ProviderConfig(provider="openai", model="gpt-4o-mini")
    with pytest.raises(Exception):
        config.model = "gpt-4o"


def test_get_settings_reads_environment(monkeypatch):
    monkeypatch.setenv("AI_PROVIDER", "github")
    assert get_settings().provider == "github"


def test_configure_logging_tolerates_unknown_level(monkeypatch):
    from agent_workspace.core import logging_config

    monkeypatch.setattr(logging_config, "_configured", False)
    monkeypatch.setenv("AI_LOG_LEVEL", "verbose")

    logging_config.configure_logging()

    assert logging_config._configured is True


def test_timeout_flows_from_environment_to_provider_client(monkeypatch):
    from agent_workspace.providers import get_provider

    monkeypatch.setenv("AI_PROVIDER", "ollama")
    monkeypatch.setenv("AI_TIMEOUT_SECONDS", "3.5")

    config = load_provider_config()
    provider = get_provider(config)
    try:
        assert config.timeout_seconds == 3.5
        assert provider._client.timeout.read == 3.5
    finally:
        asyncio.run(provider.close())
