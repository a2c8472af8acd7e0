import logging

import pytest

from fakes import RecordingAdapter
from genai_showcase.core.config import Settings
from genai_showcase.providers.base import Modality, ProviderId
from genai_showcase.providers.google import GeminiAdapter
from genai_showcase.providers.openai_compat import OpenAICompatibleAdapter
from genai_showcase.providers.registry import ProviderRegistry, build_registry


@pytest.mark.parametrize("identifier", ["google", "GOOGLE", ProviderId.GOOGLE])
def test_resolve_known_identifier(registry, adapters, identifier):
    assert registry.resolve(identifier) is adapters[ProviderId.GOOGLE]


@pytest.mark.parametrize("identifier", [None, "", "unknown-id", "gpt-4o"])
def test_resolve_absent_or_unknown_falls_back_to_default(registry, adapters, identifier):
    assert registry.resolve(identifier) is adapters[ProviderId.GOOGLE]
    assert registry.resolve(identifier) is registry.resolve(None)


def test_resolve_each_provider(registry, adapters):
    for provider_id, adapter in adapters.items():
        assert registry.resolve(provider_id.value) is adapter


def test_registry_requires_default_adapter():
    only_openai = {ProviderId.OPENAI: RecordingAdapter(ProviderId.OPENAI, "OpenAI", (Modality.TEXT,))}
    with pytest.raises(ValueError):
        ProviderRegistry(only_openai)


def test_registry_is_not_affected_by_later_mutation_of_input(adapters):
    registry = ProviderRegistry(adapters)
    adapters.pop(ProviderId.OPENAI)

    assert registry.resolve("openai").provider_id is ProviderId.OPENAI
    with pytest.raises(TypeError):
        registry._adapters[ProviderId.OPENAI] = None


def test_build_registry_without_keys_registers_unconfigured_adapters(caplog):
    settings = Settings(gemini_api_key=None, openai_api_key=None, deepseek_api_key=None)

    with caplog.at_level(logging.WARNING):
        registry = build_registry(settings)

    assert registry.providers() == [ProviderId.GOOGLE, ProviderId.OPENAI, ProviderId.DEEPSEEK]
    assert registry.default is ProviderId.GOOGLE
    assert registry.resolve("google").client is None
    assert registry.resolve("openai").llm is None
    assert registry.resolve("deepseek").llm is None
    for env_var in ("GEMINI_API_KEY", "OPENAI_API_KEY", "DEEPSEEK_API_KEY"):
        assert env_var in caplog.text


def test_build_registry_with_keys_declares_modalities():
    settings = Settings(
        gemini_api_key="g-key",
        openai_api_key="o-key",
        deepseek_api_key="d-key",
        deepseek_base_url="https://api.deepseek.com",
    )
    registry = build_registry(settings)

    google = registry.resolve("google")
    openai = registry.resolve("openai")
    deepseek = registry.resolve("deepseek")

    assert isinstance(google, GeminiAdapter) and google.client is not None
    assert isinstance(openai, OpenAICompatibleAdapter) and openai.llm is not None
    assert isinstance(deepseek, OpenAICompatibleAdapter) and deepseek.llm is not None
    assert google.modalities == {Modality.TEXT, Modality.IMAGE, Modality.DOCUMENT}
    assert openai.modalities == {Modality.TEXT, Modality.IMAGE}
    assert deepseek.modalities == {Modality.TEXT}
    assert deepseek.display_name == "DeepSeek"
