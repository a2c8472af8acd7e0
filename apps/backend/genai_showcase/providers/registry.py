from __future__ import annotations
import logging
from types import MappingProxyType
from typing import Mapping, Optional, Union

from google import genai
from langchain_openai import ChatOpenAI

from genai_showcase.core.config import Settings
from genai_showcase.providers.base import DEFAULT_PROVIDER, Modality, ProviderAdapter, ProviderId
from genai_showcase.providers.google import GeminiAdapter
from genai_showcase.providers.openai_compat import OpenAICompatibleAdapter


class ProviderRegistry:
    """Fixed mapping from provider identifier to adapter, frozen at construction."""

    def __init__(
        self,
        adapters: Mapping[ProviderId, ProviderAdapter],
        default: ProviderId = DEFAULT_PROVIDER,
    ):
        if default not in adapters:
            raise ValueError(f"Default provider '{default.value}' has no adapter")
        self._adapters = MappingProxyType(dict(adapters))
        self.default = default

    def resolve(self, identifier: Union[str, ProviderId, None] = None) -> ProviderAdapter:
        """Return the adapter for `identifier`; absent or unknown values get the default."""
        provider_id = ProviderId.parse(identifier)
        if provider_id is None or provider_id not in self._adapters:
            return self._adapters[self.default]
        return self._adapters[provider_id]

    def providers(self) -> list[ProviderId]:
        return list(self._adapters)


def build_registry(settings: Settings) -> ProviderRegistry:
    """Create one long-lived client per provider from configuration.

    Providers without an API key are still registered (so selection stays
    total) but their adapter has no client and fails fast when called.
    """
    gemini_client: Optional[genai.Client] = None
    if settings.gemini_api_key:
        gemini_client = genai.Client(api_key=settings.gemini_api_key)
    else:
        logging.warning("GEMINI_API_KEY not set; requests to provider 'google' will fail")

    openai_llm: Optional[ChatOpenAI] = None
    if settings.openai_api_key:
        openai_llm = ChatOpenAI(model=settings.openai_model, api_key=settings.openai_api_key)
    else:
        logging.warning("OPENAI_API_KEY not set; requests to provider 'openai' will fail")

    deepseek_llm: Optional[ChatOpenAI] = None
    if settings.deepseek_api_key:
        deepseek_llm = ChatOpenAI(
            model=settings.deepseek_model,
            api_key=settings.deepseek_api_key,
            base_url=settings.deepseek_base_url,
        )
    else:
        logging.warning("DEEPSEEK_API_KEY not set; requests to provider 'deepseek' will fail")

    return ProviderRegistry({
        ProviderId.GOOGLE: GeminiAdapter(gemini_client, model=settings.gemini_model),
        ProviderId.OPENAI: OpenAICompatibleAdapter(
            ProviderId.OPENAI,
            "OpenAI",
            openai_llm,
            modalities=(Modality.TEXT, Modality.IMAGE),
            api_key_env="OPENAI_API_KEY",
        ),
        ProviderId.DEEPSEEK: OpenAICompatibleAdapter(
            ProviderId.DEEPSEEK,
            "DeepSeek",
            deepseek_llm,
            modalities=(Modality.TEXT,),
            api_key_env="DEEPSEEK_API_KEY",
        ),
    })
