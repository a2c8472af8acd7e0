from __future__ import annotations
import base64
from typing import Any, Iterable, Optional

from langchain_core.messages import HumanMessage, SystemMessage
from langchain_openai import ChatOpenAI

from genai_showcase.core.errors import ProviderNotConfiguredError
from genai_showcase.providers.base import Modality, ProviderAdapter, ProviderId

JSON_SYSTEM_PROMPT = (
    "You must respond with valid JSON format. "
    "Structure your response as a JSON object with relevant fields."
)


def image_data_url(data: bytes, mime_type: str) -> str:
    encoded = base64.b64encode(data).decode("utf-8")
    return f"data:{mime_type};base64,{encoded}"


def message_text(response: Any) -> str:
    """Plain text of a chat response, joining text blocks when content is a list."""
    if isinstance(response, str):
        return response
    text = getattr(response, "text", None)
    if text is None:
        return ""
    # BaseMessage.text is a method on older langchain-core and a str property on newer ones
    if callable(text):
        text = text()
    return str(text) if text else ""


class OpenAICompatibleAdapter(ProviderAdapter):
    """
    Adapter for chat-completions style backends (OpenAI, DeepSeek).

    The same class serves every OpenAI-compatible provider; what differs is
    the configured ChatOpenAI instance (model, base URL) and the set of
    modalities the backend accepts. None of these backends takes PDFs inline,
    so document requests always fall through to the capability gap.
    """

    def __init__(
        self,
        provider_id: ProviderId,
        display_name: str,
        llm: Optional[ChatOpenAI],
        modalities: Iterable[Modality] = (Modality.TEXT,),
        api_key_env: str = "OPENAI_API_KEY",
    ):
        self.provider_id = provider_id
        self.display_name = display_name
        self.llm = llm
        self.modalities = frozenset(modalities)
        self.api_key_env = api_key_env

    async def handle_text(self, prompt: str) -> str:
        return await self._complete(prompt)

    async def handle_image(self, data: bytes, mime_type: str, prompt: str) -> str:
        if not self.supports(Modality.IMAGE):
            return self.capability_gap(Modality.IMAGE)
        return await self._complete([
            {"type": "text", "text": prompt},
            {"type": "image_url", "image_url": {"url": image_data_url(data, mime_type)}},
        ])

    async def _complete(self, content: Any) -> str:
        if self.llm is None:
            raise ProviderNotConfiguredError(self.provider_id.value, self.api_key_env)

        messages = [SystemMessage(content=JSON_SYSTEM_PROMPT), HumanMessage(content=content)]
        response = await self.llm.ainvoke(messages)
        return message_text(response)
