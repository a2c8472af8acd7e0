from __future__ import annotations
from typing import Any, Optional

from google import genai
from google.genai import types

from genai_showcase.core.errors import ProviderNotConfiguredError
from genai_showcase.providers.base import PDF_MIME_TYPE, Modality, ProviderAdapter, ProviderId
from genai_showcase.utils.streaming import accumulate_stream, iter_chunk_text


class GeminiAdapter(ProviderAdapter):
    """Google Gemini backend. Handles text, images and PDFs; output is streamed."""

    provider_id = ProviderId.GOOGLE
    display_name = "Google"
    modalities = frozenset({Modality.TEXT, Modality.IMAGE, Modality.DOCUMENT})

    def __init__(self, client: Optional[genai.Client], model: str = "gemini-2.0-flash"):
        self.client = client
        self.model = model
        self.config = types.GenerateContentConfig(response_mime_type="application/json")

    async def handle_text(self, prompt: str) -> str:
        return await self._generate([types.Part(text=prompt)])

    async def handle_image(self, data: bytes, mime_type: str, prompt: str) -> str:
        # Inline data goes first, the question follows it in the same turn
        return await self._generate([
            types.Part.from_bytes(data=data, mime_type=mime_type),
            types.Part(text=prompt),
        ])

    async def handle_document(self, data: bytes, mime_type: str, prompt: str) -> str:
        return await self._generate([
            types.Part.from_bytes(data=data, mime_type=PDF_MIME_TYPE),
            types.Part(text=prompt),
        ])

    async def _generate(self, parts: list[types.Part]) -> str:
        if self.client is None:
            raise ProviderNotConfiguredError(self.provider_id.value, "GEMINI_API_KEY")

        contents = [types.Content(role="user", parts=parts)]
        stream: Any = await self.client.aio.models.generate_content_stream(
            model=self.model,
            contents=contents,
            config=self.config,
        )
        return await accumulate_stream(iter_chunk_text(stream))
