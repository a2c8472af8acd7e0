"""
Dispatch layer between the HTTP routes and the provider adapters.

Each dispatch call validates its input, resolves the adapter for the requested
provider (falling back to the default), invokes the modality operation and
returns the adapter's string verbatim. There is no retry, no timeout and no
inspection of the returned text. Anything the adapter raises that is not
already an UpstreamError is wrapped in one so the HTTP layer sees exactly two
failure kinds.
"""

from __future__ import annotations
import logging
from typing import Awaitable, Optional, Union

from genai_showcase.core.errors import UpstreamError, ValidationError
from genai_showcase.providers.base import PDF_MIME_TYPE, Modality, ProviderAdapter, ProviderId
from genai_showcase.providers.registry import ProviderRegistry
from genai_showcase.utils.performance import track_performance

DEFAULT_IMAGE_PROMPT = "What are you seeing in this picture?"
DEFAULT_DOCUMENT_PROMPT = "What are you seeing in this PDF?"

ProviderSelector = Union[str, ProviderId, None]


class Dispatcher:
    def __init__(self, registry: ProviderRegistry):
        self.registry = registry

    async def dispatch_text(self, text: Optional[str], provider: ProviderSelector = None) -> str:
        if not text:
            raise ValidationError("Text is required")

        adapter = self.registry.resolve(provider)
        return await self._invoke(adapter, Modality.TEXT, len(text), adapter.handle_text(text))

    async def dispatch_image(
        self,
        data: Optional[bytes],
        mime_type: Optional[str],
        question: Optional[str] = None,
        provider: ProviderSelector = None,
    ) -> str:
        if not data:
            raise ValidationError("Image file is required")
        if not mime_type or not mime_type.startswith("image/"):
            raise ValidationError("File must be an image")

        prompt = question or DEFAULT_IMAGE_PROMPT
        adapter = self.registry.resolve(provider)
        return await self._invoke(
            adapter, Modality.IMAGE, len(data), adapter.handle_image(data, mime_type, prompt)
        )

    async def dispatch_document(
        self,
        data: Optional[bytes],
        mime_type: Optional[str],
        question: Optional[str] = None,
        provider: ProviderSelector = None,
    ) -> str:
        if not data:
            raise ValidationError("PDF file is required")
        if mime_type != PDF_MIME_TYPE:
            raise ValidationError("File must be a PDF")

        prompt = question or DEFAULT_DOCUMENT_PROMPT
        adapter = self.registry.resolve(provider)
        return await self._invoke(
            adapter, Modality.DOCUMENT, len(data), adapter.handle_document(data, mime_type, prompt)
        )

    async def _invoke(
        self,
        adapter: ProviderAdapter,
        modality: Modality,
        payload_size: int,
        call: Awaitable[str],
    ) -> str:
        provider = adapter.provider_id.value
        async with track_performance(
            operation_type="dispatch",
            operation_name=modality.value,
            metadata={"provider": provider, "payload_size": payload_size},
        ):
            try:
                return await call
            except UpstreamError:
                logging.error(f"{provider} {modality.value} request failed", exc_info=True)
                raise
            except Exception as e:
                logging.error(f"{provider} {modality.value} request failed: {e}", exc_info=True)
                raise UpstreamError(provider) from e
