"""
Provider adapter interface.

Every backend is wrapped in a ProviderAdapter exposing the same three async
operations (text, image, document). The base class answers each of them with a
capability-gap payload, so an adapter overrides only the modalities its
backend can actually handle and the dispatcher can call any operation on any
adapter without checking first.
"""

from __future__ import annotations
import json
from enum import Enum
from typing import Optional, Union

PDF_MIME_TYPE = "application/pdf"


class Modality(str, Enum):
    TEXT = "text"
    IMAGE = "image"
    DOCUMENT = "document"

    @property
    def label(self) -> str:
        """Name used in user-facing messages."""
        return "PDF" if self is Modality.DOCUMENT else self.value


class ProviderId(str, Enum):
    GOOGLE = "google"
    OPENAI = "openai"
    DEEPSEEK = "deepseek"

    @classmethod
    def parse(cls, value: Union[str, "ProviderId", None]) -> Optional["ProviderId"]:
        """Return the matching identifier, or None for absent/unknown values."""
        if isinstance(value, ProviderId):
            return value
        if not value:
            return None
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            return None


DEFAULT_PROVIDER = ProviderId.GOOGLE


def capability_gap(provider_name: str, modality: Modality) -> str:
    """Serialized payload telling the caller a provider lacks a modality."""
    return json.dumps({"error": f"{provider_name} does not currently support {modality.label} analysis"})


class ProviderAdapter:
    """Base class for all backend adapters."""

    provider_id: ProviderId
    display_name: str
    modalities: frozenset[Modality] = frozenset()

    def supports(self, modality: Modality) -> bool:
        return modality in self.modalities

    def capability_gap(self, modality: Modality) -> str:
        return capability_gap(self.display_name, modality)

    async def handle_text(self, prompt: str) -> str:
        return self.capability_gap(Modality.TEXT)

    async def handle_image(self, data: bytes, mime_type: str, prompt: str) -> str:
        return self.capability_gap(Modality.IMAGE)

    async def handle_document(self, data: bytes, mime_type: str, prompt: str) -> str:
        return self.capability_gap(Modality.DOCUMENT)

    def __repr__(self) -> str:
        supported = ",".join(sorted(m.value for m in self.modalities))
        return f"<{type(self).__name__} {self.provider_id.value} [{supported}]>"
