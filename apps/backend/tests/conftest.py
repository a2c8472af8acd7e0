import pytest

from fakes import RecordingAdapter
from genai_showcase.providers.base import Modality, ProviderId
from genai_showcase.providers.registry import ProviderRegistry
from genai_showcase.services.dispatcher import Dispatcher


@pytest.fixture
def adapters():
    return {
        ProviderId.GOOGLE: RecordingAdapter(
            ProviderId.GOOGLE, "Google", (Modality.TEXT, Modality.IMAGE, Modality.DOCUMENT)
        ),
        ProviderId.OPENAI: RecordingAdapter(ProviderId.OPENAI, "OpenAI", (Modality.TEXT, Modality.IMAGE)),
        ProviderId.DEEPSEEK: RecordingAdapter(ProviderId.DEEPSEEK, "DeepSeek", (Modality.TEXT,)),
    }


@pytest.fixture
def registry(adapters):
    return ProviderRegistry(adapters)


@pytest.fixture
def dispatcher(registry):
    return Dispatcher(registry)
