"""
Best-effort provider cascade with a deterministic fallback.
"""
import logging
from typing import List, Optional

from ..config import Settings, get_settings
from ..exceptions import ProviderError
from ..schemas.extraction import ExtractionResult
from .clients import ProviderClients, get_provider_clients
from .providers import GeminiAdapter, OpenAIAdapter, ProviderAdapter
from .regex_extractor import RegexExtractionEngine

logger = logging.getLogger(__name__)


class ProviderOrchestrator:
    """
    Tries each adapter in order and returns the first success. When every
    adapter fails, or none is configured, the regex engine answers instead.
    Providers are tried one at a time, never concurrently.
    """

    def __init__(self, adapters: List[ProviderAdapter] = None, engine: Optional[RegexExtractionEngine] = None):
        self.adapters = list(adapters or [])
        self.engine = engine or RegexExtractionEngine()

    async def extract(self, text: str) -> ExtractionResult:
        for adapter in self.adapters:
            logger.info(f"Attempting {adapter.name} parsing...")
            try:
                return await adapter.extract(text)
            except ProviderError as e:
                logger.warning(f"{adapter.name} parsing failed: {e}")

        if self.adapters:
            logger.info("All AI providers failed, using regex parser")
        else:
            logger.info("No AI providers configured, using regex parser")
        return self.engine.extract(text)


def build_adapters(settings: Settings, clients: ProviderClients) -> List[ProviderAdapter]:
    """Adapters for every provider with a client, Gemini first unless OpenAI is preferred."""
    options = dict(temperature=settings.llm_temperature, prompt_max_chars=settings.prompt_max_chars)

    adapters = []
    if clients.gemini is not None:
        adapters.append(GeminiAdapter(clients.gemini, settings.get_gemini_models(), **options))
    if clients.openai is not None:
        adapters.append(OpenAIAdapter(clients.openai, settings.get_openai_models(), **options))

    if settings.prefer_openai:
        adapters.sort(key=lambda adapter: not isinstance(adapter, OpenAIAdapter))
    return adapters


def build_orchestrator(settings: Settings = None, clients: ProviderClients = None) -> ProviderOrchestrator:
    settings = settings or get_settings()
    if clients is None:
        clients = get_provider_clients(settings)
    adapters = build_adapters(settings, clients)
    logger.info(f"Provider order: {[adapter.name for adapter in adapters] or ['regex']}")
    return ProviderOrchestrator(adapters)
