"""
Process-wide provider SDK clients.

Clients are created at most once, the first time they are needed, and then
handed to the adapters explicitly. A provider whose key is missing (or whose
client cannot be built) simply has no client.
"""
import logging
import threading
from typing import Optional

from google import genai
from openai import AsyncOpenAI

from ..config import Settings, get_settings

logger = logging.getLogger(__name__)


class ProviderClients:
    """Holds the SDK client for each configured provider, or None."""

    def __init__(self, gemini=None, openai=None):
        self.gemini = gemini
        self.openai = openai

    @classmethod
    def from_settings(cls, settings: Settings) -> "ProviderClients":
        return cls(
            gemini=_create_gemini_client(settings),
            openai=_create_openai_client(settings),
        )

    def available(self) -> list:
        return [name for name in ("gemini", "openai") if getattr(self, name) is not None]


def _create_gemini_client(settings: Settings):
    if not settings.gemini_api_key:
        logger.warning("GEMINI_API_KEY not set - Gemini resume parsing disabled")
        return None
    try:
        client = genai.Client(api_key=settings.gemini_api_key)
    except Exception as e:
        logger.warning(f"Failed to initialize Gemini client: {e}")
        return None
    logger.info("Gemini client initialized")
    return client


def _create_openai_client(settings: Settings):
    if not settings.openai_api_key:
        logger.warning("OPENAI_API_KEY not set - OpenAI resume parsing disabled")
        return None
    try:
        client = AsyncOpenAI(api_key=settings.openai_api_key)
    except Exception as e:
        logger.warning(f"Failed to initialize OpenAI client: {e}")
        return None
    logger.info("OpenAI client initialized")
    return client


_clients: Optional[ProviderClients] = None
_clients_lock = threading.Lock()


def get_provider_clients(settings: Settings = None) -> ProviderClients:
    """Return the shared clients, building them on first use."""
    global _clients
    if _clients is None:
        with _clients_lock:
            if _clients is None:
                _clients = ProviderClients.from_settings(settings or get_settings())
    return _clients


def reset_provider_clients() -> None:
    """Forget the shared clients so the next call rebuilds them (tests, key rotation)."""
    global _clients
    with _clients_lock:
        _clients = None
