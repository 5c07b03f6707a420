from .text_normalizer import (
    normalize,
    to_matchable,
    preview
)
from .regex_extractor import (
    RegexExtractionEngine,
    canonical_country,
    canonical_education_level
)
from .providers import (
    ProviderAdapter,
    GeminiAdapter,
    OpenAIAdapter,
    parse_model_response,
    normalize_model_output
)
from .clients import (
    ProviderClients,
    get_provider_clients,
    reset_provider_clients
)
from .orchestrator import (
    ProviderOrchestrator,
    build_adapters,
    build_orchestrator
)
from .text_extractor import (
    DocumentFormat,
    DocumentTextExtractor,
    TextExtractor
)
from .pipeline import (
    ExtractionPipeline,
    create_pipeline
)
from .manual_entry import (
    build_manual_profile,
    validate_manual_profile
)

__all__ = [
    # Text normalization
    "normalize",
    "to_matchable",
    "preview",
    # Heuristic extraction
    "RegexExtractionEngine",
    "canonical_country",
    "canonical_education_level",
    # Providers
    "ProviderAdapter",
    "GeminiAdapter",
    "OpenAIAdapter",
    "parse_model_response",
    "normalize_model_output",
    "ProviderClients",
    "get_provider_clients",
    "reset_provider_clients",
    # Orchestration
    "ProviderOrchestrator",
    "build_adapters",
    "build_orchestrator",
    # Documents
    "DocumentFormat",
    "DocumentTextExtractor",
    "TextExtractor",
    # Pipeline
    "ExtractionPipeline",
    "create_pipeline",
    # Manual entry
    "build_manual_profile",
    "validate_manual_profile"
]
