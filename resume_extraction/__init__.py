"""
Resume profile extraction: turns resume documents into structured candidate
profiles using language-model providers with a deterministic regex fallback.
"""
from .exceptions import (
    ResumeExtractionError,
    UnsupportedFormat,
    EmptyDocument,
    DocumentNotFound,
    DocumentDecodeError,
    InvalidProfileData,
    ProviderError,
    ProviderCallFailure,
    MalformedProviderResponse,
)
from .schemas import ExtractionResult, ExperienceEntry, EducationEntry
from .services import ExtractionPipeline, create_pipeline, build_manual_profile

__version__ = "1.0.0"

__all__ = [
    "ResumeExtractionError",
    "UnsupportedFormat",
    "EmptyDocument",
    "DocumentNotFound",
    "DocumentDecodeError",
    "InvalidProfileData",
    "ProviderError",
    "ProviderCallFailure",
    "MalformedProviderResponse",
    "ExtractionResult",
    "ExperienceEntry",
    "EducationEntry",
    "ExtractionPipeline",
    "create_pipeline",
    "build_manual_profile",
]
