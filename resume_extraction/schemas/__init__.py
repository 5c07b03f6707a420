from .extraction import (
    EDUCATION_LEVELS,
    DEFAULT_EDUCATION_LEVEL,
    DEFAULT_FIELD_OF_STUDY,
    DEFAULT_COUNTRY,
    ExtractionSource,
    ExperienceEntry,
    EducationEntry,
    ExtractionResult,
    safe_default_result,
)

__all__ = [
    "EDUCATION_LEVELS",
    "DEFAULT_EDUCATION_LEVEL",
    "DEFAULT_FIELD_OF_STUDY",
    "DEFAULT_COUNTRY",
    "ExtractionSource",
    "ExperienceEntry",
    "EducationEntry",
    "ExtractionResult",
    "safe_default_result",
]
