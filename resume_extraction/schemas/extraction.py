"""
Extraction result schemas shared by every extraction path
"""
import math
from enum import Enum
from typing import Any, Dict, List, Literal, Optional, Union
from pydantic import BaseModel, Field, field_validator


EDUCATION_LEVELS = ("High School", "Bachelor's", "Master's", "PhD")
DEFAULT_EDUCATION_LEVEL = "Bachelor's"
DEFAULT_FIELD_OF_STUDY = "General"
DEFAULT_COUNTRY = "International"
MAX_FIELDS_OF_STUDY = 2

EducationLevel = Literal["High School", "Bachelor's", "Master's", "PhD"]


class ExtractionSource(str, Enum):
    """Which path produced an ExtractionResult."""
    GEMINI = "gemini"
    OPENAI = "openai"
    REGEX = "regex"
    MANUAL = "manual"
    FALLBACK = "fallback"


def _coerce_text(value: Any) -> Optional[str]:
    # Models happily return 3.8 for a GPA or 2021 for a year
    if value is None:
        return None
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    return value


# ============================================================================
# Entry Schemas
# ============================================================================

class ExperienceEntry(BaseModel):
    company: Optional[str] = None
    position: Optional[str] = None
    duration: Optional[str] = None
    description: Optional[str] = None

    class Config:
        frozen = True

    @field_validator("company", "position", "duration", "description", mode="before")
    @classmethod
    def coerce_text_fields(cls, value):
        return _coerce_text(value)


class EducationEntry(BaseModel):
    institution: Optional[str] = None
    degree: Optional[str] = None
    field: Optional[str] = None
    graduation_year: Optional[Union[int, str]] = Field(default=None, alias="graduationYear")
    gpa: Optional[str] = None

    class Config:
        frozen = True
        populate_by_name = True

    @field_validator("institution", "degree", "field", "gpa", mode="before")
    @classmethod
    def coerce_text_fields(cls, value):
        return _coerce_text(value)


# ============================================================================
# Extraction Result
# ============================================================================

class ExtractionResult(BaseModel):
    """Structured candidate profile produced from resume text"""
    education_level: EducationLevel = Field(default=DEFAULT_EDUCATION_LEVEL, alias="educationLevel")
    field_of_study: List[str] = Field(default_factory=lambda: [DEFAULT_FIELD_OF_STUDY], alias="fieldOfStudy")
    country: str = DEFAULT_COUNTRY
    skills: List[str] = Field(default_factory=list)
    experience: List[ExperienceEntry] = Field(default_factory=list)
    education: List[EducationEntry] = Field(default_factory=list)
    confidence: int = 0
    text_preview: str = Field(default="", alias="textPreview")
    fallback: bool = Field(default=False, alias="_fallback")
    source: ExtractionSource = ExtractionSource.REGEX

    class Config:
        frozen = True
        populate_by_name = True

    @field_validator("field_of_study", mode="before")
    @classmethod
    def bound_fields_of_study(cls, value):
        if value is None:
            value = []
        elif not isinstance(value, (list, tuple)):
            value = [value]
        fields = [str(item).strip() for item in value if item is not None and str(item).strip()]
        return fields[:MAX_FIELDS_OF_STUDY] or [DEFAULT_FIELD_OF_STUDY]

    @field_validator("country", mode="before")
    @classmethod
    def default_country(cls, value):
        if value is None or not str(value).strip():
            return DEFAULT_COUNTRY
        return value

    @field_validator("confidence", mode="before")
    @classmethod
    def clamp_confidence(cls, value):
        if isinstance(value, str):
            value = float(value.strip().rstrip("%"))
        if isinstance(value, bool) or not isinstance(value, (int, float)) or not math.isfinite(value):
            raise ValueError(f"confidence must be a number, got {value!r}")
        return max(0, min(100, round(value)))

    def to_response(self) -> Dict[str, Any]:
        """Serialize with the public camelCase field names."""
        data = self.model_dump(by_alias=True, mode="json")
        if not self.fallback:
            data.pop("_fallback", None)
        return data


def safe_default_result() -> ExtractionResult:
    """Placeholder profile returned when extraction fails for an unclassified reason."""
    return ExtractionResult(
        education_level=DEFAULT_EDUCATION_LEVEL,
        field_of_study=[DEFAULT_FIELD_OF_STUDY],
        country=DEFAULT_COUNTRY,
        skills=[],
        experience=[],
        confidence=30,
        text_preview="",
        fallback=True,
        source=ExtractionSource.FALLBACK,
    )
