"""
Profiles typed in by the candidate instead of parsed from a document.
"""
import re
from typing import Any, Dict

from ..exceptions import InvalidProfileData
from ..schemas.extraction import ExtractionResult, ExtractionSource
from .providers import normalize_education_entries, normalize_experience_entries
from .regex_extractor import canonical_country, canonical_education_level

_ANGLE_BRACKETS_RE = re.compile(r"[<>]")

REQUIRED_FIELDS = ("educationLevel", "fieldOfStudy", "country")
LIST_FIELDS = ("fieldOfStudy", "skills", "experience", "education")


def sanitize_string(value):
    if not isinstance(value, str):
        return value
    return _ANGLE_BRACKETS_RE.sub("", value)


def validate_manual_profile(data: Dict[str, Any]) -> None:
    """Raise InvalidProfileData unless the required fields are present and list fields are lists."""
    if not isinstance(data, dict):
        raise InvalidProfileData(f"Profile data must be an object, got {type(data).__name__}")

    missing = [key for key in REQUIRED_FIELDS if not data.get(key)]
    if missing:
        raise InvalidProfileData(f"Missing required fields: {', '.join(missing)}")

    for key in LIST_FIELDS:
        value = data.get(key)
        # A single field of study may be sent as a plain string
        if key == "fieldOfStudy" and isinstance(value, str):
            continue
        if value is not None and not isinstance(value, list):
            raise InvalidProfileData(f"{key} must be an array")


def _sanitize_entries(entries) -> list:
    return [
        {key: sanitize_string(value) for key, value in entry.items()}
        for entry in entries or []
        if isinstance(entry, dict)
    ]


def score_manual_profile(skills: list, experience: list, education: list) -> int:
    confidence = 60
    if skills:
        confidence += 10
    if experience:
        confidence += 15
    if len(education) > 1:
        confidence += 15
    return min(confidence, 100)


def build_manual_profile(data: Dict[str, Any]) -> ExtractionResult:
    """
    Build a profile from user-entered data (camelCase keys, as the client
    submits them). Strings are stripped of angle brackets before use.

    Raises:
        InvalidProfileData: a required field is missing or a list field is not a list
    """
    validate_manual_profile(data)

    skills = [sanitize_string(skill) for skill in data.get("skills") or [] if isinstance(skill, str)]
    experience = normalize_experience_entries(_sanitize_entries(data.get("experience")))
    education = normalize_education_entries(_sanitize_entries(data.get("education")))
    fields = data["fieldOfStudy"]
    if isinstance(fields, str):
        fields = [fields]

    return ExtractionResult(
        education_level=canonical_education_level(sanitize_string(data["educationLevel"])),
        field_of_study=[sanitize_string(field) for field in fields],
        country=canonical_country(sanitize_string(data["country"])),
        skills=skills,
        experience=experience,
        education=education,
        confidence=score_manual_profile(skills, experience, education),
        source=ExtractionSource.MANUAL,
    )
