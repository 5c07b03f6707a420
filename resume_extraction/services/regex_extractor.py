"""
Deterministic resume extractor built on keyword dictionaries and regexes.

Used whenever no language-model provider produced a result. It never calls
out to anything, so it is also the reference behaviour in tests.
"""
import re
import logging
from typing import List

from ..schemas.extraction import (
    DEFAULT_COUNTRY,
    DEFAULT_EDUCATION_LEVEL,
    DEFAULT_FIELD_OF_STUDY,
    EDUCATION_LEVELS,
    MAX_FIELDS_OF_STUDY,
    ExperienceEntry,
    ExtractionResult,
    ExtractionSource,
)
from .keywords import (
    COUNTRY_KEYWORDS,
    DATE_RANGE_PATTERN,
    EDUCATION_LEVEL_PATTERNS,
    FIELD_OF_STUDY_KEYWORDS,
    SKILL_VOCABULARY,
)
from .text_normalizer import to_matchable

logger = logging.getLogger(__name__)

MAX_EXPERIENCE_ENTRIES = 3
MAX_COMPANY_LENGTH = 50
UNKNOWN_COMPANY = "Unknown Company"
UNKNOWN_POSITION = "Unknown Position"
EXPERIENCE_DESCRIPTION = "Extracted from resume"

# Spellings models use that are not in the keyword lists
_COUNTRY_ALIASES = {
    "us": "USA",
    "u.s.": "USA",
    "america": "USA",
    "united states of america": "USA",
    "britain": "UK",
    "great britain": "UK",
    "u.k.": "UK",
    "holland": "Netherlands",
    "deutschland": "Germany",
}


# ============================================================================
# Sub-extractors (all take the lowercase matchable view)
# ============================================================================

def detect_education_level(matchable: str) -> str:
    for level, pattern in EDUCATION_LEVEL_PATTERNS:
        if pattern.search(matchable):
            return level
    return DEFAULT_EDUCATION_LEVEL


def detect_fields_of_study(matchable: str) -> List[str]:
    """Every category with a keyword hit, in declaration order, capped at two."""
    fields = [
        field for field, keywords in FIELD_OF_STUDY_KEYWORDS
        if any(keyword in matchable for keyword in keywords)
    ]
    return fields[:MAX_FIELDS_OF_STUDY]


def detect_country(matchable: str) -> str:
    for country, keywords in COUNTRY_KEYWORDS:
        if any(keyword in matchable for keyword in keywords):
            return country
    return DEFAULT_COUNTRY


def detect_skills(matchable: str) -> List[str]:
    return [skill[0].upper() + skill[1:] for skill in SKILL_VOCABULARY if skill in matchable]


def extract_experience(text: str) -> List[ExperienceEntry]:
    """
    Mine work history from lines carrying a year range.

    The company is guessed from the rest of the line, or the line above it.
    Job titles are not guessed at all.
    """
    experience = []
    lines = text.split("\n")

    for i, line in enumerate(lines):
        match = DATE_RANGE_PATTERN.search(line)
        if not match:
            continue

        company = UNKNOWN_COMPANY
        clean_line = DATE_RANGE_PATTERN.sub("", line).strip()
        if len(clean_line) > 3:
            company = clean_line
        elif i > 0 and len(lines[i - 1].strip()) > 3:
            company = lines[i - 1].strip()

        experience.append(ExperienceEntry(
            company=company[:MAX_COMPANY_LENGTH],
            position=UNKNOWN_POSITION,
            duration=match.group(0),
            description=EXPERIENCE_DESCRIPTION,
        ))

        if len(experience) >= MAX_EXPERIENCE_ENTRIES:
            break

    return experience


def score_confidence(education_level: str, fields: List[str], country: str, skills: List[str]) -> int:
    confidence = 50
    if education_level != DEFAULT_EDUCATION_LEVEL:
        confidence += 10
    if fields:
        confidence += 20
    if country != DEFAULT_COUNTRY:
        confidence += 10
    if skills:
        confidence += 10
    return confidence


# ============================================================================
# Canonicalization of free-form values (used on model output)
# ============================================================================

def canonical_education_level(value) -> str:
    """Map a free-form degree label ("Masters", "Post-Doc") onto the fixed set."""
    if not isinstance(value, str) or not value.strip():
        return DEFAULT_EDUCATION_LEVEL
    if value in EDUCATION_LEVELS:
        return value
    lowered = value.strip().lower()
    if re.search(r"post[\s-]?doc", lowered):
        return "PhD"
    return detect_education_level(lowered)


def canonical_country(value) -> str:
    """
    Map a free-form country ("United States", "Bengaluru, India") onto a
    known label. Keywords must match whole words here, so "Ukraine" does not
    become "UK".
    """
    if not isinstance(value, str) or not value.strip():
        return DEFAULT_COUNTRY
    lowered = value.strip().lower()
    if lowered in _COUNTRY_ALIASES:
        return _COUNTRY_ALIASES[lowered]

    for country, keywords in COUNTRY_KEYWORDS:
        if lowered == country.lower() or lowered in keywords:
            return country

    # Country names win over city and region keywords ("New South Wales, Australia")
    for country, keywords in COUNTRY_KEYWORDS:
        if any(_contains_word(lowered, name) for name in (country.lower(), keywords[0])):
            return country

    for country, keywords in COUNTRY_KEYWORDS:
        if any(_contains_word(lowered, keyword) for keyword in keywords[1:]):
            return country
    return DEFAULT_COUNTRY


def _contains_word(text: str, word: str) -> bool:
    return re.search(r"\b" + re.escape(word) + r"\b", text) is not None


# ============================================================================
# Engine
# ============================================================================

class RegexExtractionEngine:
    """Keyword/regex extractor producing a complete ExtractionResult."""

    source = ExtractionSource.REGEX

    def extract(self, text: str) -> ExtractionResult:
        matchable = to_matchable(text)

        education_level = detect_education_level(matchable)
        fields = detect_fields_of_study(matchable)
        country = detect_country(matchable)
        skills = detect_skills(matchable)
        experience = extract_experience(text or "")
        confidence = score_confidence(education_level, fields, country, skills)

        logger.debug(
            f"Regex extraction: level={education_level}, fields={fields}, country={country}, "
            f"skills={len(skills)}, experience={len(experience)}, confidence={confidence}"
        )

        return ExtractionResult(
            education_level=education_level,
            field_of_study=fields or [DEFAULT_FIELD_OF_STUDY],
            country=country,
            skills=skills,
            experience=experience,
            education=[],
            confidence=confidence,
            source=self.source,
        )
