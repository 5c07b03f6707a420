"""Tests for ExtractionResult validation and serialization."""

import pytest
from pydantic import ValidationError

from resume_extraction.schemas.extraction import (
    EducationEntry,
    ExtractionResult,
    ExtractionSource,
    safe_default_result,
)


class TestExtractionResultInvariants:

    def test_defaults(self):
        result = ExtractionResult()
        assert result.education_level == "Bachelor's"
        assert result.field_of_study == ["General"]
        assert result.country == "International"

    def test_field_of_study_truncated_to_two(self):
        result = ExtractionResult(field_of_study=["Biology", "Chemistry", "Physics"])
        assert result.field_of_study == ["Biology", "Chemistry"]

    def test_blank_field_of_study_defaults(self):
        assert ExtractionResult(field_of_study=["", "  "]).field_of_study == ["General"]

    def test_scalar_field_of_study(self):
        assert ExtractionResult(field_of_study="Law").field_of_study == ["Law"]

    def test_empty_country_defaults(self):
        assert ExtractionResult(country="").country == "International"

    @pytest.mark.parametrize("raw,expected", [(150, 100), (-5, 0), (72.6, 73), ("85", 85), ("90%", 90)])
    def test_confidence_clamped(self, raw, expected):
        assert ExtractionResult(confidence=raw).confidence == expected

    def test_non_numeric_confidence_rejected(self):
        with pytest.raises(ValidationError):
            ExtractionResult(confidence="high")

    def test_unknown_education_level_rejected(self):
        with pytest.raises(ValidationError):
            ExtractionResult(education_level="Kindergarten")

    def test_frozen(self):
        result = ExtractionResult()
        with pytest.raises(ValidationError):
            result.country = "USA"


class TestSerialization:

    def test_camel_case_keys(self):
        data = ExtractionResult(
            education=[EducationEntry(institution="MIT", graduation_year=2020, gpa=3.9)],
        ).to_response()
        assert set(data) == {
            "educationLevel", "fieldOfStudy", "country", "skills", "experience",
            "education", "confidence", "textPreview", "source",
        }
        assert data["education"][0]["graduationYear"] == 2020
        assert data["education"][0]["gpa"] == "3.9"

    def test_fallback_marker_only_on_safe_default(self):
        data = safe_default_result().to_response()
        assert data["_fallback"] is True
        assert data["confidence"] == 30
        assert data["source"] == ExtractionSource.FALLBACK.value
        assert data["textPreview"] == ""
        assert data["skills"] == [] and data["experience"] == []
