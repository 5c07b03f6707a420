"""
Language-model provider adapters for resume extraction.

Each adapter owns an ordered list of model variants and returns the first
structurally valid answer. Anything that goes wrong inside an adapter is
raised as a ProviderError so the orchestrator can move on.
"""
import json
import logging
from typing import Any, List, Optional

from google.genai import types as genai_types
from pydantic import ValidationError

from ..exceptions import MalformedProviderResponse, ProviderCallFailure, ProviderError
from ..schemas.extraction import ExtractionResult, ExtractionSource
from .regex_extractor import canonical_country, canonical_education_level

logger = logging.getLogger(__name__)

DEFAULT_CONFIDENCE = 70


# ============================================================================
# Resume Extraction Prompt
# ============================================================================

RESUME_EXTRACTION_PROMPT = """
You are an expert resume parser. Extract the following information from the resume text below:

1. Education history - one entry per degree or qualification with:
   - institution: university, college or school name
   - degree: e.g. Bachelor's, Master's, PhD, High School Diploma
   - field: major or discipline
   - graduationYear: YYYY. If still studying, use the expected year.
   - gpa: as written (e.g. 3.5/4.0, 8.5/10), or null if absent
2. educationLevel: the highest level reached - one of High School, Bachelor's, Master's, PhD
3. fieldOfStudy: the top 1-2 academic disciplines (e.g. Computer Science, Biology)
4. country: country of citizenship or residency, full English name. Infer it from the
   address or university location if it is not stated.
5. skills: technical and soft skills found in the text
6. experience: work history entries with company, position, duration and a short description

Return ONLY a valid JSON object with exactly these keys:
"education" (array of objects with keys institution, degree, field, graduationYear, gpa),
"educationLevel" (string),
"fieldOfStudy" (array of strings),
"country" (string),
"skills" (array of strings),
"experience" (array of objects with keys company, position, duration, description),
"confidence" (integer 0-100 reflecting how clearly the resume states this information).

Do not wrap the JSON in markdown code fences (no ```json). Output the raw JSON object only.

Resume Text:
"""


def build_extraction_prompt(text: str, max_chars: int = 10000) -> str:
    return RESUME_EXTRACTION_PROMPT + (text or "")[:max_chars]


# ============================================================================
# Response Parsing & Normalization
# ============================================================================

def strip_code_fences(response_text: str) -> str:
    """Remove a markdown code fence the model added despite being told not to."""
    response_text = (response_text or "").strip()
    if response_text.startswith("```json"):
        response_text = response_text[7:]
    elif response_text.startswith("```"):
        response_text = response_text[3:]
    if response_text.endswith("```"):
        response_text = response_text[:-3]
    return response_text.strip()


def _as_list(value: Any) -> list:
    """Arrays sometimes come back as a bare string (or not at all)."""
    if value is None:
        return []
    if isinstance(value, list):
        return value
    if isinstance(value, str):
        return [value] if value.strip() else []
    return [value]


def _first_of(entry: dict, *keys, default=None):
    for key in keys:
        value = entry.get(key)
        if value is not None and value != "":
            return value
    return default


def normalize_experience_entries(entries: list) -> List[dict]:
    experience = []
    for entry in entries:
        if isinstance(entry, str):
            entry = {"description": entry}
        if not isinstance(entry, dict):
            continue
        experience.append({
            "company": _first_of(entry, "company", "employer", "organization"),
            "position": _first_of(entry, "position", "title", "role"),
            "duration": _first_of(entry, "duration", "dates", "period"),
            "description": _first_of(entry, "description", "summary"),
        })
    return experience


def normalize_education_entries(entries: list) -> List[dict]:
    education = []
    for entry in entries:
        if isinstance(entry, str):
            entry = {"degree": entry}
        if not isinstance(entry, dict):
            continue
        education.append({
            "institution": _first_of(entry, "institution", "school", "university"),
            "degree": _first_of(entry, "degree"),
            "field": _first_of(entry, "field", "fieldOfStudy", "field_of_study", "major"),
            "graduationYear": _first_of(entry, "graduationYear", "graduation_year", "year"),
            "gpa": _first_of(entry, "gpa"),
        })
    return education


def _normalize_skills(entries: list) -> List[str]:
    skills = []
    for skill in entries:
        if isinstance(skill, dict):
            skill = skill.get("name")
        if isinstance(skill, str) and skill.strip():
            skills.append(skill.strip())
    return skills


def normalize_model_output(data: dict) -> dict:
    """
    Coerce a model's JSON answer into ExtractionResult keyword arguments.

    Scalars in array fields become one-element lists, missing values get the
    documented defaults, and education level / country are mapped onto the
    fixed label sets.
    """
    confidence = data.get("confidence")
    return {
        "education": normalize_education_entries(_as_list(data.get("education"))),
        "education_level": canonical_education_level(data.get("educationLevel")),
        "field_of_study": _as_list(data.get("fieldOfStudy")),
        "country": canonical_country(data.get("country")),
        "skills": _normalize_skills(_as_list(data.get("skills"))),
        "experience": normalize_experience_entries(_as_list(data.get("experience"))),
        "confidence": DEFAULT_CONFIDENCE if confidence is None else confidence,
    }


def parse_model_response(
    response_text: Optional[str],
    source: ExtractionSource,
    model: str = None,
) -> ExtractionResult:
    """Strictly parse a model answer, raising MalformedProviderResponse on any shape problem."""
    provider = source.value
    if not response_text or not response_text.strip():
        raise MalformedProviderResponse(f"Empty response from {provider}", provider=provider, model=model)

    cleaned = strip_code_fences(response_text)
    try:
        parsed = json.loads(cleaned)
    except json.JSONDecodeError as e:
        logger.debug(f"Raw {provider} response: {cleaned[:500]}...")
        raise MalformedProviderResponse(
            f"Invalid JSON response from {provider}: {e}", provider=provider, model=model
        ) from e

    if not isinstance(parsed, dict):
        raise MalformedProviderResponse(
            f"Expected a JSON object from {provider}, got {type(parsed).__name__}",
            provider=provider, model=model,
        )

    try:
        return ExtractionResult(**normalize_model_output(parsed), source=source)
    except (ValidationError, ValueError, TypeError) as e:
        raise MalformedProviderResponse(
            f"Response from {provider} does not match the profile schema: {e}",
            provider=provider, model=model,
        ) from e


# ============================================================================
# Adapters
# ============================================================================

class ProviderAdapter:
    """
    Base class for a provider. Subclasses implement `_complete`, a single
    model call returning the raw response text.
    """

    source: ExtractionSource = None

    def __init__(self, client, models: List[str], temperature: float = 0.1, prompt_max_chars: int = 10000):
        self.client = client
        self.models = list(models)
        self.temperature = temperature
        self.prompt_max_chars = prompt_max_chars

    @property
    def name(self) -> str:
        return self.source.value

    async def _complete(self, model: str, prompt: str) -> Optional[str]:
        raise NotImplementedError

    async def _attempt(self, model: str, prompt: str) -> ExtractionResult:
        try:
            response_text = await self._complete(model, prompt)
        except Exception as e:
            raise ProviderCallFailure(
                f"{self.name} model {model} failed: {e}", provider=self.name, model=model
            ) from e
        return parse_model_response(response_text, self.source, model=model)

    async def extract(self, text: str) -> ExtractionResult:
        """Try each model variant in order and return the first valid result."""
        if not self.models:
            raise ProviderCallFailure(f"No {self.name} models configured", provider=self.name)

        prompt = build_extraction_prompt(text, self.prompt_max_chars)
        last_error: Optional[ProviderError] = None

        for model in self.models:
            logger.info(f"Attempting resume parsing with {self.name} model: {model}")
            try:
                return await self._attempt(model, prompt)
            except ProviderError as e:
                logger.warning(f"{self.name} model {model} failed: {e}")
                last_error = e

        logger.error(f"All {self.name} models failed. Last error: {last_error}")
        raise last_error

    def __repr__(self):
        return f"{type(self).__name__}(models={self.models!r})"


class GeminiAdapter(ProviderAdapter):
    source = ExtractionSource.GEMINI

    async def _complete(self, model: str, prompt: str) -> Optional[str]:
        response = await self.client.aio.models.generate_content(
            model=model,
            contents=prompt,
            config=genai_types.GenerateContentConfig(
                temperature=self.temperature,
                response_mime_type="application/json",
            ),
        )
        return response.text


class OpenAIAdapter(ProviderAdapter):
    source = ExtractionSource.OPENAI

    async def _complete(self, model: str, prompt: str) -> Optional[str]:
        completion = await self.client.chat.completions.create(
            model=model,
            messages=[{"role": "user", "content": prompt}],
            response_format={"type": "json_object"},
            temperature=self.temperature,
        )
        return completion.choices[0].message.content
