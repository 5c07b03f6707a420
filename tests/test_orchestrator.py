"""Tests for the provider cascade and its construction from settings."""

from unittest.mock import AsyncMock, MagicMock

import pytest

from resume_extraction.exceptions import MalformedProviderResponse, ProviderCallFailure
from resume_extraction.schemas.extraction import ExtractionResult, ExtractionSource
from resume_extraction.services.clients import ProviderClients
from resume_extraction.services.orchestrator import (
    ProviderOrchestrator,
    build_adapters,
    build_orchestrator,
)
from resume_extraction.services.providers import GeminiAdapter, OpenAIAdapter
from resume_extraction.services.regex_extractor import RegexExtractionEngine


def fake_adapter(name, result=None, error=None):
    adapter = MagicMock()
    adapter.name = name
    adapter.extract = AsyncMock(return_value=result, side_effect=error)
    return adapter


def model_result(source):
    return ExtractionResult(education_level="PhD", country="USA", confidence=95, source=source)


class TestProviderOrchestrator:

    @pytest.mark.asyncio
    async def test_first_success_wins(self, sample_resume):
        gemini = fake_adapter("gemini", result=model_result(ExtractionSource.GEMINI))
        openai = fake_adapter("openai", result=model_result(ExtractionSource.OPENAI))
        orchestrator = ProviderOrchestrator([gemini, openai])

        result = await orchestrator.extract(sample_resume)

        assert result.source == ExtractionSource.GEMINI
        openai.extract.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_failed_provider_falls_through_to_next(self, sample_resume):
        gemini = fake_adapter("gemini", error=ProviderCallFailure("quota exceeded"))
        openai = fake_adapter("openai", result=model_result(ExtractionSource.OPENAI))
        orchestrator = ProviderOrchestrator([gemini, openai])

        result = await orchestrator.extract(sample_resume)

        assert result.source == ExtractionSource.OPENAI
        gemini.extract.assert_awaited_once_with(sample_resume)

    @pytest.mark.asyncio
    async def test_all_providers_fail_uses_regex_engine(self, sample_resume):
        orchestrator = ProviderOrchestrator([
            fake_adapter("gemini", error=ProviderCallFailure("network down")),
            fake_adapter("openai", error=MalformedProviderResponse("bad json")),
        ])

        result = await orchestrator.extract(sample_resume)

        assert result == RegexExtractionEngine().extract(sample_resume)
        assert result.fallback is False

    @pytest.mark.asyncio
    async def test_no_providers_uses_regex_engine(self, sample_resume):
        engine = MagicMock(wraps=RegexExtractionEngine())
        orchestrator = ProviderOrchestrator([], engine=engine)

        result = await orchestrator.extract(sample_resume)

        assert result.source == ExtractionSource.REGEX
        engine.extract.assert_called_once_with(sample_resume)

    @pytest.mark.asyncio
    async def test_unexpected_errors_are_not_swallowed(self, sample_resume):
        orchestrator = ProviderOrchestrator([fake_adapter("gemini", error=KeyError("bug"))])
        with pytest.raises(KeyError):
            await orchestrator.extract(sample_resume)


class TestBuildAdapters:

    def test_default_order_gemini_first(self, settings):
        adapters = build_adapters(settings, ProviderClients(gemini=MagicMock(), openai=MagicMock()))
        assert [type(adapter) for adapter in adapters] == [GeminiAdapter, OpenAIAdapter]
        assert adapters[0].models == ["gemini-2.0-flash", "gemini-1.5-flash", "gemini-flash-latest", "gemini-pro"]
        assert adapters[1].models == ["gpt-4o-mini", "gpt-3.5-turbo"]

    def test_prefer_openai(self, settings):
        settings = settings.model_copy(update={"prefer_openai": True})
        adapters = build_adapters(settings, ProviderClients(gemini=MagicMock(), openai=MagicMock()))
        assert [adapter.name for adapter in adapters] == ["openai", "gemini"]

    def test_provider_without_client_is_absent(self, settings):
        adapters = build_adapters(settings, ProviderClients(gemini=None, openai=MagicMock()))
        assert [adapter.name for adapter in adapters] == ["openai"]

    def test_settings_flow_into_adapters(self, settings):
        settings = settings.model_copy(update={"llm_temperature": 0.3, "prompt_max_chars": 500})
        adapter = build_adapters(settings, ProviderClients(gemini=MagicMock()))[0]
        assert adapter.temperature == 0.3
        assert adapter.prompt_max_chars == 500

    def test_build_orchestrator_without_credentials(self, settings):
        orchestrator = build_orchestrator(settings, ProviderClients())
        assert orchestrator.adapters == []
        assert isinstance(orchestrator.engine, RegexExtractionEngine)
