"""Tests for the Gemini wrapper: fence stripping, validation and bounded retry."""

import json

import pytest
from pydantic import ValidationError

from config import settings
from models.schemas.jd_extracted import ExtractedJD
from models.schemas.llm_analysis import LLMAnalysis
from services import gemini_client
from services.gemini_client import generate_validated, get_client, strip_code_fences
from services.pipeline.errors import AnalysisError, LLMUnavailableError, PipelineError

VALID_ANALYSIS = {
    "category_scores": {
        "hard_match": 0.8,
        "evidence_depth": 0.6,
        "round_readiness": 0.7,
        "clarity": 0.3,
        "company_proxy": 0.5,
    },
    "ranked_risks": [{"id": "r1", "title": "Go gap", "severity": "high"}],
}


def _scripted(responses):
    """Async stand-in for generate_json that replays ``responses`` in order."""
    calls = []

    async def fake(prompt, model=None, temperature=None):
        calls.append(prompt)
        item = responses[len(calls) - 1]
        if isinstance(item, Exception):
            raise item
        return item

    return fake, calls


class TestStripCodeFences:
    def test_json_fence(self):
        assert strip_code_fences('```json\n{"a": 1}\n```') == '{"a": 1}'

    def test_bare_fence(self):
        assert strip_code_fences('```\n{"a": 1}```') == '{"a": 1}'

    def test_no_fence(self):
        assert strip_code_fences('  {"a": 1}  ') == '{"a": 1}'


class TestGenerateValidated:
    @pytest.mark.asyncio
    async def test_first_attempt_valid(self, monkeypatch):
        fake, calls = _scripted([VALID_ANALYSIS])
        monkeypatch.setattr(gemini_client, "generate_json", fake)

        result = await generate_validated("prompt", LLMAnalysis, error_cls=AnalysisError)
        assert isinstance(result, LLMAnalysis)
        assert result.ranked_risks[0].title == "Go gap"
        assert len(calls) == 1

    @pytest.mark.asyncio
    async def test_retries_schema_violation(self, monkeypatch):
        bad = {"category_scores": {"hard_match": 3}}
        fake, calls = _scripted([bad, VALID_ANALYSIS])
        monkeypatch.setattr(gemini_client, "generate_json", fake)

        result = await generate_validated("prompt", LLMAnalysis, error_cls=AnalysisError)
        assert result.category_scores.hard_match == 0.8
        assert len(calls) == 2

    @pytest.mark.asyncio
    async def test_retries_malformed_json(self, monkeypatch):
        fake, calls = _scripted([json.JSONDecodeError("Expecting value", "oops", 0), VALID_ANALYSIS])
        monkeypatch.setattr(gemini_client, "generate_json", fake)

        await generate_validated("prompt", LLMAnalysis, error_cls=AnalysisError)
        assert len(calls) == 2

    @pytest.mark.asyncio
    async def test_raises_typed_error_after_bound(self, monkeypatch):
        bad = {"category_scores": None}
        fake, calls = _scripted([bad, bad, bad, VALID_ANALYSIS])
        monkeypatch.setattr(gemini_client, "generate_json", fake)

        with pytest.raises(AnalysisError) as exc_info:
            await generate_validated("prompt", LLMAnalysis, error_cls=AnalysisError, max_retries=2)

        assert len(calls) == 3
        assert isinstance(exc_info.value.__cause__, ValidationError)
        assert isinstance(exc_info.value, PipelineError)

    @pytest.mark.asyncio
    async def test_default_bound_from_settings(self, monkeypatch):
        monkeypatch.setattr(settings, "llm_max_retries", 0)
        fake, calls = _scripted([{"must_have": "not a list"}, {}])
        monkeypatch.setattr(gemini_client, "generate_json", fake)

        with pytest.raises(PipelineError):
            await generate_validated("prompt", ExtractedJD)
        assert len(calls) == 1

    @pytest.mark.asyncio
    async def test_transport_errors_propagate(self, monkeypatch):
        fake, calls = _scripted([RuntimeError("503 from upstream"), VALID_ANALYSIS])
        monkeypatch.setattr(gemini_client, "generate_json", fake)

        with pytest.raises(RuntimeError):
            await generate_validated("prompt", LLMAnalysis, error_cls=AnalysisError)
        assert len(calls) == 1


class TestClient:
    def test_missing_key_is_fatal(self, monkeypatch):
        monkeypatch.setattr(settings, "gemini_api_key", "")
        with pytest.raises(LLMUnavailableError):
            get_client()
