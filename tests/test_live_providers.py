"""Live calls against the real providers. Need an API key and a short sample clip."""

import os

import pytest

from teardown.config import get_settings
from teardown.models.analysis import AnalyzeResponse
from teardown.models.provider import ProviderType
from teardown.services import analysis as analysis_service

SAMPLE_VIDEO = os.environ.get("TEARDOWN_SAMPLE_VIDEO", "")

requires_sample = pytest.mark.skipif(
    not os.path.isfile(SAMPLE_VIDEO),
    reason="No sample clip — set TEARDOWN_SAMPLE_VIDEO to a short video file",
)
requires_openai = pytest.mark.skipif(
    not get_settings().openai_api_key,
    reason="OpenAI API key not configured — set OPENAI_API_KEY in .env",
)
requires_gemini = pytest.mark.skipif(
    not get_settings().gemini_api_key,
    reason="Gemini API key not configured — set GEMINI_API_KEY in .env",
)


@requires_sample
@requires_gemini
class TestGeminiLive:
    def test_analyze_sample(self):
        result = analysis_service.analyze_file(SAMPLE_VIDEO, ProviderType.GEMINI)
        assert isinstance(result, AnalyzeResponse)
        assert result.provider == ProviderType.GEMINI
        assert result.result.body


@requires_sample
@requires_openai
class TestOpenAILive:
    def test_analyze_sample(self):
        result = analysis_service.analyze_file(SAMPLE_VIDEO, ProviderType.OPENAI)
        assert isinstance(result, AnalyzeResponse)
        assert result.result.body
