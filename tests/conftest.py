import pytest
from unittest.mock import MagicMock

from fastapi.testclient import TestClient

from teardown.config import get_settings


# --- Canned model output and API responses ---

MODEL_OUTPUT = (
    '<!-- META: {"topic": "How ordinary people earn with short videos", '
    '"audience": ["Founders: first business", "Parents: side income"], '
    '"viral_tags": ["side hustle", "mindset"], '
    '"tags": ["business", "awakening", "money", "home services"]} -->\n'
    "<!-- SUMMARY: Contrast plus a concrete scene drives the hook -->\n"
    '<div class="space-y-6"><p>report</p></div>'
)

OPENAI_API_RESPONSE = {
    "id": "chatcmpl-123",
    "object": "chat.completion",
    "choices": [
        {
            "index": 0,
            "message": {"role": "assistant", "content": MODEL_OUTPUT},
            "finish_reason": "stop",
        }
    ],
}

GEMINI_API_RESPONSE = {
    "candidates": [
        {
            "content": {"role": "model", "parts": [{"text": MODEL_OUTPUT}]},
            "finishReason": "STOP",
        }
    ],
}


def make_response(status_code: int = 200, json_data=None, text: str = "") -> MagicMock:
    resp = MagicMock()
    resp.status_code = status_code
    resp.text = text
    if json_data is None:
        resp.json.side_effect = ValueError("No JSON object could be decoded")
    else:
        resp.json.return_value = json_data
    return resp


@pytest.fixture
def temp_settings(tmp_path, monkeypatch):
    """Point settings at a temp store file with no API keys from the environment."""
    monkeypatch.setenv("SETTINGS_FILE", str(tmp_path / "provider_settings.json"))
    monkeypatch.setenv("OPENAI_API_KEY", "")
    monkeypatch.setenv("GEMINI_API_KEY", "")
    get_settings.cache_clear()
    yield get_settings()
    get_settings.cache_clear()


@pytest.fixture
def mock_session(mocker):
    """Shared HTTP session used by the provider adapter."""
    session = MagicMock()
    mocker.patch("teardown.services.providers.get_session", return_value=session)
    return session


@pytest.fixture
def api_client():
    """FastAPI TestClient for router tests."""
    from teardown.main import api
    return TestClient(api)
