"""Provider adapter: one HTTP call to an OpenAI- or Gemini-compatible endpoint, one text blob back.

Each provider is an entry in ``PROVIDERS`` pairing a request builder with an
envelope reader. ``invoke`` is the only entry point the rest of the code uses.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Callable

import requests

from teardown.config import get_settings
from teardown.exceptions import EnvelopeError, TransportError
from teardown.http_client import get_session
from teardown.models.provider import MediaPayload, ProviderConfig, ProviderType
from teardown.prompts import USER_PROMPT

logger = logging.getLogger(__name__)

TEMPERATURE = 0.7
MAX_OUTPUT_TOKENS = 2000


@dataclass(frozen=True)
class ProviderRequest:
    url: str
    json: dict
    headers: dict = field(default_factory=dict)
    params: dict = field(default_factory=dict)


@dataclass(frozen=True)
class ProviderSpec:
    build_request: Callable[[ProviderConfig, str, MediaPayload], ProviderRequest]
    extract_text: Callable[[Any], str]


def _base(config: ProviderConfig) -> str:
    return config.base_url.rstrip("/")


# --- OpenAI chat completions ---

def build_openai_request(config: ProviderConfig, instruction: str, media: MediaPayload) -> ProviderRequest:
    return ProviderRequest(
        url=f"{_base(config)}/chat/completions",
        headers={"Authorization": f"Bearer {config.api_key}"},
        json={
            "model": config.model,
            "messages": [
                {"role": "system", "content": instruction},
                {
                    "role": "user",
                    "content": [
                        {"type": "text", "text": USER_PROMPT},
                        {"type": "image_url", "image_url": {"url": media.data_uri()}},
                    ],
                },
            ],
            "temperature": TEMPERATURE,
            "max_tokens": MAX_OUTPUT_TOKENS,
            "stream": False,
        },
    )


def extract_openai_text(data: Any) -> str:
    try:
        content = data["choices"][0]["message"]["content"]
    except (KeyError, IndexError, TypeError):
        raise EnvelopeError("API response format error: no choices[0].message.content")
    if not isinstance(content, str):
        raise EnvelopeError("API response format error: message content is not text")
    return content


# --- Gemini generateContent ---

def build_gemini_request(config: ProviderConfig, instruction: str, media: MediaPayload) -> ProviderRequest:
    return ProviderRequest(
        url=f"{_base(config)}/v1beta/models/{config.model}:generateContent",
        params={"key": config.api_key},
        json={
            "contents": [{
                "parts": [
                    {"text": instruction},
                    {"inlineData": {"mimeType": media.mime_type, "data": media.as_base64()}},
                ],
            }],
            "generationConfig": {
                "temperature": TEMPERATURE,
                "maxOutputTokens": MAX_OUTPUT_TOKENS,
            },
        },
    )


def extract_gemini_text(data: Any) -> str:
    try:
        text = data["candidates"][0]["content"]["parts"][0]["text"]
    except (KeyError, IndexError, TypeError):
        raise EnvelopeError("API response format error: no candidates[0].content.parts[0].text")
    if not isinstance(text, str):
        raise EnvelopeError("API response format error: candidate part is not text")
    return text


PROVIDERS: dict[ProviderType, ProviderSpec] = {
    ProviderType.OPENAI: ProviderSpec(build_openai_request, extract_openai_text),
    ProviderType.GEMINI: ProviderSpec(build_gemini_request, extract_gemini_text),
}


def _send(req: ProviderRequest) -> requests.Response:
    try:
        return get_session().post(
            req.url,
            headers=req.headers,
            params=req.params or None,
            json=req.json,
            timeout=get_settings().request_timeout,
        )
    except requests.RequestException as e:
        raise TransportError(f"Request to provider failed: {e}") from e


def invoke(config: ProviderConfig, instruction: str, media: MediaPayload) -> str:
    """Send the instruction and media to the configured provider, return the model's raw text."""
    spec = PROVIDERS[config.provider]
    req = spec.build_request(config, instruction, media)
    logger.info(
        "Calling %s model %s (%d bytes of %s)",
        config.provider.value, config.model, len(media.data), media.mime_type,
    )
    resp = _send(req)
    if not 200 <= resp.status_code < 300:
        raise TransportError(f"HTTP {resp.status_code}: {resp.text[:200]}", status_code=resp.status_code)
    try:
        data = resp.json()
    except ValueError:
        raise EnvelopeError("API response format error: body is not JSON")
    return spec.extract_text(data)
