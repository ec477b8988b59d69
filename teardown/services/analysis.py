"""Analysis run: resolve provider settings, call the model once, parse its answer once."""

import logging
import mimetypes
from pathlib import Path

from teardown.exceptions import AuthenticationError
from teardown.models.analysis import AnalyzeResponse
from teardown.models.provider import MediaPayload, ProviderType
from teardown.prompts import SYSTEM_PROMPT
from teardown.services import parser, providers
from teardown.settings_store import is_default_endpoint, resolve_provider_config

logger = logging.getLogger(__name__)

DEFAULT_MIME_TYPE = "video/mp4"


def analyze_media(
    media_bytes: bytes,
    mime_type: str | None = None,
    provider: ProviderType | None = None,
    model: str | None = None,
    instruction: str = SYSTEM_PROMPT,
) -> AnalyzeResponse:
    """Send a video to the configured provider and return the parsed teardown."""
    config = resolve_provider_config(provider, model)
    if not config.api_key and is_default_endpoint(config):
        raise AuthenticationError(
            f"No API key configured for {config.provider.value}. "
            "Save one via PUT /api/settings or set it in .env"
        )
    media = MediaPayload(data=media_bytes, mime_type=mime_type or DEFAULT_MIME_TYPE)
    raw = providers.invoke(config, instruction, media)
    result = parser.parse(raw)
    logger.info(
        "Parsed %d chars from %s: metadata=%s summary=%s",
        len(raw), config.provider.value, result.metadata is not None, result.summary is not None,
    )
    return AnalyzeResponse(provider=config.provider, model=config.model, result=result)


def analyze_file(
    path: str | Path,
    provider: ProviderType | None = None,
    model: str | None = None,
) -> AnalyzeResponse:
    """Read a local video file and analyze it."""
    path = Path(path).expanduser()
    if not path.is_file():
        raise FileNotFoundError(f"Video file not found: {path}")
    mime_type = mimetypes.guess_type(path.name)[0] or DEFAULT_MIME_TYPE
    return analyze_media(path.read_bytes(), mime_type, provider, model)
