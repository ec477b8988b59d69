"""Recover metadata, summary and HTML body from free-text model output.

Models are told to emit ``<!-- META: {...} -->`` and ``<!-- SUMMARY: ... -->``
on the first two lines and raw HTML after that, but they drift: the JSON shows
up in markdown fences, the marker goes missing, or prose comes first. Metadata
is therefore recovered through a cascade of strategies, each aimed at a looser
form of the same output. Nothing in here raises; a strategy that fails just
yields ``None``.
"""

import json
import logging
import re
from typing import Callable

from teardown.models.analysis import AnalysisResult, ParsedMetadata

logger = logging.getLogger(__name__)

META_COMMENT_RE = re.compile(r"<!--\s*META:\s*([\s\S]*?)\s*-->")
SUMMARY_COMMENT_RE = re.compile(r"<!--\s*SUMMARY:\s*([\s\S]*?)\s*-->")
JSON_FENCE_RE = re.compile(r"```json\s*([\s\S]*?)\s*```")
MARKER_COMMENT_RE = re.compile(r"<!--\s*(?:META|SUMMARY):[\s\S]*?-->")
HTML_FENCE_OPEN = "```html"
FENCE = "```"

BRACE_SCAN_WINDOW = 2000
DEFAULT_REQUIRED_FIELDS = ("topic", "audience")

Predicate = Callable[[dict], bool]


def require_any_field(*names: str) -> Predicate:
    """Build a predicate accepting objects that contain at least one of ``names``."""
    def accept(obj: dict) -> bool:
        return any(name in obj for name in names)
    return accept


def _decode_object(text: str) -> dict | None:
    try:
        obj = json.loads(text)
    except (json.JSONDecodeError, RecursionError):
        return None
    return obj if isinstance(obj, dict) else None


def _as_text(value) -> str | None:
    return value if isinstance(value, str) else None


def _as_list(value) -> list[str] | None:
    # A bare string becomes a one-item list; non-string items are dropped
    if isinstance(value, str):
        return [value]
    if isinstance(value, list):
        return [item for item in value if isinstance(item, str)]
    return None


def _to_metadata(obj: dict | None) -> ParsedMetadata | None:
    """Keep any decoded object; fields of the wrong type are coerced or left out."""
    if obj is None:
        return None
    return ParsedMetadata(
        topic=_as_text(obj.get("topic")),
        audience=_as_list(obj.get("audience")),
        viral_tags=_as_list(obj.get("viral_tags")),
        tags=_as_list(obj.get("tags")),
    )


# --- Metadata strategies ---

def from_marker_comment(raw: str) -> ParsedMetadata | None:
    """Decode the payload of ``<!-- META: ... -->``, tolerating stray code fences."""
    match = META_COMMENT_RE.search(raw)
    if not match or not match.group(1):
        return None
    payload = match.group(1).strip()
    payload = re.sub(r"^```json", "", payload)
    payload = re.sub(r"^```", "", payload)
    payload = re.sub(r"```$", "", payload)
    return _to_metadata(_decode_object(payload))


def from_json_fence(raw: str) -> ParsedMetadata | None:
    """Decode the first ```json fenced block."""
    match = JSON_FENCE_RE.search(raw)
    if not match or not match.group(1):
        return None
    return _to_metadata(_decode_object(match.group(1)))


def scan_for_object(
    raw: str,
    accept: Predicate,
    window: int = BRACE_SCAN_WINDOW,
) -> dict | None:
    """Find a JSON object starting at the first ``{`` by trying every ``}`` after it.

    Only closing braces within ``window`` characters of the opening brace are
    tried. Braces inside string literals are not tracked, so ``{"a": "}"}``
    ahead of the real object can shadow it.
    """
    start = raw.find("{")
    if start == -1:
        return None
    limit = min(len(raw), start + window)
    for i in range(start + 1, limit):
        if raw[i] != "}":
            continue
        obj = _decode_object(raw[start:i + 1])
        if obj is not None and accept(obj):
            return obj
    return None


def from_brace_scan(
    raw: str,
    accept: Predicate | None = None,
    window: int = BRACE_SCAN_WINDOW,
) -> ParsedMetadata | None:
    if accept is None:
        accept = require_any_field(*DEFAULT_REQUIRED_FIELDS)
    return _to_metadata(scan_for_object(raw, accept, window))


METADATA_STRATEGIES: tuple[tuple[str, Callable[[str], ParsedMetadata | None]], ...] = (
    ("marker_comment", from_marker_comment),
    ("json_fence", from_json_fence),
    ("brace_scan", from_brace_scan),
)


def extract_metadata(raw: str) -> ParsedMetadata | None:
    """Run the metadata strategies in order and return the first hit."""
    for name, strategy in METADATA_STRATEGIES:
        metadata = strategy(raw)
        if metadata is not None:
            logger.debug("Metadata recovered via %s", name)
            return metadata
    logger.info("No metadata found in model output (%d chars)", len(raw))
    return None


def extract_summary(raw: str) -> str | None:
    match = SUMMARY_COMMENT_RE.search(raw)
    if not match:
        return None
    return match.group(1).strip() or None


def extract_body(raw: str) -> str:
    """Strip code fences and marker comments, leaving displayable HTML.

    Cleanup repeats until nothing changes, so running it on its own output is a
    no-op. If nothing would be left, the raw text comes back as is.
    """
    body = raw
    while True:
        cleaned = MARKER_COMMENT_RE.sub("", body)
        cleaned = cleaned.replace(HTML_FENCE_OPEN, "").replace(FENCE, "")
        if cleaned == body:
            break
        body = cleaned
    return body if body else raw


def parse(raw: str) -> AnalysisResult:
    """Split one model response into body, metadata and summary."""
    return AnalysisResult(
        body=extract_body(raw),
        metadata=extract_metadata(raw),
        summary=extract_summary(raw),
    )
