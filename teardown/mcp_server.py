from fastmcp import FastMCP

from teardown.exceptions import AuthenticationError, EnvelopeError, TransportError
from teardown.models.provider import ProviderType
from teardown.services import analysis as analysis_service
from teardown.services import parser
from teardown.settings_store import resolve_provider_config, settings_view

mcp = FastMCP("Viral Teardown")


def _handle_mcp_error(e: Exception) -> dict:
    """Convert exceptions to agent-friendly error dicts."""
    if isinstance(e, AuthenticationError):
        return {"error": "auth_error", "message": str(e), "action": "Ask the user to configure an API key"}
    if isinstance(e, TransportError):
        return {"error": "transport_error", "message": str(e), "upstream_status": e.status_code}
    if isinstance(e, EnvelopeError):
        return {"error": "envelope_error", "message": str(e)}
    if isinstance(e, FileNotFoundError):
        return {"error": "file_not_found", "message": str(e)}
    if isinstance(e, OSError):
        return {"error": "file_error", "message": str(e)}
    if isinstance(e, ValueError):
        return {"error": "invalid_data", "message": str(e)}
    return {"error": "unknown_error", "message": str(e)}


@mcp.tool
def analyze_video(path: str, provider: str | None = None, model: str | None = None) -> dict:
    """Run a viral teardown on a local video file. Returns the topic/audience/tag metadata,
    a one-line summary of the video's core playbook, and an HTML report body.
    provider is 'openai' or 'gemini'; omit it to use the saved settings."""
    try:
        chosen = ProviderType(provider) if provider else None
    except ValueError:
        return {"error": "invalid_provider", "message": f"Unknown provider '{provider}'. Use 'openai' or 'gemini'."}
    try:
        return analysis_service.analyze_file(path, chosen, model).model_dump(mode="json")
    except (AuthenticationError, TransportError, EnvelopeError, OSError, ValueError) as e:
        return _handle_mcp_error(e)


@mcp.tool
def parse_model_output(text: str) -> dict:
    """Parse raw teardown output from a model (META/SUMMARY comments plus HTML) into
    metadata, summary and body. Never fails; missing parts come back as null."""
    return parser.parse(text).model_dump(mode="json")


@mcp.tool
def get_provider_settings() -> dict:
    """Show which provider, model and base URL analyses will use, and whether a key is set."""
    try:
        return settings_view(resolve_provider_config()).model_dump(mode="json")
    except ValueError as e:
        return _handle_mcp_error(e)
