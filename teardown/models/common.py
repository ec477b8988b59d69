from pydantic import BaseModel

from teardown.models.provider import ProviderType


class ErrorResponse(BaseModel):
    error_code: str
    message: str
    upstream_status: int | None = None


class StatusResponse(BaseModel):
    provider: ProviderType
    model: str
    api_key_configured: bool
    ready: bool
