import base64
from enum import Enum

from pydantic import BaseModel


class ProviderType(str, Enum):
    OPENAI = "openai"
    GEMINI = "gemini"


class ProviderConfig(BaseModel):
    provider: ProviderType
    model: str
    base_url: str
    api_key: str = ""

    model_config = {"frozen": True}


class MediaPayload(BaseModel):
    data: bytes
    mime_type: str = "video/mp4"

    model_config = {"frozen": True}

    def as_base64(self) -> str:
        return base64.b64encode(self.data).decode("ascii")

    def data_uri(self) -> str:
        return f"data:{self.mime_type};base64,{self.as_base64()}"
