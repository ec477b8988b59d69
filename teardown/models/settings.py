from pydantic import BaseModel

from teardown.models.provider import ProviderType


class StoredSettings(BaseModel):
    provider: ProviderType = ProviderType.OPENAI
    base_url: str | None = None
    api_key: str | None = None
    model: str | None = None


class SettingsView(BaseModel):
    provider: ProviderType
    base_url: str
    model: str
    api_key_set: bool
    api_key_hint: str | None = None  # last 4 characters only


class ProviderDefaults(BaseModel):
    provider: ProviderType
    model: str
    base_url: str
