import json
import logging
from pathlib import Path

from teardown.config import get_settings
from teardown.models.provider import ProviderConfig, ProviderType
from teardown.models.settings import ProviderDefaults, SettingsView, StoredSettings

logger = logging.getLogger(__name__)

DEFAULT_SETTINGS: dict[ProviderType, ProviderDefaults] = {
    ProviderType.GEMINI: ProviderDefaults(
        provider=ProviderType.GEMINI,
        model="gemini-2.5-flash",
        base_url="https://generativelanguage.googleapis.com",
    ),
    ProviderType.OPENAI: ProviderDefaults(
        provider=ProviderType.OPENAI,
        model="gpt-4o",
        base_url="https://api.openai.com/v1",
    ),
}

# Fixed key names in the settings file
PROVIDER_KEY = "provider"
BASE_URL_KEY = "customBaseUrl"
API_KEY_KEY = "customApiKey"
MODEL_KEY = "customModel"


class SettingsStore:
    """Reads/writes provider overrides to a local JSON file under fixed key names."""

    def __init__(self, path: Path):
        self.path = path

    def _read_all(self) -> dict:
        if not self.path.exists():
            return {}
        return json.loads(self.path.read_text())

    def _write_all(self, values: dict) -> None:
        self.path.write_text(json.dumps(values, indent=2))

    def load(self) -> StoredSettings:
        values = self._read_all()
        return StoredSettings(
            provider=values.get(PROVIDER_KEY, ProviderType.OPENAI),
            base_url=values.get(BASE_URL_KEY),
            api_key=values.get(API_KEY_KEY),
            model=values.get(MODEL_KEY),
        )

    def save(self, stored: StoredSettings) -> None:
        """Persist the settings. Empty overrides remove their key."""
        values = self._read_all()
        values[PROVIDER_KEY] = stored.provider.value
        for key, value in (
            (BASE_URL_KEY, stored.base_url),
            (API_KEY_KEY, stored.api_key),
            (MODEL_KEY, stored.model),
        ):
            if value:
                values[key] = value
            else:
                values.pop(key, None)
        self._write_all(values)
        logger.info("Saved %s provider settings to %s", stored.provider.value, self.path)

    def clear(self) -> None:
        if self.path.exists():
            self.path.unlink()


def get_settings_store() -> SettingsStore:
    return SettingsStore(get_settings().settings_file)


def _env_api_key(provider: ProviderType) -> str:
    settings = get_settings()
    if provider == ProviderType.GEMINI:
        return settings.gemini_api_key
    return settings.openai_api_key


def resolve_provider_config(
    provider: ProviderType | None = None,
    model: str | None = None,
) -> ProviderConfig:
    """Build the ProviderConfig for one analysis run.

    Stored overrides apply only to the stored provider; asking for another
    provider gets its defaults. The environment supplies the key when the
    store has none.
    """
    stored = get_settings_store().load()
    active = provider or stored.provider
    defaults = DEFAULT_SETTINGS[active]
    overrides = stored if active == stored.provider else StoredSettings(provider=active)
    return ProviderConfig(
        provider=active,
        model=model or overrides.model or defaults.model,
        base_url=(overrides.base_url or defaults.base_url).rstrip("/"),
        api_key=overrides.api_key or _env_api_key(active),
    )


def is_default_endpoint(config: ProviderConfig) -> bool:
    return config.base_url.rstrip("/") == DEFAULT_SETTINGS[config.provider].base_url


def settings_view(config: ProviderConfig) -> SettingsView:
    return SettingsView(
        provider=config.provider,
        base_url=config.base_url,
        model=config.model,
        api_key_set=bool(config.api_key),
        api_key_hint=config.api_key[-4:] if len(config.api_key) > 8 else None,
    )
