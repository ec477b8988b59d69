from fastapi import APIRouter

from teardown.models.settings import ProviderDefaults, SettingsView, StoredSettings
from teardown.settings_store import (
    DEFAULT_SETTINGS,
    get_settings_store,
    resolve_provider_config,
    settings_view,
)

router = APIRouter(prefix="/api", tags=["settings"])


@router.get("/settings")
def get_provider_settings() -> SettingsView:
    return settings_view(resolve_provider_config())


@router.put("/settings")
def save_provider_settings(req: StoredSettings) -> SettingsView:
    get_settings_store().save(req)
    return settings_view(resolve_provider_config())


@router.delete("/settings")
def reset_provider_settings() -> SettingsView:
    get_settings_store().clear()
    return settings_view(resolve_provider_config())


@router.get("/providers")
def list_providers() -> list[ProviderDefaults]:
    return list(DEFAULT_SETTINGS.values())
