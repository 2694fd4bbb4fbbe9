"""FastAPI dependencies for dependency injection."""

from typing import Annotated

from fastapi import Depends, Request

from vanity_imports.config import Settings, get_settings
from vanity_imports.resolver.vanity import VanityResolver
from vanity_imports.services.config_store import ConfigStore


def get_settings_dep() -> Settings:
    """Get application settings."""
    return get_settings()


def get_config_store(request: Request) -> ConfigStore:
    """Get the configuration store from app state."""
    return request.app.state.config_store


def get_resolver(store: Annotated[ConfigStore, Depends(get_config_store)]) -> VanityResolver:
    """Get the currently published resolver snapshot."""
    return store.resolver


# Type aliases for dependency injection
SettingsDep = Annotated[Settings, Depends(get_settings_dep)]
ConfigStoreDep = Annotated[ConfigStore, Depends(get_config_store)]
ResolverDep = Annotated[VanityResolver, Depends(get_resolver)]
