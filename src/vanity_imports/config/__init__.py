"""Configuration for the vanity import server."""

from vanity_imports.config.loader import (
    build_config,
    fetch_config_document,
    load_config,
    parse_document,
)
from vanity_imports.config.settings import Settings, get_settings

__all__ = [
    "Settings",
    "get_settings",
    "build_config",
    "parse_document",
    "fetch_config_document",
    "load_config",
]
