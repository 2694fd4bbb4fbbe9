"""Services for the vanity import server."""

from vanity_imports.services.config_store import ConfigStore

__all__ = ["ConfigStore"]
