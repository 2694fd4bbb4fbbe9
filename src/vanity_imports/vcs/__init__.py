"""Repository hosting integration."""

from vanity_imports.vcs.providers import (
    PROVIDERS,
    HostingProvider,
    find_provider,
    infer_display,
    infer_vcs,
)

__all__ = ["PROVIDERS", "HostingProvider", "find_provider", "infer_display", "infer_vcs"]
