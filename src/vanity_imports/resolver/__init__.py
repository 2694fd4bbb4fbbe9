"""Path resolution for vanity import requests."""

from vanity_imports.resolver.paths import PathConfigSet
from vanity_imports.resolver.vanity import VanityResolver

__all__ = ["PathConfigSet", "VanityResolver"]
