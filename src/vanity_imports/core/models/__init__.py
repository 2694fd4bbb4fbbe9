"""Domain models for the vanity import server."""

from vanity_imports.core.models.config import PathEntry, ResolverConfig, VCSKind
from vanity_imports.core.models.resolution import (
    IndexListing,
    NotFound,
    Resolution,
    VanityMatch,
)

__all__ = [
    "PathEntry",
    "ResolverConfig",
    "VCSKind",
    "VanityMatch",
    "IndexListing",
    "NotFound",
    "Resolution",
]
