"""Core domain models and exceptions for the vanity import server."""

from vanity_imports.core.exceptions import (
    ConfigNotLoadedError,
    ConfigurationError,
    EmptyDocumentError,
    EntryErrorCause,
    FetchFailedError,
    InvalidEntryError,
    ParseFailedError,
    VanityError,
)
from vanity_imports.core.models import (
    IndexListing,
    NotFound,
    PathEntry,
    Resolution,
    ResolverConfig,
    VanityMatch,
    VCSKind,
)

__all__ = [
    # Models
    "PathEntry",
    "ResolverConfig",
    "VCSKind",
    "VanityMatch",
    "IndexListing",
    "NotFound",
    "Resolution",
    # Exceptions
    "VanityError",
    "ConfigurationError",
    "FetchFailedError",
    "EmptyDocumentError",
    "ParseFailedError",
    "InvalidEntryError",
    "EntryErrorCause",
    "ConfigNotLoadedError",
]
