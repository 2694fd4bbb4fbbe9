"""Custom exceptions for the vanity import server."""

from enum import Enum
from typing import Any


class VanityError(Exception):
    """Base exception for the vanity import server."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ConfigurationError(VanityError):
    """Raised when a configuration document cannot be turned into a snapshot."""


class FetchFailedError(ConfigurationError):
    """Raised when the configuration document cannot be retrieved."""


class EmptyDocumentError(ConfigurationError):
    """Raised when the configuration document has no content."""


class ParseFailedError(ConfigurationError):
    """Raised when the configuration document is not a valid mapping."""


class EntryErrorCause(str, Enum):
    """Reason a configuration entry was rejected."""

    MISSING_REPO = "missing-repo"
    UNRECOGNIZED_VCS = "unrecognized-vcs"
    UNINFERABLE_VCS = "uninferable-vcs"
    NEGATIVE_CACHE_AGE = "negative-cache-age"
    DUPLICATE_PATH = "duplicate-path"


class InvalidEntryError(ConfigurationError):
    """Raised when a single entry fails validation.

    ``path`` is the offending path key, or None for document-level
    settings such as ``cache_max_age``.
    """

    def __init__(
        self,
        message: str,
        path: str | None,
        cause: EntryErrorCause,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, details={"path": path, "cause": cause.value, **(details or {})})
        self.path = path
        self.cause = cause


class ConfigNotLoadedError(ConfigurationError):
    """Raised when the resolver is requested before a config was published."""
