"""Resolve request paths against a configuration snapshot."""

from vanity_imports.core.models.config import ResolverConfig
from vanity_imports.core.models.resolution import (
    IndexListing,
    NotFound,
    Resolution,
    VanityMatch,
)
from vanity_imports.resolver.paths import PathConfigSet


class VanityResolver:
    """Maps request paths to vanity metadata for one configuration snapshot.

    Instances never change after construction and are safe to share
    between concurrent requests.
    """

    def __init__(self, config: ResolverConfig) -> None:
        self._config = config
        self._paths = PathConfigSet(config.entries)

    @property
    def config(self) -> ResolverConfig:
        return self._config

    @property
    def paths(self) -> PathConfigSet:
        return self._paths

    def effective_host(self, request_host: str) -> str:
        """Return the configured host override, else the request host."""
        return self._config.host or request_host

    def resolve(self, request_path: str, request_host: str) -> Resolution:
        """Resolve a request path into a match, an index listing or not-found."""
        entry, subpath = self._paths.find(request_path)
        host = self.effective_host(request_host)

        if entry is None:
            if request_path == "/":
                return IndexListing(
                    host=host,
                    import_paths=[host + e.path for e in self._paths],
                )
            return NotFound()

        return VanityMatch(
            import_path=host + entry.path,
            subpath=subpath,
            repo_url=entry.repo_url,
            display=entry.display,
            vcs=entry.vcs,
            cache_max_age=self._config.cache_max_age,
        )
