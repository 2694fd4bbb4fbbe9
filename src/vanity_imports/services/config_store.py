"""Publishes the current configuration snapshot to request handlers."""

import asyncio

import httpx
import structlog

from vanity_imports.config.loader import load_config
from vanity_imports.core.exceptions import ConfigNotLoadedError, ConfigurationError
from vanity_imports.core.models.config import ResolverConfig
from vanity_imports.resolver.vanity import VanityResolver

logger = structlog.get_logger(__name__)


class ConfigStore:
    """Holds the published resolver and swaps it on reload.

    Readers take ``resolver`` without locking. A reload builds the new
    snapshot completely before replacing the reference, so a failed or
    in-progress reload is never visible to readers.
    """

    def __init__(
        self,
        source: str | None,
        timeout: float = 10.0,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self._source = source
        self._timeout = timeout
        self._client = client
        self._resolver: VanityResolver | None = None
        self._reload_lock = asyncio.Lock()

    @property
    def source(self) -> str | None:
        return self._source

    @property
    def is_loaded(self) -> bool:
        return self._resolver is not None

    @property
    def resolver(self) -> VanityResolver:
        """Get the published resolver."""
        resolver = self._resolver
        if resolver is None:
            raise ConfigNotLoadedError("configuration has not been loaded")
        return resolver

    def publish(self, config: ResolverConfig) -> VanityResolver:
        """Publish an already-built snapshot."""
        resolver = VanityResolver(config)
        self._resolver = resolver
        logger.info("Config published", entries=len(config.entries))
        return resolver

    async def initialize(self) -> VanityResolver:
        """Load the configuration before serving traffic."""
        if self._source is None:
            raise ConfigurationError("no configuration source set (CONFIG_URL)")
        return await self.reload()

    async def reload(self) -> VanityResolver:
        """Fetch and build a new snapshot, then publish it.

        On failure the error propagates and the previous snapshot stays
        published.
        """
        if self._source is None:
            raise ConfigurationError("no configuration source set (CONFIG_URL)")

        async with self._reload_lock:
            try:
                config = await load_config(
                    self._source,
                    timeout=self._timeout,
                    client=self._client,
                )
            except ConfigurationError:
                if self._resolver is not None:
                    logger.warning("Reload failed, keeping previous config")
                raise
            return self.publish(config)
