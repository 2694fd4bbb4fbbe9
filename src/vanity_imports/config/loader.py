"""Build resolver configuration snapshots from raw documents."""

from collections.abc import Mapping
from pathlib import Path
from typing import Any
from urllib.parse import unquote, urlparse

import httpx
import structlog
import yaml
from pydantic import BaseModel, Field, ValidationError

from vanity_imports.core.exceptions import (
    EmptyDocumentError,
    EntryErrorCause,
    FetchFailedError,
    InvalidEntryError,
    ParseFailedError,
)
from vanity_imports.core.models.config import PathEntry, ResolverConfig, VCSKind
from vanity_imports.vcs.providers import infer_display, infer_vcs

logger = structlog.get_logger(__name__)

DEFAULT_CACHE_MAX_AGE = 86400  # 24 hours


class RawPathConfig(BaseModel):
    """One ``paths`` entry as written in the document."""

    repo: str | None = None
    display: str | None = None
    vcs: str | None = None


class RawConfig(BaseModel):
    """The configuration document before validation rules are applied."""

    host: str | None = None
    cache_max_age: int | None = None
    paths: dict[str, RawPathConfig | None] = Field(default_factory=dict)


def parse_document(raw: bytes | str) -> dict[str, Any]:
    """Parse a YAML (or JSON) document into a mapping."""
    try:
        text = raw.decode("utf-8") if isinstance(raw, bytes) else raw
    except UnicodeDecodeError as e:
        raise ParseFailedError(f"could not parse config: {e}") from e
    if not text.strip():
        raise EmptyDocumentError("found empty config file")

    try:
        document = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise ParseFailedError(f"could not parse config: {e}") from e

    if document is None:
        raise EmptyDocumentError("found empty config file")
    if not isinstance(document, dict):
        raise ParseFailedError(
            f"could not parse config: expected a mapping, got {type(document).__name__}"
        )
    return document


def normalize_path(path: str) -> str:
    """Trim a single trailing slash from a configured path key."""
    return path.removesuffix("/")


def _build_entry(key: str, raw: RawPathConfig) -> PathEntry:
    path = normalize_path(key)

    if not raw.repo:
        raise InvalidEntryError(
            f"configuration for {key}: repo is empty",
            path=key,
            cause=EntryErrorCause.MISSING_REPO,
        )

    display = raw.display or infer_display(raw.repo)

    if raw.vcs:
        try:
            vcs = VCSKind(raw.vcs)
        except ValueError:
            raise InvalidEntryError(
                f"configuration for {key}: unknown VCS {raw.vcs}",
                path=key,
                cause=EntryErrorCause.UNRECOGNIZED_VCS,
                details={"vcs": raw.vcs},
            ) from None
    else:
        inferred = infer_vcs(raw.repo)
        if inferred is None:
            raise InvalidEntryError(
                f"configuration for {key}: cannot infer VCS from {raw.repo}",
                path=key,
                cause=EntryErrorCause.UNINFERABLE_VCS,
                details={"repo": raw.repo},
            )
        vcs = inferred

    return PathEntry(path=path, repo_url=raw.repo, display=display, vcs=vcs)


def build_config(document: Mapping[str, Any]) -> ResolverConfig:
    """Validate a parsed document and build an immutable snapshot.

    Any invalid entry rejects the whole document.
    """
    try:
        raw = RawConfig.model_validate(document)
    except ValidationError as e:
        raise ParseFailedError(f"could not parse config: {e}") from e

    cache_max_age = DEFAULT_CACHE_MAX_AGE
    if raw.cache_max_age is not None:
        cache_max_age = raw.cache_max_age
        if cache_max_age < 0:
            raise InvalidEntryError(
                "cache_max_age is negative",
                path=None,
                cause=EntryErrorCause.NEGATIVE_CACHE_AGE,
                details={"cache_max_age": cache_max_age},
            )

    entries: dict[str, PathEntry] = {}
    for key, raw_entry in raw.paths.items():
        entry = _build_entry(key, raw_entry or RawPathConfig())
        if entry.path in entries:
            raise InvalidEntryError(
                f"configuration for {key}: duplicate path {entry.path or '/'}",
                path=key,
                cause=EntryErrorCause.DUPLICATE_PATH,
            )
        entries[entry.path] = entry

    return ResolverConfig(
        host=raw.host or None,
        cache_max_age=cache_max_age,
        entries=tuple(entries.values()),
    )


def _is_http_source(source: str) -> bool:
    return urlparse(source).scheme in ("http", "https")


def _local_path(source: str) -> Path:
    parsed = urlparse(source)
    if parsed.scheme == "file":
        return Path(unquote(parsed.path))
    return Path(source).expanduser()


async def fetch_config_document(
    source: str,
    timeout: float = 10.0,
    client: httpx.AsyncClient | None = None,
) -> bytes:
    """Fetch the raw configuration document.

    ``source`` is an http(s) URL, a ``file://`` URL or a local path.
    """
    if not _is_http_source(source):
        path = _local_path(source)
        try:
            return path.read_bytes()
        except OSError as e:
            raise FetchFailedError(
                f"could not read config file: {e}",
                details={"source": source},
            ) from e

    owns_client = client is None
    if client is None:
        client = httpx.AsyncClient(timeout=timeout)
    try:
        response = await client.get(source)
    except httpx.HTTPError as e:
        raise FetchFailedError(
            f"could not fetch config file: {e}",
            details={"source": source},
        ) from e
    finally:
        if owns_client:
            await client.aclose()

    if response.status_code != httpx.codes.OK:
        raise FetchFailedError(
            f"could not fetch config file: {response.status_code}",
            details={"source": source, "status_code": response.status_code},
        )
    return response.content


async def load_config(
    source: str,
    timeout: float = 10.0,
    client: httpx.AsyncClient | None = None,
) -> ResolverConfig:
    """Fetch, parse and validate a configuration document."""
    log = logger.bind(source=source)
    try:
        raw = await fetch_config_document(source, timeout=timeout, client=client)
        config = build_config(parse_document(raw))
    except InvalidEntryError as e:
        log.error("Invalid config entry", path=e.path, cause=e.cause.value, error=e.message)
        raise
    except (FetchFailedError, EmptyDocumentError, ParseFailedError) as e:
        log.error("Could not load config", error=e.message)
        raise

    log.info(
        "Config loaded",
        entries=len(config.entries),
        host=config.host,
        cache_max_age=config.cache_max_age,
    )
    return config
