"""Pytest configuration and fixtures."""

import pytest

from factories import PathEntryFactory, ResolverConfigFactory
from vanity_imports.core.models.config import PathEntry, ResolverConfig
from vanity_imports.resolver.vanity import VanityResolver


@pytest.fixture
def sample_yaml() -> str:
    """A configuration document exercising inference and explicit fields."""
    return """\
host: go.example.com
cache_max_age: 3600
paths:
  /lib:
    repo: https://github.com/org/lib
  /lib/sub/:
    repo: https://github.com/org/lib-sub
  /tool:
    repo: https://bitbucket.org/org/tool
    vcs: hg
  /svn:
    repo: https://svn.example.com/repo
    vcs: svn
    display: "https://svn.example.com/repo _ _"
"""


@pytest.fixture
def entries() -> list[PathEntry]:
    """Entries covering nesting and lexicographic neighbours."""
    return [
        PathEntryFactory(path="/abc"),
        PathEntryFactory(path="/abc/def"),
        PathEntryFactory(path="/abc-x"),
        PathEntryFactory(path="/xyz"),
    ]


@pytest.fixture
def sample_config(entries: list[PathEntry]) -> ResolverConfig:
    """A config with a host override."""
    return ResolverConfigFactory(host="go.example.com", entries=tuple(entries))


@pytest.fixture
def resolver(sample_config: ResolverConfig) -> VanityResolver:
    return VanityResolver(sample_config)
