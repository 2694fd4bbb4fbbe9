"""Configuration snapshot models."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator


class VCSKind(str, Enum):
    """Version control systems understood by the go tool."""

    GIT = "git"
    HG = "hg"
    SVN = "svn"
    BZR = "bzr"


class PathEntry(BaseModel):
    """A configured import path and the repository it redirects to."""

    model_config = ConfigDict(frozen=True)

    path: str
    repo_url: str = Field(..., min_length=1)
    display: str = ""
    vcs: VCSKind


class ResolverConfig(BaseModel):
    """Immutable configuration snapshot consumed by the resolver.

    Entries are kept sorted by path; the resolver's binary search relies
    on that ordering.
    """

    model_config = ConfigDict(frozen=True)

    host: str | None = None
    cache_max_age: int = Field(default=86400, ge=0)
    entries: tuple[PathEntry, ...] = ()

    @field_validator("entries")
    @classmethod
    def _sort_entries(cls, entries: tuple[PathEntry, ...]) -> tuple[PathEntry, ...]:
        ordered = tuple(sorted(entries, key=lambda e: e.path))
        for prev, cur in zip(ordered, ordered[1:]):
            if prev.path == cur.path:
                raise ValueError(f"duplicate path: {cur.path!r}")
        return ordered

    @property
    def cache_control(self) -> str:
        return f"public, max-age={self.cache_max_age}"

    @property
    def paths(self) -> list[str]:
        return [entry.path for entry in self.entries]
