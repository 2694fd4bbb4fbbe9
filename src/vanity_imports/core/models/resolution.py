"""Resolution results handed to the HTTP layer."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from vanity_imports.core.models.config import VCSKind


class VanityMatch(BaseModel):
    """A request path owned by a configured entry."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["match"] = "match"
    import_path: str
    subpath: str = ""
    repo_url: str
    display: str = ""
    vcs: VCSKind
    cache_max_age: int


class IndexListing(BaseModel):
    """Root request with no root entry: list every configured import path."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["index"] = "index"
    host: str
    import_paths: list[str] = Field(default_factory=list)


class NotFound(BaseModel):
    """No entry owns the request path."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["not-found"] = "not-found"


Resolution = VanityMatch | IndexListing | NotFound
