"""Well-known repository hosting providers."""

from dataclasses import dataclass

from vanity_imports.core.models.config import VCSKind


@dataclass(frozen=True)
class HostingProvider:
    """A hosting provider recognized by its repository URL prefix.

    ``display_template`` uses ``{repo}`` for the repository URL and keeps
    the ``{/dir}``, ``{file}`` and ``{line}`` placeholders that the go tool
    expands itself.
    """

    name: str
    prefix: str
    display_template: str
    vcs: VCSKind | None = None

    def matches(self, repo_url: str) -> bool:
        return repo_url.startswith(self.prefix)

    def display_for(self, repo_url: str) -> str:
        return self.display_template.replace("{repo}", repo_url)


PROVIDERS: tuple[HostingProvider, ...] = (
    HostingProvider(
        name="github",
        prefix="https://github.com/",
        display_template="{repo} {repo}/tree/master{/dir} {repo}/blob/master{/dir}/{file}#L{line}",
        vcs=VCSKind.GIT,
    ),
    HostingProvider(
        name="gitlab",
        prefix="https://gitlab.com/",
        display_template="{repo} {repo}/-/tree/master{/dir} {repo}/-/blob/master{/dir}/{file}#L{line}",
        vcs=VCSKind.GIT,
    ),
    # Bitbucket hosts both git and hg repositories, so no VCS is inferred.
    HostingProvider(
        name="bitbucket",
        prefix="https://bitbucket.org",
        display_template="{repo} {repo}/src/default{/dir} {repo}/src/default{/dir}/{file}#{file}-{line}",
    ),
)


def find_provider(repo_url: str) -> HostingProvider | None:
    """Return the provider hosting ``repo_url``, if it is a known one."""
    for provider in PROVIDERS:
        if provider.matches(repo_url):
            return provider
    return None


def infer_display(repo_url: str) -> str:
    """Infer a go-source display template, or an empty string."""
    provider = find_provider(repo_url)
    if provider is None:
        return ""
    return provider.display_for(repo_url)


def infer_vcs(repo_url: str) -> VCSKind | None:
    """Infer the VCS kind from the repository URL, if unambiguous."""
    provider = find_provider(repo_url)
    if provider is None:
        return None
    return provider.vcs
