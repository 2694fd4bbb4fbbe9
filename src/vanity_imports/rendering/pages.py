"""HTML pages served to the go tool and to browsers."""

from functools import lru_cache

from jinja2 import Environment, PackageLoader, select_autoescape

from vanity_imports.core.models.resolution import IndexListing, VanityMatch


@lru_cache
def get_environment() -> Environment:
    """Get the cached Jinja2 environment for the bundled templates."""
    return Environment(
        loader=PackageLoader("vanity_imports.rendering", "templates"),
        autoescape=select_autoescape(["html"]),
    )


def render_vanity_page(match: VanityMatch) -> str:
    """Render the go-import / go-source meta tag page."""
    return get_environment().get_template("vanity.html").render(match=match)


def render_index_page(listing: IndexListing) -> str:
    """Render the list of import paths served by this host."""
    return get_environment().get_template("index.html").render(listing=listing)
