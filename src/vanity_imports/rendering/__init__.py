"""Page rendering."""

from vanity_imports.rendering.pages import render_index_page, render_vanity_page

__all__ = ["render_index_page", "render_vanity_page"]
