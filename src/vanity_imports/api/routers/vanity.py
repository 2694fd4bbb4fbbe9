"""Vanity import endpoints."""

import structlog
from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse, PlainTextResponse, Response
from jinja2 import TemplateError

from vanity_imports.api.dependencies import ResolverDep
from vanity_imports.core.models.resolution import IndexListing, VanityMatch
from vanity_imports.rendering.pages import render_index_page, render_vanity_page

logger = structlog.get_logger(__name__)

router = APIRouter()


@router.api_route(
    "/{request_path:path}",
    methods=["GET", "HEAD"],
    response_class=HTMLResponse,
)
async def handle_import(request: Request, resolver: ResolverDep) -> Response:
    """Serve go-import metadata, the index page, or 404."""
    path = request.url.path
    result = resolver.resolve(path, request.headers.get("host", ""))

    try:
        if isinstance(result, VanityMatch):
            return HTMLResponse(
                render_vanity_page(result),
                headers={"Cache-Control": resolver.config.cache_control},
            )
        if isinstance(result, IndexListing):
            return HTMLResponse(render_index_page(result))
    except TemplateError:
        logger.exception("Could not render page", path=path, kind=result.kind)
        return PlainTextResponse("cannot render the page", status_code=500)

    return PlainTextResponse("404 page not found", status_code=404)
