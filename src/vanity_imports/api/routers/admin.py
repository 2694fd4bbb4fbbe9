"""Administrative endpoints."""

import structlog
from fastapi import APIRouter, HTTPException

from vanity_imports.api.dependencies import ConfigStoreDep
from vanity_imports.core.exceptions import ConfigurationError

logger = structlog.get_logger(__name__)

router = APIRouter(prefix="/_admin")


@router.post("/reload")
async def reload_config(store: ConfigStoreDep) -> dict[str, int]:
    """Re-fetch the configuration and publish it if valid."""
    try:
        resolver = await store.reload()
    except ConfigurationError as e:
        raise HTTPException(status_code=502, detail=e.message) from e
    return {"entries": len(resolver.config.entries)}
