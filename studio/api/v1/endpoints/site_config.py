"""
Site Configuration Endpoints Module

Serves the effective site-content document and accepts editor changes.
Changes are deep-merged into the persisted overrides: objects merge key by
key, lists are replaced whole.
"""
from datetime import datetime
from typing import Any, Dict
from fastapi import APIRouter, Body, Depends, Response

from studio.api import deps
from studio.schemas.site_config import ConfigPathUpdate, ConfigUpdateResult
from studio.site_config import SiteConfigStore

router = APIRouter()

NO_CACHE_HEADERS = {
    "Cache-Control": "no-cache, no-store, must-revalidate",
    "Pragma": "no-cache",
    "Expires": "0",
}


@router.get("", response_model=Dict[str, Any])
def read_site_config(
    response: Response,
    store: SiteConfigStore = Depends(deps.get_site_config_store),
):
    """
    The effective configuration (defaults merged with overrides). Never cached.
    """
    response.headers.update(NO_CACHE_HEADERS)
    return store.get()


@router.patch("/bulk", response_model=ConfigUpdateResult)
def bulk_update_site_config(
    updates: Dict[str, Any] = Body(...),
    store: SiteConfigStore = Depends(deps.get_site_config_store),
    staff: deps.Identity = Depends(deps.require_staff),
):
    """
    Deep-merge a partial document into the overrides and persist it.

    The update is all-or-nothing: if the overrides file cannot be written the
    served configuration stays as it was.
    """
    store.apply_bulk_update(updates)
    return ConfigUpdateResult(
        message="Bulk update completed",
        updated_fields=list(updates),
        timestamp=datetime.utcnow().isoformat(),
    )


@router.patch("", response_model=ConfigUpdateResult)
def update_site_config_value(
    update: ConfigPathUpdate,
    store: SiteConfigStore = Depends(deps.get_site_config_store),
    staff: deps.Identity = Depends(deps.require_staff),
):
    """
    Set one value by dotted path, e.g. ``{"path": "contact.business.name", "value": "..."}``.
    """
    store.apply_path_update(update.path, update.value)
    return ConfigUpdateResult(
        message=f"Updated {update.path}",
        updated_fields=[update.path],
        timestamp=datetime.utcnow().isoformat(),
    )
