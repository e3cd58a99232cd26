from fastapi import APIRouter, Depends
from typing import Any

from studio.api import deps
from studio.site_config import SiteConfigStore

router = APIRouter()

@router.get("", response_model=dict[str, Any])
def health_check(store: SiteConfigStore = Depends(deps.get_site_config_store)) -> Any:
    """
    Health check endpoint.
    """
    return {"status": "ok", "siteConfig": store.state.value}
