from fastapi import APIRouter
from studio.api.v1.endpoints import (
    health, clients, shoots, images, gallery, site_config
)

api_router = APIRouter()

api_router.include_router(health.router, prefix="/health", tags=["health"])

# Back-office resources
api_router.include_router(clients.router, prefix="/clients", tags=["clients"])
api_router.include_router(shoots.router, prefix="/shoots", tags=["shoots"])
api_router.include_router(images.router, prefix="/images", tags=["images"])

# Public gallery and client portal
api_router.include_router(gallery.router, prefix="/gallery", tags=["gallery"])
api_router.include_router(gallery.portal_router, prefix="/client", tags=["client-portal"])

# Site content
api_router.include_router(site_config.router, prefix="/site-config", tags=["site-config"])
