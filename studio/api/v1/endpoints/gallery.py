"""
Public Gallery Endpoints Module

Unauthenticated read access to public galleries, plus the client-portal
listing for signed-in clients.
"""
from typing import List
from fastapi import APIRouter, Depends, HTTPException, status
from sqlmodel import Session

from studio.api import deps
from studio.db.session import get_db
from studio.schemas.shoot import ShootRead, ShootWithImages
from studio.services import shoots as shoot_service

router = APIRouter()
portal_router = APIRouter()


@router.get("", response_model=List[ShootRead])
def list_public_galleries(db: Session = Depends(get_db)):
    """
    All public shoots, newest first.
    """
    return shoot_service.list_public_shoots(db)


@router.get("/{slug}", response_model=ShootWithImages)
def read_public_gallery(slug: str, db: Session = Depends(get_db)):
    """
    Fetch a public gallery by slug and count the view.

    Private images are left out. Private galleries are refused and not counted.

    Raises:
        HTTPException 403: If the gallery is private
    """
    shoot = shoot_service.get_shoot_by_slug(db, slug)
    if shoot.is_private:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Private gallery")

    shoot = shoot_service.record_gallery_view(db, shoot)
    return {"shoot": shoot, "images": shoot_service.get_shoot_images(db, shoot.id, include_private=False)}


@portal_router.get("/shoots", response_model=List[ShootRead])
def list_my_shoots(
    db: Session = Depends(get_db),
    identity: deps.Identity = Depends(deps.get_current_identity),
):
    """
    Shoots of the signed-in client, matched on the identity's email.
    """
    if not identity.email:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Identity has no email")
    return shoot_service.list_shoots_for_client_email(db, identity.email)
