"""
Shoot Endpoints Module

Staff endpoints for shoots: CRUD, the gallery customization entry points,
and the image ordering / album cover operations.
"""
from typing import List
from fastapi import APIRouter, Depends, status
from sqlmodel import Session

from studio.api import deps
from studio.db.session import get_db
from studio.schemas.image import ImageRead
from studio.schemas.shoot import (
    ClientReassignment, CoverSelection, ImageMove, ImageOrder,
    ShootCreate, ShootCustomization, ShootRead, ShootWithImages,
)
from studio.services import gallery as gallery_service
from studio.services import sequencing
from studio.services import shoots as shoot_service

router = APIRouter()


@router.get("", response_model=List[ShootRead])
def list_shoots(
    skip: int = 0,
    limit: int = 100,
    db: Session = Depends(get_db),
    staff: deps.Identity = Depends(deps.require_staff),
):
    """
    All shoots, public and private, newest first.
    """
    return shoot_service.list_shoots(db, skip=skip, limit=limit)


@router.get("/{shoot_id}", response_model=ShootWithImages)
def read_shoot(
    shoot_id: int,
    db: Session = Depends(get_db),
    staff: deps.Identity = Depends(deps.require_staff),
):
    """
    Get a shoot with its images sorted by sequence.
    """
    return shoot_service.get_shoot_with_images(db, shoot_id)


@router.get("/{shoot_id}/images", response_model=List[ImageRead])
def list_shoot_images(
    shoot_id: int,
    db: Session = Depends(get_db),
    staff: deps.Identity = Depends(deps.require_staff),
):
    shoot_service.get_shoot(db, shoot_id)
    return shoot_service.get_shoot_images(db, shoot_id)


@router.post("", response_model=ShootRead, status_code=status.HTTP_201_CREATED)
def create_shoot(
    shoot_in: ShootCreate,
    db: Session = Depends(get_db),
    staff: deps.Identity = Depends(deps.require_staff),
):
    """
    Create a shoot. Without ``customSlug`` the slug is derived from the title,
    the gallery suffix and the current year.
    """
    return shoot_service.create_shoot(db, shoot_in)


@router.patch("/{shoot_id}", response_model=ShootRead)
def update_shoot(
    shoot_id: int,
    shoot_update: ShootCustomization,
    db: Session = Depends(get_db),
    staff: deps.Identity = Depends(deps.require_staff),
):
    """
    Partial update of a shoot. Accepts the same body as the customization
    endpoint, including ``imageSequences``.
    """
    return gallery_service.apply_customization(db, shoot_id, shoot_update)


@router.patch("/{shoot_id}/customization", response_model=ShootRead)
def customize_shoot(
    shoot_id: int,
    customization: ShootCustomization,
    db: Session = Depends(get_db),
    staff: deps.Identity = Depends(deps.require_staff),
):
    """
    Save metadata, gallery settings, cover and image order in one transaction.

    Raises:
        400: Blank title/location, cover from another shoot, incomplete image order
        404: Unknown shoot, client or image
        409: customSlug already in use
    """
    return gallery_service.apply_customization(db, shoot_id, customization)


@router.delete("/{shoot_id}")
def delete_shoot(
    shoot_id: int,
    db: Session = Depends(get_db),
    staff: deps.Identity = Depends(deps.require_staff),
):
    shoot_service.delete_shoot(db, shoot_id)
    return {"status": "success", "detail": "Shoot deleted"}


@router.put("/{shoot_id}/image-order", response_model=List[ImageRead])
def reorder_images(
    shoot_id: int,
    order: ImageOrder,
    db: Session = Depends(get_db),
    staff: deps.Identity = Depends(deps.require_staff),
):
    """
    Replace the display order. ``imageIds`` must list every image of the shoot.
    """
    return sequencing.reorder(db, shoot_id, order.image_ids)


@router.post("/{shoot_id}/images/{image_id}/move", response_model=List[ImageRead])
def move_image(
    shoot_id: int,
    image_id: int,
    move: ImageMove,
    db: Session = Depends(get_db),
    staff: deps.Identity = Depends(deps.require_staff),
):
    """
    Move one image up or down by one place.
    """
    return sequencing.move_one(db, shoot_id, image_id, move.direction)


@router.put("/{shoot_id}/cover", response_model=ShootRead)
def set_cover(
    shoot_id: int,
    cover: CoverSelection,
    db: Session = Depends(get_db),
    staff: deps.Identity = Depends(deps.require_staff),
):
    """
    Set the album cover. Sending the current cover again clears it.
    """
    return sequencing.set_cover(db, shoot_id, cover.image_id)


@router.put("/{shoot_id}/client", response_model=ShootRead)
def reassign_shoot(
    shoot_id: int,
    reassignment: ClientReassignment,
    db: Session = Depends(get_db),
    staff: deps.Identity = Depends(deps.require_staff),
):
    return shoot_service.reassign_shoot_to_client(db, shoot_id, reassignment.client_id)
