"""
Image Endpoints Module

Images are uploaded to object storage by the browser; these endpoints only
register and maintain the records.
"""
from fastapi import APIRouter, Depends, status
from sqlmodel import Session

from studio.api import deps
from studio.db.session import get_db
from studio.schemas.image import ImageCreate, ImageRead, ImageUpdate
from studio.services import images as image_service

router = APIRouter()


@router.post("", response_model=ImageRead, status_code=status.HTTP_201_CREATED)
def create_image(
    image_in: ImageCreate,
    db: Session = Depends(get_db),
    staff: deps.Identity = Depends(deps.require_staff),
):
    """
    Register an uploaded image. It is appended at the end of the shoot's order.
    """
    return image_service.create_image(db, image_in)


@router.patch("/{image_id}", response_model=ImageRead)
def update_image(
    image_id: int,
    image_update: ImageUpdate,
    db: Session = Depends(get_db),
    staff: deps.Identity = Depends(deps.require_staff),
):
    """
    Update an image. Setting ``shootId`` moves it to another shoot (archive).
    """
    return image_service.update_image(db, image_id, image_update)


@router.delete("/{image_id}")
def delete_image(
    image_id: int,
    db: Session = Depends(get_db),
    staff: deps.Identity = Depends(deps.require_staff),
):
    image_service.delete_image(db, image_id)
    return {"status": "success", "detail": "Image deleted"}


@router.post("/{image_id}/download", response_model=ImageRead)
def record_download(
    image_id: int,
    db: Session = Depends(get_db),
):
    """
    Count a download. Public: gallery visitors are not signed in.
    """
    return image_service.record_download(db, image_id)
