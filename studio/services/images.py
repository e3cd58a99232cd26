"""
Image Service Module

Image records for files already accepted by object storage. New images go
to the end of their shoot's order; deleting leaves a gap in the sequence
values, which is fine because only the relative order matters.
"""
import logging
from typing import Optional

from pydantic.alias_generators import to_camel
from sqlalchemy import func, update
from sqlmodel import Session, select

from studio.core.errors import NotFoundError, ValidationError
from studio.db.session import commit
from studio.models.image import Image
from studio.models.shoot import Shoot
from studio.schemas.image import ImageCreate, ImageUpdate
from studio.services import shoots as shoot_service

logger = logging.getLogger(__name__)

NON_NULLABLE_FIELDS = ("shoot_id", "filename", "is_private")


def get_image(db: Session, image_id: int) -> Image:
    image = db.get(Image, image_id)
    if not image:
        raise NotFoundError("Image", image_id)
    return image


def next_sequence(db: Session, shoot_id: int) -> int:
    """Current max sequence in the shoot + 1; the first image of a shoot gets 1."""
    current_max: Optional[int] = db.exec(
        select(func.max(Image.sequence)).where(Image.shoot_id == shoot_id)
    ).one()
    return (current_max or 0) + 1


def create_image(db: Session, data: ImageCreate) -> Image:
    shoot_service.get_shoot(db, data.shoot_id)
    image = Image(**data.model_dump(), sequence=next_sequence(db, data.shoot_id))
    db.add(image)
    commit(db)
    db.refresh(image)
    logger.info("Registered image %s in shoot %s at sequence %s", image.id, image.shoot_id, image.sequence)
    return image


def _release_cover(db: Session, image: Image) -> None:
    """Clear the album cover of the image's current shoot if it is this image."""
    shoot = db.get(Shoot, image.shoot_id)
    if shoot and shoot.banner_image_id == image.id:
        shoot.banner_image_id = None
        db.add(shoot)


def update_image(db: Session, image_id: int, data: ImageUpdate) -> Image:
    """
    Update image fields. Changing ``shoot_id`` moves the image to the end of
    the target shoot and clears it as the cover of the shoot it leaves.
    """
    image = get_image(db, image_id)
    updates = data.model_dump(exclude_unset=True)
    for field in NON_NULLABLE_FIELDS:
        if field in updates and updates[field] is None:
            raise ValidationError(f"{to_camel(field)} cannot be null", field=to_camel(field))

    target_shoot_id = updates.pop("shoot_id", None)
    if target_shoot_id is not None and target_shoot_id != image.shoot_id:
        shoot_service.get_shoot(db, target_shoot_id)
        _release_cover(db, image)
        previous = image.shoot_id
        image.sequence = next_sequence(db, target_shoot_id)
        image.shoot_id = target_shoot_id
        logger.info("Moved image %s from shoot %s to shoot %s", image_id, previous, target_shoot_id)

    for key, value in updates.items():
        setattr(image, key, value)

    db.add(image)
    commit(db)
    db.refresh(image)
    return image


def delete_image(db: Session, image_id: int) -> None:
    """Remove the record. Sibling sequences are not renumbered."""
    image = get_image(db, image_id)
    shoot_id = image.shoot_id
    _release_cover(db, image)
    db.delete(image)
    commit(db)
    logger.info("Deleted image %s from shoot %s", image_id, shoot_id)


def record_download(db: Session, image_id: int) -> Image:
    image = get_image(db, image_id)
    db.execute(
        update(Image).where(Image.id == image_id).values(download_count=Image.download_count + 1)
    )
    commit(db)
    db.refresh(image)
    return image
