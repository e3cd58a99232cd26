"""
Sequencing Service Module

Keeps the display order of a shoot's images and its album cover consistent.
Every public operation here commits once: a failure rolls the session back
so the old complete ordering survives.
"""
import logging
from datetime import datetime
from typing import List, Optional, Sequence

from sqlmodel import Session

from studio.core.errors import ValidationError
from studio.db.session import commit
from studio.models.image import Image
from studio.models.shoot import Shoot
from studio.services import shoots as shoot_service

logger = logging.getLogger(__name__)

UP = "up"
DOWN = "down"


def validate_full_set(images: Sequence[Image], ordered_ids: Sequence[int], field: str = "imageIds") -> None:
    """
    ``ordered_ids`` must list every image of the shoot exactly once. Partial
    orderings are refused so an image can never drop out of the visible order.
    """
    if len(set(ordered_ids)) != len(ordered_ids):
        raise ValidationError(f"{field} contains duplicate image ids", field=field)

    current = {image.id for image in images}
    requested = set(ordered_ids)
    missing = sorted(current - requested)
    unknown = sorted(requested - current)
    if missing or unknown:
        parts = []
        if missing:
            parts.append(f"missing images {missing}")
        if unknown:
            parts.append(f"images not in this shoot {unknown}")
        raise ValidationError(f"{field} must list every image of the shoot: " + ", ".join(parts), field=field)


def stage_reorder(db: Session, shoot_id: int, ordered_ids: Sequence[int], field: str = "imageIds") -> List[Image]:
    """Validate and assign sequence = position (1-based) without committing."""
    images = shoot_service.get_shoot_images(db, shoot_id)
    validate_full_set(images, ordered_ids, field)

    by_id = {image.id: image for image in images}
    for position, image_id in enumerate(ordered_ids, start=1):
        image = by_id[image_id]
        if image.sequence != position:
            image.sequence = position
            db.add(image)
    return [by_id[image_id] for image_id in ordered_ids]


def reorder(db: Session, shoot_id: int, ordered_ids: Sequence[int]) -> List[Image]:
    shoot_service.get_shoot(db, shoot_id)
    try:
        images = stage_reorder(db, shoot_id, list(ordered_ids))
        commit(db)
    except Exception:
        db.rollback()
        raise
    logger.info("Reordered %d images in shoot %s", len(images), shoot_id)
    return shoot_service.get_shoot_images(db, shoot_id)


def move_one(db: Session, shoot_id: int, image_id: int, direction: str) -> List[Image]:
    """
    Swap an image with its neighbour in the current order. Moving the first
    image up or the last image down changes nothing.
    """
    if direction not in (UP, DOWN):
        raise ValidationError("direction must be 'up' or 'down'", field="direction")
    shoot_service.get_shoot(db, shoot_id)
    images = shoot_service.get_shoot_images(db, shoot_id)

    index = next((i for i, image in enumerate(images) if image.id == image_id), None)
    if index is None:
        shoot_service.check_image_membership(db, shoot_id, image_id, field="imageId")

    neighbour = index - 1 if direction == UP else index + 1
    if neighbour < 0 or neighbour >= len(images):
        return images

    current, other = images[index], images[neighbour]
    try:
        if current.sequence == other.sequence:
            # Legacy rows sharing a value: renumber the whole swapped order instead
            order = [image.id for image in images]
            order[index], order[neighbour] = order[neighbour], order[index]
            stage_reorder(db, shoot_id, order)
        else:
            current.sequence, other.sequence = other.sequence, current.sequence
            db.add(current)
            db.add(other)
        commit(db)
    except Exception:
        db.rollback()
        raise
    logger.info("Moved image %s %s in shoot %s", image_id, direction, shoot_id)
    return shoot_service.get_shoot_images(db, shoot_id)


def validate_cover(db: Session, shoot_id: int, image_id: Optional[int], field: str = "imageId") -> None:
    if image_id is not None:
        shoot_service.check_image_membership(db, shoot_id, image_id, field)


def set_cover(db: Session, shoot_id: int, image_id: Optional[int]) -> Shoot:
    """
    Designate the album cover. Selecting the image that already is the cover
    clears it again (the admin UI's toggle); ``None`` always clears.
    """
    shoot = shoot_service.get_shoot(db, shoot_id)
    validate_cover(db, shoot_id, image_id)

    new_cover = None if image_id is None or shoot.banner_image_id == image_id else image_id
    shoot.banner_image_id = new_cover
    shoot.updated_at = datetime.utcnow().isoformat()
    db.add(shoot)
    commit(db)
    db.refresh(shoot)
    logger.info("Shoot %s cover set to %s", shoot_id, new_cover)
    return shoot
