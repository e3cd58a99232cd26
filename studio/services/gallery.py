"""
Gallery Customization Service

Single entry point for "everything about how a shoot's gallery looks and is
ordered". All input is validated first; then the image order and the shoot
fields are staged and committed together, so metadata, cover and order are
never left half-updated.
"""
import logging
from typing import Any, Dict, List

from pydantic.alias_generators import to_camel
from sqlmodel import Session

from studio.core.errors import ValidationError
from studio.db.session import commit
from studio.models.shoot import Shoot
from studio.schemas.shoot import ShootCustomization
from studio.services import clients as client_service
from studio.services import sequencing
from studio.services import shoots as shoot_service

logger = logging.getLogger(__name__)


def order_from_positions(image_sequences: Dict[int, int]) -> List[int]:
    """``{image_id: position}`` -> image ids sorted by position. Positions must be distinct."""
    positions = list(image_sequences.values())
    if len(set(positions)) != len(positions):
        raise ValidationError("imageSequences assigns the same position to several images", field="imageSequences")
    return [image_id for image_id, _ in sorted(image_sequences.items(), key=lambda item: item[1])]


def apply_customization(db: Session, shoot_id: int, data: ShootCustomization) -> Shoot:
    shoot = shoot_service.get_shoot(db, shoot_id)
    provided = data.model_fields_set
    updates: Dict[str, Any] = {
        field: getattr(data, field)
        for field in provided
        if field not in ("image_sequences", "gallery_settings")
    }

    # 1. Required text stays non-blank
    for field in shoot_service.REQUIRED_TEXT_FIELDS:
        if field in updates and (updates[field] is None or not updates[field].strip()):
            raise ValidationError(f"{field} cannot be blank", field=field)
    for field in shoot_service.NON_NULLABLE_FIELDS:
        if field in updates and updates[field] is None:
            raise ValidationError(f"{to_camel(field)} cannot be null", field=to_camel(field))

    # 2. Cover must be one of this shoot's images
    if updates.get("banner_image_id") is not None:
        shoot_service.check_image_membership(db, shoot_id, updates["banner_image_id"], field="bannerImageId")

    # 3. A new order must cover every image of the shoot
    ordered_ids = None
    if data.image_sequences is not None:
        ordered_ids = order_from_positions(data.image_sequences)
        sequencing.validate_full_set(
            shoot_service.get_shoot_images(db, shoot_id), ordered_ids, field="imageSequences"
        )

    if "client_id" in updates:
        client_service.get_client(db, updates["client_id"])
    if "custom_slug" in updates:
        updates["custom_slug"] = shoot_service.normalize_slug(updates["custom_slug"] or "")
        shoot_service.ensure_slug_free(db, updates["custom_slug"], shoot_id)
    if "gallery_settings" in provided:
        new_settings = (
            data.gallery_settings.model_dump(by_alias=True, exclude_unset=True)
            if data.gallery_settings else {}
        )
        updates["gallery_settings"] = {**(shoot.gallery_settings or {}), **new_settings}

    # 4. Stage everything, commit once
    try:
        if ordered_ids is not None:
            sequencing.stage_reorder(db, shoot_id, ordered_ids, field="imageSequences")
        if updates:
            shoot_service.stage_shoot_updates(shoot, updates)
            db.add(shoot)
        commit(db)
    except Exception:
        db.rollback()
        raise

    db.refresh(shoot)
    logger.info(
        "Customized shoot %s: fields=%s reordered=%s",
        shoot_id, sorted(updates), ordered_ids is not None,
    )
    return shoot
