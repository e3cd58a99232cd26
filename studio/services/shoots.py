"""
Shoot Service Module

Durable CRUD for shoots plus the read paths used by the admin panel, the
public gallery and the client portal.
"""
import logging
from datetime import date, datetime
from typing import Any, Dict, List, Optional

from pydantic.alias_generators import to_camel
from sqlalchemy import update
from sqlmodel import Session, select

from studio.core.config import settings
from studio.core.errors import ConflictError, NotFoundError, ValidationError
from studio.core.slugs import shoot_slug, slugify
from studio.db.session import commit
from studio.models.image import Image
from studio.models.shoot import Shoot
from studio.schemas.shoot import ShootCreate
from studio.services import clients as client_service

logger = logging.getLogger(__name__)

# Fields that update_shoot may touch. id, counters and timestamps are managed here
UPDATABLE_FIELDS = {
    "client_id", "title", "description", "notes", "shoot_type", "shoot_date",
    "location", "is_private", "custom_slug", "custom_title", "seo_tags",
    "banner_image_id", "gallery_settings",
}
REQUIRED_TEXT_FIELDS = ("title", "location")
NON_NULLABLE_FIELDS = ("client_id", "shoot_type", "is_private", "seo_tags")


def get_shoot(db: Session, shoot_id: int) -> Shoot:
    shoot = db.get(Shoot, shoot_id)
    if not shoot:
        raise NotFoundError("Shoot", shoot_id)
    return shoot


def get_shoot_by_slug(db: Session, slug: str) -> Shoot:
    shoot = db.exec(select(Shoot).where(Shoot.custom_slug == slug)).first()
    if not shoot:
        raise NotFoundError("Shoot", slug)
    return shoot


def list_shoots(db: Session, skip: int = 0, limit: int = 100) -> List[Shoot]:
    statement = select(Shoot).order_by(Shoot.created_at.desc()).offset(skip).limit(limit)
    return db.exec(statement).all()


def list_shoots_by_client(db: Session, client_id: int) -> List[Shoot]:
    client_service.get_client(db, client_id)
    return db.exec(
        select(Shoot).where(Shoot.client_id == client_id).order_by(Shoot.shoot_date.desc())
    ).all()


def list_public_shoots(db: Session) -> List[Shoot]:
    return db.exec(
        select(Shoot).where(Shoot.is_private == False).order_by(Shoot.shoot_date.desc())  # noqa: E712
    ).all()


def list_shoots_for_client_email(db: Session, email: str) -> List[Shoot]:
    """Client portal: shoots of the client whose contact email matches the identity."""
    client = client_service.get_client_by_email(db, email)
    if not client:
        return []
    return db.exec(
        select(Shoot).where(Shoot.client_id == client.id).order_by(Shoot.shoot_date.desc())
    ).all()


def get_shoot_images(db: Session, shoot_id: int, include_private: bool = True) -> List[Image]:
    """Images in display order. Ties (legacy data) fall back to upload order."""
    statement = select(Image).where(Image.shoot_id == shoot_id)
    if not include_private:
        statement = statement.where(Image.is_private == False)  # noqa: E712
    return db.exec(statement.order_by(Image.sequence, Image.id)).all()


def get_shoot_with_images(db: Session, shoot_id: int, include_private: bool = True) -> Dict[str, Any]:
    shoot = get_shoot(db, shoot_id)
    return {"shoot": shoot, "images": get_shoot_images(db, shoot_id, include_private)}


def check_image_membership(db: Session, shoot_id: int, image_id: int, field: str = "imageId") -> Image:
    """The image must exist (404) and belong to ``shoot_id`` (400 naming ``field``)."""
    image = db.get(Image, image_id)
    if not image:
        raise NotFoundError("Image", image_id)
    if image.shoot_id != shoot_id:
        raise ValidationError(f"{field} {image_id} does not belong to shoot {shoot_id}", field=field)
    return image


def normalize_slug(value: str) -> str:
    slug = slugify(value)
    if not slug:
        raise ValidationError("customSlug must contain at least one letter or digit", field="customSlug")
    return slug


def ensure_slug_free(db: Session, slug: str, shoot_id: Optional[int] = None) -> None:
    existing = db.exec(select(Shoot).where(Shoot.custom_slug == slug)).first()
    if existing and existing.id != shoot_id:
        raise ConflictError(f"Gallery slug '{slug}' is already in use")


def _require_text(field: str, value: Optional[str]) -> str:
    if value is None or not value.strip():
        raise ValidationError(f"{field} is required", field=field)
    return value.strip()


def create_shoot(db: Session, data: ShootCreate) -> Shoot:
    """
    Create a shoot. Without a custom slug one is derived from the title:
    "Sarah & Tom Wedding" -> "sarah-tom-wedding-gallery-<year>". A slug that
    is already taken fails with ConflictError.
    """
    title = _require_text("title", data.title)
    location = _require_text("location", data.location)
    client_service.get_client(db, data.client_id)

    if data.custom_slug:
        slug = normalize_slug(data.custom_slug)
    else:
        slug = shoot_slug(title, settings.SHOOT_SLUG_SUFFIX, date.today().year)
    ensure_slug_free(db, slug)

    shoot = Shoot(
        client_id=data.client_id,
        title=title,
        description=data.description,
        notes=data.notes,
        shoot_type=data.shoot_type,
        shoot_date=data.shoot_date.isoformat(),
        location=location,
        is_private=data.is_private,
        custom_slug=slug,
        custom_title=data.custom_title,
        seo_tags=list(data.seo_tags),
        gallery_settings=(
            data.gallery_settings.model_dump(by_alias=True, exclude_unset=True)
            if data.gallery_settings else {}
        ),
    )
    db.add(shoot)
    commit(db)
    db.refresh(shoot)
    logger.info("Created shoot %s (%s) for client %s", shoot.id, shoot.custom_slug, shoot.client_id)
    return shoot


def stage_shoot_updates(shoot: Shoot, updates: Dict[str, Any]) -> Shoot:
    """Apply field updates to the instance without committing."""
    if "id" in updates:
        raise ValidationError("id cannot be changed", field="id")
    unknown = set(updates) - UPDATABLE_FIELDS
    if unknown:
        field = sorted(unknown)[0]
        raise ValidationError(f"{field} is not an updatable shoot field", field=field)
    for field in REQUIRED_TEXT_FIELDS:
        if field in updates:
            updates[field] = _require_text(field, updates[field])
    for field in NON_NULLABLE_FIELDS:
        if field in updates and updates[field] is None:
            raise ValidationError(f"{to_camel(field)} cannot be null", field=to_camel(field))
    if isinstance(updates.get("shoot_date"), date):
        updates["shoot_date"] = updates["shoot_date"].isoformat()

    for key, value in updates.items():
        setattr(shoot, key, value)
    shoot.updated_at = datetime.utcnow().isoformat()
    return shoot


def update_shoot(db: Session, shoot_id: int, updates: Dict[str, Any]) -> Shoot:
    shoot = get_shoot(db, shoot_id)
    updates = dict(updates)
    if "custom_slug" in updates:
        updates["custom_slug"] = normalize_slug(updates["custom_slug"] or "")
        ensure_slug_free(db, updates["custom_slug"], shoot_id)
    if "client_id" in updates:
        if updates["client_id"] is not None:
            client_service.get_client(db, updates["client_id"])
    if updates.get("banner_image_id") is not None:
        check_image_membership(db, shoot_id, updates["banner_image_id"], field="bannerImageId")

    stage_shoot_updates(shoot, updates)
    db.add(shoot)
    commit(db)
    db.refresh(shoot)
    return shoot


def reassign_shoot_to_client(db: Session, shoot_id: int, client_id: int) -> Shoot:
    """Move a shoot to another client. The target client must exist."""
    shoot = get_shoot(db, shoot_id)
    client_service.get_client(db, client_id)
    previous = shoot.client_id
    stage_shoot_updates(shoot, {"client_id": client_id})
    db.add(shoot)
    commit(db)
    db.refresh(shoot)
    logger.info("Shoot %s reassigned from client %s to %s", shoot_id, previous, client_id)
    return shoot


def delete_shoot(db: Session, shoot_id: int) -> None:
    """Delete the shoot and its image records in one transaction."""
    shoot = get_shoot(db, shoot_id)
    for image in db.exec(select(Image).where(Image.shoot_id == shoot_id)).all():
        db.delete(image)
    db.delete(shoot)
    commit(db)
    logger.info("Deleted shoot %s", shoot_id)


def record_gallery_view(db: Session, shoot: Shoot) -> Shoot:
    """Count one public view. Done in SQL so concurrent views are never lost."""
    db.execute(
        update(Shoot).where(Shoot.id == shoot.id).values(view_count=Shoot.view_count + 1)
    )
    commit(db)
    db.refresh(shoot)
    return shoot
