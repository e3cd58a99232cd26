"""
Client Service Module

Durable CRUD for clients. Slugs are derived from the client's name once, on
creation; renaming keeps the old slug until ``regenerate_client_slug`` is
called explicitly.
"""
import logging
from typing import List, Optional

from sqlmodel import Session, select

from studio.core.errors import ConflictError, NotFoundError, ValidationError
from studio.core.slugs import slugify
from studio.db.session import commit
from studio.models.client import Client
from studio.models.shoot import Shoot
from studio.schemas.client import ClientCreate, ClientUpdate

logger = logging.getLogger(__name__)


def get_client(db: Session, client_id: int) -> Client:
    client = db.get(Client, client_id)
    if not client:
        raise NotFoundError("Client", client_id)
    return client


def get_client_by_slug(db: Session, slug: str) -> Client:
    client = db.exec(select(Client).where(Client.slug == slug)).first()
    if not client:
        raise NotFoundError("Client", slug)
    return client


def get_client_by_email(db: Session, email: str) -> Optional[Client]:
    return db.exec(select(Client).where(Client.email == email)).first()


def list_clients(db: Session, skip: int = 0, limit: int = 100) -> List[Client]:
    return db.exec(select(Client).order_by(Client.name).offset(skip).limit(limit)).all()


def _client_slug(name: str) -> str:
    slug = slugify(name)
    if not slug:
        raise ValidationError("name must contain at least one letter or digit", field="name")
    return slug


def _ensure_slug_free(db: Session, slug: str, client_id: Optional[int] = None) -> None:
    existing = db.exec(select(Client).where(Client.slug == slug)).first()
    if existing and existing.id != client_id:
        raise ConflictError(f"A client with slug '{slug}' already exists")


def _ensure_email_free(db: Session, email: Optional[str], client_id: Optional[int] = None) -> None:
    if not email:
        return
    existing = get_client_by_email(db, email)
    if existing and existing.id != client_id:
        raise ConflictError(f"A client with email {email} already exists")


def create_client(db: Session, data: ClientCreate, user_id: Optional[str] = None) -> Client:
    """
    Create a client. A slug collision is an error, never silently disambiguated:
    two "Sarah Johnson"s need distinguishable names.
    """
    if not data.name.strip():
        raise ValidationError("name is required", field="name")
    slug = _client_slug(data.name)
    _ensure_slug_free(db, slug)
    _ensure_email_free(db, data.email)

    client = Client(
        name=data.name.strip(),
        slug=slug,
        email=data.email,
        phone=data.phone,
        address=data.address,
        user_id=user_id,
    )
    db.add(client)
    commit(db)
    db.refresh(client)
    logger.info("Created client %s (%s)", client.id, client.slug)
    return client


def update_client(db: Session, client_id: int, data: ClientUpdate) -> Client:
    client = get_client(db, client_id)
    updates = data.model_dump(exclude_unset=True)

    if "name" in updates and not (updates["name"] or "").strip():
        raise ValidationError("name cannot be blank", field="name")
    if "email" in updates:
        _ensure_email_free(db, updates["email"], client_id)

    for key, value in updates.items():
        setattr(client, key, value)

    db.add(client)
    commit(db)
    db.refresh(client)
    return client


def regenerate_client_slug(db: Session, client_id: int) -> Client:
    """Re-derive the slug from the current name."""
    client = get_client(db, client_id)
    slug = _client_slug(client.name)
    if slug == client.slug:
        return client
    _ensure_slug_free(db, slug, client_id)

    previous = client.slug
    client.slug = slug
    db.add(client)
    commit(db)
    db.refresh(client)
    logger.info("Client %s slug changed from %s to %s", client_id, previous, slug)
    return client


def delete_client(db: Session, client_id: int) -> None:
    """Clients with shoots are never removed; reassign or delete the shoots first."""
    client = get_client(db, client_id)
    has_shoots = db.exec(select(Shoot.id).where(Shoot.client_id == client_id)).first()
    if has_shoots is not None:
        raise ConflictError("Client still has shoots; reassign or delete them first")
    db.delete(client)
    commit(db)
    logger.info("Deleted client %s", client_id)
