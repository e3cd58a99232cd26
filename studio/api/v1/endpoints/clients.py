"""
Client Endpoints Module

Staff-only CRUD for clients. Slugs are assigned on creation and only change
through the explicit regenerate endpoint.
"""
from typing import List
from fastapi import APIRouter, Depends, status
from sqlmodel import Session

from studio.api import deps
from studio.db.session import get_db
from studio.schemas.client import ClientCreate, ClientRead, ClientUpdate, ClientWithShoots
from studio.services import clients as client_service
from studio.services import shoots as shoot_service

router = APIRouter()


@router.get("", response_model=List[ClientRead])
def list_clients(
    skip: int = 0,
    limit: int = 100,
    db: Session = Depends(get_db),
    staff: deps.Identity = Depends(deps.require_staff),
):
    """
    Retrieve a paginated list of clients, ordered by name.
    """
    return client_service.list_clients(db, skip=skip, limit=limit)


@router.post("", response_model=ClientRead, status_code=status.HTTP_201_CREATED)
def create_client(
    client_in: ClientCreate,
    db: Session = Depends(get_db),
    staff: deps.Identity = Depends(deps.require_staff),
):
    """
    Create a new client owned by the calling staff member.

    Raises:
        409: If the derived slug or the email is already taken
    """
    return client_service.create_client(db, client_in, user_id=staff.subject)


@router.get("/{slug}", response_model=ClientWithShoots)
def read_client(
    slug: str,
    db: Session = Depends(get_db),
    staff: deps.Identity = Depends(deps.require_staff),
):
    """
    Get a client by slug together with all of its shoots.
    """
    client = client_service.get_client_by_slug(db, slug)
    return {"client": client, "shoots": shoot_service.list_shoots_by_client(db, client.id)}


@router.patch("/{client_id}", response_model=ClientRead)
def update_client(
    client_id: int,
    client_update: ClientUpdate,
    db: Session = Depends(get_db),
    staff: deps.Identity = Depends(deps.require_staff),
):
    return client_service.update_client(db, client_id, client_update)


@router.post("/{client_id}/regenerate-slug", response_model=ClientRead)
def regenerate_client_slug(
    client_id: int,
    db: Session = Depends(get_db),
    staff: deps.Identity = Depends(deps.require_staff),
):
    """
    Re-derive the slug from the client's current name.
    """
    return client_service.regenerate_client_slug(db, client_id)


@router.delete("/{client_id}")
def delete_client(
    client_id: int,
    db: Session = Depends(get_db),
    staff: deps.Identity = Depends(deps.require_staff),
):
    """
    Delete a client. Refused with 409 while shoots still reference it.
    """
    client_service.delete_client(db, client_id)
    return {"status": "success", "detail": "Client deleted"}
