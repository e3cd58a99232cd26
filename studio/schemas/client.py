from pydantic import EmailStr
from typing import List, Optional

from studio.schemas.base import CamelModel, PatchModel
from studio.schemas.shoot import ShootRead


# Properties to receive via API on creation
class ClientCreate(CamelModel):
    name: str
    email: EmailStr
    phone: Optional[str] = None
    address: Optional[str] = None


# Properties to receive via API on update. The slug is deliberately absent:
# it only changes through the explicit regenerate endpoint
class ClientUpdate(PatchModel):
    name: Optional[str] = None
    email: Optional[EmailStr] = None
    phone: Optional[str] = None
    address: Optional[str] = None


# Properties to return to client
class ClientRead(CamelModel):
    id: int
    name: str
    slug: str
    email: Optional[str] = None
    phone: Optional[str] = None
    address: Optional[str] = None
    user_id: Optional[str] = None
    created_at: Optional[str] = None


class ClientWithShoots(CamelModel):
    client: ClientRead
    shoots: List[ShootRead] = []
