"""
Client Model Module

This module defines the Client model representing the studio's customers.
Clients are created and maintained by staff; shoots point at them through a
real foreign key.
"""
from typing import Optional
from sqlmodel import SQLModel, Field

from datetime import datetime


class Client(SQLModel, table=True):
    """
    Client model representing a studio customer.

    Attributes:
        id: Auto-incrementing primary key
        name: Display name (required)
        slug: URL-safe identifier derived from the name. Unique and stable:
            renaming a client does not change it, only an explicit
            regeneration does
        email: Contact email, unique when present
        phone: Contact phone number
        address: Optional postal address
        user_id: Subject of the staff identity that created the client
        created_at: ISO timestamp of when the client record was created
    """
    __tablename__ = "clients"

    # Primary key
    id: Optional[int] = Field(default=None, primary_key=True)

    # Identity
    name: str = Field(nullable=False)
    slug: str = Field(nullable=False, unique=True, index=True)

    # Contact details
    email: Optional[str] = Field(default=None, unique=True, index=True)
    phone: Optional[str] = None
    address: Optional[str] = None

    # Owning staff member (subject claim from the identity provider)
    user_id: Optional[str] = None

    # Audit timestamp - automatically set to current UTC time on creation
    created_at: Optional[str] = Field(default_factory=lambda: datetime.utcnow().isoformat())
