"""
Shoot Model Module

This module defines the Shoot model: one photo or video engagement for a
client, together with how its public gallery looks.
"""
from enum import Enum
from typing import Any, Dict, List, Optional
from sqlmodel import SQLModel, Field, AutoString, Column, JSON

from datetime import datetime


class ShootType(str, Enum):
    wedding = "wedding"
    portrait = "portrait"
    corporate = "corporate"
    event = "event"
    family = "family"
    maternity = "maternity"
    engagement = "engagement"
    commercial = "commercial"
    lifestyle = "lifestyle"
    other = "other"


class Shoot(SQLModel, table=True):
    """
    Shoot table model.

    Invariants kept by the services (not by the schema):
        - banner_image_id, if set, references an Image whose shoot_id is this shoot
        - view_count never decreases

    Attributes:
        id: Auto-incrementing primary key
        client_id: Foreign key to the owning Client
        title: Working title (required)
        description: Free-text description shown on the gallery
        notes: Internal staff notes
        shoot_type: Category tag, one of ShootType
        shoot_date: Date of the shoot in ISO format (YYYY-MM-DD)
        location: Where the shoot took place
        is_private: Private galleries are never served publicly
        custom_slug: Unique public URL slug
        custom_title: Display title, falls back to title
        seo_tags: JSON array of tag strings
        banner_image_id: Album cover image, nullable
        gallery_settings: JSON object with the gallery appearance settings
        view_count: Number of public gallery views
        created_at / updated_at: ISO timestamps
    """
    __tablename__ = "shoots"

    # Primary key
    id: Optional[int] = Field(default=None, primary_key=True)

    # Owning client
    client_id: int = Field(foreign_key="clients.id", nullable=False, index=True)

    # Basic shoot information
    title: str = Field(nullable=False)
    description: Optional[str] = None
    notes: Optional[str] = None
    shoot_type: ShootType = Field(default=ShootType.other, sa_type=AutoString)
    shoot_date: Optional[str] = None
    location: Optional[str] = None

    # Visibility - private galleries are only visible to staff and the client
    is_private: bool = False

    # Public presentation
    custom_slug: str = Field(nullable=False, unique=True, index=True)
    custom_title: Optional[str] = None
    seo_tags: List[str] = Field(default_factory=list, sa_column=Column(JSON))

    # Album cover. Plain column (no FK) because images already point back at shoots
    banner_image_id: Optional[int] = Field(default=None, index=True)

    # Layout, spacing, borders, colours, cover alignment, nav position
    gallery_settings: Dict[str, Any] = Field(default_factory=dict, sa_column=Column(JSON))

    # Monotonic counter, only ever incremented by public views
    view_count: int = 0

    # Audit timestamps
    created_at: Optional[str] = Field(default_factory=lambda: datetime.utcnow().isoformat())
    updated_at: Optional[str] = Field(default_factory=lambda: datetime.utcnow().isoformat())

    @property
    def display_title(self) -> str:
        return self.custom_title or self.title
