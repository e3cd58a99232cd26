"""
Image Model Module

One uploaded photo. The bytes live in object storage; this record only keeps
where they are and how the image is ordered inside its shoot.
"""
from typing import Optional
from sqlmodel import SQLModel, Field

from datetime import datetime


class Image(SQLModel, table=True):
    """
    Image table model.

    ``sequence`` defines the display order within a shoot. Values are strictly
    ordered but need not be dense: deleting an image leaves a gap. No unique
    constraint on (shoot_id, sequence) because a swap passes through a
    duplicate inside one transaction; the sequencing service keeps the values
    distinct at rest.
    """
    __tablename__ = "images"

    # Primary key
    id: Optional[int] = Field(default=None, primary_key=True)

    # Owning shoot
    shoot_id: int = Field(foreign_key="shoots.id", nullable=False, index=True)

    # Storage
    filename: str = Field(nullable=False)
    storage_path: str = Field(nullable=False)  # Path or URL returned by object storage
    thumbnail_path: Optional[str] = None
    original_filename: Optional[str] = None
    file_size: Optional[int] = None  # Bytes

    is_private: bool = False

    # Ordering and counters
    sequence: int = 0
    download_count: int = 0

    created_at: Optional[str] = Field(default_factory=lambda: datetime.utcnow().isoformat())
