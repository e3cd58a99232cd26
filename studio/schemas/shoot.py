from datetime import date
from typing import Any, Dict, List, Literal, Optional
from pydantic import Field, computed_field

from studio.models.shoot import ShootType
from studio.schemas.base import CamelModel, PatchModel
from studio.schemas.image import ImageRead


class GallerySettings(PatchModel):
    """How a shoot's public gallery looks. Stored on the shoot in camelCase."""
    layout_style: Optional[Literal["automatic", "masonry", "square", "grid"]] = None
    image_spacing: Optional[Literal["tight", "normal", "loose"]] = None
    image_spacing_value: Optional[int] = Field(default=None, ge=0, le=50)
    border_style: Optional[Literal["sharp", "rounded", "circular"]] = None
    border_radius: Optional[int] = Field(default=None, ge=0, le=50)
    background_color: Optional[str] = None
    dominant_aspect_ratio: Optional[str] = None
    cover_alignment: Optional[Literal["left", "center", "right"]] = None
    cover_pic_size: Optional[int] = Field(default=None, ge=10, le=100)
    nav_position: Optional[Literal["top", "bottom", "left", "right"]] = None


class ShootCreate(CamelModel):
    client_id: int
    title: str
    shoot_type: ShootType
    shoot_date: date
    location: str
    description: Optional[str] = None
    notes: Optional[str] = None
    is_private: bool = False
    custom_slug: Optional[str] = None  # Derived from the title when omitted
    custom_title: Optional[str] = None
    seo_tags: List[str] = []
    gallery_settings: Optional[GallerySettings] = None


class ShootCustomization(PatchModel):
    """
    Everything about a shoot's gallery that can change in one save.

    ``image_sequences`` maps every image id of the shoot to its position;
    ``banner_image_id`` set to null clears the album cover.
    """
    title: Optional[str] = None
    location: Optional[str] = None
    shoot_date: Optional[date] = None
    description: Optional[str] = None
    shoot_type: Optional[ShootType] = None
    client_id: Optional[int] = None
    is_private: Optional[bool] = None
    notes: Optional[str] = None
    seo_tags: Optional[List[str]] = None
    custom_title: Optional[str] = None
    custom_slug: Optional[str] = None
    banner_image_id: Optional[int] = None
    gallery_settings: Optional[GallerySettings] = None
    image_sequences: Optional[Dict[int, int]] = None


class ShootRead(CamelModel):
    id: int
    client_id: int
    title: str
    description: Optional[str] = None
    notes: Optional[str] = None
    shoot_type: ShootType
    shoot_date: Optional[str] = None
    location: Optional[str] = None
    is_private: bool
    custom_slug: str
    custom_title: Optional[str] = None
    seo_tags: List[str] = []
    banner_image_id: Optional[int] = None
    gallery_settings: Dict[str, Any] = {}
    view_count: int
    created_at: Optional[str] = None
    updated_at: Optional[str] = None

    @computed_field
    @property
    def display_title(self) -> str:
        return self.custom_title or self.title


class ShootWithImages(CamelModel):
    shoot: ShootRead
    images: List[ImageRead] = []


# Ordering and cover requests
class ImageOrder(CamelModel):
    image_ids: List[int]


class ImageMove(CamelModel):
    direction: Literal["up", "down"]


class CoverSelection(CamelModel):
    image_id: Optional[int] = None


class ClientReassignment(CamelModel):
    client_id: int
