from typing import Optional
from pydantic import Field

from studio.schemas.base import CamelModel, PatchModel


class ImageCreate(CamelModel):
    """An upload that object storage already accepted."""
    shoot_id: int
    filename: str = Field(min_length=1)
    storage_path: str = Field(min_length=1)
    thumbnail_path: Optional[str] = None
    original_filename: Optional[str] = None
    file_size: Optional[int] = Field(default=None, ge=0)
    is_private: bool = False


class ImageUpdate(PatchModel):
    """
    Editable image fields. Setting ``shoot_id`` moves the image to another
    shoot (used to archive images out of a client gallery). The sequence is
    owned by the ordering endpoints and cannot be set here.
    """
    shoot_id: Optional[int] = None
    filename: Optional[str] = Field(default=None, min_length=1)
    thumbnail_path: Optional[str] = None
    original_filename: Optional[str] = None
    is_private: Optional[bool] = None


class ImageRead(CamelModel):
    id: int
    shoot_id: int
    filename: str
    storage_path: str
    thumbnail_path: Optional[str] = None
    original_filename: Optional[str] = None
    file_size: Optional[int] = None
    is_private: bool
    sequence: int
    download_count: int
    created_at: Optional[str] = None
