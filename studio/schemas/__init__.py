from .client import ClientCreate, ClientRead, ClientUpdate, ClientWithShoots
from .image import ImageCreate, ImageRead, ImageUpdate
from .shoot import (
    ClientReassignment, CoverSelection, GallerySettings, ImageMove, ImageOrder,
    ShootCreate, ShootCustomization, ShootRead, ShootWithImages,
)
from .site_config import ConfigPathUpdate, ConfigUpdateResult
