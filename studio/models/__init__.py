from .client import Client
from .shoot import Shoot, ShootType
from .image import Image

__all__ = [
    "Client",
    "Shoot", "ShootType",
    "Image",
]
