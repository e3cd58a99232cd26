from typing import Any, List

from studio.schemas.base import CamelModel


class ConfigPathUpdate(CamelModel):
    path: str  # Dotted path, e.g. "contact.business.name"
    value: Any


class ConfigUpdateResult(CamelModel):
    success: bool = True
    message: str
    updated_fields: List[str] = []
    timestamp: str
