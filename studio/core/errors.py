"""
Domain Error Module

Typed errors raised by the services. The HTTP layer in ``studio.main`` is the
only place that turns them into responses, using ``status_code`` and
``public_message``.
"""
from typing import Optional


class StudioError(Exception):
    """Base class for every error raised by the studio services."""
    status_code: int = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    @property
    def public_message(self) -> str:
        return self.message


class ValidationError(StudioError):
    """Malformed or missing input. Always caused by the caller."""
    status_code = 400

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message)
        self.field = field


class NotFoundError(StudioError):
    """A referenced id does not exist."""
    status_code = 404

    def __init__(self, resource: str, identifier=None):
        detail = f"{resource} {identifier} not found" if identifier is not None else f"{resource} not found"
        super().__init__(detail)
        self.resource = resource
        self.identifier = identifier

    @property
    def public_message(self) -> str:
        return "Resource not found"


class ConflictError(StudioError):
    """Uniqueness violation, e.g. a slug that is already taken."""
    status_code = 409


class StorageFailure(StudioError):
    """A durable read or write failed. Prior state is left intact."""
    status_code = 500

    @property
    def public_message(self) -> str:
        return "Storage failure, please try again"
