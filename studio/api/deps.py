"""
API Dependencies Module

This module provides FastAPI dependency functions for identity and for the
process-wide site configuration store.

Logins happen at the external identity provider. Requests carry the
provider's signed token either as a bearer token (API clients) or in the
HTTP-only ``access_token`` cookie (browser clients); this module only
verifies it and resolves a staff-or-client identity.
"""
from typing import Optional

from fastapi import Depends, HTTPException, Request, status
from fastapi.security import OAuth2PasswordBearer
from jose import JWTError
from pydantic import BaseModel, ValidationError

from studio.core.config import settings
from studio.core.security import decode_access_token
from studio.site_config import SiteConfigStore

# auto_error=False allows us to check cookies as a fallback
reusable_oauth2 = OAuth2PasswordBearer(
    tokenUrl=f"{settings.API_V1_STR}/auth/login",
    auto_error=False  # Don't raise error immediately if Authorization header is missing
)


class Identity(BaseModel):
    """Resolved caller: ``sub`` and ``role`` claims, plus email when present."""
    subject: str
    role: str
    email: Optional[str] = None

    @property
    def is_staff(self) -> bool:
        return self.role in settings.STAFF_ROLES


def get_current_identity(
    request: Request,
    token: Optional[str] = Depends(reusable_oauth2),
) -> Identity:
    """
    Dependency that resolves the caller from the provider-issued token.

    The function first checks for a bearer token in the Authorization header.
    If not found, it falls back to the access_token cookie.

    Raises:
        HTTPException 401: If no token is provided
        HTTPException 403: If the token is invalid or expired
    """
    # Try Authorization header first, then fall back to cookie
    if not token:
        token = request.cookies.get("access_token")
        # Cookie format is "Bearer <token>", so we need to extract the token
        if token and token.startswith("Bearer "):
            token = token.replace("Bearer ", "")

    # Require authentication
    if not token:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
            headers={"WWW-Authenticate": "Bearer"},
        )

    # Decode and validate the JWT token
    try:
        payload = decode_access_token(token)
        return Identity(
            subject=payload.get("sub"),
            role=payload.get("role") or "client",
            email=payload.get("email"),
        )
    except (JWTError, ValidationError):
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Could not validate credentials",
        )


def require_staff(identity: Identity = Depends(get_current_identity)) -> Identity:
    """
    Dependency that requires a staff identity (staff, admin or super_admin).
    """
    if not identity.is_staff:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="The user doesn't have enough privileges"
        )
    return identity


def get_site_config_store(request: Request) -> SiteConfigStore:
    """The singleton built at startup (see ``studio.main``)."""
    return request.app.state.site_config
