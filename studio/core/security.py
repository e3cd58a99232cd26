"""
Token helpers.

Logins happen at the external identity provider; this service only verifies
the signed token it hands out. ``create_access_token`` exists for scripts and
tests that need to act as staff without going through the provider.
"""
from datetime import datetime, timedelta
from typing import Any, Dict, Optional

from jose import jwt

from studio.core.config import settings


def create_access_token(
    subject: str,
    role: str,
    email: Optional[str] = None,
    expires_delta: Optional[timedelta] = None,
) -> str:
    expire = datetime.utcnow() + (expires_delta or timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES))
    to_encode: Dict[str, Any] = {"sub": subject, "role": role, "exp": expire}
    if email:
        to_encode["email"] = email
    return jwt.encode(to_encode, settings.SECRET_KEY, algorithm=settings.ALGORITHM)


def decode_access_token(token: str) -> Dict[str, Any]:
    """Raises ``jose.JWTError`` for bad signatures and expired tokens."""
    return jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.ALGORITHM])
