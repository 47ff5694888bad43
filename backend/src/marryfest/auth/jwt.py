"""JWT token generation and validation

Identity is issued upstream after email verification; this service only
needs to read it back. Tokens carry:

- sub / email: Verified email of the caller (case-insensitive)
- iat: Unix timestamp when the token was created
- exp: Unix timestamp when the token expires (iat + JWT_EXPIRY_MINUTES)

Signed with HS256 using JWT_SECRET.
"""

from datetime import datetime, timedelta, timezone
from typing import Dict, Any, Optional

import jwt

from ..config import get_settings


def create_access_token(email: str, expires_minutes: Optional[int] = None) -> str:
    """Create a signed access token for a verified identity.

    Args:
        email: Verified email address
        expires_minutes: Lifetime override (defaults to JWT_EXPIRY_MINUTES)

    Returns:
        str: Signed JWT token
    """
    settings = get_settings()
    now = datetime.now(timezone.utc)
    lifetime = settings.JWT_EXPIRY_MINUTES if expires_minutes is None else expires_minutes

    payload = {
        'sub': email,
        'email': email,
        'iat': int(now.timestamp()),
        'exp': int((now + timedelta(minutes=lifetime)).timestamp()),
    }
    return jwt.encode(payload, settings.JWT_SECRET, algorithm=settings.JWT_ALGORITHM)


def decode_token(token: str) -> Dict[str, Any]:
    """Decode and validate a JWT token.

    Args:
        token: JWT token string

    Returns:
        dict: Decoded token payload with claims

    Raises:
        jwt.ExpiredSignatureError: If token has expired
        jwt.InvalidTokenError: If token is invalid or tampered
    """
    settings = get_settings()
    return jwt.decode(token, settings.JWT_SECRET, algorithms=[settings.JWT_ALGORITHM])
