"""FastAPI dependencies for extracting the caller's verified identity.

Usage:
    @router.get("/profiles/me")
    def read_me(identity: str = Depends(get_current_identity)):
        ...
"""

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
import jwt

from ..domain.profiles.models import normalize_identity
from .jwt import decode_token


security = HTTPBearer()


def get_current_identity(
    credentials: HTTPAuthorizationCredentials = Depends(security),
) -> str:
    """Validate the bearer token and return the caller's verified email.

    Raises:
        HTTPException 401: If the token is invalid, expired or has no email claim
    """
    try:
        payload = decode_token(credentials.credentials)
    except jwt.ExpiredSignatureError:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Token has expired",
            headers={"WWW-Authenticate": "Bearer"},
        )
    except jwt.InvalidTokenError as e:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=f"Invalid token: {str(e)}",
            headers={"WWW-Authenticate": "Bearer"},
        )

    email = payload.get("email") or payload.get("sub")
    if not email:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid token: missing email claim",
            headers={"WWW-Authenticate": "Bearer"},
        )

    return normalize_identity(email)
