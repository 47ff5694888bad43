"""Caller identity extraction (bearer JWT)."""

from .jwt import create_access_token, decode_token
from .dependencies import get_current_identity

__all__ = ["create_access_token", "decode_token", "get_current_identity"]
