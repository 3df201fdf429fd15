"""Constants package for the Alliance of Magicians site."""

from .auth import ACCESS_TOKEN_COOKIE, ACCESS_TOKEN_EXPIRE_MINUTES, ALGORITHM, SECRET_KEY
from .magicians import (
    CAP_MANAGE_MAGICIANS,
    FEATURED_MAGICIAN_OPTION,
    FEATURED_NONCE_ACTION,
    MAGICIAN_POST_TYPE,
)
from .roles import CAP_MANAGE_OPTIONS, DEFAULT_ROLE, RoleName, get_role_capabilities

__all__ = [
    # Role constants
    "RoleName",
    "DEFAULT_ROLE",
    "CAP_MANAGE_OPTIONS",
    "get_role_capabilities",
    # Auth constants
    "SECRET_KEY",
    "ALGORITHM",
    "ACCESS_TOKEN_EXPIRE_MINUTES",
    "ACCESS_TOKEN_COOKIE",
    # Magician constants
    "MAGICIAN_POST_TYPE",
    "FEATURED_MAGICIAN_OPTION",
    "FEATURED_NONCE_ACTION",
    "CAP_MANAGE_MAGICIANS",
]
