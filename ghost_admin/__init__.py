"""ghost-admin: authenticated client for the Ghost Admin API.

Signs short-lived admin tokens from a "{id}:{secret}" key and builds
JSON requests against arbitrary Admin API paths.
"""

__version__ = "0.1.0"

from ghost_admin.client import GhostClient, GhostConfig
from ghost_admin.config import load_config
from ghost_admin.errors import (
    DecodingError,
    GhostError,
    MalformedCredentialError,
    RequestConstructionError,
    SerializationError,
    SigningError,
    TransportError,
)
from ghost_admin.ghost_jwt import build_ghost_jwt

__all__ = [
    "GhostClient",
    "GhostConfig",
    "load_config",
    "build_ghost_jwt",
    "GhostError",
    "MalformedCredentialError",
    "DecodingError",
    "SigningError",
    "SerializationError",
    "RequestConstructionError",
    "TransportError",
]
