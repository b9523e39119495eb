"""Ghost Admin API JWT builder.

Builds an HS256 JWT for Ghost Admin API token authentication.
The admin_api_key format is "{id}:{secret}" — the id becomes the kid header,
and the hex-decoded secret is the HMAC signing key.

https://ghost.org/docs/admin-api/#token-authentication
"""

from __future__ import annotations

import binascii
import hashlib
import hmac
import json
import time
from base64 import urlsafe_b64encode
from typing import Callable

from ghost_admin.constants import (
    KEY_SEPARATOR,
    TOKEN_ALGORITHM,
    TOKEN_AUDIENCE,
    TOKEN_TTL_SECONDS,
)
from ghost_admin.errors import DecodingError, MalformedCredentialError, SigningError


def split_admin_api_key(admin_api_key: str) -> tuple[str, bytes]:
    """Split an admin key into its key id and decoded secret.

    Raises:
        MalformedCredentialError: If the key is not two non-empty parts.
        DecodingError: If the secret is not valid hexadecimal.
    """
    parts = admin_api_key.split(KEY_SEPARATOR)
    if len(parts) != 2 or not all(parts):
        raise MalformedCredentialError("Ghost admin_api_key must be in {id}:{secret} format")
    key_id, secret_hex = parts

    try:
        secret = binascii.unhexlify(secret_hex)
    except (binascii.Error, ValueError) as exc:
        raise DecodingError(f"Ghost admin_api_key secret is not valid hex: {exc}") from exc

    return key_id, secret


def _b64(data: bytes) -> str:
    return urlsafe_b64encode(data).rstrip(b"=").decode("ascii")


def build_ghost_jwt(
    admin_api_key: str,
    clock: Callable[[], float] | None = None,
) -> str:
    """Build an HS256 JWT for Ghost Admin API authentication.

    Args:
        admin_api_key: Ghost admin key in "{id}:{secret}" format.
        clock: Returns the current unix time (injectable for testing).
            Defaults to time.time.

    Returns:
        Signed JWT string, valid for five minutes from now.

    Raises:
        MalformedCredentialError: If the key format is invalid.
        DecodingError: If the secret is not hexadecimal.
        SigningError: If the token could not be signed.
    """
    key_id, secret = split_admin_api_key(admin_api_key)

    now = int((clock or time.time)())
    header = {"alg": TOKEN_ALGORITHM, "typ": "JWT", "kid": key_id}
    payload = {"iat": now, "exp": now + TOKEN_TTL_SECONDS, "aud": TOKEN_AUDIENCE}

    try:
        header_b64 = _b64(json.dumps(header, separators=(",", ":")).encode())
        payload_b64 = _b64(json.dumps(payload, separators=(",", ":")).encode())

        signing_input = f"{header_b64}.{payload_b64}"
        signature = hmac.new(secret, signing_input.encode(), hashlib.sha256).digest()
    except (TypeError, ValueError) as exc:
        raise SigningError(f"Could not sign Ghost admin token: {exc}") from exc

    return f"{signing_input}.{_b64(signature)}"
