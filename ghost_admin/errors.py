"""Exception hierarchy for the Ghost Admin API client.

Every failure is raised where it is detected. Wrapped library errors are
chained, so ``exc.__cause__`` holds the original exception.
"""

from __future__ import annotations


class GhostError(Exception):
    """Base exception for all client failures."""


class MalformedCredentialError(GhostError, ValueError):
    """Admin API key is not in ``{id}:{secret}`` format."""


class DecodingError(GhostError, ValueError):
    """Secret half of the admin API key is not valid hexadecimal."""


class SigningError(GhostError):
    """Token signature could not be computed."""


class SerializationError(GhostError, TypeError):
    """Request payload could not be encoded as JSON."""


class RequestConstructionError(GhostError, ValueError):
    """HTTP method or URL is not usable for a request."""

    def __init__(self, method: str, url: str, reason: str) -> None:
        self.method = method
        self.url = url
        super().__init__(f"Cannot build {method} request for {url!r}: {reason}")


class TransportError(GhostError, RuntimeError):
    """Request could not be sent or no response was received."""

    def __init__(self, method: str, url: str, reason: object) -> None:
        self.method = method
        self.url = url
        super().__init__(f"Ghost connection error on {method} {url}: {reason}")
