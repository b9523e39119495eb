"""Ghost Admin API client.

Builds authenticated requests for the Ghost Admin API and sends them through
a urllib opener. Every request carries a freshly signed token — the
admin_api_key is split as {id}:{secret} and signed into a short-lived JWT.

Responses are returned raw; status codes and bodies are left to the caller.
"""

from __future__ import annotations

import http.client
import json
import logging
import re
import urllib.error
import urllib.request
from dataclasses import dataclass
from typing import Any, Callable
from urllib.parse import urlsplit

from ghost_admin.constants import (
    AUTH_SCHEME,
    CONTENT_TYPE,
    DEFAULT_GHOST_PATH,
    DEFAULT_HTTP_TIMEOUT,
    DEFAULT_USER_AGENT,
    DEFAULT_VERSION,
)
from ghost_admin.errors import RequestConstructionError, SerializationError, TransportError
from ghost_admin.ghost_jwt import build_ghost_jwt

logger = logging.getLogger(__name__)

# RFC 7230 token characters.
_METHOD_RE = re.compile(r"[!#$%&'*+\-.^_`|~0-9A-Za-z]+")
# urlsplit strips tabs and newlines instead of failing on them.
_CONTROL_CHARS_RE = re.compile(r"[\x00-\x1f\x7f]")


@dataclass(frozen=True)
class GhostConfig:
    api_url: str  # e.g. https://your-ghost.com
    admin_api_key: str = ""  # Format: {id}:{secret}; empty disables auth
    version: str = DEFAULT_VERSION
    ghost_path: str = DEFAULT_GHOST_PATH
    user_agent: str = ""
    timeout: float = DEFAULT_HTTP_TIMEOUT


class GhostClient:
    """Client for calling the Ghost Admin API."""

    def __init__(
        self,
        config: GhostConfig,
        opener: urllib.request.OpenerDirector | None = None,
        clock: Callable[[], float] | None = None,
    ) -> None:
        self.config = config
        self._opener = opener or urllib.request.build_opener()
        self._clock = clock

    def new_request(
        self, method: str, path: str, data: Any = None
    ) -> urllib.request.Request:
        """Build a request for ``api_url + path`` with data marshaled to JSON.

        The JSON object needs to follow the structure of Ghost request
        objects, e.g. ``{"posts": [{...}]}``.

        Raises:
            SerializationError: If data cannot be encoded as JSON.
            RequestConstructionError: If the method or URL is invalid.
            MalformedCredentialError, DecodingError, SigningError: If the
                configured admin_api_key cannot produce a token.
        """
        url = f"{self.config.api_url}{path}"

        body: bytes | None = None
        if data is not None:
            try:
                body = json.dumps(data, allow_nan=False).encode("utf-8")
            except (TypeError, ValueError) as exc:
                raise SerializationError(f"Request: {exc}") from exc

        method = method or "GET"
        if not _METHOD_RE.fullmatch(method):
            raise RequestConstructionError(method, url, "invalid method")
        if _CONTROL_CHARS_RE.search(url):
            raise RequestConstructionError(method, url, "URL contains control characters")

        try:
            parts = urlsplit(url)
            if not parts.scheme or not parts.netloc:
                raise ValueError("URL must include a scheme and host")
            req = urllib.request.Request(url, data=body, method=method)
        except ValueError as exc:
            raise RequestConstructionError(method, url, str(exc)) from exc

        req.add_header("User-Agent", self.config.user_agent or DEFAULT_USER_AGENT)
        req.add_header("Content-Type", CONTENT_TYPE)
        req.add_header("Accept-Version", self.config.version)
        if self.config.admin_api_key:
            token = build_ghost_jwt(self.config.admin_api_key, clock=self._clock)  # allow-secret — runtime-generated JWT
            req.add_header("Authorization", f"{AUTH_SCHEME} {token}")

        logger.debug(
            "Built %s %s (authenticated=%s)", method, url, bool(self.config.admin_api_key)
        )
        return req

    def do(self, req: urllib.request.Request) -> Any:
        """Send a built request and return the raw response.

        Non-2xx responses are returned as-is (urllib's HTTPError is itself a
        response object); only failures to get a response at all raise.
        """
        method = req.get_method()
        try:
            resp = self._opener.open(req, timeout=self.config.timeout)
        except urllib.error.HTTPError as exc:
            logger.debug("%s %s -> %s", method, req.full_url, exc.code)
            return exc
        except urllib.error.URLError as exc:
            raise TransportError(method, req.full_url, exc.reason) from exc
        except (OSError, ValueError, http.client.HTTPException) as exc:
            raise TransportError(method, req.full_url, exc) from exc

        logger.debug("%s %s -> %s", method, req.full_url, resp.status)
        return resp

    def request(self, method: str, path: str, data: Any = None) -> Any:
        """Build and send an API request in one step."""
        return self.do(self.new_request(method, path, data))

    # Path helpers, e.g. ("admin", "posts") -> /ghost/api/admin/posts/

    def endpoint(self, api: str, resource: str) -> str:
        return f"/{self.config.ghost_path}/api/{api}/{resource}/"

    def endpoint_for_id(self, api: str, resource: str, resource_id: str) -> str:
        return self.endpoint(api, resource) + f"{resource_id}/"

    def endpoint_for_slug(self, api: str, resource: str, slug: str) -> str:
        return self.endpoint(api, resource) + f"slug/{slug}/"
