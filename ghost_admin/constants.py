"""Read-only defaults for the Ghost Admin API client."""

DEFAULT_HTTP_TIMEOUT: float = 10.0
DEFAULT_VERSION: str = "v3.0"
DEFAULT_GHOST_PATH: str = "ghost"
DEFAULT_USER_AGENT: str = "ghost-admin-python v1"

CONTENT_TYPE: str = "application/json"
AUTH_SCHEME: str = "Ghost"

# Token authentication.
KEY_SEPARATOR: str = ":"
TOKEN_ALGORITHM: str = "HS256"
TOKEN_AUDIENCE: str = "/admin/"
TOKEN_TTL_SECONDS: int = 300  # 5 minutes
