"""
Client error taxonomy.

Every failure of a WorkOS call is classified into one of these types. The
client facade returns them as values inside an ApiResult; ApiResult.unwrap()
raises them, so they are also regular exceptions.
"""

from enum import Enum
from typing import Any, Dict, List, Optional


class ClientError(Exception):
    """Base error for all client failures."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class ConfigError(ClientError):
    """Caller misconfiguration (bad credentials, base URL or descriptor). Never retried."""


class TransportErrorKind(str, Enum):
    TIMEOUT = "timeout"
    CONNECTION_FAILED = "connection_failed"
    OTHER = "other"


class TransportError(ClientError):
    """The HTTP exchange could not be completed at all."""

    def __init__(self, kind: TransportErrorKind, detail: str):
        self.kind = kind
        self.detail = detail
        super().__init__(f"Transport error ({kind.value}): {detail}")


class DecodeError(ClientError):
    """A success response body does not match the expected schema."""

    def __init__(self, message: str, body: bytes = b""):
        self.body = body
        super().__init__(message)


class ApiError(ClientError):
    """4xx response from the WorkOS API."""

    def __init__(
        self,
        status_code: int,
        message: str,
        code: Optional[str] = None,
        errors: Optional[List[Dict[str, Any]]] = None,
        request_id: Optional[str] = None,
        body: str = "",
    ):
        self.status_code = status_code
        self.code = code
        self.errors = errors
        self.request_id = request_id
        self.body = body
        super().__init__(message)

    def __str__(self) -> str:
        if self.code:
            return f"API error {self.status_code} ({self.code}): {self.message}"
        return f"API error {self.status_code}: {self.message}"


class UnauthorizedError(ApiError):
    """Missing or invalid API key (401)."""


class NotFoundError(ApiError):
    """Resource not found (404)."""


class RateLimitError(ApiError):
    """Too many requests (429)."""

    def __init__(self, *args, retry_after: Optional[float] = None, **kwargs):
        self.retry_after = retry_after
        super().__init__(*args, **kwargs)


class ServerError(ApiError):
    """5xx response. Callers may retry with backoff."""

    def __str__(self) -> str:
        return f"Server error {self.status_code}: {self.message}"


class UnexpectedStatusError(ClientError):
    """Status code outside 2xx/4xx/5xx (1xx, 3xx)."""

    def __init__(self, status_code: int):
        self.status_code = status_code
        super().__init__(f"Unexpected HTTP status {status_code}")
