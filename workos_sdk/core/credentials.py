"""
Credential holder for the WorkOS API

Stores the secret key and base URL. Validated once at construction and
immutable afterwards, so a single instance can be shared by concurrent calls.
"""

from dataclasses import dataclass, field

import httpx

from workos_sdk.exceptions import ConfigError


@dataclass(frozen=True)
class Credentials:
    secret_key: str = field(repr=False)
    base_url: str

    def __post_init__(self):
        if not self.secret_key or not self.secret_key.strip():
            raise ConfigError("API key must not be empty")

        base_url = (self.base_url or "").strip().rstrip("/")
        try:
            url = httpx.URL(base_url)
        except (httpx.InvalidURL, TypeError) as e:
            raise ConfigError(f"Invalid base URL {self.base_url!r}: {e}") from e

        if url.scheme not in ("http", "https") or not url.host:
            raise ConfigError(f"Base URL must be an absolute http(s) URL, got {self.base_url!r}")
        if url.query or url.fragment:
            raise ConfigError(f"Base URL must not contain a query string or fragment, got {self.base_url!r}")

        # Trailing slash is dropped so path templates ("/organizations/...") join cleanly
        object.__setattr__(self, "base_url", base_url)

    @property
    def authorization_header(self) -> str:
        """Value for the Authorization header"""
        return f"Bearer {self.secret_key}"

    @property
    def masked_key(self) -> str:
        """Key suffix safe to show in logs"""
        return f"...{self.secret_key[-4:]}" if len(self.secret_key) > 8 else "***"
