"""
SDK Constants

Centralized defaults for the WorkOS API client.
"""

from typing import FrozenSet

SDK_VERSION = "0.1.0"

# Production API origin; override via WORKOS_BASE_URL for staging/test servers
DEFAULT_BASE_URL = "https://api.workos.com"

DEFAULT_REQUEST_TIMEOUT = 30.0  # seconds

USER_AGENT = f"workos-sdk-python/{SDK_VERSION}"

JSON_CONTENT_TYPE = "application/json"

# Header WorkOS uses to correlate a response with its server-side logs
REQUEST_ID_HEADER = "X-Request-ID"

# Methods that can be re-sent without duplicating side effects
IDEMPOTENT_METHODS: FrozenSet[str] = frozenset({"GET", "PUT", "DELETE"})

# Pagination limits enforced by the WorkOS list endpoints
DEFAULT_PAGE_LIMIT = 10
MAX_PAGE_LIMIT = 100
